"""
VISUALIZATION: PLOTTING ARM SEARCH RESULTS
==========================================

PURPOSE:
--------
Two plots for the arm search:

1. **Torque ranking**: every configuration sorted by base torque, with the
   best and worst highlighted. Shows how much segment order and length
   split matter overall.

2. **Arm profile**: one arm drawn along its length, each component as a
   bar sized by its mass, with each component's centre of mass and the
   composite centre of mass marked. Shows WHY an arm ranks where it does.
"""

import os

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .model import Arm, Segment


def plot_torque_ranking(
    df,
    outpath: str,
    title: str = "Arm Configurations by Base Torque",
) -> None:
    """
    Scatter of base torque against rank.

    Parameters:
    -----------
    df : pd.DataFrame
        Ranked results (SearchResult.frame): needs 'rank' and 'torque'

    outpath : str
        File path to save the plot (e.g., "artifacts/torque_ranking.png")
    """
    if len(df) == 0:
        raise ValueError("No arm configurations to plot")

    fig, ax = plt.subplots(figsize=(10, 6))

    ax.scatter(
        df['rank'].values, df['torque'].values,
        c='steelblue',
        s=12,
        alpha=0.6,
        label=f'Configurations ({len(df)})',
        edgecolors='none',
        zorder=1,
    )

    best = df.loc[df['torque'].idxmin()]
    worst = df.loc[df['torque'].idxmax()]
    ax.scatter([best['rank']], [best['torque']], c='green', s=100,
               edgecolors='darkgreen', linewidths=2, label='Best', zorder=2)
    ax.scatter([worst['rank']], [worst['torque']], c='red', s=100,
               edgecolors='darkred', linewidths=2, label='Worst', zorder=2)

    ax.set_xlabel('Rank', fontsize=12, fontweight='bold')
    ax.set_ylabel('Base Torque (in*lb)', fontsize=12, fontweight='bold')
    ax.set_title(title, fontsize=14, fontweight='bold', pad=20)
    ax.grid(True, alpha=0.3, linestyle='--')
    ax.legend(loc='best', fontsize=10, framealpha=0.9)

    os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)

    plt.tight_layout()
    plt.savefig(outpath, dpi=150, bbox_inches='tight')
    plt.close()

    print(f"Torque ranking plot saved to: {outpath}")


def plot_arm_profile(arm: Arm, outpath: str, title: str = None) -> None:
    """
    Draw one arm base-to-tip with component and composite centres of mass.

    Bar height is proportional to component mass.
    """
    masses = [c.mass for c in arm.components]
    max_mass = max(masses)

    fig, ax = plt.subplots(figsize=(12, 4))

    x = 0.0
    for component in arm.components:
        height = component.mass / max_mass
        color = 'lightsteelblue' if isinstance(component, Segment) else 'sandybrown'
        ax.add_patch(Rectangle((x, 0.0), component.length, height,
                               facecolor=color, edgecolor='black', linewidth=1))
        ax.plot(x + component.center_of_mass, height / 2, 'k.', markersize=8)
        ax.text(x + component.length / 2, height + 0.05,
                f'{component.length:g} in\n{component.mass:.2f} lb',
                ha='center', va='bottom', fontsize=8)
        x += component.length

    ax.axvline(arm.center_of_mass, color='red', linestyle='--', linewidth=2,
               label=f'Centre of mass {arm.center_of_mass:.2f} in')
    ax.plot(0.0, 0.0, 'k^', markersize=14)

    ax.set_xlim(-2.0, arm.length + 2.0)
    ax.set_ylim(-0.1, 1.5)
    ax.set_xlabel('Distance from base (in)', fontsize=12, fontweight='bold')
    ax.set_yticks([])
    if title is None:
        title = f'{arm!r}: torque {arm.torque_at_base:.2f} in*lb'
    ax.set_title(title, fontsize=14, fontweight='bold')
    ax.legend(loc='upper right', fontsize=10)

    os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)

    plt.tight_layout()
    plt.savefig(outpath, dpi=150, bbox_inches='tight')
    plt.close()

    print(f"Arm profile saved to: {outpath}")

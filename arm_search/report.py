# Plain-text and Markdown summaries of search results

import os

from .model import Arm, Massive
from .search import SearchResult


def _component_line(component: Massive) -> str:
    return (
        f"{type(component).__name__} {{ length: {component.length:g} in, "
        f"mass: {component.mass:.2f} lb, center: {component.center_of_mass:.2f} in, "
        f"torque: {component.torque_at_base:.2f} in*lb }}"
    )


def format_arm(arm: Arm) -> str:
    """Multi-line summary of an arm and each of its components."""
    lines = [
        "Arm {",
        f"  length: {arm.length:g} in,",
        f"  mass: {arm.mass:.2f} lb,",
        f"  center: {arm.center_of_mass:.2f} in,",
        f"  torque: {arm.torque_at_base:.2f} in*lb,",
        "  components: [",
        ",\n".join("    " + _component_line(c) for c in arm.components),
        "  ]",
        "}",
    ]
    return "\n".join(lines)


def _arm_section(f, heading: str, arm: Arm) -> None:
    f.write(f"## {heading}\n\n")
    f.write(f"- **Segments**: {' / '.join(f'{length:g}' for length in arm.segment_lengths)} in\n")
    f.write(f"- **Mass**: {arm.mass:.2f} lb\n")
    f.write(f"- **Length**: {arm.length:g} in\n")
    f.write(f"- **Centre of mass**: {arm.center_of_mass:.2f} in\n")
    f.write(f"- **Base torque**: {arm.torque_at_base:.2f} in*lb\n")
    f.write("\n")


def write_summary(result: SearchResult, path: str) -> None:
    """Write best / worst / symmetric arms and the torque spread as Markdown."""
    params = result.params
    os.makedirs(os.path.dirname(path) if os.path.dirname(path) else '.', exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        f.write("# Arm Configuration Search\n\n")
        f.write(f"- **Segments**: {params.segments}\n")
        f.write(f"- **Total segment length**: {params.total_length} in\n")
        f.write(f"- **Segment length range**: {params.min_length}-{params.max_length} in\n")
        f.write(f"- **Partitions**: {len(result.partitions)}\n")
        f.write(f"- **Configurations**: {len(result.arms)}\n\n")
        f.write("---\n\n")

        if result.best is None:
            f.write("No valid configurations.\n")
            return

        _arm_section(f, "Lowest Torque", result.best)
        _arm_section(f, "Highest Torque", result.worst)
        f.write(f"**Percent difference**: {result.percent_difference:.2f}%\n\n")

        if result.symmetric is not None:
            _arm_section(f, "Symmetric", result.symmetric)
        else:
            f.write("## Symmetric\n\nNo symmetric arm found.\n")

    print(f"Summary saved to: {path}")

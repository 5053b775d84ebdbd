"""
ARM CONFIGURATION SEARCH DEMO
=============================

PURPOSE:
--------
Run the exhaustive arm search and report:
1. The lowest and highest base-torque arms
2. The percent difference between them
3. The symmetric (equal segment) arm, if one exists

and write the artifacts:
  - <out>/results.csv          every configuration, ranked
  - <out>/summary.md           best / worst / symmetric
  - <out>/torque_ranking.png   torque by rank
  - <out>/best_arm.png         profile of the lowest-torque arm

EXAMPLE USAGE:
--------------
    python demos/run_arm_search.py
    python demos/run_arm_search.py --segments 4 --total-length 96 --min-length 12 --fold
"""

import argparse
import os

from arm_search.report import format_arm, write_summary
from arm_search.search import SearchParams, run_search, can_fold
from arm_search.viz import plot_torque_ranking, plot_arm_profile


def main():
    parser = argparse.ArgumentParser(
        description='Rank every arm segment configuration by base torque',
    )
    parser.add_argument('--segments', type=int, default=3,
                        help='Number of structural segments (default: 3)')
    parser.add_argument('--total-length', type=int, default=72,
                        help='Sum of segment lengths in inches (default: 72)')
    parser.add_argument('--min-length', type=int, default=12,
                        help='Shortest allowed segment in inches (default: 12)')
    parser.add_argument('--fold', action='store_true',
                        help='Only keep arms whose first two segments reach the last one')
    parser.add_argument('--out', default='artifacts',
                        help='Output directory (default: artifacts)')
    args = parser.parse_args()

    params = SearchParams(
        segments=args.segments,
        total_length=args.total_length,
        min_length=args.min_length,
    )

    print("=" * 70)
    print("ARM CONFIGURATION SEARCH")
    print("=" * 70)

    result = run_search(params, arm_filter=can_fold if args.fold else None)
    print()

    if result.best is None:
        print("No valid arm configurations for these parameters.")
        return

    print("LOWEST TORQUE")
    print("-" * 70)
    print(format_arm(result.best))
    print()
    print("HIGHEST TORQUE")
    print("-" * 70)
    print(format_arm(result.worst))
    print()
    print(f"Percent Difference: {result.percent_difference:.2f}%")
    print()
    print("SYMMETRIC")
    print("-" * 70)
    if result.symmetric is not None:
        print(format_arm(result.symmetric))
    else:
        print("No symmetric arm found")
    print()

    os.makedirs(args.out, exist_ok=True)
    csv_path = os.path.join(args.out, 'results.csv')
    result.frame.to_csv(csv_path, index=False)
    print(f"Results saved to: {csv_path}")

    write_summary(result, os.path.join(args.out, 'summary.md'))
    plot_torque_ranking(result.frame, os.path.join(args.out, 'torque_ranking.png'))
    plot_arm_profile(result.best, os.path.join(args.out, 'best_arm.png'))

    print("=" * 70)
    print("DONE")
    print("=" * 70)


if __name__ == '__main__':
    main()

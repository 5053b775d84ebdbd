# arm_search - Arm segment length search and base torque ranking
"""
ARM-SEARCH: Exhaustive Arm Configuration Explorer
=================================================

This package provides:
- A mass / length / centre-of-mass / torque model for arm parts
- Partition search over whole-inch segment lengths
- Ranking of every segment ordering by base torque

ARCHITECTURE:
-------------
    catalog.py      Material, drivetrain, segment and gripper constants
    model.py        Massive entities (Segment, Gripper, Arm)
    partitions.py   Backtracking search for length partitions
    search.py       Orderings, arm construction, ranking, run_search()
    report.py       Text / Markdown summaries
    viz.py          Visualization
"""

from .model import Massive, Segment, Gripper, Arm
from .partitions import find_partitions
from .search import SearchParams, SearchResult, run_search

# Version
__version__ = "0.1.0"

# Configuration search and torque ranking
"""
SEARCH: EXHAUSTIVE ARM CONFIGURATION SEARCH
===========================================

PURPOSE:
--------
This module turns the partition list into concrete arms and ranks them.
For every way to split the total length into distinct segment lengths we
try every ordering of those segments (a 12-24-36 arm is not the same arm
as a 36-24-12 arm), build an Arm, and sort all of them by the torque they
put on the base joint.

WHY THIS MATTERS:
-----------------
1. **Motor sizing**: The base joint motor has to hold the whole arm out
   horizontally. Lower base torque = smaller gearbox or more payload margin.

2. **Order sensitivity**: Same segments, same total mass, but putting the
   long (heavy) segment near the base moves the centre of mass inward.
   Only an exhaustive search over orderings shows how large that effect is.

3. **Reference design**: The symmetric (equal-length) arm is the obvious
   first guess. If it is in the search space we report it for comparison.

PIPELINE:
---------
    segment_domain(params)          allowed lengths: min .. max
        │
    find_partitions(...)            distinct lengths summing to the total
        │
    expand_orderings(partition)     k! orderings each
        │
    Arm(ordering)                   mass, length, centre of mass, torque
        │
    rank_arms(arms)                 ascending torque → best ... worst
"""

from dataclasses import dataclass, field
from itertools import permutations
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .catalog import SegmentSpec, GripperSpec, DEFAULT_SEGMENT, DEFAULT_GRIPPER
from .model import Arm
from .partitions import find_partitions, inclusive_range


METRIC_COLUMNS = ["mass", "length", "center_of_mass", "torque"]


@dataclass(frozen=True)
class SearchParams:
    """
    Parameters that define one arm search.

    Parameters:
    -----------
    segments : int
        Number of structural segments per arm (the gripper is extra)

    total_length : int
        Sum of all segment lengths (in), gripper excluded

    min_length : int
        Shortest allowed segment (in)

    segment : SegmentSpec
        Plate and hardware constants for every segment

    gripper : GripperSpec
        End effector appended to every arm
    """
    segments: int = 3
    total_length: int = 72
    min_length: int = 12
    segment: SegmentSpec = DEFAULT_SEGMENT
    gripper: GripperSpec = DEFAULT_GRIPPER

    def __post_init__(self):
        if self.segments < 1:
            raise ValueError(f"segments must be at least 1, got {self.segments}")
        if self.min_length <= 0:
            raise ValueError(f"min_length must be positive, got {self.min_length}")

    @property
    def max_length(self) -> int:
        """Longest segment that still leaves min_length for every other one."""
        return self.total_length - self.min_length * (self.segments - 1)


DEFAULT_PARAMS = SearchParams()


def segment_domain(params: SearchParams = DEFAULT_PARAMS) -> List[int]:
    """Every allowed segment length, min_length through max_length (in)."""
    return inclusive_range(params.min_length, params.max_length)


def expand_orderings(partition: Sequence[int]) -> List[Tuple[int, ...]]:
    """
    All distinct orderings of a partition.

    A partition of k distinct lengths gives k! orderings. Repeated values
    would give fewer; duplicates are dropped while keeping first-seen order.
    """
    return list(dict.fromkeys(permutations(partition)))


def can_fold(lengths: Sequence[float]) -> bool:
    """
    True if the first two segments together reach at least the last one.

    Arms that fail this cannot fold the tip back over the base. Arms with
    two or fewer segments always pass.
    """
    if len(lengths) <= 2:
        return True
    return lengths[0] + lengths[1] >= lengths[-1]


def build_arms(
    partitions: Sequence[Sequence[int]],
    segment_spec: SegmentSpec = DEFAULT_SEGMENT,
    gripper_spec: GripperSpec = DEFAULT_GRIPPER,
    arm_filter: Optional[Callable[[Tuple[int, ...]], bool]] = None,
) -> List[Arm]:
    """
    Build one Arm per ordering of every partition.

    Arms are returned in generation order: partitions in the order given,
    and the orderings of each partition in permutation order. If arm_filter
    is given, orderings it rejects are skipped before any Arm is built.
    """
    arms = []
    for partition in partitions:
        for ordering in expand_orderings(partition):
            if arm_filter is not None and not arm_filter(ordering):
                continue
            arms.append(Arm(ordering, segment_spec, gripper_spec))
    return arms


def rank_arms(arms: Sequence[Arm]) -> List[Arm]:
    """Arms sorted by ascending base torque (stable for ties)."""
    return sorted(arms, key=lambda arm: arm.torque_at_base)


def percent_difference(v1: float, v2: float) -> float:
    """|v1 - v2| relative to their mean, in percent."""
    mean = (v1 + v2) / 2
    assert mean != 0, "percent difference of values averaging zero"
    return abs(v1 - v2) / mean * 100


def find_symmetric(arms: Sequence[Arm]) -> Optional[Arm]:
    """
    First arm (in the given order) whose segments all have the same length.

    Every segment is compared, not just the first three: [20, 20, 20, 30]
    is not symmetric. The gripper is never compared. Returns None if there
    is none, which is always the case for more than one segment when the
    arms come from distinct-length partitions.
    """
    for arm in arms:
        lengths = arm.segment_lengths
        if lengths and all(length == lengths[0] for length in lengths):
            return arm
    return None


def evaluate_arm(arm: Arm) -> Dict:
    """
    Flatten an Arm into a result row.

    Returns:
    --------
    Dict
        - s1 .. sk: segment lengths (in), base first
        - mass: total mass (lb)
        - length: total length including gripper (in)
        - center_of_mass: distance from the base (in)
        - torque: base torque (in*lb)
    """
    result = {f"s{i}": length for i, length in enumerate(arm.segment_lengths, start=1)}
    result.update({
        'mass': arm.mass,
        'length': arm.length,
        'center_of_mass': arm.center_of_mass,
        'torque': arm.torque_at_base,
    })
    return result


def results_frame(arms: Sequence[Arm]) -> pd.DataFrame:
    """One row per arm (see evaluate_arm), in the order given."""
    if len(arms) == 0:
        return pd.DataFrame(columns=METRIC_COLUMNS)
    return pd.DataFrame([evaluate_arm(arm) for arm in arms])


@dataclass
class SearchResult:
    """
    Everything one search produced.

    arms is in generation order; ranked is sorted by torque. best, worst,
    percent_difference and symmetric are None when there is nothing to
    report (no arms, or no equal-length arm).
    """
    params: SearchParams
    partitions: List[Tuple[int, ...]]
    arms: List[Arm]
    ranked: List[Arm]
    best: Optional[Arm] = None
    worst: Optional[Arm] = None
    percent_difference: Optional[float] = None
    symmetric: Optional[Arm] = None
    frame: pd.DataFrame = field(default_factory=lambda: pd.DataFrame(columns=["rank"] + METRIC_COLUMNS))


def run_search(
    params: SearchParams = None,
    arm_filter: Optional[Callable[[Tuple[int, ...]], bool]] = None,
    prune: bool = False,
    verbose: bool = True,
) -> SearchResult:
    """
    Run the full search: partitions → orderings → arms → ranking.

    WHY THIS FUNCTION?
    ------------------
    - Encapsulates the whole pipeline behind one call
    - Returns both the Arm objects (for inspection/plots) and a flat
      DataFrame (for CSV export)
    - Deterministic: same params = same result, same order

    Parameters:
    -----------
    params : SearchParams, optional
        Run parameters (defaults to DEFAULT_PARAMS: 3 segments, 72 in, 12 in min)

    arm_filter : callable, optional
        Predicate on an ordering of segment lengths; orderings it rejects are
        not built (e.g. can_fold). Default: keep everything.

    prune : bool
        Passed to find_partitions

    verbose : bool
        Print progress counts

    Returns:
    --------
    SearchResult
        An unreachable parameterization (total too short for the segment
        count) gives a result with no arms, not an exception.
    """
    if params is None:
        params = DEFAULT_PARAMS

    domain = segment_domain(params)
    if verbose:
        print(f"Searching {params.segments}-segment arms, total {params.total_length} in, "
              f"segment lengths {params.min_length}-{params.max_length} in")

    partitions = find_partitions(domain, params.total_length, params.segments, prune=prune)
    if verbose:
        print(f"Found {len(partitions)} partitions")

    arms = build_arms(partitions, params.segment, params.gripper, arm_filter)
    if verbose:
        print(f"Built {len(arms)} arm configurations")

    ranked = rank_arms(arms)
    result = SearchResult(params=params, partitions=partitions, arms=arms, ranked=ranked)

    if ranked:
        result.best = ranked[0]
        result.worst = ranked[-1]
        result.percent_difference = percent_difference(
            result.best.torque_at_base, result.worst.torque_at_base
        )
        frame = results_frame(ranked)
        frame.insert(0, "rank", range(1, len(ranked) + 1))
        result.frame = frame

    result.symmetric = find_symmetric(arms)

    if verbose:
        if ranked:
            print(f"Torque range: {result.best.torque_at_base:.2f} - "
                  f"{result.worst.torque_at_base:.2f} in*lb "
                  f"({result.percent_difference:.2f}% difference)")
        print("Symmetric arm: " + ("found" if result.symmetric is not None else "none"))

    return result

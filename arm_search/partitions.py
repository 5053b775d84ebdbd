"""
PARTITIONS: SPLITTING A TOTAL LENGTH INTO SEGMENTS
==================================================

PURPOSE:
--------
Given the allowed segment lengths (a range of whole inches), a total arm
length and a number of segments, find every set of distinct lengths that
adds up to the total. Each result is one "partition" of the arm, listed in
ascending order; the orderings of it are generated later by the search.

Example (total 72 in, 3 segments, lengths 12..48):
    (12, 13, 47), (12, 14, 46), ..., (12, 24, 36), ..., (23, 24, 25)

WHY BACKTRACKING?
-----------------
The space is small (a few hundred partitions for the default run), so an
exhaustive depth-first search is simple and fast enough. Walking the sorted
domain with a cursor that only moves forward means:
- every combination is produced once (no (12, 24, 36) AND (24, 12, 36))
- no length is used twice in the same partition
- the remaining sum strictly decreases, so the search always terminates
"""

from typing import Iterable, List, Tuple


def inclusive_range(start: int, end: int) -> List[int]:
    """Integers from start through end, both included."""
    return list(range(start, end + 1))


def find_partitions(
    domain: Iterable[int],
    target_sum: int,
    required_count: int,
    prune: bool = False,
) -> List[Tuple[int, ...]]:
    """
    Find every strictly increasing selection of domain values summing to target_sum.

    HOW IT WORKS (PSEUDOCODE):
    --------------------------
    values = sorted(set(domain))
    search(remaining=target_sum, cursor=0, partial=[]):
        if remaining == 0:
            record a copy of partial          (whatever its length)
            return
        for i from cursor to end:
            if values[i] <= remaining:
                partial.push(values[i])
                search(remaining - values[i], i + 1, partial)
                partial.pop()                 (undo before the next candidate)
    keep only the records of length required_count

    Recording on "sum reached" rather than on "length reached" means sums
    made of fewer or more values are found and then thrown away. That is
    fine for the small domains used here; pass prune=True to stop
    descending once the partial selection is already required_count long.
    The output is the same either way.

    Parameters:
    -----------
    domain : Iterable[int]
        Allowed values. Duplicates are ignored; order does not matter.
        Every value must be positive.

    target_sum : int
        Sum every result must reach exactly

    required_count : int
        Number of values in every result

    prune : bool
        Cut branches that are already required_count long (default: False)

    Returns:
    --------
    List[Tuple[int, ...]]
        Ascending tuples, each found exactly once, in search order.
        Empty if no selection exists (not an error).
    """
    values = sorted(set(domain))
    if any(v <= 0 for v in values):
        raise ValueError(f"Domain values must be positive, got {values[0]}")
    if required_count < 0:
        raise ValueError(f"required_count must be non-negative, got {required_count}")

    found: List[Tuple[int, ...]] = []
    partial: List[int] = []

    def search(remaining: int, cursor: int) -> None:
        if remaining == 0:
            found.append(tuple(partial))
            return
        if prune and len(partial) >= required_count:
            return
        for i in range(cursor, len(values)):
            value = values[i]
            if value > remaining:
                # sorted: nothing further along fits either
                break
            partial.append(value)
            search(remaining - value, i + 1)
            partial.pop()

    if target_sum >= 0:
        search(target_sum, 0)

    return [p for p in found if len(p) == required_count]

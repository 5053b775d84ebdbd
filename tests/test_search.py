# File: tests/test_search.py
"""
Test the configuration search: orderings, arm construction, ranking,
percent difference and the symmetric-arm lookup.
"""

import dataclasses
import math

import numpy as np
import pandas as pd
import pytest

from arm_search.model import Arm
from arm_search.search import (
    SearchParams,
    DEFAULT_PARAMS,
    segment_domain,
    expand_orderings,
    build_arms,
    rank_arms,
    percent_difference,
    find_symmetric,
    can_fold,
    evaluate_arm,
    results_frame,
)


def test_default_params():
    assert DEFAULT_PARAMS.segments == 3
    assert DEFAULT_PARAMS.total_length == 72
    assert DEFAULT_PARAMS.min_length == 12
    assert DEFAULT_PARAMS.max_length == 48


def test_segment_domain():
    domain = segment_domain(DEFAULT_PARAMS)
    assert domain[0] == 12
    assert domain[-1] == 48
    assert len(domain) == 37

    params = SearchParams(segments=4, total_length=100, min_length=10)
    assert segment_domain(params) == list(range(10, 71))


def test_params_validation():
    with pytest.raises(ValueError):
        SearchParams(segments=0)
    with pytest.raises(ValueError):
        SearchParams(min_length=0)


def test_expand_orderings_count():
    """
    k distinct values give k! distinct orderings.
    """
    for partition in [(12, 24, 36), (1, 2), (1, 2, 3, 4)]:
        orderings = expand_orderings(partition)
        assert len(orderings) == math.factorial(len(partition))
        assert len(set(orderings)) == len(orderings)
        assert all(sorted(o) == sorted(partition) for o in orderings)


def test_expand_orderings_drops_duplicates():
    assert sorted(expand_orderings((1, 1, 2))) == [(1, 1, 2), (1, 2, 1), (2, 1, 1)]


def test_build_arms_one_per_ordering():
    arms = build_arms([(12, 24, 36), (20, 22, 30)])

    assert len(arms) == 12
    assert arms[0].segment_lengths == (12.0, 24.0, 36.0)
    lengths = {arm.segment_lengths for arm in arms}
    assert len(lengths) == 12


def test_orderings_share_mass_and_length():
    """
    Same partition: same mass and length; centre of mass depends on order.
    """
    arms = build_arms([(12, 25, 35)])

    assert len(arms) == 6
    np.testing.assert_allclose([a.mass for a in arms], arms[0].mass)
    np.testing.assert_allclose([a.length for a in arms], arms[0].length)
    centers = {round(a.center_of_mass, 9) for a in arms}
    assert len(centers) == 6


def test_build_arms_with_filter():
    arms = build_arms([(12, 13, 47)], arm_filter=can_fold)
    assert all(can_fold(arm.segment_lengths) for arm in arms)
    assert {arm.segment_lengths[-1] for arm in arms} == {12.0, 13.0}


def test_can_fold():
    assert can_fold((12, 24, 36))
    assert can_fold((36, 24, 12))
    assert not can_fold((12, 13, 47))
    assert can_fold((10, 50))
    assert can_fold((72,))


def test_rank_arms_sorted():
    arms = build_arms([(12, 24, 36), (20, 22, 30)])
    ranked = rank_arms(arms)
    torques = [arm.torque_at_base for arm in ranked]

    assert torques == sorted(torques)
    assert len(ranked) == len(arms)
    # input untouched
    assert arms[0].segment_lengths == (12.0, 24.0, 36.0)


def test_percent_difference():
    assert percent_difference(100.0, 50.0) == pytest.approx(200.0 / 3.0)
    assert percent_difference(50.0, 100.0) == pytest.approx(200.0 / 3.0)
    assert percent_difference(10.0, 10.0) == 0.0


def test_percent_difference_zero_mean():
    with pytest.raises(AssertionError):
        percent_difference(0.0, 0.0)


def test_find_symmetric():
    arms = [Arm([12, 24, 36]), Arm([20, 20, 20]), Arm([24, 24, 24])]
    found = find_symmetric(arms)

    assert found is arms[1]
    lengths = found.segment_lengths
    assert lengths[0] == lengths[1] == lengths[2]


def test_find_symmetric_compares_every_segment():
    """
    Four segments: equal first three is not enough, all four must match.
    """
    uneven = Arm([20, 20, 20, 30])
    even = Arm([20, 20, 20, 20])

    assert find_symmetric([uneven]) is None
    assert find_symmetric([uneven, even]) is even


def test_find_symmetric_short_arms():
    """
    Two segments compare only each other, never the gripper.
    """
    assert find_symmetric([Arm([12, 12])]) is not None
    assert find_symmetric([Arm([12, 24])]) is None
    assert find_symmetric([Arm([30])]) is not None


def test_search_params_frozen():
    """
    Params cannot be changed after construction, so the defaults stay put.
    """
    params = SearchParams()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.total_length = 30
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_PARAMS.segments = 0

    assert DEFAULT_PARAMS.total_length == 72
    assert DEFAULT_PARAMS.segments == 3


def test_find_symmetric_none():
    assert find_symmetric(build_arms([(12, 24, 36)])) is None
    assert find_symmetric([]) is None


def test_evaluate_arm_record():
    arm = Arm([12, 24, 36])
    row = evaluate_arm(arm)

    assert list(row) == ['s1', 's2', 's3', 'mass', 'length', 'center_of_mass', 'torque']
    assert row['s2'] == 24.0
    assert row['torque'] == pytest.approx(arm.torque_at_base)


def test_results_frame():
    arms = build_arms([(12, 24, 36)])
    df = results_frame(arms)

    assert isinstance(df, pd.DataFrame)
    assert len(df) == 6
    assert list(df.columns) == ['s1', 's2', 's3', 'mass', 'length', 'center_of_mass', 'torque']
    assert (df['s1'] + df['s2'] + df['s3'] == 72).all()


def test_results_frame_empty():
    df = results_frame([])
    assert len(df) == 0
    assert 'torque' in df.columns

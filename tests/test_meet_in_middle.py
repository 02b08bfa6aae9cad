import pytest

from contestkit.meet_in_middle import (
    max_subset_sum_mod,
    min_abs_difference,
    subset_sums,
)


def test_subset_sums_of_powers_of_two_cover_range():
    assert sorted(subset_sums([1, 2, 4])) == list(range(8))


def test_subset_sums_order_follows_bitmask():
    values = [3, 10]
    sums = subset_sums(values)
    assert sums[0] == 0
    assert sums[1] == values[0]
    assert sums[2] == values[1]
    assert sums[3] == values[0] + values[1]


def test_subset_sums_size_and_extremes():
    values = [5, -2, 7, 1, 9]
    sums = subset_sums(values)
    assert len(sums) == 2 ** len(values)
    assert sum(values) in sums
    assert 0 in sums


def test_subset_sums_with_modulus_are_reduced():
    values = [5, 8, 13, 21]
    modulus = 6
    assert subset_sums(values, modulus) == [s % modulus for s in subset_sums(values)]


def test_min_abs_difference_exact_goal():
    nums = [5, -7, 3, 5]
    assert min_abs_difference(nums, sum(nums)) == 0


def test_min_abs_difference_empty_subset():
    assert min_abs_difference([4, 9], 0) == 0


@pytest.mark.parametrize(
    "nums, goal",
    [([7, -9, 15, -2], -5), ([1, 2, 3], -7), ([4, 8, 15, 16, 23, 42], 60), ([3], 1)],
)
def test_min_abs_difference_against_all_subsets(nums, goal):
    expected = min(abs(s - goal) for s in subset_sums(nums))
    assert min_abs_difference(nums, goal) == expected


def test_min_abs_difference_goal_far_above():
    nums = [1, 2, 3]
    goal = 100
    assert min_abs_difference(nums, goal) == goal - sum(nums)


@pytest.mark.parametrize(
    "values, modulus",
    [([5, 2, 4, 1], 4), ([199, 41, 299], 20), ([1, 2, 3, 4, 5, 6, 7], 13), ([9], 5)],
)
def test_max_subset_sum_mod_against_all_subsets(values, modulus):
    assert max_subset_sum_mod(values, modulus) == max(subset_sums(values, modulus))


def test_max_subset_sum_mod_below_modulus():
    modulus = 11
    assert 0 <= max_subset_sum_mod([100, 200, 300, 400], modulus) < modulus


def test_max_subset_sum_mod_all_multiples():
    assert max_subset_sum_mod([6, 12, 18], 6) == 0


def test_max_subset_sum_mod_rejects_bad_modulus():
    with pytest.raises(ValueError):
        max_subset_sum_mod([1, 2], 0)
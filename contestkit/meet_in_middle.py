"""Meet-in-the-middle searches over subset sums."""

from bisect import bisect_left


def subset_sums(values, modulus=None):
    """Sums of all subsets of values; subset i takes values[j] when bit j of i is set.

    With a modulus the sums are reduced modulo it.
    """
    values = list(values)
    sums = [0]
    for value in values:
        if modulus is None:
            sums += [s + value for s in sums]
        else:
            sums += [(s + value) % modulus for s in sums]
    return sums


def min_abs_difference(nums, goal):
    """Smallest |subset sum - goal| over all subsets of nums."""
    nums = list(nums)
    half = len(nums) // 2
    first = subset_sums(nums[:half])
    second = sorted(subset_sums(nums[half:]))
    best = abs(goal)
    for a in first:
        low, high = 0, len(second) - 1
        while low <= high:
            mid = (low + high) // 2
            total = a + second[mid]
            if total == goal:
                return 0
            best = min(best, abs(total - goal))
            if total > goal:
                high = mid - 1
            else:
                low = mid + 1
    return best


def max_subset_sum_mod(values, modulus):
    """Largest value of (subset sum) mod modulus over all subsets of values."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    reduced = [value % modulus for value in values]
    half = len(reduced) // 2
    first = subset_sums(reduced[:half], modulus)
    second = sorted(subset_sums(reduced[half:], modulus))
    best = 0
    for a in first:
        partner = second[bisect_left(second, modulus - a) - 1]
        best = max(best, (a + partner) % modulus)
    return best
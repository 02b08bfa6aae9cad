"""Searching in sequences."""


def linear_search(values, key):
    """Index of the first element equal to key, or -1."""
    return next((i for i, value in enumerate(values) if value == key), -1)


def binary_search(values, key):
    """Index of an element equal to key in a sorted sequence, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if key < values[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def ternary_search(values, key):
    """Index of an element equal to key in a sorted sequence, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        third = (high - low) // 3
        mid1 = low + third
        mid2 = high - third
        if values[mid1] == key:
            return mid1
        if values[mid2] == key:
            return mid2
        if key < values[mid1]:
            high = mid1 - 1
        elif key > values[mid2]:
            low = mid2 + 1
        else:
            low, high = mid1 + 1, mid2 - 1
    return -1


def first_bad_version(n, is_bad):
    """Smallest version in 1..n for which is_bad holds; n + 1 if none does."""
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        if is_bad(mid):
            high = mid - 1
        else:
            low = mid + 1
    return low


def intersection(nums1, nums2):
    """Sorted distinct values present in both sequences."""
    return sorted(set(nums1).intersection(nums2))


def search_insert(values, target):
    """Index of target in a sorted sequence, or where it would be inserted."""
    if not values:
        return 0
    low, high = 0, len(values) - 1
    mid = 0
    while low <= high:
        mid = (low + high) // 2
        if values[mid] > target:
            high = mid - 1
        elif values[mid] < target:
            low = mid + 1
        else:
            return mid
    return mid if values[mid] > target else mid + 1
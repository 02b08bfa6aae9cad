"""Classic sorting algorithms. Each returns a new sorted list."""

from itertools import accumulate


def counting_sort(values):
    """Stable counting sort of non-negative integers."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort requires non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    positions = list(accumulate(counts))
    result = [0] * len(items)
    for value in reversed(items):
        positions[value] -= 1
        result[positions[value]] = value
    return result


def _sift_down(heap, size, root):
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and heap[largest] < heap[child]:
                largest = child
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values):
    """Sort with a max-heap built in place."""
    heap = list(values)
    size = len(heap)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(heap, size, root)
    for end in range(size - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)
    return heap


def insertion_sort(values):
    """Sort by inserting each element into the sorted prefix before it."""
    items = list(values)
    for j in range(1, len(items)):
        key = items[j]
        i = j - 1
        while i >= 0 and key < items[i]:
            items[i + 1] = items[i]
            i -= 1
        items[i + 1] = key
    return items


def _merge(left, right):
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values):
    """Top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items, low, high):
    """Partition items[low:high] around items[low]; return the pivot's final index."""
    pivot = items[low]
    i, j = low, high
    while i < j:
        i += 1
        while i < high and items[i] <= pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values):
    """Quicksort using the first element of each range as the pivot."""
    items = list(values)
    pending = [(0, len(items))]
    while pending:
        low, high = pending.pop()
        if high - low > 1:
            split = _partition(items, low, high)
            pending.append((low, split))
            pending.append((split + 1, high))
    return items


def selection_sort(values):
    """Repeatedly move the smallest remaining element to the front."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items
"""Range queries: segment trees, square-root blocks and prefix tables."""

import math
import operator
from itertools import accumulate


class SegmentTree:
    """Point updates and half-open range queries under a commutative, associative operation."""

    def __init__(self, values, combine, identity):
        items = list(values)
        self._size = len(items)
        self._combine = combine
        self._identity = identity
        self._tree = [identity] * self._size + items
        for node in range(self._size - 1, 0, -1):
            self._tree[node] = combine(self._tree[2 * node], self._tree[2 * node + 1])

    def __len__(self):
        return self._size

    def update(self, index, value):
        """Set the element at 0-based index to value."""
        if not 0 <= index < self._size:
            raise IndexError("index out of range")
        node = index + self._size
        self._tree[node] = value
        node //= 2
        while node >= 1:
            self._tree[node] = self._combine(self._tree[2 * node], self._tree[2 * node + 1])
            node //= 2

    def query(self, left, right):
        """Combine the elements with 0-based indices in [left, right)."""
        if not 0 <= left <= right <= self._size:
            raise IndexError("range out of bounds")
        result = self._identity
        lo, hi = left + self._size, right + self._size
        while lo < hi:
            if lo & 1:
                result = self._combine(result, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                result = self._combine(result, self._tree[hi])
            lo //= 2
            hi //= 2
        return result


def min_segment_tree(values):
    """Segment tree answering range minima; an empty range gives infinity."""
    return SegmentTree(values, min, math.inf)


def sum_segment_tree(values):
    """Segment tree answering range sums."""
    return SegmentTree(values, operator.add, 0)


class SqrtRangeMinimum:
    """Static range minima from blocks of about sqrt(n) elements; queries are 1-based inclusive."""

    def __init__(self, values):
        self._values = list(values)
        n = len(self._values)
        block = math.isqrt(n)
        if block * block < n:
            block += 1
        self._block = max(block, 1)
        self._blocks = [
            min(self._values[start : start + self._block]) for start in range(0, n, self._block)
        ]

    def query(self, left, right):
        """Minimum of elements left..right (1-based, inclusive)."""
        if not 1 <= left <= right <= len(self._values):
            raise IndexError("range out of bounds")
        lo, hi = left - 1, right - 1
        first, last = lo // self._block, hi // self._block
        if first == last:
            return min(self._values[lo : hi + 1])
        return min(
            min(self._values[lo : (first + 1) * self._block]),
            min(self._blocks[first + 1 : last], default=math.inf),
            min(self._values[last * self._block : hi + 1]),
        )


def _prefix_answers(values, queries, combine, inverse):
    prefix = list(accumulate(values, combine, initial=0))
    n = len(prefix) - 1
    answers = []
    for x, y in queries:
        if not 1 <= x <= y <= n:
            raise IndexError("range out of bounds")
        answers.append(inverse(prefix[y], prefix[x - 1]))
    return answers


def range_xor_queries(values, queries):
    """XOR of values[x..y] for each 1-based inclusive (x, y) query."""
    return _prefix_answers(values, queries, operator.xor, operator.xor)


def range_sum_queries(values, queries):
    """Sum of values[x..y] for each 1-based inclusive (x, y) query."""
    return _prefix_answers(values, queries, operator.add, operator.sub)
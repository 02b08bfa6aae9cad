"""Prime counting puzzles solved with a sieve."""

from itertools import pairwise


def _primes_up_to(n):
    if n < 2:
        return []
    composite = bytearray(n + 1)
    primes = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
            composite[i * i :: i] = bytes(len(range(i * i, n + 1, i)))  # placeholder zeros
            for j in range(i * i, n + 1, i):
                composite[j] = 1
    return primes


def noldbach(n, k):
    """Whether at least k primes p <= n equal 1 plus the sum of two neighbours.

    Neighbours are consecutive terms of the sequence 0, 2, 3, 5, 7, 11, ...
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    primes = _primes_up_to(n)
    neighbour_sums = {a + b + 1 for a, b in pairwise([0] + primes)}
    count = sum(1 for p in primes if p in neighbour_sums)
    return count >= k
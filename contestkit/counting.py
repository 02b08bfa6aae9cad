"""Problems solved with sets and counters."""

from collections import Counter


def second_order_statistic(values):
    """Smallest value strictly greater than the minimum, or None if there is none."""
    distinct = sorted(set(values))
    return distinct[1] if len(distinct) > 1 else None


def max_socks_on_table(socks):
    """Most socks lying on the table at once when each pair is put away as it completes."""
    table = set()
    most = 0
    for sock in socks:
        if sock in table:
            table.remove(sock)
        else:
            table.add(sock)
        most = max(most, len(table))
    return most


def seen_before(names):
    """For each name, whether it already appeared earlier in the sequence."""
    seen = set()
    answers = []
    for name in names:
        answers.append(name in seen)
        seen.add(name)
    return answers


def has_distinct_digits(n):
    """Whether all decimal digits of n differ."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = str(n)
    return len(set(digits)) == len(digits)


def first_distinct_digits(a, b):
    """Smallest x in [a, b] whose digits all differ, or -1 if there is none."""
    return next((x for x in range(a, b + 1) if has_distinct_digits(x)), -1)


def max_frequency(values):
    """Largest number of times any single value occurs, or -1 for no values."""
    return max(Counter(values).values(), default=-1)


def union_count(a, b):
    """Number of distinct values across both sequences."""
    return len(set(a).union(b))
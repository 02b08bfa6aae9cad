import random
from collections import Counter

import pytest

from contestkit.counting import (
    first_distinct_digits,
    has_distinct_digits,
    max_frequency,
    max_socks_on_table,
    second_order_statistic,
    seen_before,
    union_count,
)


def _random_lists(seed, count, low=-5, high=5, max_len=10):
    rng = random.Random(seed)
    return [
        [rng.randint(low, high) for _ in range(rng.randint(1, max_len))] for _ in range(count)
    ]


@pytest.mark.parametrize("values", _random_lists(1, 30))
def test_second_order_statistic_is_second_distinct(values):
    distinct = sorted(set(values))
    result = second_order_statistic(values)
    if len(distinct) > 1:
        assert result == distinct[1]
    else:
        assert result is None


def test_second_order_statistic_all_equal():
    assert second_order_statistic([7, 7, 7]) is None
    assert second_order_statistic([]) is None


def test_max_socks_all_pairs_open_first():
    n = 6
    socks = list(range(1, n + 1)) * 2
    assert max_socks_on_table(socks) == n


def test_max_socks_each_pair_closes_at_once():
    assert max_socks_on_table([3, 3, 1, 1, 2, 2]) == 1


@pytest.mark.parametrize("seed", range(10))
def test_max_socks_bounded_by_pairs(seed):
    rng = random.Random(seed)
    pairs = list(range(1, 8))
    socks = pairs * 2
    rng.shuffle(socks)
    result = max_socks_on_table(socks)
    assert 1 <= result <= len(pairs)


def test_seen_before_sample():
    names = ["tom", "lucius", "ginny", "harry", "ginny", "harry"]
    assert seen_before(names) == [False, False, False, False, True, True]


@pytest.mark.parametrize("values", _random_lists(2, 20, 0, 4))
def test_seen_before_marks_repeats(values):
    answers = seen_before(values)
    assert len(answers) == len(values)
    assert answers.count(False) == len(set(values))
    for i, repeated in enumerate(answers):
        assert repeated == (values[i] in values[:i])


def test_has_distinct_digits():
    assert has_distinct_digits(1234567890) is True
    assert has_distinct_digits(1231) is False


def test_has_distinct_digits_rejects_negative():
    with pytest.raises(ValueError):
        has_distinct_digits(-12)


def test_first_distinct_digits_none_in_range():
    assert first_distinct_digits(11, 11) == -1


@pytest.mark.parametrize("values", _random_lists(3, 20))
def test_max_frequency_matches_counter(values):
    assert max_frequency(values) == max(Counter(values).values())


def test_max_frequency_empty():
    assert max_frequency([]) == -1


@pytest.mark.parametrize("a, b", zip(_random_lists(4, 15), _random_lists(5, 15)))
def test_union_count_bounds(a, b):
    result = union_count(a, b)
    assert max(len(set(a)), len(set(b))) <= result <= len(set(a)) + len(set(b))
    assert result == union_count(b, a)


def test_union_count_with_itself_and_empty():
    a = [5, 1, 5, 2, 1]
    assert union_count(a, a) == len(set(a))
    assert union_count(a, []) == len(set(a))
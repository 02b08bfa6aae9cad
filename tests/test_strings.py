import math
import random

import pytest

from contestkit.strings import (
    add_strings,
    find_hashed,
    find_kmp,
    max_distinct_split,
    mirror_smallest,
    prefix_table,
    rabin_karp,
    string_lcm,
)


def _random_words(seed, count, alphabet="ab", max_len=8):
    rng = random.Random(seed)
    return [
        "".join(rng.choice(alphabet) for _ in range(rng.randint(1, max_len)))
        for _ in range(count)
    ]


@pytest.mark.parametrize("base, i, j", [("ab", 2, 3), ("abc", 1, 4), ("a", 6, 4), ("xyz", 5, 5)])
def test_string_lcm_of_repetitions(base, i, j):
    assert string_lcm(base * i, base * j) == base * math.lcm(i, j)


def test_string_lcm_result_repeats_both_inputs():
    s, t = "baba", "ba"
    result = string_lcm(s, t)
    assert result == s * (len(result) // len(s))
    assert result == t * (len(result) // len(t))


def test_string_lcm_without_common_multiple():
    assert string_lcm("ab", "ba") is None


def test_string_lcm_rejects_empty():
    with pytest.raises(ValueError):
        string_lcm("", "a")


@pytest.mark.parametrize("s", _random_words(1, 60, "abc"))
def test_mirror_smallest_is_best_choice(s):
    best = min(s[:k] + s[:k][::-1] for k in range(1, len(s) + 1))
    assert mirror_smallest(s) == best


@pytest.mark.parametrize("s", _random_words(2, 20, "abcd"))
def test_mirror_smallest_is_even_palindrome(s):
    result = mirror_smallest(s)
    assert result == result[::-1]
    assert len(result) % 2 == 0
    assert s.startswith(result[: len(result) // 2])


def test_mirror_smallest_rejects_empty():
    with pytest.raises(ValueError):
        mirror_smallest("")


def test_max_distinct_split_all_distinct():
    s = "abcdef"
    assert max_distinct_split(s) == len(s)


def test_max_distinct_split_single_letter():
    assert max_distinct_split("aaaa") == 2


@pytest.mark.parametrize("s", _random_words(3, 30, "abcde", 12))
def test_max_distinct_split_bounds(s):
    distinct = len(set(s))
    result = max_distinct_split(s)
    assert distinct <= result <= min(2 * distinct, len(s))


def _search_cases(seed):
    rng = random.Random(seed)
    cases = []
    for _ in range(80):
        text = "".join(rng.choice("ab") for _ in range(rng.randint(0, 12)))
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 4)))
        cases.append((text, pattern))
    return cases


@pytest.mark.parametrize("text, pattern", _search_cases(4))
def test_find_hashed_matches_str_find(text, pattern):
    assert find_hashed(text, pattern) == text.find(pattern)


def test_find_hashed_empty_needle():
    assert find_hashed("hello", "") == "hello".find("")
    assert find_hashed("", "") == "".find("")


def test_find_hashed_needle_longer_than_haystack():
    assert find_hashed("ab", "abc") == "ab".find("abc")


@pytest.mark.parametrize("pattern", _random_words(5, 40, "ab", 10))
def test_prefix_table_entries_are_longest_borders(pattern):
    table = prefix_table(pattern)
    assert len(table) == len(pattern)
    for i, border in enumerate(table):
        piece = pattern[: i + 1]
        assert border < len(piece)
        assert piece[:border] == piece[len(piece) - border :]
        assert not any(piece[:k] == piece[len(piece) - k :] for k in range(border + 1, len(piece)))


@pytest.mark.parametrize("text, pattern", _search_cases(6))
def test_find_kmp_matches_str_find(text, pattern):
    assert find_kmp(text, pattern) == text.find(pattern)


def test_find_kmp_rejects_empty_pattern():
    with pytest.raises(ValueError):
        find_kmp("abc", "")


@pytest.mark.parametrize("seed", range(20))
def test_add_strings_matches_integer_sum(seed):
    rng = random.Random(seed)
    a = str(rng.randint(0, 10**rng.randint(1, 40)))
    b = str(rng.randint(0, 10**rng.randint(1, 40)))
    assert add_strings(a, b) == str(int(a) + int(b))


def test_add_strings_carries_into_new_digit():
    assert add_strings("999", "1") == str(999 + 1)


def test_add_strings_rejects_non_digits():
    with pytest.raises(ValueError):
        add_strings("12a", "3")


@pytest.mark.parametrize("text, pattern", _search_cases(7))
def test_rabin_karp_finds_every_occurrence(text, pattern):
    expected = [i + 1 for i in range(len(text)) if text.startswith(pattern, i)]
    assert rabin_karp(text, pattern) == expected


def test_rabin_karp_pattern_longer_than_text():
    assert rabin_karp("ab", "abc") == []


def test_rabin_karp_rejects_empty_pattern():
    with pytest.raises(ValueError):
        rabin_karp("abc", "")
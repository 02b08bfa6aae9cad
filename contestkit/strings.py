"""String algorithms: pattern search, string multiples, digit-wise addition."""

from itertools import zip_longest

MOD = 10**9 + 7
BASE = 26
_DIGITS = frozenset("0123456789")


def _letter_value(ch):
    return ord(ch) - ord("a") + 1


def string_lcm(s, t):
    """Shortest string that is a repetition of both s and t, or None if there is none."""
    if not s or not t:
        raise ValueError("strings must not be empty")
    a, b = s, t
    while len(a) != len(b):
        if len(a) < len(b):
            a += s
        else:
            b += t
    return a if a == b else None


def mirror_smallest(s):
    """Lexicographically smallest string s[:k] + reversed(s[:k]) over 1 <= k <= len(s)."""
    if not s:
        raise ValueError("string must not be empty")
    k = 1
    while k < len(s) and (s[k] < s[k - 1] or (k > 1 and s[k] == s[k - 1])):
        k += 1
    prefix = s[:k]
    return prefix + prefix[::-1]


def _distinct_counts(chars):
    seen = set()
    counts = [0]
    for ch in chars:
        seen.add(ch)
        counts.append(len(seen))
    return counts


def max_distinct_split(s):
    """Largest sum of distinct-character counts of a prefix and the remaining suffix."""
    prefix = _distinct_counts(s)
    suffix = _distinct_counts(reversed(s))
    n = len(s)
    return max(prefix[i] + suffix[n - i] for i in range(n + 1))


def find_hashed(haystack, needle):
    """Index of the first window of haystack whose polynomial hash equals needle's, or -1."""
    h, n = len(haystack), len(needle)
    powers = [1]
    for _ in range(max(h, n) - 1):
        powers.append(powers[-1] * BASE % MOD)
    prefix = [0]
    for ch, power in zip(haystack, powers):
        prefix.append((prefix[-1] + _letter_value(ch) * power) % MOD)
    target = sum(_letter_value(ch) * power for ch, power in zip(needle, powers)) % MOD
    for i in range(h - n + 1):
        window = (prefix[i + n] - prefix[i]) % MOD
        if window == target * powers[i] % MOD:
            return i
    return -1


def prefix_table(pattern):
    """Failure function: entry i is the longest proper border of pattern[:i + 1]."""
    table = [0] * len(pattern)
    i, j = 1, 0
    while i < len(pattern):
        if pattern[i] == pattern[j]:
            table[i] = j + 1
            i += 1
            j += 1
        elif j > 0:
            j = table[j - 1]
        else:
            table[i] = 0
            i += 1
    return table


def find_kmp(text, pattern):
    """Index of the first occurrence of pattern in text using Knuth-Morris-Pratt, or -1."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_table(pattern)
    i = j = 0
    while i < len(text):
        if text[i] == pattern[j]:
            if j == len(pattern) - 1:
                return i - j
            i += 1
            j += 1
        elif j > 0:
            j = table[j - 1]
        else:
            i += 1
    return -1


def add_strings(num1, num2):
    """Sum of two non-negative decimal numbers given as strings."""
    if not set(num1) <= _DIGITS or not set(num2) <= _DIGITS:
        raise ValueError("expected strings of decimal digits")
    result = []
    carry = 0
    for d1, d2 in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        total = int(d1) + int(d2) + carry
        result.append(str(total % 10))
        carry = total // 10
    if carry:
        result.append(str(carry))
    return "".join(reversed(result))


def rabin_karp(text, pattern):
    """1-based starting positions of every occurrence of pattern in text."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    n, m = len(text), len(pattern)
    if m > n:
        return []
    high = pow(BASE, m - 1, MOD)
    pattern_hash = text_hash = 0
    for pc, tc in zip(pattern, text):
        pattern_hash = (pattern_hash * BASE + _letter_value(pc)) % MOD
        text_hash = (text_hash * BASE + _letter_value(tc)) % MOD
    matches = []
    for i in range(n - m + 1):
        if text_hash == pattern_hash and text.startswith(pattern, i):
            matches.append(i + 1)
        if i < n - m:
            text_hash = (
                (text_hash - _letter_value(text[i]) * high) * BASE + _letter_value(text[i + m])
            ) % MOD
    return matches
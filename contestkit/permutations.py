"""Permutations of a string by swap-based backtracking."""


def _permute(chars, left):
    if left == len(chars) - 1:
        yield "".join(chars)
        return
    for i in range(left, len(chars)):
        chars[left], chars[i] = chars[i], chars[left]
        yield from _permute(chars, left + 1)
        chars[left], chars[i] = chars[i], chars[left]


def permute(text):
    """Yield every arrangement of text's characters in swap-backtracking order."""
    chars = list(text)
    if chars:
        yield from _permute(chars, 0)
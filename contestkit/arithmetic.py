"""Number-theoretic helpers: modular powers, factorial facts, divisors, bits."""

import math

MOD = 10**9 + 7


def min_lcm_split(n):
    """Split n into (a, b), a + b == n, minimising lcm(a, b)."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if n % 2 == 0:
        return n // 2, n // 2
    largest_proper = max(
        d for i in range(1, math.isqrt(n) + 1) if n % i == 0 for d in (i, n // i) if d != n
    )
    return n - largest_proper, largest_proper


def power_mod(n, r):
    """n to the power r modulo 1_000_000_007."""
    if r < 0:
        raise ValueError("exponent must be non-negative")
    return pow(n, r, MOD)


def trailing_zeroes(n):
    """Number of trailing zeros of n!."""
    count = 0
    power = 5
    while True:
        count += n // power
        power *= 5
        if n // power == 0:
            return count


def inverse_factorial(digits):
    """The n >= 1 whose factorial is written by the decimal string digits."""
    if not digits or any(ch not in "0123456789" for ch in digits):
        raise ValueError("expected a string of decimal digits")
    target = 0
    for ch in digits:
        target = (target * 10 + int(ch)) % MOD
    limit = len(digits) + 1
    factorial = 1
    log_sum = 0.0
    i = 1
    while True:
        factorial = factorial * i % MOD
        if factorial == target:
            return i
        log_sum += math.log10(i)
        if log_sum >= limit:
            raise ValueError(f"{digits} is not a factorial")
        i += 1


def factorial_digits(n, base):
    """Number of digits of n! written in the given base."""
    log_sum = sum(math.log10(i) for i in range(1, n + 1))
    return int(log_sum / math.log10(base) + 1)


def count_set_bits(n):
    """Number of 1 bits in the binary form of n."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return n.bit_count()
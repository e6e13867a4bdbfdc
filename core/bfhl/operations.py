"""
core.bfhl.operations — Pure number helpers behind the /bfhl keys.

Nothing here validates input types; that's validation.py.
"""
from __future__ import annotations

from functools import reduce
from math import isqrt


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting 0, 1."""
    seq = []
    a, b = 0, 1
    for _ in range(n):
        seq.append(a)
        a, b = b, a + b
    return seq


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    for i in range(2, isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def filter_primes(values: list[int]) -> list[int]:
    """Keep the primes, in order, duplicates included."""
    return [v for v in values if is_prime(v)]


def gcd(a: int, b: int) -> int:
    """Euclid's algorithm on absolute values. gcd(0, 0) is 0."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def lcm_of(values: list[int]) -> int:
    return reduce(lcm, values)


def hcf_of(values: list[int]) -> int:
    # a single element still goes through gcd so the sign is dropped
    return reduce(gcd, values, 0)

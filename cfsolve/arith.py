"""Solvers for problems whose input is a handful of integers."""

from __future__ import annotations

from collections.abc import Iterable
from math import isqrt

MOD = 1_000_000_007
_POWER_LIMIT = 1_000_000_000


def powers_of_two(exponents: Iterable[int]) -> list[int]:
    """Return ``2 ** e`` modulo 10**9 + 7 for every exponent ``e``."""
    exponents = list(exponents)
    if any(e < 0 for e in exponents):
        raise ValueError("exponents must be non-negative")
    return [pow(2, e, MOD) for e in exponents]


def median_split(n: int, k: int) -> list[int] | None:
    """Left borders of odd-length blocks of 1..n whose medians have median k.

    Returns ``None`` when no split exists.
    """
    if n == k == 1:
        return [1]
    if n == k or k == 1:
        return None
    if (k - 1) % 2 == 0:
        return [1, k - 1, k + 2]
    return [1, k, k + 1]


def count_xor_divisors(x: int, m: int) -> int:
    """Count ``y`` in 1..m, ``y != x``, where ``x ^ y`` divides ``x`` or ``y``."""
    count = 0
    for y in range(1, min(2 * x, m) + 1):
        if y == x:
            continue
        xor = x ^ y
        if x % xor == 0 or y % xor == 0:
            count += 1
    return count


def bowling_frame_size(w: int, b: int) -> int:
    """Largest frame side ``k`` that ``w`` white and ``b`` black pins allow."""
    if w < 0 or b < 0:
        raise ValueError("pin counts must be non-negative")
    total = 2 * (w + b)
    k = isqrt(total)
    while k != 0 and not (k * (k + 1) <= total and max(w, b) >= k):
        k -= 1
    return k


def beautiful_array(a: int, b: int) -> list[int]:
    """Three numbers whose mean is ``a`` and whose median is ``b``."""
    return [b, b, 3 * a - 2 * b]


def count_power_pairs(k: int, l1: int, r1: int, l2: int, r2: int) -> int:
    """Count pairs ``(x, y)`` with ``y = x * k**n`` inside the given ranges."""
    if k < 2:
        raise ValueError("k must be at least 2")
    total = 0
    mul = 1
    while mul <= _POWER_LIMIT:
        low = max(-(-l2 // mul), l1)
        high = min(r2 // mul, r1)
        total += max(0, high - low + 1)
        mul *= k
    return total
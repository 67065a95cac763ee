"""Solvers for problems whose input is one or two integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def mirror_game_winner(a: Sequence[int], b: Sequence[int]) -> str:
    """Return "Bob" if ``b`` equals ``a`` or ``a`` reversed, else "Alice"."""
    a = list(a)
    b = list(b)
    if len(a) != len(b):
        raise ValueError("both sequences must have the same length")
    if b == a or b == a[::-1]:
        return "Bob"
    return "Alice"


def max_mex(values: Iterable[int], x: int) -> int:
    """Largest MEX reachable by adding multiples of ``x`` to duplicate values.

    Surplus copies of a value ``v`` are moved to ``v + x``, ``v + 2x`` and so
    on, and the first value that is absent is the answer.
    """
    if x <= 0:
        raise ValueError("x must be positive")
    values = list(values)
    counts = Counter(values)
    for value in range(len(values) + 1):
        if counts[value] == 0:
            return value
        step = x
        while counts[value] >= 2:
            counts[value] -= 1
            counts[value + step] += 1
            step += x
    return max(values, default=0) + 1


def min_presses(k: int, counts: Iterable[int]) -> int:
    """Fewest button presses that guarantee ``k`` cans from hidden slots."""
    remaining = k
    answer = k
    ordered = sorted(counts)
    n = len(ordered)
    subtract = 0
    for position, count in enumerate(ordered):
        level = count - subtract
        remaining -= min(remaining, (n - position) * level)
        if remaining == 0:
            break
        answer += 1
        subtract += level
    return answer


def min_removals(values: Sequence[int]) -> int:
    """Elements to remove so that the first remaining one is the maximum.

    For every start position the number of later elements not exceeding it
    is counted; the answer is the length minus the best such count.
    """
    values = list(values)
    best = max(
        (
            sum(1 for later in values[start:] if later <= head)
            for start, head in enumerate(values)
        ),
        default=0,
    )
    return len(values) - best


def max_path_cost(top: Sequence[int], bottom: Sequence[int]) -> int:
    """Best cost of a path through a two-row grid after free column swaps."""
    top = list(top)
    bottom = list(bottom)
    if len(top) != len(bottom):
        raise ValueError("both rows must have the same length")
    if not top:
        raise ValueError("the grid must have at least one column")
    pairs = list(zip(top, bottom))
    return sum(max(pair) for pair in pairs) + max(min(pair) for pair in pairs)


def odd_one_out_index(values: Iterable[int]) -> int:
    """1-based position of the number whose parity differs from the rest."""
    last_odd = last_even = None
    odd_count = 0
    for position, value in enumerate(values, start=1):
        if value % 2:
            odd_count += 1
            last_odd = position
        else:
            last_even = position
    if odd_count == 1:
        return last_odd
    if last_even is None:
        raise ValueError("no number of differing parity")
    return last_even
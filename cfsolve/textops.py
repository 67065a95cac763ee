"""Solvers for problems whose input is a string."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_PATTERN = "1100"


def rearrange_string(s: str) -> str:
    """Reorder ``s`` by dealing its characters out round-robin.

    Strings with no repeated character, or only one distinct character,
    come back unchanged.
    """
    counts = dict(Counter(s))
    if not any(count >= 2 for count in counts.values()) or len(counts) == 1:
        return s
    pieces = []
    while counts:
        pieces.extend(counts)
        counts = {ch: count - 1 for ch, count in counts.items() if count > 1}
    return "".join(pieces)


def can_win_replacements(s: str, r: str) -> bool:
    """Whether every one of ``len(s) - 1`` replacements by ``r`` can be made."""
    steps = len(s) - 1
    if len(r) < steps:
        raise ValueError("r must hold at least len(s) - 1 characters")
    ones = s.count("1")
    zeros = len(s) - ones
    if ones == 0 or zeros == 0:
        return False
    for ch in r[:steps]:
        if ones == 0 or zeros == 0:
            return False
        ones -= 1
        zeros -= 1
        if ch == "1":
            ones += 1
        else:
            zeros += 1
    return True


def isolated_one_exists(s: str) -> bool:
    """Whether some '1' has at most one '0' next to it."""
    if len(s) == 2:
        return s != "00"
    if len(s) == 1:
        return s != "0"
    for pos, ch in enumerate(s):
        if ch != "1":
            continue
        zeros_around = (pos > 0 and s[pos - 1] == "0") + (
            pos + 1 < len(s) and s[pos + 1] == "0"
        )
        if zeros_around <= 1:
            return True
    return False


def min_timar_uses(s: str, m: int, k: int) -> int:
    """Fewest strengthenings of width ``k`` so no ``m`` weak spots are adjacent."""
    if k < 1:
        raise ValueError("k must be at least 1")
    uses = 0
    run = 0
    pos = 0
    while pos < len(s):
        if s[pos] == "1":
            run = 0
        else:
            run += 1
            if run == m:
                uses += 1
                run = 0
                pos += k
                continue
        pos += 1
    return uses


class PatternTracker:
    """A mutable binary string that knows whether it contains "1100"."""

    def __init__(self, s: str) -> None:
        self._chars = list(s)
        self._count = sum(1 for start in range(len(s) - 3) if self._matches(start))

    def _matches(self, start: int) -> bool:
        return "".join(self._chars[start:start + 4]) == _PATTERN

    def _window(self, pos: int) -> range:
        return range(max(pos - 3, 0), min(pos, len(self._chars) - 4) + 1)

    def update(self, index: int, value: int) -> None:
        """Set the character at 1-based ``index`` to the digit ``value``."""
        if not 1 <= index <= len(self._chars):
            raise IndexError("index out of range")
        if value not in (0, 1):
            raise ValueError("value must be 0 or 1")
        pos = index - 1
        self._count -= sum(1 for start in self._window(pos) if self._matches(start))
        self._chars[pos] = str(value)
        self._count += sum(1 for start in self._window(pos) if self._matches(start))

    def __bool__(self) -> bool:
        return self._count > 0

    def __str__(self) -> str:
        return "".join(self._chars)


def answer_queries(s: str, queries: Iterable[tuple[int, int]]) -> list[bool]:
    """Apply each (index, value) update and report whether "1100" is present."""
    tracker = PatternTracker(s)
    answers = []
    for index, value in queries:
        tracker.update(index, value)
        answers.append(bool(tracker))
    return answers


def permutation_exists(s: str) -> bool:
    """Whether a permutation meets every 'p' prefix and 's' suffix demand."""
    if not s:
        return True
    chars = list(s)
    if chars[0] == "s":
        chars[0] = "."
    if chars[-1] == "p":
        chars[-1] = "."
    return not ("p" in chars and "s" in chars)


def divisible_by_nine(s: str) -> bool:
    """Whether squaring some 2s and 3s can make the digit sum divisible by 9."""
    if not s.isdigit():
        raise ValueError("s must consist of decimal digits")
    remainder = sum(int(ch) for ch in s) % 9
    if remainder == 0:
        return True
    # Beyond eight squarings of either digit the remainders only repeat.
    twos = min(s.count("2"), 8)
    threes = min(s.count("3"), 8)
    return any(
        (remainder + 2 * i + 6 * j) % 9 == 0
        for i in range(twos + 1)
        for j in range(threes + 1)
    )


def max_lexicographic(s: str) -> str:
    """Largest string reachable by moving a digit left, decreasing it per step."""
    if not s.isdigit():
        raise ValueError("s must consist of decimal digits")
    digits = [int(ch) for ch in s]
    for start in range(1, len(digits)):
        pos = start
        while pos >= 1 and digits[pos] > 0 and digits[pos] > digits[pos - 1] + 1:
            moved = digits[pos]
            digits[pos] = digits[pos - 1]
            digits[pos - 1] = moved - 1
            if pos > 1:
                pos -= 1
            else:
                break
    return "".join(map(str, digits))
"""Command-line entry point: read a problem's input and print its answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from cfsolve.arith import (
    beautiful_array,
    bowling_frame_size,
    count_power_pairs,
    count_xor_divisors,
    median_split,
    powers_of_two,
)
from cfsolve.arrays import (
    max_mex,
    max_path_cost,
    min_presses,
    min_removals,
    mirror_game_winner,
    odd_one_out_index,
)
from cfsolve.textops import (
    answer_queries,
    can_win_replacements,
    divisible_by_nine,
    isolated_one_exists,
    max_lexicographic,
    min_timar_uses,
    permutation_exists,
    rearrange_string,
)


class _Tokens:
    """Whitespace-separated tokens of the input, consumed in order."""

    def __init__(self, text: str) -> None:
        self._items = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("input ended early") from None

    def int(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]

    def cases(self) -> range:
        return range(self.int())


_Handler = Callable[[_Tokens], Iterator[str]]
_PROBLEMS: dict[str, _Handler] = {}

_VERDICT = {True: "YES", False: "NO"}


def _problem(name: str) -> Callable[[_Handler], _Handler]:
    def register(handler: _Handler) -> _Handler:
        _PROBLEMS[name] = handler
        return handler

    return register


@_problem("2002B")
def _mirror(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n = tokens.int()
        a = tokens.ints(n)
        b = tokens.ints(n)
        yield mirror_game_winner(a, b)


@_problem("2003C")
def _rearrange(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        tokens.int()
        yield rearrange_string(tokens.word())


@_problem("2021B")
def _mex(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n, x = tokens.ints(2)
        yield str(max_mex(tokens.ints(n), x))


@_problem("2024B")
def _presses(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n, k = tokens.ints(2)
        yield str(min_presses(k, tokens.ints(n)))


@_problem("2025B")
def _powers(tokens: _Tokens) -> Iterator[str]:
    t = tokens.int()
    tokens.ints(t)
    for value in powers_of_two(tokens.ints(t)):
        yield str(value)


@_problem("2027B")
def _removals(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n = tokens.int()
        yield str(min_removals(tokens.ints(n)))


@_problem("2029B")
def _replacements(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        tokens.int()
        s = tokens.word()
        r = tokens.word()
        yield _VERDICT[bool(can_win_replacements(s, r))]


@_problem("2030C")
def _isolated(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        tokens.int()
        yield _VERDICT[bool(isolated_one_exists(tokens.word()))]


@_problem("2032B")
def _median(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n, k = tokens.ints(2)
        borders = median_split(n, k)
        if borders is None:
            yield "-1"
        else:
            yield str(len(borders))
            yield " ".join(map(str, borders))


@_problem("2034B")
def _timar(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        _, m, k = tokens.ints(3)
        yield str(min_timar_uses(tokens.word(), m, k))


@_problem("2036C")
def _pattern(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        s = tokens.word()
        q = tokens.int()
        queries = [(tokens.int(), tokens.int()) for _ in range(q)]
        for found in answer_queries(s, queries):
            yield _VERDICT[bool(found)]


@_problem("2039C1")
def _xor(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        x, m = tokens.ints(2)
        yield str(count_xor_divisors(x, m))


@_problem("2041B")
def _bowling(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        w, b = tokens.ints(2)
        yield str(bowling_frame_size(w, b))


@_problem("2041E")
def _beautiful(tokens: _Tokens) -> Iterator[str]:
    a, b = tokens.ints(2)
    values = beautiful_array(a, b)
    yield str(len(values))
    yield " ".join(map(str, values))


@_problem("2044E")
def _power_pairs(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        yield str(count_power_pairs(*tokens.ints(5)))


@_problem("2046A")
def _path(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n = tokens.int()
        top = tokens.ints(n)
        bottom = tokens.ints(n)
        yield str(max_path_cost(top, bottom))


@_problem("2049B")
def _permutation(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        tokens.int()
        yield _VERDICT[bool(permutation_exists(tokens.word()))]


@_problem("2050C")
def _nine(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        yield _VERDICT[bool(divisible_by_nine(tokens.word()))]


@_problem("2050D")
def _lexicographic(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        yield max_lexicographic(tokens.word())


@_problem("25A")
def _parity(tokens: _Tokens) -> Iterator[str]:
    n = tokens.int()
    yield str(odd_one_out_index(tokens.ints(n)))


def solve(problem: str, text: str) -> str:
    """Answer the input ``text`` of ``problem``, one answer per line."""
    try:
        handler = _PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem {problem!r}") from None
    lines = list(handler(_Tokens(text)))
    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or stdin and print the answers."""
    parser = argparse.ArgumentParser(
        prog="cfsolve", description="Solve a contest problem from its input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="input file (default: standard input)",
    )
    args = parser.parse_args(argv)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    try:
        output = solve(args.problem, text)
    except (ValueError, IndexError) as error:
        print(f"cfsolve: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0
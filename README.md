# cfsolve

Solvers for a set of short competitive-programming problems. These include
array games, string rearrangements, pattern tracking under updates and small
number-theory counts. Each problem is a plain Python function. A command-line
tool reads a problem's input in its usual text format and prints the answers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

The functions are grouped by what they work on.

- `cfsolve.arrays`: `mirror_game_winner`, `max_mex`, `min_presses`,
  `min_removals`, `max_path_cost`, `odd_one_out_index`
- `cfsolve.textops`: `rearrange_string`, `can_win_replacements`,
  `isolated_one_exists`, `min_timar_uses`, `answer_queries`,
  `permutation_exists`, `divisible_by_nine`, `max_lexicographic`, and the
  `PatternTracker` class
- `cfsolve.arith`: `powers_of_two`, `median_split`, `count_xor_divisors`,
  `bowling_frame_size`, `beautiful_array`, `count_power_pairs`

```python
from cfsolve.arrays import odd_one_out_index
from cfsolve.textops import PatternTracker, answer_queries

# 1-based position of the one number whose parity differs from the rest
odd_one_out_index([2, 4, 7, 8, 10])   # 3

# Watch a binary string for the substring "1100" while single characters change
tracker = PatternTracker("1101")
tracker.update(4, 0)                  # 1-based index, digit 0 or 1
bool(tracker)                         # True
str(tracker)                          # "1100"

answer_queries("1101", [(4, 0), (1, 0)])   # [True, False]
```

`PatternTracker` keeps a count of the "1100" occurrences. Each update changes
only the few windows around the position that changed, so queries stay cheap
on long strings. `update` raises `IndexError` for an index outside the string
and `ValueError` for a value other than 0 or 1.

Functions raise `ValueError` on input they cannot work with, for example
sequences of different lengths, non-digit strings or a non-positive step.
`median_split` returns `None` when no split exists.

## Command line

The `cfsolve` command takes a problem identifier and an optional input file.
Without a file, or with `-`, it reads standard input. It writes the answers to
standard output, one per line:

```
cfsolve 25A < input.txt
cfsolve 2036C input.txt
```

The identifiers and the functions behind them:

| Problem | Function |
|---------|----------|
| `2002B` | `arrays.mirror_game_winner` |
| `2003C` | `textops.rearrange_string` |
| `2021B` | `arrays.max_mex` |
| `2024B` | `arrays.min_presses` |
| `2025B` | `arith.powers_of_two` |
| `2027B` | `arrays.min_removals` |
| `2029B` | `textops.can_win_replacements` |
| `2030C` | `textops.isolated_one_exists` |
| `2032B` | `arith.median_split` |
| `2034B` | `textops.min_timar_uses` |
| `2036C` | `textops.answer_queries` |
| `2039C1` | `arith.count_xor_divisors` |
| `2041B` | `arith.bowling_frame_size` |
| `2041E` | `arith.beautiful_array` |
| `2044E` | `arith.count_power_pairs` |
| `2046A` | `arrays.max_path_cost` |
| `2049B` | `textops.permutation_exists` |
| `2050C` | `textops.divisible_by_nine` |
| `2050D` | `textops.max_lexicographic` |
| `25A` | `arrays.odd_one_out_index` |

Yes/no answers are printed as `YES` or `NO`; an impossible `2032B` case prints
`-1`. If the input ends early or holds a bad token, the command prints an
error to standard error and exits with status 1.

From Python, `cfsolve.cli.solve(problem, text)` does the same work. It takes
the input as a string and returns the output text; an unknown problem raises
`ValueError`.

## What it does not do

The package does not check inputs against each problem's stated limits and
does not fetch problem statements or inputs; it only computes answers from the
input it is given.
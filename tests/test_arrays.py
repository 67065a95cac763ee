import pytest

from cfsolve.arrays import (
    max_mex,
    max_path_cost,
    min_presses,
    min_removals,
    mirror_game_winner,
    odd_one_out_index,
)


def test_mirror_same_order_bob():
    assert mirror_game_winner([1, 2, 3], [1, 2, 3]) == "Bob"


def test_mirror_reversed_bob():
    a = [4, 1, 3, 2]
    assert mirror_game_winner(a, list(reversed(a))) == "Bob"


def test_mirror_other_alice():
    assert mirror_game_winner([1, 2, 3], [2, 1, 3]) == "Alice"


def test_mirror_length_mismatch():
    with pytest.raises(ValueError):
        mirror_game_winner([1, 2], [1])


def test_max_mex_distinct_run():
    values = [3, 0, 2, 1, 4]
    assert max_mex(values, 5) == len(values)


def test_max_mex_missing_zero():
    values = [1, 2, 3]
    assert max_mex(values, 2) == min(values) - 1


def test_max_mex_duplicates_fill_gap():
    with_dup = [0, 0, 2]
    # Copies of 0 move to 0+x; with x equal to the gap the MEX grows.
    assert max_mex(with_dup, 1) > max_mex(with_dup, 3)


def test_max_mex_rejects_non_positive_step():
    with pytest.raises(ValueError):
        max_mex([0, 0], 0)


def test_min_presses_enough_everywhere():
    counts = [5, 6, 7]
    k = len(counts) * min(counts)
    assert min_presses(k, counts) == k


def test_min_presses_order_independent():
    counts = [1, 4, 2, 9, 3]
    assert min_presses(12, counts) == min_presses(12, list(reversed(counts)))


def test_min_presses_never_below_k():
    counts = [1, 1, 10]
    k = 7
    assert min_presses(k, counts) >= k


def test_min_presses_zero_request():
    assert min_presses(0, [3, 4]) == 0


def test_min_removals_non_increasing():
    assert min_removals([9, 7, 7, 3, 1]) == 0


def test_min_removals_strictly_increasing():
    values = [1, 2, 3, 4, 5]
    assert min_removals(values) == len(values) - 1


def test_min_removals_bounds():
    values = [3, 6, 4, 9, 2, 5, 2]
    result = min_removals(values)
    assert 0 <= result < len(values)


def test_max_path_cost_single_column():
    assert max_path_cost([-4], [7]) == -4 + 7


def test_max_path_cost_row_swap_symmetric():
    top = [2, 8, 5, 3]
    bottom = [1, 10, -5, 4]
    assert max_path_cost(top, bottom) == max_path_cost(bottom, top)


def test_max_path_cost_mismatch():
    with pytest.raises(ValueError):
        max_path_cost([1, 2], [3])


def test_max_path_cost_empty():
    with pytest.raises(ValueError):
        max_path_cost([], [])


def test_odd_one_out_single_odd():
    values = [2, 4, 7, 8, 10]
    assert odd_one_out_index(values) == values.index(7) + 1


def test_odd_one_out_single_even():
    values = [1, 3, 5, 6, 9]
    index = odd_one_out_index(values)
    assert values[index - 1] % 2 == 0
    assert sum(1 for v in values if v % 2 == 0) == 1


def test_odd_one_out_all_odd_raises():
    with pytest.raises(ValueError):
        odd_one_out_index([1, 3, 5])
import pytest

from cfsolve.arith import (
    MOD,
    beautiful_array,
    bowling_frame_size,
    count_power_pairs,
    count_xor_divisors,
    median_split,
    powers_of_two,
)


def test_powers_of_two_zero_exponent_is_one():
    assert powers_of_two([0]) == [1]


def test_powers_of_two_doubles_each_step():
    result = powers_of_two(range(40))
    for current, following in zip(result, result[1:]):
        assert following == (2 * current) % MOD


@pytest.mark.parametrize("a,b", [(3, 5), (100, 33333), (99999, 1)])
def test_powers_of_two_is_multiplicative(a, b):
    left, right, combined = powers_of_two([a, b, a + b])
    assert combined == (left * right) % MOD


def test_powers_of_two_stays_below_modulus():
    assert all(0 <= value < MOD for value in powers_of_two([10**5, 99999, 66666]))


def test_powers_of_two_rejects_negative():
    with pytest.raises(ValueError):
        powers_of_two([3, -1])


def test_median_split_single_element():
    assert median_split(1, 1) == [1]


@pytest.mark.parametrize("n,k", [(3, 3), (5, 5), (5, 1), (7, 1)])
def test_median_split_impossible(n, k):
    assert median_split(n, k) is None


@pytest.mark.parametrize("n,k", [(15, 8), (15, 7), (9, 2), (9, 5), (11, 10)])
def test_median_split_blocks_are_odd_and_centred(n, k):
    borders = median_split(n, k)
    assert len(borders) == 3
    assert borders[0] == 1
    lengths = [borders[1] - borders[0], borders[2] - borders[1], n - borders[2] + 1]
    assert all(length > 0 and length % 2 == 1 for length in lengths)
    middle_low, middle_high = borders[1], borders[2] - 1
    assert (middle_low + middle_high) // 2 == k


def test_count_xor_divisors_example():
    assert count_xor_divisors(6, 9) == 3


def test_count_xor_divisors_monotone_in_m():
    counts = [count_xor_divisors(12, m) for m in range(1, 30)]
    assert counts == sorted(counts)


def test_count_xor_divisors_ignores_m_beyond_twice_x():
    assert count_xor_divisors(7, 14) == count_xor_divisors(7, 1000)


def test_count_xor_divisors_bounded_by_range():
    for x in range(1, 20):
        assert count_xor_divisors(x, 50) <= min(2 * x, 50) - 1


def test_bowling_frame_size_empty():
    assert bowling_frame_size(0, 0) == 0


@pytest.mark.parametrize("w,b", [(1, 2), (3, 2), (3, 3), (12, 0), (10**9, 10**9)])
def test_bowling_frame_size_fits_and_is_maximal(w, b):
    k = bowling_frame_size(w, b)
    total = 2 * (w + b)
    assert k * (k + 1) <= total
    assert max(w, b) >= k
    assert (k + 1) * (k + 2) > total or max(w, b) < k + 1


def test_bowling_frame_size_rejects_negative():
    with pytest.raises(ValueError):
        bowling_frame_size(-1, 3)


@pytest.mark.parametrize("a,b", [(3, 4), (-100, 100), (0, 0), (7, -2)])
def test_beautiful_array_mean_and_median(a, b):
    values = beautiful_array(a, b)
    assert len(values) == 3
    assert sum(values) == 3 * a
    assert sorted(values)[1] == b


def test_count_power_pairs_example():
    assert count_power_pairs(2, 2, 6, 2, 12) == 12


def test_count_power_pairs_empty_range():
    assert count_power_pairs(2, 5, 4, 1, 10) == 0


def test_count_power_pairs_wider_range_never_counts_less():
    narrow = count_power_pairs(3, 5, 7, 15, 63)
    wide = count_power_pairs(3, 1, 100, 1, 1000)
    assert wide >= narrow


def test_count_power_pairs_rejects_small_k():
    with pytest.raises(ValueError):
        count_power_pairs(1, 1, 5, 1, 5)
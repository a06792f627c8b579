import pytest

from aocsolutions.y2024.day11 import num_digits, part1, solve, solve_cached

EXAMPLE = "125 17"


def test_example_six_blinks():
    assert solve(EXAMPLE, 6) == 22


def test_example_part1():
    assert part1(EXAMPLE) == 55312


def test_zero_blinks_counts_input_stones():
    assert solve(EXAMPLE, 0) == 2
    assert solve_cached(EXAMPLE, 0) == 2


@pytest.mark.parametrize("blinks", range(0, 30, 3))
def test_cached_matches_counting(blinks):
    assert solve_cached(EXAMPLE, blinks) == solve(EXAMPLE, blinks)
    assert solve_cached("0 1 10 99 999", blinks) == solve("0 1 10 99 999", blinks)


def test_stone_count_never_decreases():
    counts = [solve(EXAMPLE, b) for b in range(15)]
    assert counts == sorted(counts)


def test_part1_is_25_blinks():
    assert part1("0 7") == solve_cached("0 7", 25)


@pytest.mark.parametrize("k", range(0, 12))
def test_num_digits_of_powers_of_ten(k):
    assert num_digits(10**k) == k + 1


@pytest.mark.parametrize("n", [0, -5])
def test_num_digits_rejects_non_positive(n):
    with pytest.raises(ValueError):
        num_digits(n)
import pytest

from aocsolutions.y2015.day02 import parse_dimensions, part1, part2


def test_parse_dimensions():
    assert parse_dimensions("2x3x4\n1x1x10") == [(2, 3, 4), (1, 1, 10)]


def test_part1_example():
    assert part1([(2, 3, 4)]) == 58


def test_part2_example():
    assert part2([(2, 3, 4)]) == 34


def test_part1_second_example():
    assert part1([(1, 1, 10)]) == 43


@pytest.mark.parametrize("func", [part1, part2])
def test_totals_are_additive(func):
    a, b = (2, 3, 4), (1, 1, 10)
    assert func([a, b]) == func([a]) + func([b])


@pytest.mark.parametrize("func", [part1, part2])
def test_totals_ignore_orientation(func):
    assert func([(2, 3, 4)]) == func([(4, 2, 3)]) == func([(3, 4, 2)])


def test_parse_then_solve():
    dims = parse_dimensions("2x3x4")
    assert part1(dims) == part1([(2, 3, 4)])
import pytest

from aocsolutions.y2024.day02 import (
    is_safe,
    is_safe_dampened,
    parse_reports,
    part1,
    part2,
)

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9"""


def test_parse_reports():
    assert parse_reports("7 6 4\n-1 2") == [[7, 6, 4], [-1, 2]]


def test_part1_example():
    assert part1(parse_reports(EXAMPLE)) == 2


def test_part2_example():
    assert part2(parse_reports(EXAMPLE)) == 4


@pytest.mark.parametrize("report", [[7, 6, 4, 2, 1], [1, 3, 6, 7, 9]])
def test_safe_reports(report):
    assert is_safe(report)
    assert is_safe(list(reversed(report)))


@pytest.mark.parametrize("report", [[1, 2, 7, 8, 9], [9, 7, 6, 2, 1]])
def test_unsafe_even_when_dampened(report):
    assert not is_safe(report)
    assert not is_safe_dampened(report)


@pytest.mark.parametrize("report", [[1, 3, 2, 4, 5], [8, 6, 4, 4, 1]])
def test_dampener_rescues_one_bad_level(report):
    assert not is_safe(report)
    assert is_safe_dampened(report)


def test_safe_implies_dampened_safe():
    for report in parse_reports(EXAMPLE):
        if is_safe(report):
            assert is_safe_dampened(report)
import pytest

from aocsolutions.y2024.day05 import middle_page, page_lt, part1, part2

RULES = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13"""

UPDATES = """75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""

EXAMPLE = RULES + "\n\n" + UPDATES


def test_part1_example():
    assert part1(EXAMPLE) == 143


def test_part2_example():
    assert part2(EXAMPLE) == 123


def test_page_lt_follows_rules():
    rules = set(RULES.splitlines())
    assert page_lt("47", "53", rules)
    assert not page_lt("53", "47", rules)


def test_middle_page():
    assert middle_page(["75", "47", "61", "53", "29"]) == 61


def test_missing_separator_raises():
    with pytest.raises(ValueError):
        part1(RULES)


def test_sorted_updates_score_in_part1_only():
    text = RULES + "\n\n75,47,61,53,29"
    assert part1(text) == middle_page(["75", "47", "61", "53", "29"])
    assert not part2(text)
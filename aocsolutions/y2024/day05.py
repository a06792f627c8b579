"""Page ordering rules for print updates."""

from __future__ import annotations

import time
from functools import cmp_to_key
from typing import AbstractSet, Sequence

from aocsolutions.utils import read_input


def page_lt(a: str, b: str, rules: AbstractSet[str]) -> bool:
    """True if a rule says page ``a`` comes before page ``b``."""
    return f"{a}|{b}" in rules


def middle_page(pages: Sequence[str]) -> int:
    return int(pages[len(pages) // 2])


def _parse(text: str) -> tuple[set[str], list[list[str]]]:
    rules, sep, updates = text.partition("\n\n")
    if not sep:
        raise ValueError("input must separate rules and updates with a blank line")
    return set(rules.splitlines()), [line.split(",") for line in updates.splitlines()]


def _in_order(pages: Sequence[str], rules: AbstractSet[str]) -> bool:
    return all(page_lt(a, b, rules) for a, b in zip(pages, pages[1:]))


def part1(text: str) -> int:
    """Sum of middle pages of correctly ordered updates."""
    rules, updates = _parse(text)
    return sum(middle_page(pages) for pages in updates if _in_order(pages, rules))


def part2(text: str) -> int:
    """Sum of middle pages of the misordered updates once put in order."""
    rules, updates = _parse(text)

    def compare(a: str, b: str) -> int:
        if page_lt(a, b, rules):
            return -1
        if page_lt(b, a, rules):
            return 1
        return 0

    return sum(
        middle_page(sorted(pages, key=cmp_to_key(compare)))
        for pages in updates
        if not _in_order(pages, rules)
    )


def main(argv=None) -> int:
    manual = read_input(argv)
    for name, check in (("Part 1", part1), ("Part 2", part2)):
        mark = time.perf_counter_ns()
        pages = check(manual)
        duration = (time.perf_counter_ns() - mark) // 1000
        unit = f"{duration // 1000}ms" if duration >= 11000 else f"{duration}μs"
        print(f"{name}: {pages} \tTime: {unit}")
    return 0
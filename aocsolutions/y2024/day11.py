"""Stones that split and change each time you blink."""

from __future__ import annotations

import time
from collections import Counter
from functools import lru_cache, partial

from aocsolutions.utils import extract_unsigned, read_input


def num_digits(n: int) -> int:
    """Decimal digit count of a positive integer."""
    if n <= 0:
        raise ValueError("digit count is defined for positive integers only")
    return len(str(n))


def _blink(n: int) -> tuple[int, ...]:
    if n == 0:
        return (1,)
    digits = num_digits(n)
    if digits % 2 == 0:
        return divmod(n, 10 ** (digits // 2))
    return (n * 2024,)


def solve(text: str, blinks: int) -> int:
    """Number of stones after ``blinks`` blinks, tracking counts per engraving."""
    stones = Counter(extract_unsigned(text))
    for _ in range(blinks):
        updated: Counter[int] = Counter()
        for n, count in stones.items():
            for child in _blink(n):
                updated[child] += count
        stones = updated
    return sum(stones.values())


@lru_cache(maxsize=None)
def _stone_count(n: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    return sum(_stone_count(child, blinks - 1) for child in _blink(n))


def solve_cached(text: str, blinks: int) -> int:
    """Same result as :func:`solve`, computed by memoised recursion per stone."""
    return sum(_stone_count(n, blinks) for n in extract_unsigned(text))


def part1(text: str) -> int:
    return solve(text, 25)


def part2(text: str) -> int:
    return solve(text, 75)


def main(argv=None) -> int:
    stones = read_input(argv)
    sections = (
        (None, (part1, part2)),
        ("(Cached Version)", (partial(solve_cached, blinks=25), partial(solve_cached, blinks=75))),
    )
    for heading, solvers in sections:
        if heading:
            print(heading)
        for index, count_stones in enumerate(solvers, start=1):
            origin = time.perf_counter_ns()
            total = count_stones(stones)
            lapse = (time.perf_counter_ns() - origin) // 1000
            print(f"Part {index}: {total} \tTime: " + (f"{lapse // 1000}ms" if lapse >= 11000 else f"{lapse}μs"))
    return 0
"""Distances and similarity between two columns of location ids."""

from __future__ import annotations

import time
from typing import Sequence

from aocsolutions.utils import extract_unsigned, read_input


def parse_pairs(text: str) -> list[list[int]]:
    """One list of numbers per input line."""
    return [extract_unsigned(line) for line in text.splitlines()]


def similarity(n: int, values: Sequence[int]) -> int:
    """``n`` multiplied by how often it appears in ``values``."""
    return values.count(n) * n


def part1(pairs: Sequence[Sequence[int]]) -> int:
    """Sum of differences between the two columns, each sorted."""
    left = sorted(pair[0] for pair in pairs)
    right = sorted(pair[1] for pair in pairs)
    return sum(abs(a - b) for a, b in zip(left, right))


def part2(pairs: Sequence[Sequence[int]]) -> int:
    """Sum of similarity scores of the left column against the right."""
    right = [pair[1] for pair in pairs]
    return sum(similarity(pair[0], right) for pair in pairs)


def main(argv=None) -> int:
    pairs = parse_pairs(read_input(argv))
    for label, solve in (("Part 1", part1), ("Part 2", part2)):
        start = time.perf_counter_ns()
        result = solve(pairs)
        micros = (time.perf_counter_ns() - start) // 1000
        print(f"{label}: {result} \tTime: " + (f"{micros // 1000}ms" if micros >= 11000 else f"{micros}μs"))
    return 0
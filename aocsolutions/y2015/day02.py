"""Wrapping paper and ribbon for presents given as LxWxH dimensions."""

from __future__ import annotations

import time
from itertools import combinations
from math import prod
from typing import Iterable

from aocsolutions.utils import read_input


def parse_dimensions(text: str) -> list[tuple[int, ...]]:
    """Parse lines like ``2x3x4`` into tuples of integers."""
    return [tuple(int(n) for n in line.split("x")) for line in text.splitlines()]


def _paper(dim: tuple[int, ...]) -> int:
    areas = [a * b for a, b in combinations(dim, 2)]
    return 2 * sum(areas) + min(areas)


def _ribbon(dim: tuple[int, ...]) -> int:
    smallest, second, *_ = sorted(dim)
    return 2 * (smallest + second) + prod(dim)


def part1(dims: Iterable[tuple[int, ...]]) -> int:
    """Total square feet of wrapping paper."""
    return sum(_paper(dim) for dim in dims)


def part2(dims: Iterable[tuple[int, ...]]) -> int:
    """Total feet of ribbon."""
    return sum(_ribbon(dim) for dim in dims)


def main(argv=None) -> int:
    dims = parse_dimensions(read_input(argv))
    for label, solve in (("Part 1", part1), ("Part 2", part2)):
        started = time.perf_counter_ns()
        answer = solve(dims)
        spent = (time.perf_counter_ns() - started) // 1000
        shown = f"{spent // 1000}ms" if spent >= 2000 else f"{spent}μs"
        print(f"{label}: {answer} \tTime: {shown}")
    return 0
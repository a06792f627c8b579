"""Houses visited on an infinite grid following arrow directions."""

from __future__ import annotations

import time
from typing import Iterable

from aocsolutions.utils import read_input

_STEPS = {"<": (1, 0), ">": (-1, 0), "^": (0, 1), "v": (0, -1)}


def visit(moves: Iterable[str]) -> set[tuple[int, int]]:
    """Return every position visited, starting from the origin; unknown moves stay put."""
    x = y = 0
    visited = {(x, y)}
    for ch in moves:
        dx, dy = _STEPS.get(ch, (0, 0))
        x += dx
        y += dy
        visited.add((x, y))
    return visited


def part1(text: str) -> int:
    """Number of houses visited by one walker."""
    return len(visit(text))


def part2(text: str) -> int:
    """Number of houses visited by two walkers taking alternate moves."""
    return len(visit(text[::2]) | visit(text[1::2]))


def main(argv=None) -> int:
    text = read_input(argv)
    for label, solve in {"Part 1": part1, "Part 2": part2}.items():
        t0 = time.perf_counter_ns()
        value = solve(text)
        us = (time.perf_counter_ns() - t0) // 1000
        print(f"{label}: {value} \tTime: {us // 1000}ms" if us >= 2000 else f"{label}: {value} \tTime: {us}μs")
    return 0
"""Container combinations that hold an exact amount of eggnog."""

from __future__ import annotations

import time
from itertools import combinations
from typing import Sequence

from aocsolutions.utils import extract_unsigned, read_input

TARGET = 150


def num_combos(containers: Sequence[int], n: int, target: int = TARGET) -> int:
    """Number of ways to choose ``n`` containers totalling ``target``."""
    return sum(1 for combo in combinations(containers, n) if sum(combo) == target)


def part1(text: str, target: int = TARGET) -> int:
    """Ways to fill exactly ``target`` with any number of containers."""
    containers = extract_unsigned(text)
    return sum(num_combos(containers, n, target) for n in range(1, len(containers) + 1))


def part2(text: str, target: int = TARGET) -> int:
    """Ways to fill ``target`` using the fewest containers; 0 if impossible."""
    containers = extract_unsigned(text)
    counts = (num_combos(containers, n, target) for n in range(1, len(containers) + 1))
    return next((ways for ways in counts if ways), 0)


def main(argv=None) -> int:
    sizes = read_input(argv)
    for tag, ways in (("Part 1", part1), ("Part 2", part2)):
        kick = time.perf_counter_ns()
        n_ways = ways(sizes)
        usec = (time.perf_counter_ns() - kick) // 1000
        elapsed = f"{usec}μs" if usec < 2000 else f"{usec // 1000}ms"
        print(f"{tag}: {n_ways} \tTime: {elapsed}")
    return 0
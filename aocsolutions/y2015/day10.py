"""Look-and-say sequence lengths."""

from __future__ import annotations

import time
from itertools import groupby

from aocsolutions.utils import read_input


def say_number(s: str) -> str:
    """One round of look-and-say: each run becomes its length followed by its digit."""
    return "".join(f"{len(list(run))}{digit}" for digit, run in groupby(s))


def _length_after(text: str, rounds: int) -> int:
    for _ in range(rounds):
        text = say_number(text)
    return len(text)


def part1(text: str) -> int:
    return _length_after(text, 40)


def part2(text: str) -> int:
    return _length_after(text, 50)


def main(argv=None) -> int:
    seed = read_input(argv)
    for which, rounds in enumerate((part1, part2), start=1):
        origin = time.perf_counter_ns()
        length = rounds(seed)
        lapse = (time.perf_counter_ns() - origin) // 1000
        print(f"Part {which}: {length} \tTime: " + (f"{lapse // 1000}ms" if lapse >= 2000 else f"{lapse}μs"))
    return 0
"""Floor counting from a string of parentheses."""

from __future__ import annotations

import time

from aocsolutions.utils import read_input


def part1(text: str) -> int:
    """Final floor: each '(' goes up one, every other character goes down one."""
    return 2 * text.count("(") - len(text)


def part2(text: str) -> int:
    """Position (1-based) of the first step into the basement, else the final floor."""
    floor = 0
    for position, ch in enumerate(text, start=1):
        floor += 1 if ch == "(" else -1
        if floor < 0:
            return position
    return floor


def main(argv=None) -> int:
    text = read_input(argv)
    for label, solve in (("Part 1", part1), ("Part 2", part2)):
        start = time.perf_counter_ns()
        result = solve(text)
        micros = (time.perf_counter_ns() - start) // 1000
        print(f"{label}: {result} \tTime: " + (f"{micros // 1000}ms" if micros >= 2000 else f"{micros}μs"))
    return 0
"""Lengths of string literals in code, in memory and re-encoded."""

from __future__ import annotations

import time

from aocsolutions.utils import read_input


def decoded_length(s: str) -> int:
    """Characters in memory for a quoted literal with \\\\, \\" and \\xNN escapes."""
    length = 0
    escaped = False
    for ch in s:
        if ch == "\\" and not escaped:
            escaped = True
        elif ch == "x" and escaped:
            length -= 1
            escaped = False
        else:
            length += 1
            escaped = False
    return length - 2


def encoded_length(s: str) -> int:
    """Length after escaping quotes and backslashes and adding surrounding quotes."""
    return sum(2 if ch in '"\\' else 1 for ch in s) + 2


def part1(text: str) -> int:
    return sum(len(line) - decoded_length(line) for line in text.splitlines())


def part2(text: str) -> int:
    return sum(encoded_length(line) - len(line) for line in text.splitlines())


def main(argv=None) -> int:
    literals = read_input(argv)
    for heading, measure in zip(("Part 1", "Part 2"), (part1, part2)):
        t_start = time.perf_counter_ns()
        difference = measure(literals)
        taken = (time.perf_counter_ns() - t_start) // 1000
        label = f"{taken // 1000}ms" if taken >= 2000 else f"{taken}μs"
        print(f"{heading}: {difference} \tTime: {label}")
    return 0
"""Sum of multiplication instructions in corrupted memory."""

from __future__ import annotations

import re
import time
from math import prod

from aocsolutions.utils import extract_unsigned, read_input

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"mul\(\d+,\d+\)|don't\(\)|do\(\)")


def part1(text: str) -> int:
    """Sum of every well-formed ``mul(a,b)`` product."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part2(text: str) -> int:
    """Like part 1, but ``don't()`` disables and ``do()`` re-enables products."""
    total = 0
    enabled = True
    for instruction in _INSTRUCTION.findall(text):
        if instruction == "don't()":
            enabled = False
        elif instruction == "do()":
            enabled = True
        elif enabled:
            total += prod(extract_unsigned(instruction))
    return total


def main(argv=None) -> int:
    memory = read_input(argv)
    for label, solve in {"Part 1": part1, "Part 2": part2}.items():
        t0 = time.perf_counter_ns()
        value = solve(memory)
        us = (time.perf_counter_ns() - t0) // 1000
        print(f"{label}: {value} \tTime: {us // 1000}ms" if us >= 11000 else f"{label}: {value} \tTime: {us}μs")
    return 0
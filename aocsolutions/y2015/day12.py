"""Sum of all numbers in a JSON-like document."""

from __future__ import annotations

import time

from aocsolutions.utils import extract_signed, read_input


def part1(text: str) -> int:
    """Sum of every integer appearing in the text."""
    return sum(extract_signed(text))


def main(argv=None) -> int:
    document = read_input(argv)
    began = time.perf_counter_ns()
    total = part1(document)
    micro = (time.perf_counter_ns() - began) // 1000
    print(f"Part 1: {total} \tTime: " + (f"{micro // 1000}ms" if micro >= 2000 else f"{micro}μs"))
    return 0
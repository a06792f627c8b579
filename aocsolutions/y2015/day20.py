"""First house to receive at least a given number of presents."""

from __future__ import annotations

import time
from itertools import count
from math import isqrt

from aocsolutions.utils import read_input


def _divisor_sum(n: int) -> int:
    return sum(
        d + (n // d if d * d != n else 0)
        for d in range(1, isqrt(n) + 1)
        if n % d == 0
    )


def part1(text: str) -> int:
    """Lowest house number whose presents (ten per dividing elf) reach the limit."""
    limit = int(text)
    return next(house for house in count() if 10 * _divisor_sum(house) >= limit)


def main(argv=None) -> int:
    limit = read_input(argv)
    opened = time.perf_counter_ns()
    house = part1(limit)
    micros_used = (time.perf_counter_ns() - opened) // 1000
    readable = f"{micros_used}μs" if micros_used < 2000 else f"{micros_used // 1000}ms"
    print(f"Part 1: {house} \tTime: {readable}")
    return 0
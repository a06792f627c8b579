"""Search for MD5 hashes with leading zeros."""

from __future__ import annotations

import hashlib
import time
from itertools import count

from aocsolutions.utils import read_input


def md5hash(key: str, number: int) -> str:
    """Hex MD5 digest of the key followed by the decimal number."""
    return hashlib.md5(f"{key}{number}".encode()).hexdigest()


def _first_with_prefix(key: str, prefix: str) -> int:
    return next(n for n in count() if md5hash(key, n).startswith(prefix))


def part1(text: str) -> int:
    """Lowest number whose hash starts with five zeros."""
    return _first_with_prefix(text, "00000")


def part2(text: str) -> int:
    """Lowest number whose hash starts with six zeros."""
    return _first_with_prefix(text, "000000")


def main(argv=None) -> int:
    key = read_input(argv)
    for number, solve in enumerate((part1, part2), start=1):
        begin = time.perf_counter_ns()
        found = solve(key)
        micros = (time.perf_counter_ns() - begin) // 1000
        timing = f"{micros // 1000}ms" if micros >= 2000 else f"{micros}μs"
        print(f"Part {number}: {found} \tTime: {timing}")
    return 0
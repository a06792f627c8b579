"""Word search counts in a letter grid."""

from __future__ import annotations

import time
from typing import Sequence

from aocsolutions.utils import read_input

Offsets = Sequence[tuple[int, int]]

XMAS_PATTERNS: tuple[Offsets, ...] = (
    ((0, 0), (0, 1), (0, 2), (0, 3)),  # horizontal
    ((0, 0), (1, 0), (2, 0), (3, 0)),  # vertical
    ((0, 0), (1, 1), (2, 2), (3, 3)),  # diagonal down
    ((3, 0), (2, 1), (1, 2), (0, 3)),  # diagonal up
)

CROSS_PATTERNS: tuple[Offsets, ...] = (
    ((0, 0), (1, 1), (2, 2)),  # diagonal down
    ((2, 0), (1, 1), (0, 2)),  # diagonal up
)


def count_matches(
    patterns: Sequence[Offsets], word: str, r: int, c: int, rows: Sequence[str]
) -> int:
    """Number of patterns anchored at (r, c) spelling ``word`` forwards or backwards."""
    nrows, ncols = len(rows), len(rows[0])
    candidates = (word, word[::-1])

    def letters(offsets: Offsets) -> str:
        return "".join(
            rows[r + dr][c + dc] if r + dr < nrows and c + dc < ncols else " "
            for dr, dc in offsets
        )

    return sum(1 for offsets in patterns if letters(offsets) in candidates)


def _cells(rows: Sequence[str]):
    return ((r, c) for r in range(len(rows)) for c in range(len(rows[0])))


def part1(text: str) -> int:
    """Occurrences of XMAS in any straight direction."""
    rows = text.splitlines()
    return sum(count_matches(XMAS_PATTERNS, "XMAS", r, c, rows) for r, c in _cells(rows))


def part2(text: str) -> int:
    """Number of X-shaped crossings of two MAS words."""
    rows = text.splitlines()
    return sum(
        1 for r, c in _cells(rows) if count_matches(CROSS_PATTERNS, "MAS", r, c, rows) == 2
    )


def main(argv=None) -> int:
    puzzle = read_input(argv)
    for number, search in enumerate((part1, part2), start=1):
        begin = time.perf_counter_ns()
        found = search(puzzle)
        micros = (time.perf_counter_ns() - begin) // 1000
        timing = f"{micros // 1000}ms" if micros >= 11000 else f"{micros}μs"
        print(f"Part {number}: {found} \tTime: {timing}")
    return 0
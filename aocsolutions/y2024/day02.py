"""Safety checks on reactor level reports."""

from __future__ import annotations

import time
from typing import Sequence

from aocsolutions.utils import extract_signed, read_input


def parse_reports(text: str) -> list[list[int]]:
    """One report of signed levels per line."""
    return [extract_signed(line) for line in text.splitlines()]


def is_safe(report: Sequence[int]) -> bool:
    """Levels strictly increase or strictly decrease by steps of one to three."""
    diffs = [b - a for a, b in zip(report, report[1:])]
    return all(1 <= d <= 3 for d in diffs) or all(-3 <= d <= -1 for d in diffs)


def is_safe_dampened(report: Sequence[int]) -> bool:
    """Safe after removing at most one level."""
    levels = list(report)
    return any(is_safe(levels[:i] + levels[i + 1 :]) for i in range(len(levels)))


def part1(reports: Sequence[Sequence[int]]) -> int:
    return sum(1 for report in reports if is_safe(report))


def part2(reports: Sequence[Sequence[int]]) -> int:
    return sum(1 for report in reports if is_safe_dampened(report))


def main(argv=None) -> int:
    reports = parse_reports(read_input(argv))
    for title, safe_count in (("Part 1", part1), ("Part 2", part2)):
        started = time.perf_counter_ns()
        answer = safe_count(reports)
        spent = (time.perf_counter_ns() - started) // 1000
        shown = f"{spent // 1000}ms" if spent >= 11000 else f"{spent}μs"
        print(f"{title}: {answer} \tTime: {shown}")
    return 0
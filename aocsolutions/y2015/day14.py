"""Reindeer race: distance flown and lead points."""

from __future__ import annotations

import time
from dataclasses import dataclass

from aocsolutions.utils import extract_unsigned, read_input

RACE_TIME = 2503


@dataclass(frozen=True)
class Reindeer:
    speed: int
    move_time: int
    rest_time: int

    def position(self, t: int) -> int:
        """Distance flown after ``t`` seconds."""
        cycles, remainder = divmod(t, self.move_time + self.rest_time)
        return (cycles * self.move_time + min(self.move_time, remainder)) * self.speed


def parse_input(text: str) -> list[Reindeer]:
    """Take speed, flight time and rest time from the numbers on each line."""
    return [Reindeer(*extract_unsigned(line)[:3]) for line in text.splitlines()]


def part1(text: str, race_time: int = RACE_TIME) -> int:
    """Distance of the winning reindeer."""
    return max(r.position(race_time) for r in parse_input(text))


def part2(text: str, race_time: int = RACE_TIME) -> int:
    """Points of the winner, scoring one per second in the lead (ties all score)."""
    tracks = [[r.position(t) for t in range(1, race_time + 1)] for r in parse_input(text)]
    leaders = [max(column) for column in zip(*tracks)]
    return max(sum(d == lead for d, lead in zip(track, leaders)) for track in tracks)


def main(argv=None) -> int:
    herd = read_input(argv)
    for caption, race in (("Part 1", part1), ("Part 2", part2)):
        launch = time.perf_counter_ns()
        winner = race(herd)
        wait = (time.perf_counter_ns() - launch) // 1000
        stamp = f"{wait // 1000}ms" if wait >= 2000 else f"{wait}μs"
        print(f"{caption}: {winner} \tTime: {stamp}")
    return 0
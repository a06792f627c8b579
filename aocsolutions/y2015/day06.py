"""Light grid driven by on/off/toggle rectangle instructions."""

from __future__ import annotations

import time
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from itertools import product
from typing import Iterable, Iterator

from aocsolutions.utils import read_input


class Command(Enum):
    TURN_ON = "on"
    TURN_OFF = "off"
    TOGGLE = "toggle"


@dataclass(frozen=True)
class Instruction:
    command: Command
    x1: int
    y1: int
    x2: int
    y2: int


def _rectangle(ins: Instruction) -> Iterator[tuple[int, int]]:
    xs = range(min(ins.x1, ins.x2), max(ins.x1, ins.x2) + 1)
    ys = range(min(ins.y1, ins.y2), max(ins.y1, ins.y2) + 1)
    return product(xs, ys)


def _point(field: str) -> tuple[int, int]:
    x, y = field.split(",")[:2]
    return int(x), int(y)


def parse_input(text: str) -> list[Instruction]:
    """Parse lines like ``turn on 0,0 through 9,9``; unknown commands raise ValueError."""
    instructions = []
    for line in text.splitlines():
        words = line.replace("turn ", "").split()
        try:
            command = Command(words[0])
        except ValueError:
            raise ValueError(f"Invalid command: {words[0]!r}") from None
        (x1, y1), (x2, y2) = _point(words[1]), _point(words[3])
        instructions.append(Instruction(command, x1, y1, x2, y2))
    return instructions


def part1(instructions: Iterable[Instruction]) -> int:
    """Number of lights left on."""
    lit: set[tuple[int, int]] = set()
    for ins in instructions:
        area = set(_rectangle(ins))
        if ins.command is Command.TURN_ON:
            lit |= area
        elif ins.command is Command.TURN_OFF:
            lit -= area
        else:
            lit ^= area
    return len(lit)


_BRIGHTNESS = {Command.TURN_ON: 1, Command.TURN_OFF: -1, Command.TOGGLE: 2}


def part2(instructions: Iterable[Instruction]) -> int:
    """Total brightness, where no light goes below zero."""
    levels: defaultdict[tuple[int, int], int] = defaultdict(int)
    for ins in instructions:
        delta = _BRIGHTNESS[ins.command]
        for point in _rectangle(ins):
            levels[point] = max(levels[point] + delta, 0)
    return sum(levels.values())


def main(argv=None) -> int:
    instructions = parse_input(read_input(argv))
    for title, count_lights in (("Part 1", part1), ("Part 2", part2)):
        tic = time.perf_counter_ns()
        lights = count_lights(instructions)
        toc = (time.perf_counter_ns() - tic) // 1000
        print(f"{title}: {lights} \tTime: " + (f"{toc // 1000}ms" if toc >= 2000 else f"{toc}μs"))
    return 0
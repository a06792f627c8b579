"""Equations whose operands combine left to right into a test value."""

from __future__ import annotations

import operator
import time
from dataclasses import dataclass
from typing import Callable, Sequence

from aocsolutions.utils import extract_unsigned, read_input

Operation = Callable[[int, int], int]


def _run(label, solve):
    start = time.perf_counter()
    result = solve()
    elapsed = time.perf_counter() - start
    millis = int(elapsed * 1000)
    if millis > 10:
        print(f"{label}: {result} \tTime: {millis}ms")
    else:
        print(f"{label}: {result} \tTime: {int(elapsed * 1_000_000)}μs")
    return result


@dataclass(frozen=True)
class Equation:
    test_value: int
    operands: tuple[int, ...]


def parse_input(text: str) -> list[Equation]:
    """Parse lines like ``190: 10 19``."""
    equations = []
    for line in text.splitlines():
        head, sep, tail = line.partition(": ")
        if not sep:
            raise ValueError(f"malformed equation: {line!r}")
        equations.append(Equation(int(head), tuple(extract_unsigned(tail))))
    return equations


def concat(a: int, b: int) -> int:
    """Digits of ``a`` followed by the digits of positive ``b``."""
    if b <= 0:
        raise ValueError("right operand of concatenation must be positive")
    return a * 10 ** len(str(b)) + b


BASIC_OPERATIONS: tuple[Operation, ...] = (operator.add, operator.mul)
ALL_OPERATIONS: tuple[Operation, ...] = (operator.add, operator.mul, concat)


def equation_possible(
    test_value: int, operands: Sequence[int], operations: Sequence[Operation]
) -> bool:
    """True if some choice of operations, applied left to right, gives ``test_value``."""

    def search(result: int, rest: Sequence[int]) -> bool:
        if result > test_value:
            return False
        if not rest:
            return result == test_value
        return any(search(op(result, rest[0]), rest[1:]) for op in operations)

    return search(operands[0], operands[1:])


def _calibration(text: str, operations: Sequence[Operation]) -> int:
    return sum(
        eq.test_value
        for eq in parse_input(text)
        if equation_possible(eq.test_value, eq.operands, operations)
    )


def part1(text: str) -> int:
    return _calibration(text, BASIC_OPERATIONS)


def part2(text: str) -> int:
    return _calibration(text, ALL_OPERATIONS)


def main(argv=None) -> int:
    text = read_input(argv)
    _run("Part 1", lambda: part1(text))
    _run("Part 2", lambda: part2(text))
    return 0
"""Best cookie recipe from ingredient properties."""

from __future__ import annotations

import time
from math import prod
from typing import Sequence

from aocsolutions.utils import extract_signed, read_input

TEASPOONS = 100
CALORIE_TARGET = 500


def parse_input(text: str) -> list[list[int]]:
    """One row of signed properties per ingredient line."""
    return [extract_signed(line) for line in text.splitlines()]


def score(ingredients: Sequence[Sequence[int]], amounts: Sequence[int]) -> int:
    """Product of the first four property totals, each clamped at zero."""
    properties = zip(*(ingredient[:4] for ingredient in ingredients))
    totals = (sum(p * a for p, a in zip(column, amounts)) for column in properties)
    return prod(max(total, 0) for total in totals)


def calories(ingredients: Sequence[Sequence[int]], amounts: Sequence[int]) -> int:
    """Total of the fifth property."""
    return sum(ingredient[4] * a for ingredient, a in zip(ingredients, amounts))


def combos(n: int, remaining: int) -> list[list[int]]:
    """Ways to share ``remaining`` among ``n`` ingredients, as lists of amounts."""
    if n == 1:
        return [[remaining]]
    if remaining == 0:
        return []
    return [
        rest + [i]
        for i in range(remaining + 1)
        for rest in combos(n - 1, remaining - i)
    ]


def part1(text: str) -> int:
    ingredients = parse_input(text)
    return max(score(ingredients, c) for c in combos(len(ingredients), TEASPOONS))


def part2(text: str) -> int:
    ingredients = parse_input(text)
    return max(
        score(ingredients, c)
        for c in combos(len(ingredients), TEASPOONS)
        if calories(ingredients, c) == CALORIE_TARGET
    )


def main(argv=None) -> int:
    recipe = read_input(argv)
    for part, best in enumerate((part1, part2), start=1):
        first = time.perf_counter_ns()
        top = best(recipe)
        gap = (time.perf_counter_ns() - first) // 1000
        print(f"Part {part}: {top} \tTime: {gap // 1000}ms" if gap >= 2000 else f"Part {part}: {top} \tTime: {gap}μs")
    return 0
"""A guard patrolling a grid, turning right at obstacles."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace

from aocsolutions.utils import read_input

Position = tuple[int, int]
_UP: Position = (-1, 0)


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
class Grid:
    obstacles: frozenset[Position]
    nrows: int
    ncols: int

    def __contains__(self, pos: Position) -> bool:
        r, c = pos
        return 0 <= r < self.nrows and 0 <= c < self.ncols


def _find(rows: list[str], symbol: str) -> set[Position]:
    return {(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == symbol}


def parse_input(text: str) -> tuple[Position, Grid]:
    """Return the guard's start and the grid of obstacles."""
    rows = text.splitlines()
    starts = _find(rows, "^")
    if not starts:
        raise ValueError("no guard '^' in the grid")
    start = next(iter(starts))
    return start, Grid(frozenset(_find(rows, "#")), len(rows), len(rows[0]))


def traverse(start: Position, grid: Grid) -> tuple[bool, set[tuple[Position, Position]]]:
    """Walk from ``start`` facing up; return (looped, visited (position, direction) pairs)."""
    pos, direction = start, _UP
    seen = {(pos, direction)}
    while True:
        nxt = (pos[0] + direction[0], pos[1] + direction[1])
        if nxt not in grid:
            return False, seen
        if nxt in grid.obstacles:
            direction = (direction[1], -direction[0])
        elif (nxt, direction) in seen:
            return True, seen
        else:
            pos = nxt
            seen.add((pos, direction))


def traversed_positions(start: Position, grid: Grid) -> set[Position]:
    """Positions the guard walks through, excluding the start."""
    return {pos for pos, _ in traverse(start, grid)[1] if pos != start}


def part1(text: str) -> int:
    start, grid = parse_input(text)
    return len(traversed_positions(start, grid))


def part2(text: str) -> int:
    """Number of positions where one new obstacle traps the guard in a loop."""
    start, grid = parse_input(text)
    return sum(
        1
        for pos in traversed_positions(start, grid)
        if traverse(start, replace(grid, obstacles=grid.obstacles | {pos}))[0]
    )


def main(argv=None) -> int:
    text = read_input(argv)
    _run("Part 1", lambda: part1(text))
    _run("Part 2", lambda: part2(text))
    return 0
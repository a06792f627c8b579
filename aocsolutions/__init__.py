"""Solutions to selected Advent of Code puzzles from the 2015 and 2024 events."""

__version__ = "0.1.0"
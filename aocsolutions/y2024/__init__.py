"""Solutions to selected puzzles of the 2024 Advent of Code event."""
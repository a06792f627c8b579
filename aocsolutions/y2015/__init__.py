"""Solutions to selected puzzles of the 2015 Advent of Code event."""
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolutions"
version = "0.1.0"
description = "Solutions to a selection of Advent of Code puzzles from the 2015 and 2024 events"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2015-day01 = "aocsolutions.y2015.day01:main"
aoc2015-day02 = "aocsolutions.y2015.day02:main"
aoc2015-day03 = "aocsolutions.y2015.day03:main"
aoc2015-day04 = "aocsolutions.y2015.day04:main"
aoc2015-day05 = "aocsolutions.y2015.day05:main"
aoc2015-day06 = "aocsolutions.y2015.day06:main"
aoc2015-day08 = "aocsolutions.y2015.day08:main"
aoc2015-day10 = "aocsolutions.y2015.day10:main"
aoc2015-day12 = "aocsolutions.y2015.day12:main"
aoc2015-day14 = "aocsolutions.y2015.day14:main"
aoc2015-day15 = "aocsolutions.y2015.day15:main"
aoc2015-day17 = "aocsolutions.y2015.day17:main"
aoc2015-day20 = "aocsolutions.y2015.day20:main"
aoc2024-day01 = "aocsolutions.y2024.day01:main"
aoc2024-day02 = "aocsolutions.y2024.day02:main"
aoc2024-day03 = "aocsolutions.y2024.day03:main"
aoc2024-day04 = "aocsolutions.y2024.day04:main"
aoc2024-day05 = "aocsolutions.y2024.day05:main"
aoc2024-day06 = "aocsolutions.y2024.day06:main"
aoc2024-day07 = "aocsolutions.y2024.day07:main"
aoc2024-day11 = "aocsolutions.y2024.day11:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

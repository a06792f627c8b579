"""Nice and naughty string rules."""

from __future__ import annotations

import time

from aocsolutions.utils import read_input

BAD_PAIRS = ("ab", "cd", "pq", "xy")
VOWELS = frozenset("aeiou")


def has_three_vowels(s: str) -> bool:
    return sum(ch in VOWELS for ch in s) >= 3


def has_double_letter(s: str) -> bool:
    return any(a == b for a, b in zip(s, s[1:]))


def has_no_bad_pairs(s: str) -> bool:
    return not any(pair in s for pair in BAD_PAIRS)


def has_non_overlapping_pairs(s: str) -> bool:
    """True if some two-letter pair appears twice without overlapping."""
    return any(s[i : i + 2] in s[i + 2 :] for i in range(len(s) - 2))


def has_sandwiched_letter(s: str) -> bool:
    """True if some letter repeats with exactly one letter between."""
    return any(a == b for a, b in zip(s, s[2:]))


_RULES_1 = (has_three_vowels, has_double_letter, has_no_bad_pairs)
_RULES_2 = (has_non_overlapping_pairs, has_sandwiched_letter)


def _count_nice(text: str, rules) -> int:
    return sum(all(rule(line) for rule in rules) for line in text.splitlines())


def part1(text: str) -> int:
    return _count_nice(text, _RULES_1)


def part2(text: str) -> int:
    return _count_nice(text, _RULES_2)


def main(argv=None) -> int:
    words = read_input(argv)
    for name, rule_count in (("Part 1", part1), ("Part 2", part2)):
        mark = time.perf_counter_ns()
        nice = rule_count(words)
        duration = (time.perf_counter_ns() - mark) // 1000
        unit = f"{duration // 1000}ms" if duration >= 2000 else f"{duration}μs"
        print(f"{name}: {nice} \tTime: {unit}")
    return 0
"""Shared helpers for the puzzle solutions: timing, number extraction and input loading."""

from __future__ import annotations

import re
import sys
import time
from pathlib import Path
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

_UNSIGNED = re.compile(r"\d+")
_SIGNED = re.compile(r"-?\d+")
_MILLIS_THRESHOLD = 10


def timeit(name: str, func: Callable[[], T]) -> T:
    """Run ``func``, print its result with the elapsed time, and return the result."""
    start = time.perf_counter_ns()
    result = func()
    elapsed_ns = time.perf_counter_ns() - start
    millis = elapsed_ns // 1_000_000
    if millis > _MILLIS_THRESHOLD:
        print(f"{name}: {result} \tTime: {millis}ms")
    else:
        print(f"{name}: {result} \tTime: {elapsed_ns // 1000}\u03bcs")
    return result


def extract_unsigned(text: str) -> list[int]:
    """Return every run of digits in ``text`` as an integer, ignoring signs."""
    return [int(match) for match in _UNSIGNED.findall(text)]


def extract_signed(text: str) -> list[int]:
    """Return every optionally negative integer found in ``text``."""
    return [int(match) for match in _SIGNED.findall(text)]


def read_input(argv: Sequence[str] | None = None) -> str:
    """Read puzzle input from the file named first in ``argv``, or from stdin.

    Trailing line breaks are removed.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    text = Path(args[0]).read_text() if args else sys.stdin.read()
    return text.rstrip("\r\n")
"""Timing, input and call-chaining helpers shared by the puzzles."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def timed(func: Callable[[], R]) -> tuple[float, R]:
    """Run func once; return (elapsed seconds, result)."""
    start = time.perf_counter()
    result = func()
    return time.perf_counter() - start, result


def timed_repeated(repeats: int, func: Callable[[], R]) -> tuple[float, R]:
    """Run func repeatedly; return (rolling mean seconds, last result)."""
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    average = 0.0
    result: R
    for iteration in range(1, repeats + 1):
        start = time.perf_counter()
        result = func()
        elapsed = time.perf_counter() - start
        average += max(elapsed - average, 0.0) / iteration
    return average, result


def read_stdin() -> str:
    return sys.stdin.read()


def pipe(value: T, func: Callable[[T], R]) -> R:
    return func(value)


def tap(value: T, func: Callable[[T], object]) -> T:
    """Call func on value for its side effect and return value."""
    func(value)
    return value


def micros(seconds: float) -> int:
    return int(seconds * 1_000_000)
"""Small iterator helpers."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def unique(iterable: Iterable[H]) -> Iterator[H]:
    """Yield each item the first time it is seen."""
    seen: set[H] = set()
    for item in iterable:
        if item not in seen:
            seen.add(item)
            yield item


def pairs(iterable: Iterable[T]) -> Iterator[tuple[T, T | None]]:
    """Yield consecutive pairs; the last item may pair with None."""
    iterator = iter(iterable)
    for first in iterator:
        yield first, next(iterator, None)
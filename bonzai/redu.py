"""Reductions over sequences."""

from __future__ import annotations

from typing import Hashable, Iterable, TypeVar

H = TypeVar("H", bound=Hashable)


def longest(items: Iterable[object]) -> int:
    """Return the length of the longest item once converted to text."""
    return max((len(str(item)) for item in items), default=0)


def unique(items: Iterable[H]) -> list[H]:
    """Return the items with duplicates removed, keeping first occurrences."""
    return list(dict.fromkeys(items))
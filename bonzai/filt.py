"""Filters over sequences of text."""

from __future__ import annotations

import os
from typing import Sequence, TypeVar, Union

Text = Union[str, bytes]
T = TypeVar("T")
TT = TypeVar("TT", str, bytes)


def _as_str(item: Text) -> str:
    return item.decode() if isinstance(item, bytes) else item


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def has_prefix(items: Sequence[TT], prefix: str) -> list[TT]:
    """Return the items that start with prefix."""
    return [item for item in items if _as_str(item).startswith(prefix)]


def has_prefix_sorted(items: Sequence[TT], prefix: str) -> list[TT]:
    """Return the leading items that start with prefix, stopping at the first miss."""
    result = []
    for item in items:
        if not _as_str(item).startswith(prefix):
            break
        result.append(item)
    return result


def base_has_prefix(paths: Sequence[TT], prefix: str) -> list[TT]:
    """Return the paths whose base name starts with prefix."""
    return [p for p in paths if _base(_as_str(p)).startswith(prefix)]


def has_suffix(items: Sequence[TT], suffix: str) -> list[TT]:
    """Return the items that end with suffix."""
    return [item for item in items if _as_str(item).endswith(suffix)]


def has_suffix_sorted(items: Sequence[TT], prefix: str) -> list[TT]:
    """Return the leading items that start with prefix, stopping at the first miss."""
    return has_prefix_sorted(items, prefix)


def base_has_suffix(paths: Sequence[TT], suffix: str) -> list[TT]:
    """Return the paths whose base name ends with suffix."""
    return [p for p in paths if _base(_as_str(p)).endswith(suffix)]


def not_empty(items: Sequence[TT]) -> list[TT]:
    """Return the items that are not empty."""
    return [item for item in items if item]


def remove_index(items: Sequence[T], pos: int) -> list[T]:
    """Return a new list without the item at pos, keeping the same objects."""
    if not 0 <= pos < len(items):
        raise IndexError(f"index {pos} out of range")
    return [*items[:pos], *items[pos + 1 :]]
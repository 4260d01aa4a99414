"""Transforms over whole sequences and mappings."""

from __future__ import annotations

import os
from typing import Any, Iterable, Mapping, MutableMapping

from . import mapf


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def prefix(items: Iterable[str], pre: str) -> list[str]:
    """Prepend pre to every item."""
    return [pre + item for item in items]


def keys(mapping: Mapping[str, Any]) -> list[str]:
    """Return the keys in sorted order."""
    return sorted(mapping)


def keys_with_prefix(mapping: Mapping[str, Any], pre: str) -> list[str]:
    """Return the sorted keys that start with pre."""
    return sorted(k for k in mapping if k.startswith(pre))


def clear(mapping: MutableMapping[Any, Any]) -> None:
    """Remove every entry from the mapping."""
    mapping.clear()


def mark_dirs(entries: Iterable[os.DirEntry]) -> list[str]:
    """Return entry names, directories with a trailing slash."""
    return [mapf.mark_dirs(e) for e in entries]


def base(paths: Iterable[str]) -> list[str]:
    """Return the base name of every path."""
    return [_base(p) for p in paths]


def hash_comment(lines: Iterable[str]) -> list[str]:
    """Prefix every line with "# "."""
    return [mapf.hash_comment(line) for line in lines]


def esc_space(items: Iterable[str]) -> list[str]:
    """Backslash-escape the spaces in every item."""
    return [mapf.esc_space(s) for s in items]


def trim_space(items: Iterable[str]) -> list[str]:
    """Strip leading and trailing white space from every item."""
    return [s.strip() for s in items]
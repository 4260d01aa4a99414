"""Commonly used boolean tests."""

from __future__ import annotations

import re

_LOWER = re.compile(r"[a-z]+")
_LOWER_DASHES = re.compile(r"[a-z-]+")
_UPPER = re.compile(r"[A-Z]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MAX = 2**63 - 1

_TRUE_WORDS = frozenset({"t", "true", "on"})
_FALSE_WORDS = frozenset({"f", "false", "off"})


def all_latin_ascii_lower_with_dashes(s: str) -> bool:
    """Return True if s holds only a-z and dashes, not starting or ending with a dash."""
    if not s or s[0] == "-" or s[-1] == "-":
        return False
    return _LOWER_DASHES.fullmatch(s) is not None


def all_latin_ascii_lower(s: str) -> bool:
    """Return True if s is non-empty and holds only a-z."""
    return _LOWER.fullmatch(s) is not None


def all_latin_ascii_upper(s: str) -> bool:
    """Return True if s is non-empty and holds only A-Z."""
    return _UPPER.fullmatch(s) is not None


def truthy(val: str) -> bool:
    """Interpret text as a boolean.

    "t", "true" and "on" are true; "f", "false" and "off" are false
    (case and surrounding white space are ignored). A decimal integer is
    true when positive. Anything else is false.
    """
    val = val.strip().lower()
    if val in _TRUE_WORDS:
        return True
    if val in _FALSE_WORDS:
        return False
    if _INTEGER.fullmatch(val):
        return 0 < int(val) <= _INT64_MAX
    return False


def started_by_explorer() -> bool:
    """Return whether the program was launched by double-clicking in Explorer.

    Detection is not available here, so this conservatively returns False.
    """
    return False
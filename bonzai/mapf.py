"""Single-item transforms for use with map."""

from __future__ import annotations

import os


def mark_dirs(entry: os.DirEntry) -> str:
    """Return the entry's name, with a trailing slash if it is a directory."""
    return entry.name + "/" if entry.is_dir() else entry.name


def hash_comment(line: str) -> str:
    """Prefix the line with "# "."""
    return "# " + line


def esc_space(s: str) -> str:
    """Put a backslash in front of every space."""
    return s.replace(" ", "\\ ")
"""File and directory helpers."""

from __future__ import annotations

import logging
import os
import posixpath
import re
import shutil
import stat
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterator

logger = logging.getLogger(__name__)

DEFAULT_FILE_PERMS = 0o600
DEFAULT_DIR_PERMS = 0o700

EXTRACT_FILE_PERMS = 0o600
EXTRACT_DIR_PERMS = 0o700

_INTEGER = re.compile(r"[+-]?[0-9]+")


class NotExistError(FileNotFoundError):
    """Raised when a file or directory that was looked for does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"file or directory does not exist: {name}")
        self.name = name


class ExistError(FileExistsError):
    """Raised when a file or directory unexpectedly already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"file or directory already exists: {name}")
        self.name = name


class ExistsError(FileExistsError):
    """Raised when a path exists that should not."""

    def __init__(self, path: str) -> None:
        super().__init__(f"error: {path} exists")
        self.path = path


@dataclass
class PathEntry:
    """A full path together with the stat information already gathered for it."""

    path: str = ""
    info: os.stat_result | None = None


def _base(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def _walk(root: str, strict: bool) -> Iterator[str]:
    """Yield root and everything below it in lexical order, parents first."""
    yield root
    try:
        info = os.lstat(root)
    except OSError:
        if strict:
            raise
        return
    if not stat.S_ISDIR(info.st_mode):
        return
    try:
        names = sorted(os.listdir(root))
    except OSError:
        if strict:
            raise
        return
    for name in names:
        yield from _walk(os.path.join(root, name), strict)


def user_home_dir() -> str:
    """Return the current user's home directory."""
    var = "USERPROFILE" if sys.platform == "win32" else "HOME"
    home = os.environ.get(var, "")
    if not home:
        raise OSError(f"${var} is not defined")
    return home


def user_cache_dir() -> str:
    """Return the directory for user-specific cached data."""
    if sys.platform == "win32":
        path = os.environ.get("LocalAppData", "")
        if not path:
            raise OSError("%LocalAppData% is not defined")
        return path
    if sys.platform == "darwin":
        return os.path.join(user_home_dir(), "Library", "Caches")
    path = os.environ.get("XDG_CACHE_HOME", "")
    if not path:
        return os.path.join(user_home_dir(), ".cache")
    if not os.path.isabs(path):
        raise OSError("path in $XDG_CACHE_HOME is relative")
    return path


def user_config_dir() -> str:
    """Return the directory for user-specific configuration data."""
    if sys.platform == "win32":
        path = os.environ.get("AppData", "")
        if not path:
            raise OSError("%AppData% is not defined")
        return path
    if sys.platform == "darwin":
        return os.path.join(user_home_dir(), "Library", "Application Support")
    path = os.environ.get("XDG_CONFIG_HOME", "")
    if not path:
        return os.path.join(user_home_dir(), ".config")
    if not os.path.isabs(path):
        raise OSError("path in $XDG_CONFIG_HOME is relative")
    return path


def user_state_dir() -> str:
    """Return $XDG_STATE_HOME if set, otherwise ~/.local/state."""
    path = os.environ.get("XDG_STATE_HOME")
    if path is None:
        path = os.path.join(user_home_dir(), ".local", "state")
    return path


def tilde_to_home(path: str) -> str:
    """Expand a leading ~ into the user's home directory.

    The path is returned unchanged if it has no ~ prefix or no home
    directory can be found.
    """
    if not path.startswith("~"):
        return path
    try:
        home = user_home_dir()
    except OSError:
        return path
    rest = path[1:]
    return posixpath.normpath(home + "/" + rest if rest else home)


def is_dir(path: str) -> bool:
    """Return True if path is a directory; log and return False if unknown."""
    try:
        info = os.stat(path)
    except OSError as exc:
        logger.error("%s", exc)
        return False
    return stat.S_ISDIR(info.st_mode)


def dup_perms(orig: str, clone: str) -> None:
    """Copy the permission bits of orig onto clone, if clone exists."""
    info = os.stat(orig)
    try:
        os.stat(clone)
    except OSError:
        return
    os.chmod(clone, stat.S_IMODE(info.st_mode))


def mod_time(path: str) -> datetime | None:
    """Return the modification time of path, or None if it cannot be read."""
    try:
        info = os.stat(path)
    except OSError:
        return None
    return datetime.fromtimestamp(info.st_mtime, tz=timezone.utc).astimezone()


def exists(path: str) -> bool:
    """Return True only if path was definitely found."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def not_exists(path: str) -> bool:
    """Return True only if path definitely does not exist."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return True
    except (OSError, ValueError):
        return False
    return False


def here_or_above(name: str) -> str:
    """Return the path to name in the working directory or the nearest parent.

    Raises NotExistError if it is found nowhere.
    """
    current = os.getcwd()
    while current and current != os.sep:
        candidate = os.path.join(current, name)
        if exists(candidate):
            return candidate
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    raise NotExistError(name)


def extract_embed(root: str, target: str) -> None:
    """Copy the tree under root into target with restrictive permissions.

    Directories are created with EXTRACT_DIR_PERMS and files written with
    EXTRACT_FILE_PERMS.
    """
    for path in _walk(root, strict=True):
        rel = os.path.relpath(path, root)
        dest = target if rel == "." else os.path.join(target, rel)
        if os.path.isdir(path):
            os.makedirs(dest, mode=EXTRACT_DIR_PERMS, exist_ok=True)
            continue
        with open(path, "rb") as src:
            data = src.read()
        fd = os.open(dest, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, EXTRACT_FILE_PERMS)
        with os.fdopen(fd, "wb") as out:
            out.write(data)


def rel_paths(root: str) -> list[str]:
    """Return the paths of everything below root, relative to root."""
    if not os.path.lexists(root):
        return []
    paths = []
    for path in _walk(root, strict=False):
        rel = path[len(root):] if path.startswith(root) else path
        if not rel:
            continue
        paths.append(rel[1:])
    return paths


def latest_change(root: str) -> tuple[str, os.stat_result | None]:
    """Return the most recently modified path under root (itself included).

    Returns ("", None) if root is not a directory.
    """
    if not is_dir(root):
        return "", None
    latest_path = ""
    latest_info: os.stat_result | None = None
    for path in _walk(root, strict=False):
        if not latest_path:
            try:
                latest_info = os.lstat(path)
            except OSError:
                return "", None
            latest_path = path
            continue
        try:
            info = os.lstat(path)
        except OSError:
            continue
        if latest_info is not None and info.st_mtime_ns > latest_info.st_mtime_ns:
            latest_info = info
            latest_path = path
    return latest_path, latest_info


def name_is_int(path: str) -> bool:
    """Return True if the base name of path is a non-negative integer."""
    name = _base(path)
    return _INTEGER.fullmatch(name) is not None and int(name) >= 0


def int_dirs(target: str) -> tuple[list[PathEntry], int, int]:
    """Return the directories in target with non-negative integer names.

    Also returns the lowest and highest values found, both -1 if none.
    Entries come in lexical order of their names.
    """
    low = high = -1
    paths: list[PathEntry] = []
    try:
        entries = sorted(os.scandir(target), key=lambda e: e.name)
    except OSError:
        return paths, low, high
    for entry in entries:
        if not entry.is_dir(follow_symlinks=False):
            continue
        if _INTEGER.fullmatch(entry.name) is None:
            continue
        val = int(entry.name)
        if val < 0:
            continue
        low = val if low < 0 else min(low, val)
        high = val if high < 0 else max(high, val)
        pe = PathEntry(path=os.path.abspath(os.path.join(target, entry.name)))
        try:
            pe.info = entry.stat(follow_symlinks=False)
        except OSError:
            pe.info = None
        paths.append(pe)
    return paths, low, high


def isosec() -> str:
    """Return the current UTC time as YYYYMMDDhhmmss."""
    return datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")


def preserve(target: str) -> str:
    """Rename target with a ~ and timestamp suffix, returning the new name.

    Returns an empty string if target does not exist.
    """
    if not_exists(target):
        return ""
    new_name = target + "~" + isosec()
    os.rename(target, new_name)
    return new_name


def revert_if_missing(target: str, backup: str) -> None:
    """Restore backup to target if target is missing, otherwise remove backup."""
    if not target:
        return
    if not_exists(target):
        os.rename(backup, target)
    if exists(target) and backup and os.path.lexists(backup):
        if os.path.isdir(backup) and not os.path.islink(backup):
            shutil.rmtree(backup)
        else:
            os.remove(backup)


def is_sym_link(path: str) -> bool:
    """Return True if the final element of path is a symbolic link."""
    return stat.S_ISLNK(os.lstat(path).st_mode)


def is_hard_link(path: str) -> bool:
    """Return True if the file at path has more than one link."""
    return os.lstat(path).st_nlink > 1


def file_size(path: str) -> int:
    """Return the size of the file at path, or -1 if it cannot be read."""
    try:
        return os.stat(path).st_size
    except OSError:
        return -1


def file_is_empty(path: str) -> bool:
    """Return True if the file at path exists and has zero length."""
    return file_size(path) == 0


def create_dir(path: str) -> None:
    """Create the directory and any missing parents with DEFAULT_DIR_PERMS."""
    os.makedirs(path, mode=DEFAULT_DIR_PERMS, exist_ok=True)


def dir_entries(path: str) -> list[str]:
    """Return the entries of the directory joined to path, sorted by name.

    Returns an empty list if path cannot be read as a directory.
    """
    try:
        names = sorted(os.listdir(path))
    except OSError:
        return []
    return [os.path.join(path, name) for name in names]


def dir_entries_add_slash(entries: list[str]) -> list[str]:
    """Append a path separator to every entry that is a directory."""
    return [entry + os.sep if is_dir(entry) else entry for entry in entries]


def dir_entries_add_slash_path(path: str) -> list[str]:
    """Return dir_entries of path with directories marked by a separator."""
    return dir_entries_add_slash(dir_entries(path))


def dir_is_empty(path: str) -> bool:
    """Return True if the directory holds no files or only empty ones.

    The first subdirectory met decides the result. A missing path gives
    False.
    """
    if not_exists(path):
        return False
    for entry in dir_entries(path):
        if is_dir(entry):
            return dir_is_empty(entry)
        if not file_is_empty(entry):
            return False
    return True


def dir_name() -> str:
    """Return the base name of the current working directory, or ""."""
    try:
        return _base(os.getcwd())
    except OSError:
        return ""


def abs_dir() -> str:
    """Return the absolute current working directory, or ""."""
    try:
        return os.getcwd()
    except OSError:
        return ""
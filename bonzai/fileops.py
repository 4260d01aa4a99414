"""Operations on the content of files: create, fetch, read and rewrite."""

from __future__ import annotations

import os
import re
import shutil
import stat
import sys
import urllib.error
import urllib.request

from . import futil

try:
    import fcntl
except ImportError:  # not available on every platform
    fcntl = None

_TEMPLATE_REF = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\w+))")


def _split_lines(text: str) -> list[str]:
    """Split text into lines, dropping line endings and a final empty line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _read_text(path: str) -> str:
    with open(path, "rb") as handle:
        return handle.read().decode("utf-8", "replace")


def _expand(template: str, match: re.Match) -> str:
    """Expand $1, ${name} and $$ references in template using match."""

    def substitute(ref: re.Match) -> str:
        if ref.group(1):
            return "$"
        name = ref.group(2) or ref.group(3)
        key: int | str = int(name) if name.isdigit() else name
        try:
            value = match.group(key)
        except IndexError:
            value = None
        return value or ""

    return _TEMPLATE_REF.sub(substitute, template)


def touch(path: str) -> None:
    """Create an empty file at path or update the time stamps of an existing one.

    New files get futil.DEFAULT_FILE_PERMS and missing parent directories
    are created with futil.DEFAULT_DIR_PERMS.
    """
    if futil.not_exists(path):
        parent = os.path.dirname(path) or "."
        os.makedirs(parent, mode=futil.DEFAULT_DIR_PERMS, exist_ok=True)
        with open(path, "wb"):
            pass
        os.chmod(path, futil.DEFAULT_FILE_PERMS)
        return
    os.utime(path, None)


def fetch(source: str, target: str) -> None:
    """Download the URL source into the file target.

    Raises OSError carrying the HTTP status if the response is not 2xx.
    """
    with open(target, "wb") as out:
        try:
            with urllib.request.urlopen(source) as response:
                status = getattr(response, "status", 200)
                if not 200 <= status < 300:
                    raise OSError(f"{status} {getattr(response, 'reason', '')}".strip())
                shutil.copyfileobj(response, out)
        except urllib.error.HTTPError as exc:
            raise OSError(f"{exc.code} {exc.reason}") from exc


def replace(orig: str, url: str) -> None:
    """Replace the file orig with the one fetched from url, keeping orig's permissions."""
    new = orig + ".new"
    old = orig + ".orig"
    fetch(url, new)
    futil.dup_perms(orig, new)
    os.rename(orig, old)
    os.rename(new, orig)
    os.remove(old)


def head(path: str, n: int) -> list[str]:
    """Return the first n lines of the file at path."""
    if n <= 0:
        # the file must still be readable
        with open(path, "rb"):
            return []
    return _split_lines(_read_text(path))[:n]


def tail(path: str, n: int) -> list[str]:
    """Return the last n lines of the file at path.

    A negative n skips that many lines from the top and returns the rest.
    """
    lines = _split_lines(_read_text(path))
    if n < 0:
        return lines[-n:]
    n = min(n, len(lines))
    return lines[len(lines) - n :]


def replace_all_string(path: str, regx: str, repl: str) -> None:
    """Replace every match of regx in the file with repl, rewriting the file.

    repl may refer to groups as $1, ${1} or ${name}; $$ is a literal $.
    """
    content = _read_text(path)
    pattern = re.compile(regx)
    overwrite(path, pattern.sub(lambda m: _expand(repl, m), content))


def find_string(path: str, regx: str) -> str:
    """Return the first match of regx in the file, or "" if there is none."""
    content = _read_text(path)
    found = re.compile(regx).search(content)
    return found.group(0) if found else ""


def overwrite(path: str, content: str | bytes) -> None:
    """Replace the content of the file at path under an exclusive lock.

    Existing permissions are kept; a missing file is created with touch.
    """
    try:
        mode = stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        touch(path)
        mode = stat.S_IMODE(os.stat(path).st_mode)
    data = content if isinstance(content, bytes) else content.encode("utf-8")
    fd = os.open(path, os.O_WRONLY | os.O_CREAT, mode)
    with os.fdopen(fd, "wb") as out:
        if fcntl is not None:
            fcntl.flock(out.fileno(), fcntl.LOCK_EX)
        out.truncate(0)
        out.write(data)
        out.flush()


def cat(path: str) -> None:
    """Write the whole content of the file at path to standard output."""
    with open(path, "rb") as handle:
        data = handle.read()
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(data.decode("utf-8", "replace"))
        return
    sys.stdout.flush()
    buffer.write(data)
    buffer.flush()


def field(path: str, n: int) -> list[str]:
    """Return the n-th white-space separated field (from 1) of every line.

    Lines with fewer fields are skipped; an unreadable file gives [].
    """
    if n <= 0:
        return []
    try:
        content = _read_text(path)
    except OSError:
        return []
    result = []
    for line in _split_lines(content):
        fields = line.split()
        if len(fields) >= n:
            result.append(fields[n - 1])
    return result
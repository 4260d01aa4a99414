"""Helpers for the running program: its executable, shells, subprocesses and exiting."""

from __future__ import annotations

import contextlib
import getpass
import logging
import os
import shutil
import signal
import subprocess
import sys
from typing import Any, Callable, Iterator, Sequence

from . import futil

logger = logging.getLogger(__name__)

ALLOW_PANIC = False
"""When True, trap_panic lets exceptions propagate untouched."""

DO_NOT_EXIT = False
"""When True, exit_ and exit_error return instead of ending the program."""


def executable() -> str:
    """Return the absolute path of the running executable with links resolved."""
    path = sys.executable
    if not path:
        raise OSError("unable to determine the executable")
    return os.path.realpath(path)


def exe_name() -> str:
    """Return the base name of argv[0], without resolving links."""
    name = sys.argv[0] if sys.argv and sys.argv[0] else ""
    stripped = name.rstrip(os.sep)
    if not name:
        return "."
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def real_exe_name() -> str:
    """Return the base name of the executable with links resolved."""
    return os.path.basename(executable())


def exe_cache_dir() -> str:
    """Return the user cache directory joined with the executable name."""
    return os.path.join(futil.user_cache_dir(), exe_name())


def real_exe_cache_dir() -> str:
    """Return the user cache directory joined with the resolved executable name."""
    return os.path.join(futil.user_cache_dir(), real_exe_name())


def exe_config_dir() -> str:
    """Return the user config directory joined with the executable name."""
    return os.path.join(futil.user_config_dir(), exe_name())


def real_exe_state_dir() -> str:
    """Return the user state directory joined with the executable name."""
    return os.path.join(futil.user_state_dir(), exe_name())


def exe_state_dir() -> str:
    """Return the user state directory joined with the executable name."""
    return os.path.join(futil.user_state_dir(), exe_name())


def _unresolved_executable() -> str:
    if not sys.executable:
        raise OSError("unable to determine the executable")
    return sys.executable


def exe_is_sym_link() -> bool:
    """Return True if the executable itself is a symbolic link."""
    return futil.is_sym_link(_unresolved_executable())


def exe_is_hard_link() -> bool:
    """Return True if the executable has more than one hard link."""
    return futil.is_hard_link(_unresolved_executable())


def _look_path(name: str) -> str:
    path = shutil.which(name)
    if path is None:
        raise FileNotFoundError(f'exec: "{name}": executable file not found in $PATH')
    return path


def sys_exec(*args: str) -> None:
    """Replace the current process with the named program.

    Only returns by raising: ValueError without arguments, FileNotFoundError
    if the program cannot be found, or OSError if the exec fails.
    """
    if not args:
        raise ValueError("missing name of executable")
    path = _look_path(args[0])
    os.execve(path, list(args), dict(os.environ))


def execute(*args: str) -> int:
    """Run the named program attached to this program's standard streams.

    Returns 0 on success; raises subprocess.CalledProcessError on a
    non-zero exit, ValueError without arguments and FileNotFoundError if
    the program cannot be found.
    """
    if not args:
        raise ValueError("missing name of executable")
    path = _look_path(args[0])
    completed = subprocess.run([path, *args[1:]], check=True)
    return completed.returncode


def out(*args: str) -> str:
    """Return the standard output of the named program; errors are only logged."""
    if not args:
        logger.error("missing name of executable")
        return ""
    try:
        path = _look_path(args[0])
    except FileNotFoundError as exc:
        logger.error("%s", exc)
        return ""
    completed = subprocess.run([path, *args[1:]], stdout=subprocess.PIPE)
    if completed.returncode != 0:
        logger.error("exit status %d", completed.returncode)
    return completed.stdout.decode("utf-8", "replace")


def is_admin() -> bool:
    """Return True if the program runs as a privileged user."""
    try:
        username = getpass.getuser()
    except Exception:
        return False
    if sys.platform == "win32":
        return username == "SYSTEM"
    geteuid = getattr(os, "geteuid", None)
    return (geteuid is not None and geteuid() == 0) or username == "root"


def shell_is_bash() -> bool:
    """Return True if $SHELL mentions bash."""
    return "bash" in os.environ.get("SHELL", "")


def shell_is_fish() -> bool:
    """Return True if $FISH_VERSION is set and not empty."""
    return bool(os.environ.get("FISH_VERSION", ""))


def shell_is_zsh() -> bool:
    """Return True if $SHELL mentions zsh."""
    return "zsh" in os.environ.get("SHELL", "")


def shell_is_power_shell() -> bool:
    """Return True if $PSModulePath is set and not empty."""
    return bool(os.environ.get("PSModulePath", ""))


def args_from(line: str) -> list[str]:
    """Split line on white space, adding "" if it ends with a space.

    The trailing empty item marks a definite word boundary for completion.
    """
    if not line:
        return []
    args = line.split()
    if line.endswith(" "):
        args.append("")
    return args


def args_or_in(args: Sequence[str] | None) -> str:
    """Join args with spaces, or read all of standard input if there are none."""
    if not args:
        return sys.stdin.read()
    return " ".join(args)


def file_or_in(path: str) -> str:
    """Return the content of the file at path, or of standard input if path is empty."""
    if path:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    return sys.stdin.read()


@contextlib.contextmanager
def trap_panic() -> Iterator[None]:
    """Log any exception raised in the block and exit with status 1.

    Does nothing special when ALLOW_PANIC is True.
    """
    try:
        yield
    except Exception as exc:
        if ALLOW_PANIC:
            raise
        logger.error("%s", exc)
        sys.exit(1)


def exit_error(*args: Any) -> None:
    """Report an error and exit with status 1 unless DO_NOT_EXIT is set.

    A leading string is written to standard error, formatted with any
    further arguments; an exception's text is printed to standard output.
    """
    if not args:
        raise ValueError("exit_error requires at least one argument")
    first = args[0]
    if isinstance(first, str):
        if len(first) > 1:
            text = first % args[1:] if len(args) > 1 else first
            sys.stderr.write(text + "\n")
        else:
            sys.stderr.write(first)
    elif isinstance(first, BaseException):
        text = str(first)
        if text:
            print(text.strip())
    if not DO_NOT_EXIT:
        sys.exit(1)


def exit_() -> None:
    """Exit with status 0 unless DO_NOT_EXIT is set."""
    if not DO_NOT_EXIT:
        sys.exit(0)


def exit_off() -> None:
    """Stop exit_ and exit_error from ending the program."""
    global DO_NOT_EXIT
    DO_NOT_EXIT = True


def exit_on() -> None:
    """Let exit_ and exit_error end the program again."""
    global DO_NOT_EXIT
    DO_NOT_EXIT = False


def default_interrupt_handler() -> None:
    """Erase the echoed control characters and exit."""
    print("\b\b", end="", flush=True)
    exit_()


def trap(handler: Callable[[], Any] | None, *args: int) -> None:
    """Call handler once when the first of the given signals arrives.

    Signals arriving after the first are ignored. A None handler uses
    default_interrupt_handler. Must be called from the main thread.
    """
    action = handler if handler is not None else default_interrupt_handler
    fired = False

    def on_signal(signum: int, frame: Any) -> None:
        nonlocal fired
        if fired:
            return
        fired = True
        action()

    for sig in args:
        signal.signal(sig, on_signal)
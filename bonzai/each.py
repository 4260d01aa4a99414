"""Loop helpers that apply an action to every item of a sequence."""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Iterable

logger = logging.getLogger(__name__)


def do(items: Iterable[Any], f: Callable[[Any], Any]) -> None:
    """Call f on every item."""
    for item in items:
        f(item)


def until_error(items: Iterable[Any], f: Callable[[Any], Any]) -> None:
    """Call f on every item, stopping at the first error.

    An exception raised by f propagates; an exception instance returned
    by f is raised in the same way.
    """
    for item in items:
        result = f(item)
        if isinstance(result, BaseException):
            raise result


def println_all(items: Iterable[Any]) -> None:
    """Print every item on its own line."""
    do(items, print)


def print_all(items: Iterable[Any]) -> None:
    """Print every item with no separator."""
    do(items, lambda item: print(item, end=""))


def printf_all(items: Iterable[Any], form: str) -> None:
    """Write every item to stdout through the %-style format form."""
    do(items, lambda item: sys.stdout.write(form % (item,)))


def log_all(items: Iterable[Any]) -> None:
    """Log every item at INFO level."""
    do(items, lambda item: logger.info("%s", item))


def logf_all(items: Iterable[Any], form: str) -> None:
    """Log every item through the %-style format form."""
    do(items, lambda item: logger.info("%s", (form % (item,)).removesuffix("\n")))
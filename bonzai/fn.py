"""Map, filter and reduce helpers plus a list type that chains them."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, TypeVar

from . import each

T = TypeVar("T")
O = TypeVar("O")
R = TypeVar("R")

logger = logging.getLogger(__name__)


def mapped(items: Iterable[T], f: Callable[[T], O]) -> list[O]:
    """Return a new list holding f applied to every item."""
    return [f(item) for item in items]


def filtered(items: Iterable[T], f: Callable[[T], bool]) -> list[T]:
    """Return a new list of the items for which f is true."""
    return [item for item in items if f(item)]


def reduce(items: Iterable[T], f: Callable[[T, R], R], initial: R) -> R:
    """Fold the items into an accumulator, calling f(item, acc) for each."""
    acc = initial
    for item in items:
        acc = f(item, acc)
    return acc


class A(list):
    """A list whose functional helpers return new A instances for chaining."""

    def each(self, f: Callable[[Any], Any]) -> None:
        """Call f on every item."""
        each.do(self, f)

    def e(self, f: Callable[[Any], Any]) -> None:
        """Short form of each."""
        self.each(f)

    def map(self, f: Callable[[Any], Any]) -> "A":
        """Return a new A with f applied to every item."""
        return A(mapped(self, f))

    def m(self, f: Callable[[Any], Any]) -> "A":
        """Short form of map."""
        return self.map(f)

    def filter(self, f: Callable[[Any], bool]) -> "A":
        """Return a new A with the items for which f is true."""
        return A(filtered(self, f))

    def f(self, f: Callable[[Any], bool]) -> "A":
        """Short form of filter."""
        return self.filter(f)

    def reduce(self, f: Callable[[Any, Any], Any], initial: Any) -> Any:
        """Fold the items into initial with f(item, acc)."""
        return reduce(self, f, initial)

    def r(self, f: Callable[[Any, Any], Any], initial: Any) -> Any:
        """Short form of reduce."""
        return self.reduce(f, initial)

    def print(self) -> None:
        """Print every item with no separator."""
        each.print_all(self)

    def println(self) -> None:
        """Print every item on its own line."""
        each.println_all(self)

    def printf(self, form: str) -> None:
        """Print every item through the %-style format form."""
        each.printf_all(self, form)

    def log(self) -> None:
        """Log every item."""
        each.log_all(self)

    def logf(self, form: str) -> None:
        """Log every item through the %-style format form."""
        each.logf_all(self, form)


def pipe(*args: Any) -> str:
    """Feed the first value through each following callable, returning text.

    Values that are not callable replace the running value. If a stage
    returns or raises an exception it is logged and an empty string is
    returned.
    """
    if not args:
        return ""
    value = args[0]
    for stage in args[1:]:
        if callable(stage):
            try:
                value = stage(value)
            except Exception as exc:  # a failing stage ends the pipeline
                value = exc
        else:
            value = stage
        if isinstance(value, BaseException):
            logger.error("%s", value)
            return ""
    return str(value)


def pipe_print(*args: Any) -> None:
    """Print the result of pipe followed by a newline."""
    print(pipe(*args))


def or_(this: T, that: T) -> T:
    """Return this unless it is empty or zero, otherwise that."""
    return this if this else that


def fall(*args: T) -> T:
    """Return the first non-empty value, or the last value if all are empty."""
    if not args:
        raise ValueError("fall requires at least one value")
    return next((value for value in args if value), args[-1])
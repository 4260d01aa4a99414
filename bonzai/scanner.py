"""A buffered, rune-centric scanner with regular expression support."""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)

TRACE = 0
"""Non-zero turns on tracing for every scanner."""

VIEW_LEN_DEFAULT = 10
"""Default number of bytes shown after the cursor in the text form."""

DEFAULT_NEWLINES = ("\r\n", "\n")

Pattern = Union[str, bytes, "re.Pattern[str]", "re.Pattern[bytes]"]

_SIMPLE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _escape_char(ch: str, quote: str) -> str:
    if ch == quote or ch == "\\":
        return "\\" + ch
    if ch.isprintable():
        return ch
    simple = _SIMPLE_ESCAPES.get(ch)
    if simple is not None:
        return simple
    code = ord(ch)
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if 0xD800 <= code <= 0xDFFF:
        code = 0xFFFD
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def _quote_rune(ch: str) -> str:
    return "'" + _escape_char(ch, "'") + "'"


def _quote_bytes(data: bytes) -> str:
    parts = []
    for ch in data.decode("utf-8", "surrogateescape"):
        code = ord(ch)
        if 0xDC80 <= code <= 0xDCFF:
            parts.append(f"\\x{code - 0xDC00:02x}")
        else:
            parts.append(_escape_char(ch, '"'))
    return '"' + "".join(parts) + '"'


def _lead_width(byte: int) -> int:
    if 0xC2 <= byte <= 0xDF:
        return 2
    if 0xE0 <= byte <= 0xEF:
        return 3
    if 0xF0 <= byte <= 0xF4:
        return 4
    return 0


def _decode_rune(buf: bytes, index: int) -> tuple[str, int]:
    width = _lead_width(buf[index])
    if width:
        try:
            return buf[index : index + width].decode("utf-8"), width
        except UnicodeDecodeError:
            pass
    return "\ufffd", 1


def _match_length(pattern: Pattern, data: bytes) -> int:
    if isinstance(pattern, (str, bytes)):
        pattern = re.compile(pattern)
    if isinstance(pattern.pattern, bytes):
        found = pattern.match(data)
        return found.end() if found else -1
    text = data.decode("utf-8", "surrogateescape")
    found = pattern.match(text)
    if found is None:
        return -1
    return len(text[: found.end()].encode("utf-8", "surrogateescape"))


def _emit(text: str) -> str:
    sys.stdout.write(text + "\n")
    return text


def _log(text: str) -> str:
    logger.info("%s", text)
    return text


@dataclass(frozen=True)
class Cursor:
    """A saved scanner location: last rune and its byte span."""

    rune: str = "\x00"
    start: int = 0
    end: int = 0

    def __str__(self) -> str:
        return f"{_quote_rune(self.rune)} {self.start}-{self.end}"


@dataclass(frozen=True)
class Position:
    """Human-friendly location in a text; counts begin at 1."""

    rune: str = "\x00"
    buf_byte: int = 0
    buf_rune: int = 0
    line: int = 0
    line_byte: int = 0
    line_rune: int = 0

    def __str__(self) -> str:
        return (
            f"U+{ord(self.rune):04X} {_quote_rune(self.rune)} "
            f"{self.line},{self.line_rune}-{self.line_byte} "
            f"({self.buf_rune}-{self.buf_byte})"
        )

    def print(self) -> str:
        """Print the position on its own line and return the printed text."""
        return _emit(str(self))

    def log(self) -> str:
        """Log the position and return the logged text."""
        return _log(str(self))


class Scanner:
    """Scans a byte buffer rune by rune with lookahead and lookbehind.

    ``rune`` is the last scanned character, ``start`` the byte offset
    where it begins and ``end`` the byte offset just after it.
    """

    def __init__(self, data: Any = None, cursor: Cursor | None = None) -> None:
        self.buf = b""
        self.rune = "\x00"
        self.start = 0
        self.end = 0
        self.newline: list[str] | None = None
        self.trace = 0
        self.view_len = 0
        if data is not None:
            self.buffer(data)
        if cursor is not None:
            self.goto(cursor)

    def trace_on(self) -> None:
        """Increase the trace level of this scanner."""
        self.trace += 1

    def trace_off(self) -> None:
        """Turn tracing off for this scanner."""
        self.trace = 0

    def mark(self) -> Cursor:
        """Return the current location."""
        return Cursor(self.rune, self.start, self.end)

    def goto(self, cursor: Cursor) -> None:
        """Move to a previously marked location."""
        self.rune, self.start, self.end = cursor.rune, cursor.start, cursor.end

    def revert(self, cursor: Cursor) -> bool:
        """Move to cursor and return False."""
        self.goto(cursor)
        return False

    def _text(self, lo: int, hi: int) -> str:
        return self.buf[lo:hi].decode("utf-8", "replace")

    def copy_ee(self, cursor: Cursor) -> str:
        """Return the text between the two rune ends, exclusive of the first."""
        if cursor.start <= self.start:
            return self._text(cursor.end, self.end)
        return self._text(self.end, cursor.end)

    def copy_be(self, cursor: Cursor) -> str:
        """Return the text from the earlier rune start to the later rune end."""
        if cursor.start <= self.start:
            return self._text(cursor.start, self.end)
        return self._text(self.start, cursor.end)

    def copy_bb(self, cursor: Cursor) -> str:
        """Return the text from one rune start up to the other rune start."""
        if cursor.start <= self.start:
            return self._text(cursor.start, self.start)
        return self._text(self.start, cursor.start)

    def copy_eb(self, cursor: Cursor) -> str:
        """Return the text strictly between the two runes."""
        if cursor.start <= self.start:
            return self._text(cursor.end, self.start)
        return self._text(self.end, cursor.start)

    def open(self, path: str) -> None:
        """Load the file at path into the buffer."""
        with open(path, "rb") as handle:
            self.buffer(handle)

    def buffer(self, data: Any) -> None:
        """Replace the buffer and reset the cursor.

        Accepts text, bytes, a list of characters or a readable object.
        """
        if isinstance(data, str):
            buf = data.encode("utf-8")
        elif isinstance(data, (bytes, bytearray, memoryview)):
            buf = bytes(data)
        elif isinstance(data, list) and all(isinstance(ch, str) for ch in data):
            buf = "".join(data).encode("utf-8")
        elif hasattr(data, "read"):
            content = data.read()
            buf = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        else:
            raise TypeError(f"cannot buffer {type(data).__name__}")
        self.buf = buf
        self.rune = "\x00"
        self.start = 0
        self.end = 0

    def pos(self) -> Position:
        """Return the human-friendly position of the current end offset."""
        return self.positions(self.end)[0]

    def positions(self, *args: int) -> list[Position]:
        """Return a Position for each byte offset given, in one pass."""
        result = [Position() for _ in args]
        if not args:
            return result
        newlines = self.newline if self.newline is not None else DEFAULT_NEWLINES
        rune_width = len(self.rune.encode("utf-8", "surrogatepass"))
        rune_no = line = line_byte = line_rune = 1
        walker = Scanner(self.buf)
        while walker.scan():
            for nl in newlines:
                if walker.is_(nl):
                    extra = len(nl.encode("utf-8")) - 1
                    line += 1
                    walker.end += extra
                    rune_no += extra
                    line_byte = 0
                    line_rune = 0
            for i, offset in enumerate(args):
                if walker.end == offset:
                    result[i] = Position(
                        rune=walker.rune,
                        buf_byte=walker.end,
                        buf_rune=rune_no,
                        line=line,
                        line_byte=line_byte,
                        line_rune=line_rune,
                    )
            line_byte += rune_width
            line_rune += 1
            rune_no += 1
        return result

    def __str__(self) -> str:
        view = self.view_len or VIEW_LEN_DEFAULT
        ahead = self.buf[self.end : min(self.end + view, len(self.buf))]
        return f"{self.mark()} {_quote_bytes(ahead)}"

    def print(self) -> str:
        """Print the scanner state and return the printed text."""
        return _emit(str(self))

    def log(self) -> str:
        """Log the scanner state and return the logged text."""
        return _log(str(self))

    def scan(self) -> bool:
        """Decode the next rune and advance; return False at the end."""
        if self.end >= len(self.buf):
            return False
        byte = self.buf[self.end]
        if byte > 0x80:
            rune, width = _decode_rune(self.buf, self.end)
        else:
            rune, width = chr(byte), 1
        self.start = self.end
        self.end += width
        self.rune = rune
        if self.trace > 0 or TRACE > 0:
            self.log()
        return True

    def peek(self, s: str) -> bool:
        """Return True if s follows the current rune, without advancing."""
        data = s.encode("utf-8")
        if len(data) + self.end > len(self.buf):
            return False
        return self.buf[self.end : self.end + len(data)] == data

    def finished(self) -> bool:
        """Return True if nothing is left to scan."""
        return self.end == len(self.buf)

    def beginning(self) -> bool:
        """Return True if nothing has been scanned yet."""
        return self.end == 0

    def is_(self, s: str) -> bool:
        """Return True if s matches starting at the last scanned rune."""
        data = s.encode("utf-8")
        if len(data) + self.start > len(self.buf):
            return False
        return self.buf[self.start : self.start + len(data)] == data

    def peek_match(self, pattern: Pattern) -> int:
        """Return the byte length of a match right after the current rune, or -1."""
        return _match_length(pattern, self.buf[self.end :])

    def match(self, pattern: Pattern) -> int:
        """Return the byte length of a match at the last scanned rune, or -1."""
        return _match_length(pattern, self.buf[self.start :])
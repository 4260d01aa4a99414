"""Delimited multi-section text, such as captured output streams."""

from __future__ import annotations

import base64
import secrets
from dataclasses import dataclass, field


def _new_delimiter() -> str:
    return base64.b32hexencode(secrets.token_bytes(20)).decode("ascii")


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class Multipart:
    """Named sections of text joined into one string by delimiter lines.

    Each section begins with a line holding the delimiter, a space and
    the key; the final line is the delimiter followed by "break".
    """

    delimiter: str = ""
    map: dict[str, str] = field(default_factory=dict)

    def marshal_text(self) -> str:
        """Return all sections as one delimited string.

        A random delimiter is used if none is set; it is not stored.
        """
        delimiter = self.delimiter or _new_delimiter()
        parts = [f"{delimiter} {key}\n{value}\n" for key, value in self.map.items()]
        return "".join(parts) + delimiter + " break"

    def unmarshal_text(self, text: str | bytes) -> None:
        """Parse delimited text into the map, replacing its contents.

        If no delimiter is set, the first field of the first line is taken
        as the delimiter. Parsing stops at the "break" delimiter or the end
        of the text. Raises ValueError on malformed delimiter lines.
        """
        if isinstance(text, bytes):
            text = text.decode("utf-8", "replace")
        lines = iter(_split_lines(text))
        self.map = {}
        current = ""

        if not self.delimiter:
            first = next(lines, None)
            if first is None:
                raise ValueError("failed to scan first line")
            fields = first.split()
            if len(fields) < 2:
                raise ValueError("first line is not delimiter")
            if fields[1] == "break":
                return
            self.delimiter = fields[0]
            current = fields[1]

        for line in lines:
            if line.startswith(self.delimiter):
                fields = line.split()
                if len(fields) < 2:
                    raise ValueError("delimiter missing key")
                if current:
                    self.map[current] = self.map.get(current, "")[:-1]
                if fields[1] == "break":
                    return
                current = fields[1]
                continue
            if not current:
                continue
            self.map[current] = self.map.get(current, "") + line + "\n"

    def __str__(self) -> str:
        return self.marshal_text()
"""JSON helpers that avoid unnecessary HTML escaping."""

from __future__ import annotations

import base64
import dataclasses
import json as _json
import logging
import sys
from typing import Any

logger = logging.getLogger(__name__)

_JSON_ESCAPES = {
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\\": "\\\\",
    '"': '\\"',
}

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def escape(s: str) -> str:
    """Escape only the characters the JSON specification requires."""
    return "".join(_JSON_ESCAPES.get(ch, ch) for ch in s)


def _prepare(value: Any) -> Any:
    """Convert a value into plain JSON-ready data with mapping keys sorted."""
    if isinstance(value, dict):
        return {k: _prepare(value[k]) for k in sorted(value, key=str)}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _prepare(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, (list, tuple)):
        return [_prepare(item) for item in value]
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


def _dumps(value: Any, indent: str | None = None) -> str:
    separators = (",", ": ") if indent is not None else (",", ":")
    return _json.dumps(
        _prepare(value),
        ensure_ascii=False,
        allow_nan=False,
        indent=indent,
        separators=separators,
    )


def marshal(value: Any) -> str:
    """Encode value as compact JSON without HTML escapes."""
    return _dumps(value).strip()


def marshal_indent(value: Any, prefix: str, indent: str) -> str:
    """Encode value as indented JSON without HTML escapes.

    Every line after the first begins with prefix followed by the
    nesting indentation.
    """
    return _dumps(value, indent=indent).replace("\n", "\n" + prefix).strip()


def unmarshal(buf: str | bytes) -> Any:
    """Decode JSON text into Python data."""
    return _json.loads(buf)


def _html_escape(text: str) -> str:
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)


@dataclasses.dataclass
class This:
    """Wraps any value so it can be shown as JSON."""

    this: Any = None

    def json(self) -> str:
        """Return the wrapped value as compact JSON with HTML-safe escapes."""
        return _html_escape(_dumps(self.this))

    def unmarshal_json(self, buf: str | bytes) -> None:
        """Replace the wrapped value with the data decoded from buf."""
        self.this = _json.loads(buf)

    def __str__(self) -> str:
        try:
            return self.json()
        except (TypeError, ValueError) as exc:
            logger.error("%s", exc)
            return ""

    def print(self) -> str:
        """Write the JSON form and a newline to stdout; return the JSON form."""
        text = str(self)
        sys.stdout.write(text + "\n")
        return text

    def log(self) -> str:
        """Log the JSON form and return it."""
        text = str(self)
        logger.info("%s", text)
        return text
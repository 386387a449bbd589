"""Conversions between ``HeaderMap`` and plain strings, lists, and dicts.

Usage::

    from headermap.transform import headers_to_string, string_to_headers

    headers = string_to_headers("Content-Type: text/html\\r\\nVary: Accept")
    headers_to_string(headers)  # "Content-Type: text/html\\r\\nVary: Accept"
"""

import logging
import re

from headermap._internal.types import HeaderPairs, HeaderRecord
from headermap.config import HeaderMapConfig
from headermap.errors import InvalidHeaderName
from headermap.headers import HeaderMap

logger = logging.getLogger("headermap.transform")

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def headers_to_string(headers: HeaderMap) -> str:
    """Render *headers* as ``Name: value`` lines joined by CRLF, using raw names."""
    return "\r\n".join(f"{name.strip()}: {value}" for name, value in headers.raw().items())


def string_to_headers(text: str, *, config: HeaderMapConfig | None = None) -> HeaderMap:
    """Parse a raw header block into a ``HeaderMap``.

    Blank lines are skipped. A line starting with a space or tab continues
    the previous header's value (obsolete line folding). Repeated names
    merge the same way ``append`` does.

    Raises ``InvalidHeaderName`` for a line without a ``:`` separator.
    """
    pairs: list[tuple[str, str]] = []
    for line in _LINE_BREAK.split(text):
        if not line.strip():
            continue
        if line[0] in " \t" and pairs:
            name, value = pairs[-1]
            pairs[-1] = (name, f"{value} {line.strip()}")
            continue
        name, sep, value = line.partition(":")
        if not sep:
            msg = f"Header line has no ':' separator: {line!r}"
            raise InvalidHeaderName(line, msg)
        pairs.append((name.strip(), value))

    logger.debug("Parsed %d header lines", len(pairs))
    return HeaderMap(pairs, config=config)


def headers_to_list(headers: HeaderMap) -> list[tuple[str, str | list[str]]]:
    """Return ``(name, value)`` pairs, splitting comma-joined values into lists."""
    return [(name, _split(value)) for name, value in headers]


def headers_to_object(headers: HeaderMap) -> dict[str, str | list[str]]:
    """Return ``{name: value}``, splitting comma-joined values into lists."""
    return {name: _split(value) for name, value in headers}


def list_to_headers(pairs: HeaderPairs, *, config: HeaderMapConfig | None = None) -> HeaderMap:
    return HeaderMap(pairs, config=config)


def object_to_headers(record: HeaderRecord, *, config: HeaderMapConfig | None = None) -> HeaderMap:
    return HeaderMap(record, config=config)


def _split(value: str) -> str | list[str]:
    if "," not in value:
        return value
    return [part.strip() for part in value.split(",")]

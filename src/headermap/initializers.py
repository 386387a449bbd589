"""Initializer shapes accepted by ``HeaderMap``.

``classify_init`` turns whatever the caller passed into one of four
explicit variants; ``iter_pairs`` flattens a variant into the
``(name, value)`` pairs that the container appends in order.

Accepted shapes::

    HeaderMap()                                    # NoInit
    HeaderMap(other_headers)                       # BagInit
    HeaderMap({"Accept": "*/*"})                   # RecordInit
    HeaderMap([("Accept", "*/*"), ("Vary", ["Accept", "Origin"])])  # PairListInit
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import TypeAlias

from headermap._internal.bag import HeaderBag
from headermap._internal.types import HeaderPairs, HeaderRecord, HeaderValueInit
from headermap.errors import InvalidHeadersInit, InvalidHeaderValue

logger = logging.getLogger("headermap.init")


@dataclass(frozen=True, slots=True)
class NoInit:
    """No initializer: the container starts empty."""


@dataclass(frozen=True, slots=True)
class BagInit:
    """Copy every entry of another header container."""

    bag: HeaderBag


@dataclass(frozen=True, slots=True)
class PairListInit:
    """An ordered sequence of ``(name, value)`` pairs."""

    pairs: HeaderPairs


@dataclass(frozen=True, slots=True)
class RecordInit:
    """A key/value record whose keys are header names."""

    record: HeaderRecord


InitVariant: TypeAlias = NoInit | BagInit | PairListInit | RecordInit


def classify_init(init: object) -> InitVariant:
    """Pick the initializer variant for *init*.

    Falsy values (``None``, ``[]``, ``{}``) are ``NoInit``. Any other value
    that is not a header container, a mapping, or a non-string iterable
    raises ``InvalidHeadersInit``.
    """
    if not init:
        return NoInit()
    if isinstance(init, HeaderBag):
        return BagInit(init)
    if isinstance(init, Mapping):
        return RecordInit(init)
    if isinstance(init, Iterable) and not isinstance(init, str | bytes | bytearray):
        return PairListInit(init)
    raise InvalidHeadersInit(init)


def iter_pairs(variant: InitVariant, separator: str = ", ") -> Iterator[tuple[str, str]]:
    """Yield the ``(name, value)`` pairs described by *variant*."""
    logger.debug("Building headers from %s", type(variant).__name__)
    match variant:
        case NoInit():
            return
        case BagInit(bag=bag):
            yield from bag.entries()
        case RecordInit(record=record):
            for name, value in record.items():
                yield name, _join(value, separator)
        case PairListInit(pairs=pairs):
            for pair in pairs:
                msg = f"Header pair must be (name, value), got {pair!r}"
                if isinstance(pair, str | bytes | bytearray):
                    raise InvalidHeadersInit(pair, msg)
                try:
                    name, value = pair
                except (TypeError, ValueError) as exc:
                    raise InvalidHeadersInit(pair, msg) from exc
                yield name, _join(value, separator)


def _join(value: HeaderValueInit, separator: str) -> str:
    """Join a list-valued entry; single strings pass through unchanged."""
    if isinstance(value, str | bytes | bytearray) or not isinstance(value, Iterable):
        # Non-strings fall through to normalize_value, which rejects them
        return value  # type: ignore[return-value]
    parts = list(value)
    for part in parts:
        if not isinstance(part, str):
            msg = f"Header value list must contain strings, got {type(part).__name__}"
            raise InvalidHeaderValue(value, msg)
    return separator.join(parts)

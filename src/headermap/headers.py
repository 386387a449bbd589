"""Mutable, case-insensitive, order-preserving HTTP headers.

Behaves like the browser ``Headers`` container: names are matched
case-insensitively, repeated ``append`` calls merge into one
comma-joined value, and iteration follows first insertion. On top of
that it remembers the spelling each header was last written with, so
``raw()`` can hand back ``Content-Type`` rather than ``content-type``.
"""

import functools
from collections.abc import Iterator
from dataclasses import dataclass, replace

from headermap._internal.normalize import normalize_name, normalize_value
from headermap._internal.types import ForEachCallback
from headermap.config import DEFAULT_CONFIG, HeaderMapConfig
from headermap.initializers import classify_init, iter_pairs

# for_each receiver default; None is a valid receiver
_NO_RECEIVER = object()


@dataclass(slots=True)
class _Entry:
    """Stored value and last raw spelling for one normalized name."""

    value: str
    raw_name: str


class HeaderMap:
    """Mutable, case-insensitive HTTP headers.

    Build from nothing, another header container, a ``(name, value)`` pair
    list, or a mapping::

        headers = HeaderMap({"Content-Type": "text/html"})
        headers.append("Vary", "Accept")
        headers.append("vary", "Origin")
        headers.get("VARY")   # "Accept, Origin"
        headers.raw()         # {"Content-Type": "text/html", "vary": "Accept, Origin"}

    Iterating yields ``(name, value)`` pairs, like ``entries()``.
    Not thread-safe; serialize access externally if shared.
    """

    __slots__ = ("_config", "_entries")

    def __init__(self, init: object = None, *, config: HeaderMapConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG
        self._entries: dict[str, _Entry] = {}
        for name, value in iter_pairs(classify_init(init), self._config.separator):
            self.append(name, value)

    @property
    def config(self) -> HeaderMapConfig:
        return self._config

    # -- Lookup --

    def get(self, name: str) -> str | None:
        """Return the merged value for *name*, or ``None`` if missing."""
        entry = self._entries.get(normalize_name(name))
        return entry.value if entry is not None else None

    def has(self, name: str) -> bool:
        return normalize_name(name) in self._entries

    # Generators read the live dict. Adding or deleting a header while one
    # is suspended raises RuntimeError; overwriting a value does not.

    def keys(self) -> Iterator[str]:
        yield from self._entries

    def values(self) -> Iterator[str]:
        for entry in self._entries.values():
            yield entry.value

    def entries(self) -> Iterator[tuple[str, str]]:
        for name, entry in self._entries.items():
            yield name, entry.value

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.entries()

    # -- Mutation --

    def set(self, name: str, value: str) -> None:
        """Replace the value for *name*, remembering *name* as its raw spelling.

        An existing header keeps its position in iteration order.
        """
        key = normalize_name(name)
        normalized = normalize_value(value)
        entry = self._entries.get(key)
        if entry is None:
            self._entries[key] = _Entry(normalized, name)
        else:
            entry.value = normalized
            entry.raw_name = name

    def append(self, name: str, value: str) -> None:
        """Add *value* to *name*, joining onto any existing value.

        The raw spelling follows the latest call::

            headers.append("X-Foo", "a")
            headers.append("x-foo", "b")
            headers.raw()  # {"x-foo": "a, b"}
        """
        value = normalize_value(value)
        entry = self._entries.get(normalize_name(name))
        if entry is not None:
            value = f"{entry.value}{self._config.separator}{value}"
        self.set(name, value)

    def delete(self, name: str) -> None:
        """Remove *name*. Missing headers are ignored."""
        self._entries.pop(normalize_name(name), None)

    # -- Export --

    def all(self) -> dict[str, str]:
        """Return a copy of the normalized ``{name: value}`` pairs."""
        return {name: entry.value for name, entry in self._entries.items()}

    def raw(self) -> dict[str, str]:
        """Return ``{raw_name: value}`` using each header's last-written spelling.

        With ``HeaderMapConfig(raw_names=False)`` this is the same as ``all()``.
        """
        if not self._config.raw_names:
            return self.all()
        return {entry.raw_name: entry.value for entry in self._entries.values()}

    def for_each(self, callback: ForEachCallback, this_arg: object = _NO_RECEIVER) -> None:
        """Call ``callback(value, name, self)`` for each header in order.

        If *this_arg* is given, ``None`` included, it is passed first as the
        callback's receiver: ``callback(this_arg, value, name, self)``. The
        callback may mutate the headers; iteration runs over the entries
        present when it started.
        """
        if this_arg is not _NO_RECEIVER:
            callback = functools.partial(callback, this_arg)
        for name, value in list(self.entries()):
            callback(value, name, self)

    def copy(self) -> "HeaderMap":
        """Return an independent copy, raw spellings and config included."""
        clone = HeaderMap(config=self._config)
        clone._entries = {name: replace(entry) for name, entry in self._entries.items()}
        return clone

    # -- Mapping-style access --

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.has(name)

    def __getitem__(self, name: str) -> str:
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def __setitem__(self, name: str, value: str) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        if not self.has(name):
            raise KeyError(name)
        self.delete(name)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderMap):
            return NotImplemented
        return list(self.entries()) == list(other.entries())

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.entries())
        return f"HeaderMap({{{items}}})"

"""Shared type aliases used across headermap modules."""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeAlias

# A single header value, or several values to be joined with the separator
HeaderValueInit: TypeAlias = str | Iterable[str]

# [("Accept", "*/*"), ("Accept", ["text/html", "text/plain"])]
HeaderPairs: TypeAlias = Iterable[tuple[str, HeaderValueInit]]

# {"Accept": "*/*", "Vary": ["Accept", "Origin"]}
HeaderRecord: TypeAlias = Mapping[str, HeaderValueInit]

# for_each callback — receives (value, name, headers), or a receiver first
ForEachCallback: TypeAlias = Callable[..., Any]

"""HeaderBag protocol — the shape of any header container we can copy from.

A structural protocol so ``HeaderMap`` can be built from another
``HeaderMap`` or from a third-party container without coupling to the
concrete type.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class HeaderBag(Protocol):
    """A header container that yields ``(name, value)`` pairs from ``entries()``.

    ``HeaderMap`` satisfies this protocol. Values are taken as already
    merged; each pair is appended as-is.
    """

    def entries(self) -> Iterator[tuple[str, str]]: ...

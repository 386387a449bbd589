"""headermap exception hierarchy.

Normalization, construction, and the container itself raise these types
so callers can catch one base class or a precise failure.
"""


class HeaderMapError(Exception):
    """Base for all headermap-specific errors."""


class InvalidHeaderName(HeaderMapError, ValueError):  # noqa: N818
    """A header name is empty or contains a character outside the token set."""

    def __init__(self, name: object, detail: str = "") -> None:
        self.name = name
        super().__init__(detail or f"Invalid header name: {name!r}")


class InvalidHeaderValue(HeaderMapError, ValueError):  # noqa: N818
    """A header value contains a control character or is not a string."""

    def __init__(self, value: object, detail: str = "") -> None:
        self.value = value
        super().__init__(detail or f"Invalid header value: {value!r}")


class InvalidHeadersInit(HeaderMapError, TypeError):  # noqa: N818
    """The ``HeaderMap`` initializer matches none of the accepted shapes.

    Raised for truthy scalars (``42``, ``"Accept: */*"``, ``b"..."``) and for
    pair-list elements that are not ``(name, value)`` pairs.
    """

    def __init__(self, init: object, detail: str = "") -> None:
        self.init = init
        super().__init__(detail or f"Cannot build headers from {type(init).__name__}: {init!r}")

"""headermap — case-insensitive, order-preserving HTTP headers.

A drop-in ``Headers`` container for code that runs outside a browser,
with one addition: it remembers the spelling each header was written with.

Basic usage::

    from headermap import HeaderMap

    headers = HeaderMap([("Accept", "text/html"), ("accept", "*/*")])
    headers.get("ACCEPT")  # "text/html, */*"
    headers.raw()          # {"accept": "text/html, */*"}
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "HeaderMap",
    "HeaderMapConfig",
    "HeaderMapError",
    "InvalidHeaderName",
    "InvalidHeaderValue",
    "InvalidHeadersInit",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import headermap`` fast while providing a clean top-level API.
    """
    if name == "HeaderMap":
        from headermap.headers import HeaderMap

        return HeaderMap

    if name == "HeaderMapConfig":
        from headermap.config import HeaderMapConfig

        return HeaderMapConfig

    if name in ("HeaderMapError", "InvalidHeaderName", "InvalidHeaderValue", "InvalidHeadersInit"):
        from headermap import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

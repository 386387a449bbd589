"""Header name and value normalization.

Every read and write path in ``HeaderMap`` goes through these two
functions, so stored keys and values are always already normalized.
"""

import re

from headermap.errors import InvalidHeaderName, InvalidHeaderValue

# RFC 9110 token: 1*tchar
_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# HTTP whitespace allowed around a value
_HTTP_WHITESPACE = " \t\r\n"

# Only spaces and tabs may pad a name
_NAME_PADDING = " \t"

# A line break plus any spaces/tabs around it (obsolete line folding)
_FOLD = re.compile(r"[ \t]*(?:\r\n|\r|\n)+[ \t]*")

# C0 controls except HTAB, plus DEL
_CONTROL = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def normalize_name(name: str) -> str:
    """Return *name* with surrounding spaces and tabs removed, lower-cased.

    Raises ``InvalidHeaderName`` if the trimmed name is empty or is not a
    single RFC 9110 token.
    """
    if not isinstance(name, str):
        msg = f"Header name must be a string, got {type(name).__name__}"
        raise InvalidHeaderName(name, msg)
    stripped = name.strip(_NAME_PADDING)
    if not stripped:
        msg = "Header name must not be empty"
        raise InvalidHeaderName(name, msg)
    if _TOKEN.fullmatch(stripped) is None:
        raise InvalidHeaderName(name)
    return stripped.lower()


def normalize_value(value: str) -> str:
    """Return *value* with surrounding whitespace stripped and folds collapsed.

    Raises ``InvalidHeaderValue`` if a control character other than a
    horizontal tab survives normalization.
    """
    if not isinstance(value, str):
        msg = f"Header value must be a string, got {type(value).__name__}"
        raise InvalidHeaderValue(value, msg)
    normalized = _FOLD.sub(" ", value.strip(_HTTP_WHITESPACE))
    if _CONTROL.search(normalized):
        raise InvalidHeaderValue(value)
    return normalized

"""Tests for headermap.errors — exception hierarchy and error messages."""

import pytest

from headermap.errors import (
    HeaderMapError,
    InvalidHeaderName,
    InvalidHeadersInit,
    InvalidHeaderValue,
)
from headermap.headers import HeaderMap


class TestHierarchy:
    @pytest.mark.parametrize("cls", [InvalidHeaderName, InvalidHeaderValue, InvalidHeadersInit])
    def test_is_headermap_error(self, cls: type[Exception]) -> None:
        assert issubclass(cls, HeaderMapError)

    def test_name_and_value_are_value_errors(self) -> None:
        assert issubclass(InvalidHeaderName, ValueError)
        assert issubclass(InvalidHeaderValue, ValueError)

    def test_init_is_type_error(self) -> None:
        assert issubclass(InvalidHeadersInit, TypeError)


class TestMessages:
    def test_name_default_message(self) -> None:
        err = InvalidHeaderName("bad name")
        assert str(err) == "Invalid header name: 'bad name'"
        assert err.name == "bad name"

    def test_value_custom_detail(self) -> None:
        err = InvalidHeaderValue(b"x", "Header value must be a string, got bytes")
        assert str(err) == "Header value must be a string, got bytes"
        assert err.value == b"x"

    def test_init_default_message(self) -> None:
        err = InvalidHeadersInit(42)
        assert str(err) == "Cannot build headers from int: 42"
        assert err.init == 42


class TestPropagation:
    def test_construction_surfaces_name_error(self) -> None:
        with pytest.raises(InvalidHeaderName):
            HeaderMap({"bad name": "v"})

    def test_catchable_as_base(self) -> None:
        with pytest.raises(HeaderMapError):
            HeaderMap().append("X", "v\x00")

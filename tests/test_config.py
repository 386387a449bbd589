"""Tests for headermap.config — HeaderMapConfig frozen dataclass."""

import pytest

from headermap.config import DEFAULT_CONFIG, HeaderMapConfig
from headermap.headers import HeaderMap


class TestHeaderMapConfig:
    def test_defaults(self) -> None:
        cfg = HeaderMapConfig()

        assert cfg.separator == ", "
        assert cfg.raw_names is True

    def test_override(self) -> None:
        cfg = HeaderMapConfig(separator=",", raw_names=False)

        assert cfg.separator == ","
        assert cfg.raw_names is False

    def test_frozen(self) -> None:
        cfg = HeaderMapConfig()

        with pytest.raises(AttributeError):
            cfg.separator = ";"  # type: ignore[misc]

    def test_header_map_uses_default(self) -> None:
        assert HeaderMap().config is DEFAULT_CONFIG

"""Tests for headermap.__init__ — lazy import registry covers all public names."""

import tomllib
from pathlib import Path

import pytest

import headermap


@pytest.mark.parametrize("name", headermap.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(headermap, name)
    assert obj is not None, f"headermap.{name} resolved to None"


def test_header_map_is_the_class() -> None:
    from headermap.headers import HeaderMap

    assert headermap.HeaderMap is HeaderMap


def test_unknown_name_raises_attribute_error() -> None:
    """Accessing an unregistered name raises AttributeError."""
    with pytest.raises(AttributeError, match="no attribute"):
        headermap.__getattr__("ThisDoesNotExist")


def test_version_matches_project_metadata() -> None:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    project = tomllib.loads(pyproject.read_text(encoding="utf-8"))["project"]
    assert headermap.__version__ == project["version"]

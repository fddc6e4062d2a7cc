"""Shared test fixtures."""

from pathlib import Path

import pytest

from hy_translit.engine import Transliterator


@pytest.fixture
def latin() -> Transliterator:
    return Transliterator("en")


@pytest.fixture
def cyrillic() -> Transliterator:
    return Transliterator("ru")


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a hy_translit.toml into tmp_path and return its path."""
    def _write(body: str, name: str = "hy_translit.toml") -> Path:
        p = tmp_path / name
        p.write_text(body, encoding="utf-8")
        return p
    return _write

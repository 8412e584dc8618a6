"""Shared pytest fixtures for lox tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from lox.core.config import DivisionByZero, LoxConfig


@pytest.fixture
def write_script(tmp_path: Path) -> Callable[[str], Path]:
    """Return a factory that writes source text to a script file."""

    def _write(source: str, name: str = "script.lox") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ieee_config() -> LoxConfig:
    """Config where division by zero follows IEEE-754."""
    return LoxConfig(division_by_zero=DivisionByZero.IEEE)

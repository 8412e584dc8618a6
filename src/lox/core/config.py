"""
Run configuration for the Lox pipeline.

Usage:
    from lox.core.config import DivisionByZero, LoxConfig

    config = LoxConfig(division_by_zero=DivisionByZero.ERROR)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class DivisionByZero(StrEnum):
    """What ``x / 0`` evaluates to."""

    NIL = "nil"  # result is nil
    ERROR = "error"  # runtime error
    IEEE = "ieee"  # inf, -inf or nan


@dataclass(frozen=True)
class LoxConfig:
    """Options controlling one pipeline run."""

    division_by_zero: DivisionByZero = DivisionByZero.NIL
    evaluate: bool = True  # False stops after parsing
    show_tokens: bool = False
    show_ast: bool = False


DEFAULT_CONFIG = LoxConfig()

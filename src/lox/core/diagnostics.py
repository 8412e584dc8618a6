"""
Diagnostics collected while scanning and parsing.

Each pass receives a :class:`Diagnostics` collector and hands it back next to
its result; the driver decides whether evaluation may run by looking at
``had_error`` instead of a shared flag.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from lox.core.errors import ErrorContext, LexError, LoxError, ParseError, where_for
from lox.core.tokens import Token

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Pipeline stage that produced a diagnostic."""

    LEX = "lex"
    PARSE = "parse"


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem."""

    phase: Phase
    line: int
    where: str
    message: str

    def __str__(self) -> str:
        return ErrorContext(line=self.line, where=self.where).format(self.message)

    def to_error(self) -> LoxError:
        """Convert to the matching exception type."""
        context = ErrorContext(line=self.line, where=self.where)
        if self.phase is Phase.LEX:
            return LexError(self.message, context)
        return ParseError(self.message, context)


@dataclass
class Diagnostics:
    """Ordered collection of diagnostics for one pipeline run."""

    items: list[Diagnostic] = field(default_factory=list)

    def report(self, phase: Phase, line: int, where: str, message: str) -> Diagnostic:
        diagnostic = Diagnostic(phase=phase, line=line, where=where, message=message)
        logger.debug("diagnostic recorded: %s", diagnostic)
        self.items.append(diagnostic)
        return diagnostic

    def lex_error(self, line: int, message: str) -> Diagnostic:
        return self.report(Phase.LEX, line, "", message)

    def parse_error(self, token: Token, message: str) -> Diagnostic:
        return self.report(Phase.PARSE, token.line, where_for(token), message)

    @property
    def had_error(self) -> bool:
        return bool(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Diagnostics(errors={len(self.items)})"

"""
Error types for Lox scanning, parsing, and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lox.core.tokens import Token


class LoxError(Exception):
    """Base exception for all Lox errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return self.context.format(self.message)
        return self.message


class LexError(LoxError):
    """
    Raised when source text cannot be scanned.

    Examples:
    - Unexpected character
    - Unterminated string literal
    """

    pass


class ParseError(LoxError):
    """
    Raised when a token sequence does not match the expression grammar.

    Examples:
    - Missing closing parenthesis
    - Operator with no operand
    - Trailing tokens after a complete expression
    """

    pass


class LoxRuntimeError(LoxError):
    """
    Raised when an operator is applied to values it does not support.

    Carries the operator token so the report can name the offending line.
    """

    def __init__(self, token: Token, message: str):
        self.token = token
        super().__init__(message, ErrorContext(line=token.line))

    def _format_message(self) -> str:
        return f"{self.message}\n[line {self.token.line}]"


@dataclass(frozen=True)
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        line: Line number (1-indexed)
        where: Location hint such as ``" at end"`` or ``" at '+'"``; empty for
            scanner errors
    """

    line: int
    where: str = ""

    def format(self, message: str) -> str:
        """
        Format a message with its location.

        Returns:
            Formatted string like: "[line 3] Error at ')': Expected expression."
        """
        return f"[line {self.line}] Error{self.where}: {message}"


def where_for(token: Token) -> str:
    """Location hint for an error reported at ``token``."""
    from lox.core.tokens import TokenKind

    if token.kind == TokenKind.EOF:
        return " at end"
    return f" at '{token.lexeme}'"

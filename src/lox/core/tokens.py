"""
Token definitions for the Lox expression language.

Identifiers, strings and numbers all share the generic ``LITERAL`` kind;
the attached :class:`LiteralPayload` says which one a token is.
"""

from __future__ import annotations

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Identifiers, strings and numbers
    LITERAL = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FOR = auto()
    FUN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # End of input
    EOF = auto()


class LiteralKind(StrEnum):
    """What a ``LITERAL`` token holds."""

    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()


class LiteralPayload(BaseModel):
    """Decoded value of a ``LITERAL`` token."""

    kind: LiteralKind
    value: str | float = Field(description="Identifier name, string contents or number")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def identifier(cls, name: str) -> LiteralPayload:
        return cls(kind=LiteralKind.IDENTIFIER, value=name)

    @classmethod
    def string(cls, text: str) -> LiteralPayload:
        return cls(kind=LiteralKind.STRING, value=text)

    @classmethod
    def number(cls, value: float) -> LiteralPayload:
        return cls(kind=LiteralKind.NUMBER, value=value)

    def __str__(self) -> str:
        return str(self.value)


class Token(BaseModel):
    """A single token from the lexer."""

    kind: TokenKind
    lexeme: str = Field(description="Exact source text of the token")
    literal: LiteralPayload | None = None
    line: int = Field(ge=1, description="1-indexed source line")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        name = self.kind.name
        if self.literal is None:
            return f"{name} {self.lexeme}"
        return f"{name} {self.lexeme} {self.literal}"


KEYWORDS: dict[str, TokenKind] = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "for": TokenKind.FOR,
    "fun": TokenKind.FUN,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
}

# Keywords that start a statement; panic-mode recovery stops before them.
STATEMENT_KEYWORDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.CLASS,
        TokenKind.FUN,
        TokenKind.VAR,
        TokenKind.FOR,
        TokenKind.IF,
        TokenKind.WHILE,
        TokenKind.PRINT,
        TokenKind.RETURN,
    }
)

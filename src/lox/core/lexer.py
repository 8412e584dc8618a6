"""
Lexer for the Lox expression language.

Converts source text into a list of tokens terminated by a single EOF token.
Problems are recorded in a :class:`Diagnostics` collector and scanning carries
on, so one pass reports every bad character in the input.
"""

from __future__ import annotations

import logging

from lox.core.diagnostics import Diagnostics
from lox.core.tokens import KEYWORDS, LiteralPayload, Token, TokenKind

logger = logging.getLogger(__name__)

_SINGLE_CHAR: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# First character -> (kind when followed by "=", kind otherwise)
_WITH_EQUAL: dict[str, tuple[TokenKind, TokenKind]] = {
    "!": (TokenKind.BANG_EQUAL, TokenKind.BANG),
    "=": (TokenKind.EQUAL_EQUAL, TokenKind.EQUAL),
    "<": (TokenKind.LESS_EQUAL, TokenKind.LESS),
    ">": (TokenKind.GREATER_EQUAL, TokenKind.GREATER),
}


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z" or c == "_"


def _is_alpha_numeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


class Lexer:
    """Single-pass scanner over one source string."""

    def __init__(self, source: str, diagnostics: Diagnostics | None = None) -> None:
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.tokens: list[Token] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> list[Token]:
        while not self.is_at_end():
            self.start = self.current
            self.scan_token()

        self.tokens.append(Token(kind=TokenKind.EOF, lexeme="", line=self.line))
        logger.debug("scanned %d tokens over %d lines", len(self.tokens), self.line)
        return self.tokens

    def scan_token(self) -> None:
        c = self.advance()

        if c in _SINGLE_CHAR:
            self.add_token(_SINGLE_CHAR[c])
        elif c in _WITH_EQUAL:
            merged, single = _WITH_EQUAL[c]
            self.add_token(merged if self.match("=") else single)
        elif c == "/":
            if self.match("/"):
                # Comment runs to end of line
                while self.peek() != "\n" and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenKind.SLASH)
        elif c in " \r\t":
            pass
        elif c == "\n":
            self.line += 1
        elif c == '"':
            self.string()
        elif _is_digit(c):
            self.number()
        elif _is_alpha(c):
            self.identifier()
        else:
            self.diagnostics.lex_error(self.line, "Unexpected character.")

    def string(self) -> None:
        start_line = self.line
        chars: list[str] = []

        while self.peek() != '"' and not self.is_at_end():
            c = self.advance()
            if c == "\\" and not self.is_at_end():
                c = self.advance()
            if c == "\n":
                self.line += 1
            chars.append(c)

        if self.is_at_end():
            self.diagnostics.lex_error(self.line, "Unterminated string.")
            return

        # Closing quote
        self.advance()
        self.add_token(TokenKind.LITERAL, LiteralPayload.string("".join(chars)), line=start_line)

    def number(self) -> None:
        while _is_digit(self.peek()):
            self.advance()

        # Fractional part needs a digit after the dot
        if self.peek() == "." and _is_digit(self.peek_next()):
            self.advance()
            while _is_digit(self.peek()):
                self.advance()

        value = float(self.source[self.start : self.current])
        self.add_token(TokenKind.LITERAL, LiteralPayload.number(value))

    def identifier(self) -> None:
        while _is_alpha_numeric(self.peek()):
            self.advance()
        word = self.source[self.start : self.current]

        kind = KEYWORDS.get(word)
        if kind is not None:
            self.add_token(kind)
        else:
            self.add_token(TokenKind.LITERAL, LiteralPayload.identifier(word))

    # -- Cursor helpers --

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def add_token(
        self,
        kind: TokenKind,
        literal: LiteralPayload | None = None,
        *,
        line: int | None = None,
    ) -> None:
        text = self.source[self.start : self.current]
        self.tokens.append(
            Token(kind=kind, lexeme=text, literal=literal, line=self.line if line is None else line)
        )


def scan(source: str, diagnostics: Diagnostics | None = None) -> tuple[list[Token], Diagnostics]:
    """Scan source text into tokens.

    Args:
        source: Raw Lox source.
        diagnostics: Collector to append to; a fresh one is created if omitted.

    Returns:
        The token list (always ending in EOF) and the diagnostics collector.
    """
    lexer = Lexer(source, diagnostics)
    tokens = lexer.scan_tokens()
    return tokens, lexer.diagnostics

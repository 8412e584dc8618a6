"""
Recursive descent parser for Lox expressions.

Grammar (precedence low to high):
    expression  → equality
    equality    → comparison (("!=" | "==") comparison)*
    comparison  → term ((">" | ">=" | "<" | "<=") term)*
    term        → factor (("-" | "+") factor)*
    factor      → unary (("/" | "*") unary)*
    unary       → ("!" | "-") unary | primary
    primary     → NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

All binary levels are left-associative. The first syntax error is reported
to the diagnostics collector and ends the parse; an expression has no
statement boundary to recover at.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from lox.core.diagnostics import Diagnostics
from lox.core.errors import ErrorContext, LoxError, ParseError
from lox.core.expressions import Binary, Expr, Grouping, Literal, Unary
from lox.core.lexer import scan
from lox.core.tokens import STATEMENT_KEYWORDS, LiteralKind, Token, TokenKind

logger = logging.getLogger(__name__)

_EQUALITY_OPS = (TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL)
_COMPARISON_OPS = (
    TokenKind.GREATER,
    TokenKind.GREATER_EQUAL,
    TokenKind.LESS,
    TokenKind.LESS_EQUAL,
)
_TERM_OPS = (TokenKind.MINUS, TokenKind.PLUS)
_FACTOR_OPS = (TokenKind.SLASH, TokenKind.STAR)
_UNARY_OPS = (TokenKind.BANG, TokenKind.MINUS)


class Parser:
    """Recursive descent parser over one token list."""

    def __init__(self, tokens: list[Token], diagnostics: Diagnostics | None = None) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("token list must end with an EOF token")
        self.tokens = tokens
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.pos = 0

    def parse(self) -> Expr | None:
        """Parse one expression spanning the whole token list.

        Returns:
            The expression tree, or None if a syntax error was reported.
        """
        try:
            expr = self.expression()
            if not self.is_at_end():
                raise self.error(self.current, "Expected end of expression.")
        except ParseError:
            return None
        except RecursionError:
            self.error(self.current, "Expression nested too deeply.")
            return None
        logger.debug("parsed expression from %d tokens", len(self.tokens))
        return expr

    # -- Token cursor --

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    @property
    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.current.kind == TokenKind.EOF

    def advance(self) -> Token:
        tok = self.current
        if not self.is_at_end():
            self.pos += 1
        return tok

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.current.kind == kind

    def match(self, *kinds: TokenKind) -> Token | None:
        for kind in kinds:
            if self.check(kind):
                return self.advance()
        return None

    def expect(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise self.error(self.current, message)

    def error(self, token: Token, message: str) -> ParseError:
        """Report a syntax error at ``token`` and return it for raising."""
        diagnostic = self.diagnostics.parse_error(token, message)
        return ParseError(message, ErrorContext(line=diagnostic.line, where=diagnostic.where))

    def synchronize(self) -> None:
        """Discard tokens up to the next statement boundary.

        Panic-mode recovery for a statement grammar: stops just after a ``;``
        or just before a keyword that starts a statement. Expressions have no
        such boundary, so :meth:`parse` does not call this.
        """
        self.advance()
        while not self.is_at_end():
            if self.previous.kind == TokenKind.SEMICOLON:
                return
            if self.current.kind in STATEMENT_KEYWORDS:
                return
            self.advance()

    # -- Grammar rules --

    def expression(self) -> Expr:
        return self.equality()

    def equality(self) -> Expr:
        return self._left_assoc(self.comparison, _EQUALITY_OPS)

    def comparison(self) -> Expr:
        return self._left_assoc(self.term, _COMPARISON_OPS)

    def term(self) -> Expr:
        return self._left_assoc(self.factor, _TERM_OPS)

    def factor(self) -> Expr:
        return self._left_assoc(self.unary, _FACTOR_OPS)

    def _left_assoc(self, operand: Callable[[], Expr], operators: tuple[TokenKind, ...]) -> Expr:
        """operand (operator operand)*, folded left to right."""
        left = operand()
        while operator := self.match(*operators):
            right = operand()
            left = Binary(left=left, operator=operator, right=right)
        return left

    def unary(self) -> Expr:
        if operator := self.match(*_UNARY_OPS):
            right = self.unary()
            return Unary(operator=operator, right=right)
        return self.primary()

    def primary(self) -> Expr:
        tok = self.current

        if self.match(TokenKind.FALSE):
            return Literal(value=False)
        if self.match(TokenKind.TRUE):
            return Literal(value=True)
        if self.match(TokenKind.NIL):
            return Literal(value=None)

        if tok.kind == TokenKind.LITERAL and tok.literal is not None:
            # Identifiers have no meaning without variables
            if tok.literal.kind == LiteralKind.IDENTIFIER:
                raise self.error(tok, "Expected expression.")
            self.advance()
            return Literal(value=tok.literal.value)

        if self.match(TokenKind.LEFT_PAREN):
            expr = self.expression()
            self.expect(TokenKind.RIGHT_PAREN, "Expected ')' after expression.")
            return Grouping(expression=expr)

        raise self.error(tok, "Expected expression.")


def parse(tokens: list[Token], diagnostics: Diagnostics | None = None) -> tuple[Expr | None, Diagnostics]:
    """Parse a token list into an expression tree.

    Returns:
        The tree (None on a syntax error) and the diagnostics collector.
    """
    parser = Parser(tokens, diagnostics)
    expr = parser.parse()
    return expr, parser.diagnostics


def parse_expr(source: str) -> Expr:
    """Scan and parse a source string in one step.

    Args:
        source: Expression string (e.g., "1 + 2 * 3")

    Returns:
        Parsed expression AST.

    Raises:
        LexError: If scanning reported a problem.
        ParseError: If the expression is invalid.
    """
    tokens, diagnostics = scan(source)
    expr = None
    if not diagnostics.had_error:
        expr, diagnostics = parse(tokens, diagnostics)
    if expr is None:
        first: LoxError = diagnostics.items[0].to_error()
        raise first
    return expr

"""Tests for the Lox lexer.

Covers:
- Punctuation and one/two character operators
- Number, string and identifier literals
- Keywords, comments and whitespace
- Line tracking
- Error reporting (unexpected character, unterminated string)
"""

from __future__ import annotations

import pytest

from lox.core.diagnostics import Diagnostics, Phase
from lox.core.lexer import Lexer, scan
from lox.core.tokens import KEYWORDS, LiteralKind, LiteralPayload, Token, TokenKind


def kinds(source: str) -> list[TokenKind]:
    tokens, _ = scan(source)
    return [t.kind for t in tokens]


# ============================================================================
# Punctuation and operators
# ============================================================================


class TestPunctuation:
    """Single-character tokens map 1:1."""

    def test_single_characters(self) -> None:
        assert kinds("(){},.-+;*/") == [
            TokenKind.LEFT_PAREN,
            TokenKind.RIGHT_PAREN,
            TokenKind.LEFT_BRACE,
            TokenKind.RIGHT_BRACE,
            TokenKind.COMMA,
            TokenKind.DOT,
            TokenKind.MINUS,
            TokenKind.PLUS,
            TokenKind.SEMICOLON,
            TokenKind.STAR,
            TokenKind.SLASH,
            TokenKind.EOF,
        ]

    def test_two_character_operators(self) -> None:
        assert kinds("!= == <= >=") == [
            TokenKind.BANG_EQUAL,
            TokenKind.EQUAL_EQUAL,
            TokenKind.LESS_EQUAL,
            TokenKind.GREATER_EQUAL,
            TokenKind.EOF,
        ]

    def test_one_character_fallbacks(self) -> None:
        assert kinds("! = < >") == [
            TokenKind.BANG,
            TokenKind.EQUAL,
            TokenKind.LESS,
            TokenKind.GREATER,
            TokenKind.EOF,
        ]

    def test_operator_lexemes(self) -> None:
        tokens, _ = scan("<=>")
        assert [t.lexeme for t in tokens] == ["<=", ">", ""]

    def test_comment_runs_to_end_of_line(self) -> None:
        tokens, diagnostics = scan("1 // ignored ( @ \"\n2")
        assert [t.kind for t in tokens] == [TokenKind.LITERAL, TokenKind.LITERAL, TokenKind.EOF]
        assert not diagnostics.had_error

    def test_comment_at_end_of_input(self) -> None:
        assert kinds("// nothing here") == [TokenKind.EOF]


# ============================================================================
# Literals
# ============================================================================


class TestLiterals:
    """Numbers, strings and identifiers share the LITERAL kind."""

    def test_integer_number(self) -> None:
        tokens, _ = scan("123")
        assert len(tokens) == 2
        assert tokens[0] == Token(
            kind=TokenKind.LITERAL,
            lexeme="123",
            literal=LiteralPayload.number(123.0),
            line=1,
        )
        assert tokens[1].kind == TokenKind.EOF

    def test_decimal_number(self) -> None:
        tokens, _ = scan("3.14")
        assert tokens[0].literal == LiteralPayload.number(3.14)
        assert tokens[0].lexeme == "3.14"

    def test_number_value_is_float(self) -> None:
        tokens, _ = scan("7")
        assert isinstance(tokens[0].literal.value, float)

    def test_trailing_dot_is_not_part_of_number(self) -> None:
        tokens, _ = scan("1.")
        assert [t.kind for t in tokens] == [TokenKind.LITERAL, TokenKind.DOT, TokenKind.EOF]
        assert tokens[0].lexeme == "1"

    def test_leading_dot_is_not_part_of_number(self) -> None:
        tokens, _ = scan(".5")
        assert [t.kind for t in tokens] == [TokenKind.DOT, TokenKind.LITERAL, TokenKind.EOF]

    def test_string(self) -> None:
        tokens, _ = scan('"hello"')
        assert tokens[0].kind == TokenKind.LITERAL
        assert tokens[0].literal == LiteralPayload.string("hello")
        assert tokens[0].lexeme == '"hello"'

    def test_empty_string(self) -> None:
        tokens, _ = scan('""')
        assert tokens[0].literal == LiteralPayload.string("")

    def test_string_escape(self) -> None:
        tokens, _ = scan('"he\\"llo"')
        assert tokens[0].literal.value == 'he"llo'

    def test_identifier(self) -> None:
        tokens, _ = scan("my_field")
        assert tokens[0].kind == TokenKind.LITERAL
        assert tokens[0].literal.kind == LiteralKind.IDENTIFIER
        assert tokens[0].literal.value == "my_field"

    def test_identifier_with_leading_underscore_and_digits(self) -> None:
        tokens, _ = scan("_x1")
        assert tokens[0].literal == LiteralPayload.identifier("_x1")

    def test_keyword_prefix_is_identifier(self) -> None:
        tokens, _ = scan("andy")
        assert tokens[0].literal == LiteralPayload.identifier("andy")

    def test_identifier_stops_at_non_ascii_letter(self) -> None:
        tokens, diagnostics = scan("café")
        assert tokens[0].literal == LiteralPayload.identifier("caf")
        assert [d.message for d in diagnostics] == ["Unexpected character."]

    def test_identifier_stops_at_operator(self) -> None:
        tokens, _ = scan("a1+b")
        assert tokens[0].literal == LiteralPayload.identifier("a1")
        assert tokens[1].kind == TokenKind.PLUS
        assert tokens[2].literal == LiteralPayload.identifier("b")


class TestKeywords:
    """Reserved words get their own kinds and no payload."""

    def test_all_keywords(self) -> None:
        source = " ".join(KEYWORDS)
        tokens, _ = scan(source)
        assert [t.kind for t in tokens] == list(KEYWORDS.values()) + [TokenKind.EOF]
        assert all(t.literal is None for t in tokens)

    def test_keyword_table(self) -> None:
        assert set(KEYWORDS) == {
            "and", "class", "else", "false", "for", "fun", "if", "nil",
            "or", "print", "return", "super", "this", "true", "var", "while",
        }  # fmt: skip


# ============================================================================
# Lines and whitespace
# ============================================================================


class TestLines:
    """Line numbers count newlines before each token's start."""

    def test_whitespace_is_discarded(self) -> None:
        assert kinds(" \t\r 1 \t ") == [TokenKind.LITERAL, TokenKind.EOF]

    def test_line_numbers(self) -> None:
        source = "1\n\n2\n3"
        tokens, _ = scan(source)
        assert [t.line for t in tokens] == [1, 3, 4, 4]

    @pytest.mark.parametrize("source", ["1 +\n 2", "\n\n(\n)", "a\nb\n\nc"])
    def test_line_is_one_plus_newlines_before_token(self, source: str) -> None:
        lexer = Lexer(source)
        tokens = lexer.scan_tokens()
        offsets = [i for i, c in enumerate(source) if not c.isspace()]
        for token, offset in zip(tokens, offsets):
            assert token.line == 1 + source.count("\n", 0, offset)

    def test_multiline_string_keeps_start_line(self) -> None:
        tokens, _ = scan('1\n"a\nb" 2')
        assert [t.line for t in tokens] == [1, 2, 3, 3]
        assert tokens[1].literal.value == "a\nb"

    def test_lines_non_decreasing(self) -> None:
        tokens, _ = scan('(1 +\n"x\ny")\n* 3 // c\n- 4')
        lines = [t.line for t in tokens]
        assert lines == sorted(lines)

    def test_single_eof(self) -> None:
        tokens, _ = scan("1 + 2\n")
        assert [t.kind for t in tokens].count(TokenKind.EOF) == 1
        assert tokens[-1].kind == TokenKind.EOF
        assert tokens[-1].line == 2


# ============================================================================
# Errors
# ============================================================================


class TestLexErrors:
    """Errors are collected; scanning continues where it can."""

    def test_unexpected_character(self) -> None:
        tokens, diagnostics = scan("@")
        assert [t.kind for t in tokens] == [TokenKind.EOF]
        assert len(diagnostics) == 1
        diagnostic = diagnostics.items[0]
        assert diagnostic.phase is Phase.LEX
        assert diagnostic.message == "Unexpected character."
        assert str(diagnostic) == "[line 1] Error: Unexpected character."

    def test_scanning_continues_after_unexpected_character(self) -> None:
        tokens, diagnostics = scan("1 @ 2 #\n3")
        assert [t.lexeme for t in tokens] == ["1", "2", "3", ""]
        assert [d.line for d in diagnostics] == [1, 1]

    def test_unterminated_string(self) -> None:
        tokens, diagnostics = scan('"unterminated')
        assert [t.kind for t in tokens] == [TokenKind.EOF]
        assert [d.message for d in diagnostics] == ["Unterminated string."]

    def test_unterminated_string_reported_at_final_line(self) -> None:
        tokens, diagnostics = scan('1\n"abc\ndef\n')
        assert [t.kind for t in tokens] == [TokenKind.LITERAL, TokenKind.EOF]
        assert diagnostics.items[0].line == 4

    def test_existing_diagnostics_are_appended_to(self) -> None:
        diagnostics = Diagnostics()
        diagnostics.lex_error(9, "earlier")
        _, returned = scan("@", diagnostics)
        assert returned is diagnostics
        assert [d.message for d in returned] == ["earlier", "Unexpected character."]


class TestTokenDisplay:
    """str(token) is the debug dump format."""

    def test_token_without_literal(self) -> None:
        tokens, _ = scan("+")
        assert str(tokens[0]) == "PLUS +"

    def test_token_with_literal(self) -> None:
        tokens, _ = scan('"hi"')
        assert str(tokens[0]) == 'LITERAL "hi" hi'

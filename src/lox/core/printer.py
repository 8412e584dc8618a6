"""
S-expression printer for Lox expression trees.

Every compound node is parenthesized, so the output shows the exact shape the
parser built:

    >>> print_ast(parse_expr("1 + 2 * 3"))
    '(+ 1 (* 2 3))'
"""

from __future__ import annotations

from lox.core.errors import LoxError
from lox.core.expressions import Binary, Expr, ExprVisitor, Grouping, Literal, Unary
from lox.core.values import format_number


class AstPrinter(ExprVisitor[str]):
    """Renders an expression tree as a fully parenthesized string."""

    def print(self, expr: Expr) -> str:
        return self.visit(expr)

    def visit_literal(self, expr: Literal) -> str:
        value = expr.value
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return f'"{value}"'
        return format_number(value)

    def visit_grouping(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_unary(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def visit_binary(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [self.visit(e) for e in exprs]
        return "(" + " ".join(parts) + ")"


def print_ast(expr: Expr) -> str:
    """Render ``expr`` as an s-expression string.

    Raises:
        LoxError: If the tree is too deep to render.
    """
    try:
        return AstPrinter().print(expr)
    except RecursionError:
        raise LoxError("Expression nested too deeply to print.") from None

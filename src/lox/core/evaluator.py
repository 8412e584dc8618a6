"""
Expression evaluator for Lox.

Walks an expression tree and produces a runtime value. Pure evaluation: no
I/O and no printing; the caller decides how to present the value or the
error. The first runtime error aborts the whole expression.
"""

from __future__ import annotations

import logging
import math

from lox.core.config import DEFAULT_CONFIG, DivisionByZero, LoxConfig
from lox.core.errors import LoxRuntimeError
from lox.core.expressions import Binary, Expr, ExprVisitor, Grouping, Literal, Unary
from lox.core.tokens import Token, TokenKind
from lox.core.values import Value, is_number, is_string, is_truthy, values_equal

logger = logging.getLogger(__name__)


class Evaluator(ExprVisitor[Value]):
    """Tree-walking interpreter over the closed expression node set."""

    def __init__(self, config: LoxConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def evaluate(self, expr: Expr) -> Value:
        return self.visit(expr)

    def visit_literal(self, expr: Literal) -> Value:
        return expr.value

    def visit_grouping(self, expr: Grouping) -> Value:
        return self.evaluate(expr.expression)

    def visit_unary(self, expr: Unary) -> Value:
        right = self.evaluate(expr.right)
        op = expr.operator

        if op.kind == TokenKind.BANG:
            return not is_truthy(right)
        if op.kind == TokenKind.MINUS:
            _check_number_operand(op, right)
            return -right

        raise LoxRuntimeError(op, f"Unknown unary operator '{op.lexeme}'.")

    def visit_binary(self, expr: Binary) -> Value:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.operator

        match op.kind:
            case TokenKind.EQUAL_EQUAL:
                return values_equal(left, right)
            case TokenKind.BANG_EQUAL:
                return not values_equal(left, right)
            case TokenKind.PLUS:
                if is_number(left) and is_number(right):
                    return left + right
                if is_string(left) and is_string(right):
                    return left + right
                raise LoxRuntimeError(op, "Operands must be two numbers or two strings.")

        _check_number_operands(op, left, right)

        match op.kind:
            case TokenKind.MINUS:
                return left - right
            case TokenKind.STAR:
                return left * right
            case TokenKind.SLASH:
                return self._divide(op, left, right)
            case TokenKind.GREATER:
                return left > right
            case TokenKind.GREATER_EQUAL:
                return left >= right
            case TokenKind.LESS:
                return left < right
            case TokenKind.LESS_EQUAL:
                return left <= right

        raise LoxRuntimeError(op, f"Unknown binary operator '{op.lexeme}'.")

    def _divide(self, op: Token, left: float, right: float) -> Value:
        if right != 0:
            return left / right

        policy = self.config.division_by_zero
        if policy == DivisionByZero.ERROR:
            raise LoxRuntimeError(op, "Division by zero.")
        if policy == DivisionByZero.IEEE:
            if left == 0 or math.isnan(left):
                return math.nan
            # Sign of a zero divisor counts: 1 / -0 is -inf
            return math.copysign(math.inf, left) * math.copysign(1.0, right)
        return None


def _outermost_operator(expr: Expr) -> Token | None:
    while isinstance(expr, Grouping):
        expr = expr.expression
    if isinstance(expr, (Unary, Binary)):
        return expr.operator
    return None


def _check_number_operand(operator: Token, operand: Value) -> None:
    if not is_number(operand):
        raise LoxRuntimeError(operator, "Operand must be a number.")


def _check_number_operands(operator: Token, left: Value, right: Value) -> None:
    if not (is_number(left) and is_number(right)):
        raise LoxRuntimeError(operator, "Operands must be numbers.")


def evaluate(expr: Expr, config: LoxConfig | None = None) -> Value:
    """Evaluate an expression tree.

    Args:
        expr: Parsed expression AST.
        config: Run options; only ``division_by_zero`` applies here.

    Returns:
        The computed value: float, str, bool, or None for nil.

    Raises:
        LoxRuntimeError: If an operator gets operands it does not support.
            Also raised when the tree is too deep to walk.
    """
    try:
        value = Evaluator(config or DEFAULT_CONFIG).evaluate(expr)
    except RecursionError:
        # Left-associative chains and unary runs parse iteratively or cheaply
        # but take several frames per level here
        operator = _outermost_operator(expr)
        if operator is None:
            raise
        raise LoxRuntimeError(operator, "Expression nested too deeply.") from None
    logger.debug("evaluated to %r", value)
    return value

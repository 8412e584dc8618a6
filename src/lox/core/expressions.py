"""
Expression AST for Lox.

The node set is closed: Literal, Grouping, Unary and Binary. Nodes are frozen
pydantic models, built bottom-up by the parser and never mutated afterwards.

Consumers subclass :class:`ExprVisitor` and implement one method per node
kind; :meth:`ExprVisitor.visit` picks the method by matching on the node.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from lox.core.tokens import Token

T = TypeVar("T")


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A literal value: number (float), string, boolean, or None (nil)."""

    value: bool | float | str | None = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)


class Grouping(BaseModel):
    """Parenthesized expression."""

    expression: Expr

    model_config = ConfigDict(frozen=True)


class Unary(BaseModel):
    """Prefix operation: operator right."""

    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)


class Binary(BaseModel):
    """Infix operation: left operator right."""

    left: Expr
    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | Grouping | Unary | Binary

# Rebuild models for recursive forward references
Grouping.model_rebuild()
Unary.model_rebuild()
Binary.model_rebuild()


# ---------------------------------------------------------------------------
# Visitor
# ---------------------------------------------------------------------------


class ExprVisitor(Generic[T]):
    """Base class for tree walkers producing a ``T`` per node."""

    def visit(self, expr: Expr) -> T:
        match expr:
            case Literal():
                return self.visit_literal(expr)
            case Grouping():
                return self.visit_grouping(expr)
            case Unary():
                return self.visit_unary(expr)
            case Binary():
                return self.visit_binary(expr)
            case _:
                raise TypeError(f"Unknown expression type: {type(expr).__name__}")

    def visit_literal(self, expr: Literal) -> T:
        raise NotImplementedError

    def visit_grouping(self, expr: Grouping) -> T:
        raise NotImplementedError

    def visit_unary(self, expr: Unary) -> T:
        raise NotImplementedError

    def visit_binary(self, expr: Binary) -> T:
        raise NotImplementedError

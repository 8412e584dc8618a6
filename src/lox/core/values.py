"""
Runtime values for the Lox evaluator.

Lox values map onto Python's native types:

    Number  -> float
    String  -> str
    Boolean -> bool
    Nil     -> None

``bool`` is a subclass of ``int`` in Python, so kind checks use exact types;
``True`` is never a Number here.
"""

from __future__ import annotations

import math

Value = float | str | bool | None


def kind_name(value: Value) -> str:
    """Lox name of the value's kind."""
    if value is None:
        return "nil"
    if type(value) is bool:
        return "boolean"
    if type(value) is float:
        return "number"
    if type(value) is str:
        return "string"
    raise TypeError(f"Not a Lox value: {value!r}")


def is_number(value: Value) -> bool:
    return type(value) is float


def is_string(value: Value) -> bool:
    return type(value) is str


def is_truthy(value: Value) -> bool:
    """nil and false are falsy; everything else, including 0 and "", is truthy."""
    if value is None:
        return False
    if type(value) is bool:
        return value
    return True


def values_equal(left: Value, right: Value) -> bool:
    """Equality without coercion: values of different kinds are never equal."""
    if type(left) is not type(right):
        return False
    return left == right


def format_number(n: float) -> str:
    """Shortest decimal rendering: 123.0 -> "123", 1.5 -> "1.5"."""
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n.is_integer():
        text = str(int(n))
        if n == 0 and math.copysign(1.0, n) < 0:
            return "-0"
        return text
    return repr(n)


def stringify(value: Value) -> str:
    """Presentation form of a value, as the REPL prints it."""
    if value is None:
        return "nil"
    if type(value) is bool:
        return "true" if value else "false"
    if type(value) is float:
        return format_number(value)
    return str(value)

"""
Lox expression core.

Lexer, parser, printer, and evaluator for Lox expressions.

Usage:
    from lox.core import evaluate, parse_expr, print_ast

    expr = parse_expr("(1 + 2) * 3")
    print_ast(expr)   # '(* (group (+ 1 2)) 3)'
    evaluate(expr)    # 9.0
"""

from lox.core.evaluator import evaluate
from lox.core.lexer import scan
from lox.core.parser import parse, parse_expr
from lox.core.printer import print_ast
from lox.core.runner import run_source

__all__ = ["evaluate", "parse", "parse_expr", "print_ast", "run_source", "scan"]

"""
Lox - a tree-walking interpreter for Lox expressions.

Scans source text into tokens, parses them into an expression tree, and
evaluates the tree to a number, string, boolean, or nil.
"""

from __future__ import annotations

from lox._version import get_version

# Re-export commonly used types for convenience
from lox.core import evaluate, parse, parse_expr, print_ast, run_source, scan
from lox.core.errors import LexError, LoxError, LoxRuntimeError, ParseError

__version__ = get_version()

__all__ = [
    "__version__",
    "evaluate",
    "parse",
    "parse_expr",
    "print_ast",
    "run_source",
    "scan",
    "LoxError",
    "LexError",
    "ParseError",
    "LoxRuntimeError",
]

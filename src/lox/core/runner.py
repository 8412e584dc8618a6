"""
Source-to-value pipeline.

Runs Lexer → Parser → Evaluator over one source string and collects
everything a driver needs to report: the tokens, the tree, the value, and
whichever error stopped the run. Nothing here prints.

Usage:
    from lox.core.runner import run_source

    result = run_source('"a" + "b"')
    result.value       # 'ab'
    result.exit_code   # 0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from lox.core.config import DEFAULT_CONFIG, LoxConfig
from lox.core.diagnostics import Diagnostics
from lox.core.errors import LoxRuntimeError
from lox.core.evaluator import evaluate
from lox.core.expressions import Expr
from lox.core.lexer import scan
from lox.core.parser import parse
from lox.core.tokens import Token
from lox.core.values import Value, stringify

logger = logging.getLogger(__name__)

# sysexits.h codes
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70


@dataclass
class RunResult:
    """Outcome of running one source string."""

    tokens: list[Token] = field(default_factory=list)
    expr: Expr | None = None
    value: Value = None
    evaluated: bool = False
    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    runtime_error: LoxRuntimeError | None = None

    @property
    def had_error(self) -> bool:
        """True if scanning or parsing reported anything."""
        return self.diagnostics.had_error

    @property
    def had_runtime_error(self) -> bool:
        return self.runtime_error is not None

    @property
    def exit_code(self) -> int:
        if self.had_error:
            return EX_DATAERR
        if self.had_runtime_error:
            return EX_SOFTWARE
        return EX_OK

    @property
    def output(self) -> str | None:
        """Printable form of the value, if evaluation succeeded."""
        if not self.evaluated:
            return None
        return stringify(self.value)


def run_source(source: str, config: LoxConfig | None = None) -> RunResult:
    """Scan, parse and (optionally) evaluate ``source``.

    Evaluation never runs on a tree that came with diagnostics.

    Args:
        source: Lox expression source.
        config: Run options; ``evaluate=False`` stops after parsing.

    Returns:
        RunResult with whatever stages completed.
    """
    config = config or DEFAULT_CONFIG
    result = RunResult()

    result.tokens, result.diagnostics = scan(source)
    expr, result.diagnostics = parse(result.tokens, result.diagnostics)
    if result.diagnostics.had_error:
        logger.debug("skipping evaluation: %d diagnostics", len(result.diagnostics))
        return result
    result.expr = expr

    if not config.evaluate or expr is None:
        return result

    try:
        result.value = evaluate(expr, config)
        result.evaluated = True
    except LoxRuntimeError as e:
        logger.debug("runtime error at line %d: %s", e.token.line, e.message)
        result.runtime_error = e
    return result

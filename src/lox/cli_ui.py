"""
Rich console output for the Lox CLI.

Values and debug dumps go to stdout; diagnostics and runtime errors go to
stderr.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text

from lox.core.diagnostics import Diagnostics
from lox.core.errors import LoxRuntimeError
from lox.core.tokens import Token

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

# Style definitions
STYLES = {
    "banner": Style(color="bright_cyan", bold=True),
    "error": Style(color="red", bold=True),
    "muted": Style(color="bright_black"),
    "value": Style(color="bright_white"),
    "ast": Style(color="cyan"),
}


def print_banner(version: str) -> None:
    console.print(Text(f"Welcome to lox! (v{version})", style=STYLES["banner"]))
    console.print(Text("Enter an expression; Ctrl-D exits.", style=STYLES["muted"]))


def print_value(output: str) -> None:
    """Print an evaluated value."""
    console.print(Text(output, style=STYLES["value"]), soft_wrap=True)


def print_ast_text(text: str) -> None:
    console.print(Text(text, style=STYLES["ast"]), soft_wrap=True)


def print_tokens(tokens: list[Token]) -> None:
    """Dump tokens one per line, prefixed with their line number."""
    for token in tokens:
        console.print(Text(f"{token.line:4d} | {token}", style=STYLES["muted"]), soft_wrap=True)


def print_diagnostics(diagnostics: Diagnostics) -> None:
    """Diagnostics sink: one line per lex or parse error."""
    for diagnostic in diagnostics:
        err_console.print(Text(str(diagnostic), style=STYLES["error"]), soft_wrap=True)


def print_runtime_error(error: LoxRuntimeError) -> None:
    err_console.print(Text(str(error), style=STYLES["error"]), soft_wrap=True)


def print_error(message: str) -> None:
    err_console.print(Text(message, style=STYLES["error"]), soft_wrap=True)


def read_line(prompt: str = "> ") -> str:
    """Read one REPL line; raises EOFError at end of input."""
    return console.input(prompt)

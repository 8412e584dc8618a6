"""
Lox CLI.

    lox                 interactive prompt, one expression per line
    lox <script>        run a file once; exit 65 on syntax errors, 70 on runtime errors
    lox a b ...         print usage and stop
"""

import logging
import platform
import sys
from pathlib import Path

import typer

from lox import cli_ui
from lox._version import get_version
from lox.core.config import DivisionByZero, LoxConfig
from lox.core.errors import LoxError
from lox.core.printer import print_ast
from lox.core.runner import EX_NOINPUT, EX_OK, EX_USAGE, RunResult, run_source

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"lox version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""lox – Lox expression interpreter

Run without arguments for an interactive prompt, or pass a script path.
""",
    add_completion=False,
)


@app.command()
def main_command(
    scripts: list[str] | None = typer.Argument(
        None,
        help="Script to run (omit for the interactive prompt)",
        show_default=False,
    ),
    tokens: bool = typer.Option(False, "--tokens", help="Print the token stream"),
    ast: bool = typer.Option(False, "--ast", help="Print the parsed tree as an s-expression"),
    no_eval: bool = typer.Option(False, "--no-eval", help="Stop after parsing"),
    division_by_zero: DivisionByZero = typer.Option(
        DivisionByZero.NIL,
        "--division-by-zero",
        case_sensitive=False,
        help="Result of x / 0: nil, error, or ieee (inf/nan)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Run a Lox script, or start the interactive prompt."""
    configure_logging(verbose)

    if scripts and len(scripts) > 1:
        typer.echo("Usage: lox [script]")
        raise typer.Exit(code=EX_USAGE)

    config = LoxConfig(
        division_by_zero=division_by_zero,
        evaluate=not no_eval,
        show_tokens=tokens,
        show_ast=ast or no_eval,
    )

    if scripts:
        code = run_file(Path(scripts[0]), config)
    else:
        code = run_prompt(config)
    if code != EX_OK:
        raise typer.Exit(code=code)


def report(result: RunResult, config: LoxConfig) -> None:
    """Presentation step: print whatever the run produced."""
    if config.show_tokens:
        cli_ui.print_tokens(result.tokens)
    if result.had_error:
        cli_ui.print_diagnostics(result.diagnostics)
        return
    if config.show_ast and result.expr is not None:
        try:
            cli_ui.print_ast_text(print_ast(result.expr))
        except LoxError as e:
            cli_ui.print_error(str(e))
    if result.runtime_error is not None:
        cli_ui.print_runtime_error(result.runtime_error)
    elif result.output is not None:
        cli_ui.print_value(result.output)


def run_file(path: Path, config: LoxConfig) -> int:
    """Run a script once and return the process exit code."""
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Could not read {path}: {e.strerror or e}", err=True)
        return EX_NOINPUT

    logger.debug("running %s (%d chars)", path, len(source))
    result = run_source(source, config)
    report(result, config)
    return result.exit_code


def run_prompt(config: LoxConfig) -> int:
    """Interactive loop; errors on one line never end the session."""
    cli_ui.print_banner(get_version())
    while True:
        try:
            line = cli_ui.read_line()
        except (EOFError, KeyboardInterrupt):
            typer.echo("")
            break
        # Each line gets a fresh diagnostics collector from run_source
        report(run_source(line, config), config)
    return EX_OK


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


if __name__ == "__main__":
    main(sys.argv[1:])

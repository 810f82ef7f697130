"""
CSC CLI.

    csc 'a = 2 ^ 10'      evaluate once and exit
    csc                   start the interactive prompt
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from csc.cli.repl import evaluate_line, run_repl
from csc.cli.utils import configure_logging, version_callback
from csc.cli_ui import print_error
from csc.core.errors import ConfigError
from csc.core.expression_lang import State
from csc.core.manifest import resolve_config

app = typer.Typer(
    help="""CSC – command-line scientific calculator

Evaluates arithmetic with variables (a = 2), compound assignment
(a += 1), constants (PI, TAU, E) and math functions (sin, log, sqrt, ...).
""",
    add_completion=False,
)


# Leading "-2" in an expression is an argument, not an unknown option
@app.command(context_settings={"ignore_unknown_options": True})
def calc(
    expr: list[str] | None = typer.Argument(  # noqa: B008
        None,
        help="Expression to evaluate once; omit to start the prompt",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="Path to csc.toml (default: ./csc.toml if present)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
    tree: bool = typer.Option(
        False,
        "--tree",
        help="Print the parenthesized form of each expression before its result",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Evaluate an expression, or start the interactive prompt."""
    try:
        settings = resolve_config(config)
    except ConfigError as e:
        print_error(e)
        raise typer.Exit(code=2)

    configure_logging(log_level or settings.logging.level)

    if expr:
        ok = evaluate_line(" ".join(expr), State(), show_tree=tree)
        if not ok:
            raise typer.Exit(code=1)
        return

    run_repl(
        State(),
        prompt=settings.repl.prompt,
        banner=settings.repl.banner,
        show_tree=tree,
    )


def main(argv: list[str] | None = None) -> None:
    app(args=argv if argv is not None else sys.argv[1:], prog_name="csc")


__all__ = ["app", "main"]

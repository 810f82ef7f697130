"""
Rich output helpers for the CSC CLI.

Results go to stdout, errors to stderr.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text

from csc.core.errors import CscError, ErrorContext, error_column
from csc.core.ir.expressions import format_number

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

LOGO = r"""
 ██████ ███████  ██████
██      ██      ██
██      ███████ ██
██           ██ ██
 ██████ ███████  ██████
"""

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "error": Style(color="red", bold=True),
    "muted": Style(color="bright_black"),
    "tree": Style(color="cyan"),
}


def print_banner(version: str) -> None:
    """Print the logo and version shown when the REPL starts."""
    console.print(Text(LOGO, style=STYLES["title"]), soft_wrap=True)
    console.print(Text(version, style=STYLES["subtitle"]), soft_wrap=True)


def print_result(value: float) -> None:
    """Print an evaluation result."""
    console.print(Text(format_number(value)), soft_wrap=True)


def print_tree(rendered: str) -> None:
    """Print the canonical rendering of a parsed expression."""
    console.print(Text(rendered, style=STYLES["tree"]), soft_wrap=True)


def print_message(message: str) -> None:
    console.print(Text(message, style=STYLES["muted"]), soft_wrap=True)


def print_error(error: CscError, source: str | None = None) -> None:
    """Print an error, with a marked source snippet when a location is known."""
    err_console.print(Text(f"✗ {error.message}", style=STYLES["error"]), soft_wrap=True)
    column = error_column(error)
    if source is not None and column is not None:
        context = ErrorContext.from_source(source, column)
        err_console.print(Text(context.format(), style=STYLES["muted"]), soft_wrap=True)

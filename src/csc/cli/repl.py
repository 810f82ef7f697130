"""
Read-eval-print loop.

Every line is evaluated against one State, so variables assigned on one
line are visible on the next. Errors are printed and the loop continues.
"""

from __future__ import annotations

import logging

from csc._version import get_version
from csc.cli_ui import console, print_banner, print_error, print_message, print_result, print_tree
from csc.core.errors import CscError
from csc.core.expression_lang import State, evaluate, parse, tokenize

logger = logging.getLogger(__name__)


def evaluate_line(line: str, state: State, show_tree: bool = False) -> bool:
    """Evaluate one line and print its result or error.

    Returns:
        True if the line evaluated successfully.
    """
    try:
        expr = parse(tokenize(line))
        if show_tree:
            print_tree(str(expr))
        result = evaluate(expr, state)
    except CscError as e:
        logger.debug(f"{e.kind} while evaluating {line!r}")
        print_error(e, line)
        return False
    print_result(result)
    return True


def run_repl(
    state: State | None = None,
    prompt: str = "> ",
    banner: bool = True,
    show_tree: bool = False,
) -> State:
    """Run the interactive loop until Ctrl-C or end of input.

    Returns:
        The session state, with every variable assigned during the session.
    """
    state = state if state is not None else State()

    if banner:
        print_banner(get_version())

    while True:
        try:
            line = console.input(prompt, markup=False)
        except KeyboardInterrupt:
            print_message("CTRL-C")
            break
        except EOFError:
            print_message("CTRL-D")
            break

        if not line.strip():
            continue
        evaluate_line(line, state, show_tree)

    return state

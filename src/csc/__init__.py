"""
CSC - a command-line scientific calculator.

Evaluates arithmetic expressions with variables, named constants,
assignment operators and a library of transcendental functions.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import CscError, EvalError, LexError, ParseError
from .core.expression_lang import State, eval_source

__version__ = get_version()

__all__ = [
    "__version__",
    "CscError",
    "EvalError",
    "LexError",
    "ParseError",
    "State",
    "eval_source",
]

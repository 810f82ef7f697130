"""
CSC expression language.

Tokenizer, parser and evaluator for arithmetic expressions with
variables, constants, assignment and a fixed function library.

Usage:
    from csc.core.expression_lang import State, eval_source

    state = State()
    eval_source("a = 2 + 3", state)  # 5.0
    eval_source("a * PI", state)     # 15.707963267948966
"""

from csc.core.expression_lang.evaluator import eval_source, evaluate
from csc.core.expression_lang.parser import parse, parse_expr, parse_tokens
from csc.core.expression_lang.state import State
from csc.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "State",
    "Token",
    "TokenKind",
    "eval_source",
    "evaluate",
    "parse",
    "parse_expr",
    "parse_tokens",
    "tokenize",
]

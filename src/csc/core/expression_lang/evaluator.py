"""
Expression evaluator for the CSC expression language.

Walks an expression tree depth-first against a State. Pure computation,
no I/O; the only side effect is writing variables on assignment. Side
effects are not rolled back when a later sub-expression fails.
"""

from __future__ import annotations

import logging

from csc.core.errors import InvalidFunctionCallError
from csc.core.expression_lang import floatmath as fm
from csc.core.expression_lang.functions import lookup
from csc.core.expression_lang.parser import parse
from csc.core.expression_lang.state import State
from csc.core.expression_lang.tokenizer import tokenize
from csc.core.ir.expressions import (
    Assignment,
    AssignOp,
    BinaryExpr,
    BinaryOp,
    Expr,
    FuncCall,
    Group,
    Identifier,
    Number,
    UnaryExpr,
    UnaryOp,
)

logger = logging.getLogger(__name__)

_BINARY = {
    BinaryOp.ADD: lambda a, b: a + b,
    BinaryOp.SUB: lambda a, b: a - b,
    BinaryOp.MUL: lambda a, b: a * b,
    BinaryOp.DIV: fm.div,
    BinaryOp.MOD: fm.fmod,
    BinaryOp.POW: fm.power,
}

_COMPOUND = {
    AssignOp.MUL: BinaryOp.MUL,
    AssignOp.DIV: BinaryOp.DIV,
    AssignOp.MOD: BinaryOp.MOD,
    AssignOp.ADD: BinaryOp.ADD,
    AssignOp.SUB: BinaryOp.SUB,
}


def eval_source(source: str, state: State) -> float:
    """Tokenize, parse and evaluate one line of input.

    Tokenizing and parsing finish before evaluation starts, so a lexical
    or syntax error never touches the state.

    Args:
        source: Expression text (e.g., "a = 2 + 3").
        state: State to read variables from and assign into.

    Returns:
        The value of the expression.

    Raises:
        InvalidTokenError: If tokenization fails.
        ParseError: If the tokens do not form one expression.
        EvalError: If evaluation fails.
    """
    tokens = tokenize(source)
    expr = parse(tokens)
    result = evaluate(expr, state)
    logger.debug(f"Evaluated {len(tokens)} tokens to {result!r}")
    return result


def evaluate(expr: Expr, state: State) -> float:
    """Evaluate an expression tree against a state.

    Raises:
        VariableNotFoundError: An identifier is unbound.
        InvalidFunctionCallError: Unknown function or wrong arity.
        CannotChangeConstantError: Assignment to a constant.
    """
    return _interpret(expr, state)


def _interpret(expr: Expr, state: State) -> float:
    """Evaluate a tree depth-first, left to right, with an explicit stack.

    Each node is visited twice: once on the way down (push its children,
    and do any work that must happen before them), once on the way up
    (combine the children's values). Trees of any depth evaluate without
    reaching the recursion limit.
    """
    values: list[float] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]

    while pending:
        node, expanded = pending.pop()
        if expanded:
            _finish(node, values, state)
            continue

        if isinstance(node, Number):
            values.append(node.value)

        elif isinstance(node, Identifier):
            values.append(state.lookup(node.name))

        elif isinstance(node, Group):
            pending.append((node.expr, False))

        elif isinstance(node, UnaryExpr):
            pending.append((node, True))
            pending.append((node.operand, False))

        elif isinstance(node, BinaryExpr):
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))

        elif isinstance(node, FuncCall):
            # Unknown calls fail before any argument is evaluated
            if lookup(node.name, len(node.args)) is None:
                raise InvalidFunctionCallError(str(node))
            pending.append((node, True))
            pending.extend((arg, False) for arg in reversed(node.args))

        elif isinstance(node, Assignment):
            if node.op != AssignOp.ASSIGN:
                # Compound forms read the target first; an unbound target is an error
                values.append(state.lookup(node.target))
            pending.append((node, True))
            pending.append((node.value, False))

        else:
            raise TypeError(f"Unknown expression type: {type(node).__name__}")

    return values[0]


def _finish(node: Expr, values: list[float], state: State) -> None:
    """Replace a node's operand values on the stack with its result."""
    if isinstance(node, UnaryExpr):
        if node.op == UnaryOp.NEG:
            values[-1] = -values[-1]

    elif isinstance(node, BinaryExpr):
        right = values.pop()
        left = values.pop()
        values.append(_BINARY[node.op](left, right))

    elif isinstance(node, FuncCall):
        fn = lookup(node.name, len(node.args))
        split = len(values) - len(node.args)
        args = values[split:]
        del values[split:]
        values.append(float(fn(*args)))

    elif isinstance(node, Assignment):
        value = values.pop()
        if node.op != AssignOp.ASSIGN:
            current = values.pop()
            value = _BINARY[_COMPOUND[node.op]](current, value)
        state.assign(node.target, value)
        values.append(value)

"""
Expression tree types for CSC.

Each precedence tier of the grammar contributes a node type:

- Assignment: a = b, a *= b, a /= b, a %= b, a += b, a -= b (right-assoc)
- Additive / multiplicative / exponential: BinaryExpr (^ is right-assoc)
- Unary: +x, -x
- Postfix: function calls, name(arg1, arg2, ...)
- Primary: identifiers, number literals, parenthesized groups

A tier that applies no operator hands its child up unchanged, so there
are no pass-through wrapper nodes. Nodes are frozen once built; ``str()``
renders the canonical, fully parenthesized form.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class AssignOp(StrEnum):
    """Assignment operators."""

    ASSIGN = "="
    MUL = "*="
    DIV = "/="
    MOD = "%="
    ADD = "+="
    SUB = "-="


class BinaryOp(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"


class UnaryOp(StrEnum):
    """Prefix operators."""

    POS = "+"
    NEG = "-"


def format_number(value: float) -> str:
    """Render a float in shortest positional decimal form.

    Integral values drop the fractional part (``5``), tiny and huge values
    never use exponent notation, and the non-finite values render as
    ``inf``, ``-inf`` and ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Number(BaseModel):
    """A decimal literal, parsed to a float at lex time."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class Identifier(BaseModel):
    """Reference to a constant or variable by name."""

    name: str = Field(description="Identifier text from the source")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class Group(BaseModel):
    """A parenthesized sub-expression: ( expr )."""

    expr: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class FuncCall(BaseModel):
    """
    Function call: name(arg1, arg2, ...).

    Dispatch happens at evaluation time on (name, number of arguments);
    the parser accepts any name and any argument count.
    """

    name: str = Field(description="Function name")
    args: list[Expr] = Field(default_factory=list, description="Arguments")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class Assignment(BaseModel):
    """
    Assignment to a named variable: target op value.

    The target is a bare name, not a sub-tree.
    """

    op: AssignOp
    target: str = Field(description="Variable name being assigned")
    value: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Number | Identifier | Group | UnaryExpr | BinaryExpr | FuncCall | Assignment

# Rebuild models for recursive forward references
Group.model_rebuild()
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
FuncCall.model_rebuild()
Assignment.model_rebuild()


# ---------------------------------------------------------------------------
# Canonical rendering
# ---------------------------------------------------------------------------


def _children(node: Expr) -> list[Expr]:
    if isinstance(node, Group):
        return [node.expr]
    if isinstance(node, UnaryExpr):
        return [node.operand]
    if isinstance(node, BinaryExpr):
        return [node.left, node.right]
    if isinstance(node, FuncCall):
        return list(node.args)
    if isinstance(node, Assignment):
        return [node.value]
    return []


def _renders_parenthesized(node: Expr) -> bool:
    """True if the node's rendering already starts with its own "(".

    Unary plus renders as its bare operand, so look through it.
    """
    while isinstance(node, UnaryExpr) and node.op == UnaryOp.POS:
        node = node.operand
    return isinstance(node, (BinaryExpr, Assignment, Group))


def _render_node(node: Expr, parts: list[str]) -> str:
    """Render one node from the already rendered text of its children."""
    if isinstance(node, Number):
        return format_number(node.value)
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, Group):
        if _renders_parenthesized(node.expr):
            return parts[0]
        return f"({parts[0]})"
    if isinstance(node, UnaryExpr):
        if node.op == UnaryOp.POS:
            return parts[0]
        # "--" would lex as a single decrement symbol
        if parts[0].startswith("-"):
            return f"- {parts[0]}"
        return f"-{parts[0]}"
    if isinstance(node, BinaryExpr):
        return f"({parts[0]} {node.op.value} {parts[1]})"
    if isinstance(node, FuncCall):
        return f"{node.name}({', '.join(parts)})"
    if isinstance(node, Assignment):
        return f"({node.target} {node.op.value} {parts[0]})"
    raise TypeError(f"Unknown expression type: {type(node).__name__}")


def render(expr: Expr) -> str:
    """Render an expression tree in canonical, fully parenthesized form.

    The tree is walked bottom-up with an explicit stack, so operator
    chains of any length render without reaching the recursion limit.

    Examples:
        a - b - c   → ((a - b) - c)
        a ^ b ^ c   → (a ^ (b ^ c))
        -(x)        → -(x)
    """
    rendered: list[str] = []
    pending: list[tuple[Expr, bool]] = [(expr, False)]

    while pending:
        node, expanded = pending.pop()
        children = _children(node)
        if expanded or not children:
            split = len(rendered) - len(children)
            parts = rendered[split:]
            del rendered[split:]
            rendered.append(_render_node(node, parts))
        else:
            pending.append((node, True))
            pending.extend((child, False) for child in reversed(children))

    return rendered[0]

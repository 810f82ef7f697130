"""Expression tree types."""

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
    format_number,
    render,
)

__all__ = [
    "Assignment",
    "AssignOp",
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "FuncCall",
    "Group",
    "Identifier",
    "Number",
    "UnaryExpr",
    "UnaryOp",
    "format_number",
    "render",
]

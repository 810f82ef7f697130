"""
Recursive descent parser for the CSC expression language.

Grammar (precedence low to high):
    assignment  → IDENT assign_op assignment | additive
    assign_op   → "=" | "*=" | "/=" | "%=" | "+=" | "-="
    additive    → multiply (("+"|"-") multiply)*
    multiply    → exponent (("*"|"/"|"%") exponent)*
    exponent    → unary ("^" exponent)?
    unary       → ("+"|"-") unary | primary
    primary     → IDENT "(" (assignment ("," assignment)*)? ")"
                | IDENT | NUMBER | "(" assignment ")"

The whole token sequence must form exactly one expression.

Each level of parentheses or call nesting costs six Python frames, so
nesting deeper than about a sixth of the interpreter recursion limit
(roughly 160 levels by default) is rejected as InvalidSyntaxError.
"""

from __future__ import annotations

import logging

from csc.core.errors import (
    ExpectedTokenError,
    IncompleteParseError,
    InvalidSyntaxError,
)
from csc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
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

_ASSIGN_OPS: dict[TokenKind, AssignOp] = {
    TokenKind.ASSIGN: AssignOp.ASSIGN,
    TokenKind.STAR_ASSIGN: AssignOp.MUL,
    TokenKind.SLASH_ASSIGN: AssignOp.DIV,
    TokenKind.PERCENT_ASSIGN: AssignOp.MOD,
    TokenKind.PLUS_ASSIGN: AssignOp.ADD,
    TokenKind.MINUS_ASSIGN: AssignOp.SUB,
}

_ADDITIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
}

_MULTIPLICATIVE_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
    TokenKind.PERCENT: BinaryOp.MOD,
}

_UNARY_OPS: dict[TokenKind, UnaryOp] = {
    TokenKind.PLUS: UnaryOp.POS,
    TokenKind.MINUS: UnaryOp.NEG,
}


class _Parser:
    """Recursive descent parser for expressions."""

    def __init__(self, tokens: list[Token], pos: int = 0) -> None:
        self.tokens = tokens
        self.pos = pos

    @property
    def current(self) -> Token | None:
        return self.peek()

    def peek(self, offset: int = 0) -> Token | None:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return None

    def at(self, kind: TokenKind, offset: int = 0) -> bool:
        tok = self.peek(offset)
        return tok is not None and tok.kind == kind

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def column(self) -> int:
        """Source index of the current token, or end of input."""
        tok = self.current
        if tok is not None:
            return tok.pos
        return self.tokens[-1].end if self.tokens else 0

    def expect(self, kind: TokenKind) -> Token:
        if not self.at(kind):
            raise ExpectedTokenError(kind.value, self.pos, self.column())
        return self.advance()

    def match(self, *kinds: TokenKind) -> Token | None:
        tok = self.current
        if tok is not None and tok.kind in kinds:
            return self.advance()
        return None

    # -- Grammar rules --

    def parse_expr(self) -> Expr:
        """Top-level: assignment."""
        return self.parse_assignment()

    def parse_assignment(self) -> Expr:
        """IDENT assign_op assignment | additive"""
        tok = self.current
        op_tok = self.peek(1)
        if (
            tok is not None
            and tok.kind == TokenKind.IDENT
            and op_tok is not None
            and op_tok.kind in _ASSIGN_OPS
        ):
            self.pos += 2
            value = self.parse_assignment()
            return Assignment(op=_ASSIGN_OPS[op_tok.kind], target=str(tok.value), value=value)
        return self.parse_additive()

    def parse_additive(self) -> Expr:
        """multiply (('+' | '-') multiply)*"""
        left = self.parse_multiply()
        while op_tok := self.match(*_ADDITIVE_OPS):
            right = self.parse_multiply()
            left = BinaryExpr(op=_ADDITIVE_OPS[op_tok.kind], left=left, right=right)
        return left

    def parse_multiply(self) -> Expr:
        """exponent (('*' | '/' | '%') exponent)*"""
        left = self.parse_exponent()
        while op_tok := self.match(*_MULTIPLICATIVE_OPS):
            right = self.parse_exponent()
            left = BinaryExpr(op=_MULTIPLICATIVE_OPS[op_tok.kind], left=left, right=right)
        return left

    def parse_exponent(self) -> Expr:
        """unary ('^' exponent)?"""
        base = self.parse_unary()
        if self.match(TokenKind.CARET):
            exponent = self.parse_exponent()
            return BinaryExpr(op=BinaryOp.POW, left=base, right=exponent)
        return base

    def parse_unary(self) -> Expr:
        """('+' | '-') unary | primary"""
        if op_tok := self.match(*_UNARY_OPS):
            operand = self.parse_unary()
            return UnaryExpr(op=_UNARY_OPS[op_tok.kind], operand=operand)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        """func_call | IDENT | NUMBER | '(' assignment ')'"""
        tok = self.current

        if self.at(TokenKind.IDENT) and self.at(TokenKind.LPAREN, 1):
            return self._parse_func_call()

        if tok is not None and tok.kind == TokenKind.LPAREN:
            self.advance()
            expr = self.parse_assignment()
            self.expect(TokenKind.RPAREN)
            return Group(expr=expr)

        if tok is not None and tok.kind == TokenKind.IDENT:
            self.advance()
            return Identifier(name=str(tok.value))

        if tok is not None and tok.kind == TokenKind.NUMBER:
            self.advance()
            return Number(value=float(tok.value))

        found = "end of input" if tok is None else repr(tok.value)
        raise InvalidSyntaxError(
            f"Expected identifier, number or '(' at token {self.pos}, got {found}",
            self.pos,
            self.column(),
        )

    def _parse_func_call(self) -> FuncCall:
        """IDENT '(' (assignment (',' assignment)*)? ')'"""
        name_tok = self.advance()
        self.advance()  # (

        args: list[Expr] = []
        if not self.at(TokenKind.RPAREN):
            args.append(self.parse_assignment())
            while self.match(TokenKind.COMMA):
                args.append(self.parse_assignment())

        self.expect(TokenKind.RPAREN)
        return FuncCall(name=str(name_tok.value), args=args)


def parse_tokens(tokens: list[Token], pos: int = 0) -> tuple[Expr, int]:
    """Parse one expression starting at a token offset.

    Trailing tokens are left alone; the caller decides whether they are
    an error.

    Returns:
        The expression tree and the offset just past its last token.
    """
    parser = _Parser(tokens, pos)
    try:
        expr = parser.parse_expr()
    except RecursionError:
        raise InvalidSyntaxError(
            "Expression is nested too deeply", parser.pos, parser.column()
        ) from None
    return expr, parser.pos


def parse(tokens: list[Token]) -> Expr:
    """Parse a complete token sequence into a single expression tree.

    Raises:
        InvalidSyntaxError: An unexpected construct.
        ExpectedTokenError: A required token is missing.
        IncompleteParseError: Tokens remain after the expression.
    """
    expr, pos = parse_tokens(tokens)
    if pos < len(tokens):
        raise IncompleteParseError(pos, tokens[pos].pos)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Parsed {len(tokens)} tokens: {expr}")
    return expr


def parse_expr(source: str) -> Expr:
    """Tokenize and parse an expression string.

    Args:
        source: Expression string (e.g., "a = 2 * PI")

    Returns:
        Parsed expression tree.

    Raises:
        InvalidTokenError: If tokenization fails.
        ParseError: If the tokens do not form one expression.
    """
    return parse(tokenize(source))

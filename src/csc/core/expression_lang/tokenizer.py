"""
Tokenizer for the CSC expression language.

Converts an expression string into a sequence of typed tokens. At each
position the recognizers are tried in priority order (identifier, number,
then punctuation) and the first match wins.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import StrEnum

from csc.core.errors import InvalidTokenError

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for the expression language.

    Punctuation members use their source text as value.
    """

    # Identifiers and literals
    IDENT = "ident"
    NUMBER = "number"

    # Brackets and separators
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    LPAREN = "("
    RPAREN = ")"
    ELLIPSIS = "..."
    DOT = "."
    COMMA = ","
    COLON = ":"
    SEMICOLON = ";"
    ARROW = "->"

    # Arithmetic and assignment
    INCREMENT = "++"
    PLUS_ASSIGN = "+="
    PLUS = "+"
    DECREMENT = "--"
    MINUS_ASSIGN = "-="
    MINUS = "-"
    STAR_ASSIGN = "*="
    STAR = "*"
    SLASH_ASSIGN = "/="
    SLASH = "/"
    PERCENT_ASSIGN = "%="
    PERCENT = "%"
    CARET_ASSIGN = "^="
    CARET = "^"

    # Comparison, logic and bitwise
    EQ = "=="
    NE = "!="
    ASSIGN = "="
    AND_AND = "&&"
    AMP_ASSIGN = "&="
    AMP = "&"
    PIPE_PIPE = "||"
    PIPE_ASSIGN = "|="
    PIPE = "|"
    BANG = "!"
    QUESTION = "?"
    TILDE = "~"
    SHL_ASSIGN = "<<="
    SHL = "<<"
    SHR_ASSIGN = ">>="
    SHR = ">>"
    LE = "<="
    GE = ">="
    LT = "<"
    GT = ">"


# Declaration order above is the match priority.
SYMBOLS: tuple[TokenKind, ...] = tuple(
    kind for kind in TokenKind if kind not in (TokenKind.IDENT, TokenKind.NUMBER)
)


class Token:
    """A single token from the expression tokenizer.

    ``value`` is the identifier or symbol text, or the parsed float for
    NUMBER tokens. ``pos``/``end`` are character indices into the source.
    """

    __slots__ = ("kind", "value", "pos", "end")

    def __init__(self, kind: TokenKind, value: str | float, pos: int, end: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos
        self.end = end

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.value, self.pos, self.end) == (
            other.kind,
            other.value,
            other.pos,
            other.end,
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.value, self.pos, self.end))

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, pos={self.pos})"


# Identifier: letter or underscore followed by alphanumerics/underscores
_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
# Number: first satisfied alternative wins
_NUMBER_RE = re.compile(r"[0-9]+\.[0-9]+|[0-9]+\.|\.[0-9]+|[0-9]+")

_WHITESPACE = " \n"


def _lex_ident(source: str, i: int) -> Token | None:
    m = _IDENT_RE.match(source, i)
    if m is None:
        return None
    return Token(TokenKind.IDENT, m.group(0), i, m.end())


def _lex_number(source: str, i: int) -> Token | None:
    m = _NUMBER_RE.match(source, i)
    if m is None:
        return None
    return Token(TokenKind.NUMBER, float(m.group(0)), i, m.end())


def _lex_symbol(source: str, i: int) -> Token | None:
    for kind in SYMBOLS:
        if source.startswith(kind.value, i):
            return Token(kind, kind.value, i, i + len(kind.value))
    return None


_RECOGNIZERS: tuple[Callable[[str, int], Token | None], ...] = (
    _lex_ident,
    _lex_number,
    _lex_symbol,
)


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    Spaces and newlines between tokens are skipped. Empty input yields an
    empty list.

    Raises:
        InvalidTokenError: No recognizer matches at some position.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while True:
        while i < n and source[i] in _WHITESPACE:
            i += 1
        if i >= n:
            break

        for recognize in _RECOGNIZERS:
            tok = recognize(source, i)
            if tok is not None:
                break
        else:
            # Tokens are ASCII, so the first bad character sits at byte offset i
            raise InvalidTokenError(i, source[i])

        tokens.append(tok)
        i = tok.end

    logger.debug(f"Tokenized {n} chars into {len(tokens)} tokens")
    return tokens

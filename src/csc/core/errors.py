"""
Error types for CSC tokenizing, parsing, and evaluation.

The core raises a closed set of errors, grouped by the stage that
detected them:

- Lexical:  InvalidTokenError
- Syntax:   InvalidSyntaxError, ExpectedTokenError, IncompleteParseError
- Semantic: VariableNotFoundError, InvalidFunctionCallError,
            CannotChangeConstantError
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class ErrorKind(StrEnum):
    """Tag identifying which member of the error taxonomy was raised."""

    INVALID_TOKEN = "invalid_token"
    SYNTAX = "syntax"
    EXPECTED_TOKEN = "expected_token"
    INCOMPLETE_PARSE = "incomplete_parse"
    VARIABLE_NOT_FOUND = "variable_not_found"
    INVALID_FUNCTION_CALL = "invalid_function_call"
    CANNOT_CHANGE_CONSTANT = "cannot_change_constant"
    CONFIG = "config"


class CscError(Exception):
    """Base exception for all CSC errors."""

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# ---------------------------------------------------------------------------
# Lexical errors
# ---------------------------------------------------------------------------


class LexError(CscError):
    """Raised when the source text cannot be split into tokens."""


class InvalidTokenError(LexError):
    """
    No token recognizer matched at a position.

    Attributes:
        pos: Offset of the offending character. Every token is ASCII, so
            the byte offset and the character index coincide.
        column: Same as pos; shared with ParseError for error display
    """

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, pos: int, char: str) -> None:
        self.pos = pos
        self.column = pos
        self.char = char
        super().__init__(f"Invalid token {char!r} at offset {pos}")


# ---------------------------------------------------------------------------
# Syntax errors
# ---------------------------------------------------------------------------


class ParseError(CscError):
    """
    Raised when a token sequence does not form exactly one expression.

    Attributes:
        pos: Token offset where parsing failed
        column: Character index in the source of that token (or the end
            of the last token when the failure is at end of input)
    """

    def __init__(self, message: str, pos: int, column: int | None = None) -> None:
        self.pos = pos
        self.column = column
        super().__init__(message)


class InvalidSyntaxError(ParseError):
    """An unexpected construct at a token offset."""

    kind = ErrorKind.SYNTAX


class ExpectedTokenError(ParseError):
    """A specific token (e.g. a closing parenthesis) was required but missing."""

    kind = ErrorKind.EXPECTED_TOKEN

    def __init__(self, expected: str, pos: int, column: int | None = None) -> None:
        self.expected = expected
        super().__init__(f"Expected {expected!r} at token {pos}", pos, column)


class IncompleteParseError(ParseError):
    """Tokens remain after a complete top-level expression."""

    kind = ErrorKind.INCOMPLETE_PARSE

    def __init__(self, pos: int, column: int | None = None) -> None:
        super().__init__(f"Unexpected input after expression at token {pos}", pos, column)


# ---------------------------------------------------------------------------
# Semantic errors
# ---------------------------------------------------------------------------


class EvalError(CscError):
    """Raised while walking an expression tree."""


class VariableNotFoundError(EvalError):
    """An identifier is neither a constant nor an assigned variable."""

    kind = ErrorKind.VARIABLE_NOT_FOUND

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Variable not found: {name}")


class InvalidFunctionCallError(EvalError):
    """Unknown function name, or a known name called with the wrong arity."""

    kind = ErrorKind.INVALID_FUNCTION_CALL

    def __init__(self, call: str) -> None:
        self.call = call
        super().__init__(f"Invalid function call: ({call})")


class CannotChangeConstantError(EvalError):
    """Assignment target is a reserved constant name."""

    kind = ErrorKind.CANNOT_CHANGE_CONSTANT

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cannot change constant: {name}")


class ConfigError(CscError):
    """Raised when csc.toml cannot be read or has invalid values."""

    kind = ErrorKind.CONFIG


@dataclass
class ErrorContext:
    """
    Source location for an error, with a snippet for display.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: The source line the error points into
    """

    line: int
    column: int
    snippet: str | None = None

    @classmethod
    def from_source(cls, source: str, index: int) -> ErrorContext:
        """Build a context from a character index into multi-line source."""
        index = max(0, min(index, len(source)))
        line_start = source.rfind("\n", 0, index) + 1
        line_end = source.find("\n", index)
        if line_end == -1:
            line_end = len(source)
        line = source.count("\n", 0, index) + 1
        return cls(line=line, column=index - line_start + 1, snippet=source[line_start:line_end])

    def format(self) -> str:
        """
        Format the location as a human-readable string.

        Returns:
            Formatted string like: "1:5" followed by the marked snippet
        """
        location = f"{self.line}:{self.column}"
        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet with its line number and an error marker."""
        prefix = f"{self.line:4d} | "
        marker_pos = len(prefix) + self.column - 1
        return f"{prefix}{self.snippet}\n{' ' * marker_pos}^^^"


def error_column(error: CscError) -> int | None:
    """Character index an error points at, if it carries one."""
    if isinstance(error, (InvalidTokenError, ParseError)):
        return error.column
    return None

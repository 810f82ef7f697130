"""
Built-in function table.

Functions are looked up by (name, number of arguments); a name is only
callable with the arity listed here. Trigonometric functions take radians.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from csc.core.expression_lang import floatmath as fm

MathFunc = Callable[..., float]


def _sec(x: float) -> float:
    return fm.recip(fm.cos(x))


def _csc(x: float) -> float:
    return fm.recip(fm.sin(x))


def _cot(x: float) -> float:
    return fm.recip(fm.tan(x))


def _asec(x: float) -> float:
    return fm.acos(fm.recip(x))


def _acsc(x: float) -> float:
    return fm.asin(fm.recip(x))


def _acot(x: float) -> float:
    return math.pi / 2 - fm.atan(x)


def _sech(x: float) -> float:
    return fm.recip(fm.cosh(x))


def _csch(x: float) -> float:
    return fm.recip(fm.sinh(x))


def _coth(x: float) -> float:
    return fm.recip(fm.tanh(x))


def _asech(x: float) -> float:
    # ln(1/x + sqrt(1/x^2 - 1))
    return fm.ln(fm.recip(x) + fm.sqrt(fm.power(x, -2.0) - 1.0))


def _acsch(x: float) -> float:
    # ln(1/x + sqrt(1/x^2 + 1))
    return fm.ln(fm.recip(x) + fm.sqrt(fm.power(x, -2.0) + 1.0))


def _acoth(x: float) -> float:
    # 0.5 * ln(1 + 2/(x - 1))
    return 0.5 * fm.log1p(fm.div(2.0, x - 1.0))


_UNARY: dict[str, MathFunc] = {
    # Exponents, roots, rounding
    "exp": fm.exp,
    "sqrt": fm.sqrt,
    "cbrt": fm.cbrt,
    "abs": abs,
    "floor": fm.floor,
    "ceil": fm.ceil,
    "round": fm.round_half_away,
    # Logarithms
    "ln": fm.ln,
    "log2": fm.log2,
    "log10": fm.log10,
    # Circular
    "sin": fm.sin,
    "cos": fm.cos,
    "tan": fm.tan,
    "asin": fm.asin,
    "acos": fm.acos,
    "atan": fm.atan,
    "sec": _sec,
    "csc": _csc,
    "cot": _cot,
    "asec": _asec,
    "acsc": _acsc,
    "acot": _acot,
    # Hyperbolic
    "sinh": fm.sinh,
    "cosh": fm.cosh,
    "tanh": fm.tanh,
    "asinh": fm.asinh,
    "acosh": fm.acosh,
    "atanh": fm.atanh,
    "sech": _sech,
    "csch": _csch,
    "coth": _coth,
    "asech": _asech,
    "acsch": _acsch,
    "acoth": _acoth,
}

BUILTINS: dict[tuple[str, int], MathFunc] = {(name, 1): fn for name, fn in _UNARY.items()}
BUILTINS[("log", 2)] = fm.log


def lookup(name: str, arity: int) -> MathFunc | None:
    """Return the function registered for (name, arity), if any."""
    return BUILTINS.get((name, arity))

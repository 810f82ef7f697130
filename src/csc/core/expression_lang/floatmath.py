"""
IEEE 754 double-precision helpers.

Python's float operators and ``math`` functions raise on division by
zero, domain errors and overflow. The evaluator needs the IEEE results
instead (``inf``, ``-inf``, ``NaN``), so every operation it performs goes
through this module.
"""

from __future__ import annotations

import math

INF = math.inf
NAN = math.nan


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def div(a: float, b: float) -> float:
    """a / b, with x/0 giving ±inf and 0/0 giving NaN."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return NAN
        return math.copysign(INF, a) * math.copysign(1.0, b)
    return a / b


def fmod(a: float, b: float) -> float:
    """C fmod: remainder with the sign of the dividend, NaN for a zero divisor."""
    try:
        return math.fmod(a, b)
    except ValueError:
        return NAN


def power(base: float, exponent: float) -> float:
    """C pow: never raises, never returns a complex number."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -INF
        return INF
    except ValueError:
        if base == 0 and exponent < 0:
            # pow(±0, negative odd integer) keeps the sign of zero
            if _is_odd_integer(exponent):
                return math.copysign(INF, base)
            return INF
        return NAN


def recip(x: float) -> float:
    return div(1.0, x)


def exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return INF


def sqrt(x: float) -> float:
    if x < 0:
        return NAN
    return math.sqrt(x)


def cbrt(x: float) -> float:
    return math.cbrt(x)


def _integral(fn, x: float) -> float:
    # floor/ceil return ints in Python and reject inf/NaN
    if not math.isfinite(x):
        return x
    return math.copysign(float(fn(x)), x)


def floor(x: float) -> float:
    return _integral(math.floor, x)


def ceil(x: float) -> float:
    return _integral(math.ceil, x)


def round_half_away(x: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    if not math.isfinite(x):
        return x
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), x)


def _log_with(fn, x: float) -> float:
    if math.isnan(x):
        return x
    if x == 0:
        return -INF
    if x < 0:
        return NAN
    return fn(x)


def ln(x: float) -> float:
    return _log_with(math.log, x)


def log2(x: float) -> float:
    return _log_with(math.log2, x)


def log10(x: float) -> float:
    return _log_with(math.log10, x)


def log(x: float, base: float) -> float:
    """Logarithm of x in an arbitrary base, as ln(x) / ln(base)."""
    return div(ln(x), ln(base))


def log1p(x: float) -> float:
    if x == -1:
        return -INF
    if x < -1:
        return NAN
    return math.log1p(x)


def _domain(fn, x: float) -> float:
    # Out-of-domain input (e.g. asin(2), sin(inf)) is NaN
    try:
        return fn(x)
    except ValueError:
        return NAN


def sin(x: float) -> float:
    return _domain(math.sin, x)


def cos(x: float) -> float:
    return _domain(math.cos, x)


def tan(x: float) -> float:
    return _domain(math.tan, x)


def asin(x: float) -> float:
    return _domain(math.asin, x)


def acos(x: float) -> float:
    return _domain(math.acos, x)


def atan(x: float) -> float:
    return math.atan(x)


def sinh(x: float) -> float:
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(INF, x)


def cosh(x: float) -> float:
    try:
        return math.cosh(x)
    except OverflowError:
        return INF


def tanh(x: float) -> float:
    return math.tanh(x)


def asinh(x: float) -> float:
    return math.asinh(x)


def acosh(x: float) -> float:
    return _domain(math.acosh, x)


def atanh(x: float) -> float:
    if x == 1 or x == -1:
        return math.copysign(INF, x)
    return _domain(math.atanh, x)

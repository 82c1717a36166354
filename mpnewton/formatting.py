"""Exact decimal rendering of multiple-precision numbers in printf style."""

from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction
from numbers import Rational

import mpmath

__all__ = ["format_fixed", "format_scientific"]


def _special(value) -> str | None:
    """Return the text for an infinity or NaN, or None for a finite value."""
    if isinstance(value, (float, mpmath.mpf)):
        if math.isnan(value) if isinstance(value, float) else mpmath.isnan(value):
            return "nan"
        if math.isinf(value) if isinstance(value, float) else mpmath.isinf(value):
            return "-inf" if value < 0 else "inf"
    return None


def _exact(value) -> tuple[Fraction, bool]:
    """Return the exact magnitude of a finite value and whether it is negative."""
    if isinstance(value, mpmath.mpf):
        exact = Fraction(int(value.man)) * Fraction(2) ** int(value.exp)
        return abs(exact), exact < 0
    if isinstance(value, float):
        return abs(Fraction(value)), math.copysign(1.0, value) < 0
    if isinstance(value, (int, Rational, Decimal)):
        exact = Fraction(value)
        return abs(exact), exact < 0
    return _exact(mpmath.mpf(value))


def _check_digits(digits: int) -> None:
    if digits < 0:
        raise ValueError(f"digits must not be negative, got {digits}")


def format_fixed(value, digits: int) -> str:
    """Render ``value`` with ``digits`` decimals, rounding the exact value to nearest."""
    _check_digits(digits)
    special = _special(value)
    if special is not None:
        return special
    magnitude, negative = _exact(value)
    scaled = round(magnitude * 10**digits)
    text = str(scaled).rjust(digits + 1, "0")
    if digits:
        text = f"{text[:-digits]}.{text[-digits:]}"
    return f"-{text}" if negative else text


def format_scientific(value, digits: int) -> str:
    """Render ``value`` as ``d.ddde+XX`` with ``digits`` digits after the point."""
    _check_digits(digits)
    special = _special(value)
    if special is not None:
        return special
    magnitude, negative = _exact(value)
    exponent = 0
    mantissa = 0
    if magnitude:
        exponent = len(str(magnitude.numerator)) - len(str(magnitude.denominator))
        while magnitude >= Fraction(10) ** (exponent + 1):
            exponent += 1
        while magnitude < Fraction(10) ** exponent:
            exponent -= 1
        mantissa = round(magnitude / Fraction(10) ** exponent * 10**digits)
        if mantissa >= 10 ** (digits + 1):
            mantissa = 10**digits
            exponent += 1
    text = str(mantissa).rjust(digits + 1, "0")
    if digits:
        text = f"{text[0]}.{text[1:]}"
    sign = "-" if exponent < 0 else "+"
    text = f"{text}e{sign}{abs(exponent):02d}"
    return f"-{text}" if negative else text
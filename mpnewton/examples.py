"""Tour of multiple-precision arithmetic: precision, rounding, special values, timing."""

from __future__ import annotations

import argparse
import sys
import time
from enum import Enum
from typing import TextIO

import mpmath
from mpmath.libmp import mpf_div

from .formatting import format_fixed

__all__ = [
    "Rounding",
    "divide",
    "basic_operations",
    "mathematical_functions",
    "precision_comparison",
    "rounding_modes",
    "special_values",
    "performance_timing",
    "main",
]

TITLE = "Multiple-Precision Floating-Point Examples"
DEFAULT_ITERATIONS = 10000


class Rounding(Enum):
    """Directed rounding modes for a correctly rounded operation."""

    NEAREST = "n"
    TOWARD_ZERO = "d"
    UP = "c"
    DOWN = "f"

    @property
    def label(self) -> str:
        """Short description used in printed output."""
        return _LABELS[self]


_LABELS = {
    Rounding.NEAREST: "RNDN (nearest)",
    Rounding.TOWARD_ZERO: "RNDZ (toward 0)",
    Rounding.UP: "RNDU (toward +∞)",
    Rounding.DOWN: "RNDD (toward -∞)",
}


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def divide(a, b, prec=64, rounding=Rounding.NEAREST):
    """Return a / b correctly rounded to ``prec`` bits in the given direction.

    The operands are first rounded to nearest at ``prec`` bits.
    Raises ZeroDivisionError when ``b`` is zero.
    """
    if prec < 1:
        raise ValueError(f"precision must be positive, got {prec}")
    rounding = Rounding(rounding)
    with mpmath.workprec(prec):
        numerator = mpmath.mpf(a)
        denominator = mpmath.mpf(b)
        if denominator == 0:
            raise ZeroDivisionError("division by zero")
        raw = mpf_div(numerator._mpf_, denominator._mpf_, prec, rounding.value)
        return mpmath.mpf(raw)


def basic_operations(out: TextIO | None = None) -> dict:
    """Add, multiply, divide and raise to a power at 256-bit precision."""
    stream = _stream(out)
    print("=== Basic Operations ===", file=stream)
    with mpmath.workprec(256):
        a = mpmath.mpf("1.23456789012345678901234567890")
        b = mpmath.mpf("9.87654321098765432109876543210")
        results = {
            "a": a,
            "b": b,
            "sum": a + b,
            "product": a * b,
            "quotient": a / b,
            "power": a**10,
        }
    lines = [
        ("a", "a"),
        ("b", "b"),
        ("a + b", "sum"),
        ("a * b", "product"),
        ("a / b", "quotient"),
        ("a^10", "power"),
    ]
    for label, key in lines:
        print(f"{label} = {format_fixed(results[key], 30)}", file=stream)
    print(file=stream)
    return results


def _real_sqrt(x):
    """Square root on the reals: NaN for negative arguments."""
    if mpmath.isnan(x) or x < 0:
        return mpmath.mpf("nan")
    return mpmath.sqrt(x)


def _real_log(x):
    """Natural logarithm on the reals: -inf at zero, NaN for negative arguments."""
    if mpmath.isnan(x) or x < 0:
        return mpmath.mpf("nan")
    if x == 0:
        return mpmath.mpf("-inf")
    return mpmath.log(x)


def mathematical_functions(out: TextIO | None = None) -> dict:
    """Evaluate elementary functions at x = 0.5 with 128-bit precision."""
    stream = _stream(out)
    print("=== Mathematical Functions ===", file=stream)
    with mpmath.workprec(128):
        x = mpmath.mpf(0.5)
        results = {
            "x": x,
            "sin": mpmath.sin(x),
            "cos": mpmath.cos(x),
            "tan": mpmath.tan(x),
            "exp": mpmath.exp(x),
            "log": _real_log(x),
            "sqrt": _real_sqrt(x),
        }
    print(f"x = {format_fixed(x, 25)}", file=stream)
    for name in ("sin", "cos", "tan", "exp", "log", "sqrt"):
        print(f"{name}(x) = {format_fixed(results[name], 25)}", file=stream)
    print(file=stream)
    return results


def precision_comparison(out: TextIO | None = None) -> dict:
    """Compute pi at 64 and 512 bits of precision."""
    stream = _stream(out)
    print("=== Precision Comparison ===", file=stream)
    results = {}
    for bits in (64, 512):
        with mpmath.workprec(bits):
            results[bits] = +mpmath.pi
    print(f"Pi with 64-bit precision:  {format_fixed(results[64], 20)}", file=stream)
    print(f"Pi with 512-bit precision: {format_fixed(results[512], 50)}", file=stream)
    print(file=stream)
    return results


def rounding_modes(out: TextIO | None = None) -> dict:
    """Compute 1/3 at 64 bits under every rounding mode."""
    stream = _stream(out)
    print("=== Rounding Modes ===", file=stream)
    print("Computing 1/3 with different rounding modes:", file=stream)
    results = {}
    for mode in Rounding:
        results[mode] = divide("1.0", "3.0", 64, mode)
        print(f"{mode.label}: {format_fixed(results[mode], 20)}", file=stream)
    print(file=stream)
    return results


def special_values(out: TextIO | None = None) -> dict:
    """Show infinities, NaN, signed zeros and operations that produce them."""
    stream = _stream(out)
    print("=== Special Values ===", file=stream)
    with mpmath.workprec(64):
        results = {
            "+infinity": mpmath.mpf("inf"),
            "-infinity": mpmath.mpf("-inf"),
            "NaN": mpmath.mpf("nan"),
            "+0": 0.0,
            "-0": -0.0,
            "log(0)": _real_log(mpmath.mpf(0)),
            "sqrt(-1)": _real_sqrt(mpmath.mpf(-1)),
        }
    for name in ("+infinity", "-infinity", "NaN", "+0", "-0"):
        print(f"x = {name}: {format_fixed(results[name], 10)}", file=stream)
    for name in ("log(0)", "sqrt(-1)"):
        print(f"{name} = {format_fixed(results[name], 10)}", file=stream)
    print(file=stream)
    return results


def performance_timing(iterations=DEFAULT_ITERATIONS, out: TextIO | None = None) -> dict:
    """Time repeated 256-bit multiplication, division and square root in CPU seconds."""
    if iterations < 0:
        raise ValueError(f"iterations must not be negative, got {iterations}")
    stream = _stream(out)
    print("=== Performance Timing ===", file=stream)
    timings = {}
    with mpmath.workprec(256):
        a = mpmath.mpf("1.23456789")
        b = mpmath.mpf("9.87654321")
        operations = (
            ("multiplications", lambda: a * b),
            ("divisions", lambda: a / b),
            ("square roots", lambda: mpmath.sqrt(a)),
        )
        for name, operation in operations:
            start = time.process_time()
            for _ in range(iterations):
                operation()
            timings[name] = time.process_time() - start
    for name, seconds in timings.items():
        print(f"Time for {iterations} {name}: {seconds:.6f} seconds", file=stream)
    print(file=stream)
    return timings


def main(argv=None) -> int:
    """Run every example in turn and print the results."""
    parser = argparse.ArgumentParser(description="Demonstrate multiple-precision arithmetic.")
    parser.add_argument(
        "--iterations",
        type=int,
        default=DEFAULT_ITERATIONS,
        help="number of repetitions for the timing example",
    )
    args = parser.parse_args(argv)

    out = sys.stdout
    print(TITLE, file=out)
    print("=" * len(TITLE), file=out)
    print(file=out)
    basic_operations(out)
    mathematical_functions(out)
    precision_comparison(out)
    rounding_modes(out)
    special_values(out)
    performance_timing(args.iterations, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
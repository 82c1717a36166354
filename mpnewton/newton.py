"""Newton's method for the single equation x^3 - 2x - 5 = 0."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TextIO

import mpmath

from .formatting import format_fixed, format_scientific

__all__ = ["ConvergenceError", "NewtonResult", "f", "df", "newton_single", "main"]

PRECISION = 128
MAX_ITER = 100
DEFAULT_GUESS = 2
DEFAULT_TOLERANCE = "1e-30"


class ConvergenceError(ArithmeticError):
    """Raised when an iteration cannot reach the requested tolerance."""


@dataclass(frozen=True)
class NewtonResult:
    """Root found by Newton's method, with the step count and f at the root."""

    root: mpmath.mpf
    iterations: int
    residual: mpmath.mpf


def f(x):
    """Evaluate f(x) = x^3 - 2x - 5."""
    return x * x * x - 2 * x - 5


def df(x):
    """Evaluate the derivative f'(x) = 3x^2 - 2."""
    return 3 * (x * x) - 2


def newton_single(initial_guess, tolerance, max_iter=MAX_ITER, out: TextIO | None = None):
    """Find a root of f near ``initial_guess`` at 128-bit precision.

    Each iteration is written as a table row to ``out`` when it is given.
    Raises ConvergenceError on a zero derivative or after ``max_iter`` steps.
    """

    def write(text: str) -> None:
        if out is not None:
            out.write(text)

    with mpmath.workprec(PRECISION):
        x = mpmath.mpf(initial_guess)
        tol = mpmath.mpf(tolerance)
        write("Newton Method Iterations:\n")
        write("Iter\tx_n\t\t\tf(x_n)\n")
        for iteration in range(max_iter):
            fx = f(x)
            write(f"{iteration}\t{format_fixed(x, 15)}\t{format_fixed(fx, 15)}\n")
            if abs(fx) < tol:
                write(f"\nConverged after {iteration} iterations!\n")
                return NewtonResult(root=x, iterations=iteration, residual=fx)
            dfx = df(x)
            if dfx == 0:
                raise ConvergenceError("Derivative is zero! Cannot continue.")
            x = x - fx / dfx
    raise ConvergenceError(f"Failed to converge after {max_iter} iterations.")


def main(argv=None) -> int:
    """Solve x^3 - 2x - 5 = 0 from x = 2 and report the root."""
    parser = argparse.ArgumentParser(
        description="Solve x^3 - 2*x - 5 = 0 with Newton's method at 128-bit precision."
    )
    parser.parse_args(argv)

    out = sys.stdout
    with mpmath.workprec(PRECISION):
        guess = mpmath.mpf(DEFAULT_GUESS)
        tolerance = mpmath.mpf(DEFAULT_TOLERANCE)
    out.write("Solving f(x) = x^3 - 2*x - 5 = 0\n")
    out.write(f"Initial guess: {format_fixed(guess, 15)}\n")
    out.write(f"Tolerance: {format_scientific(tolerance, 2)}\n\n")

    try:
        result = newton_single(guess, tolerance, MAX_ITER, out)
    except ConvergenceError as exc:
        out.write(f"{exc}\n")
        return 0

    out.write(f"\nRoot found: {format_fixed(result.root, 30)}\n")
    with mpmath.workprec(PRECISION):
        verification = f(result.root)
    out.write(f"Verification f(root) = {format_scientific(verification, 2)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
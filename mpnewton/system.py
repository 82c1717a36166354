"""Newton's method for the system x^2 + y^2 - 4 = 0, x^2 - y - 1 = 0."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TextIO

import mpmath

from .formatting import format_fixed, format_scientific
from .newton import ConvergenceError

__all__ = [
    "SingularJacobianError",
    "SystemResult",
    "system_f",
    "jacobian",
    "solve_linear_system_2x2",
    "newton_system",
    "main",
]

PRECISION = 128
MAX_ITER = 100
DEFAULT_GUESS = (1.5, 1.5)
DEFAULT_TOLERANCE = "1e-25"


class SingularJacobianError(ArithmeticError):
    """Raised when the Jacobian has a zero determinant."""


@dataclass(frozen=True)
class SystemResult:
    """Solution (x, y) of the system, with the step count and residual norm."""

    solution: tuple
    iterations: int
    norm: mpmath.mpf


def system_f(x):
    """Evaluate (x^2 + y^2 - 4, x^2 - y - 1) at the point ``x``."""
    px, py = x
    x2 = px * px
    y2 = py * py
    return (x2 + y2 - 4, x2 - py - 1)


def jacobian(x):
    """Return the Jacobian ((2x, 2y), (2x, -1)) at the point ``x``."""
    px, py = x
    return ((px * 2, py * 2), (px * 2, mpmath.mpf(-1)))


def solve_linear_system_2x2(j, f):
    """Solve J * delta = -f by Cramer's rule and return delta."""
    (j00, j01), (j10, j11) = ((mpmath.mpf(a), mpmath.mpf(b)) for a, b in j)
    f0, f1 = (mpmath.mpf(v) for v in f)
    det = j00 * j11 - j01 * j10
    if det == 0:
        raise SingularJacobianError("Singular Jacobian matrix!")
    neg_f0 = -f0
    neg_f1 = -f1
    delta0 = (neg_f0 * j11 - neg_f1 * j01) / det
    delta1 = (j00 * neg_f1 - j10 * neg_f0) / det
    return (delta0, delta1)


def newton_system(initial_guess, tolerance, max_iter=MAX_ITER, out: TextIO | None = None):
    """Solve the system from ``initial_guess`` at 128-bit precision.

    Each iteration is written as a table row to ``out`` when it is given.
    Raises SingularJacobianError or ConvergenceError when no solution is reached.
    """

    def write(text: str) -> None:
        if out is not None:
            out.write(text)

    with mpmath.workprec(PRECISION):
        point = tuple(mpmath.mpf(v) for v in initial_guess)
        tol = mpmath.mpf(tolerance)
        write("Newton Method for System of Equations:\n")
        write("Iter\tx\t\ty\t\tf1(x,y)\t\tf2(x,y)\t\tnorm\n")
        for iteration in range(max_iter):
            values = system_f(point)
            norm = mpmath.sqrt(sum((v * v for v in values), mpmath.mpf(0)))
            write(
                f"{iteration}\t{format_fixed(point[0], 10)}\t{format_fixed(point[1], 10)}"
                f"\t{format_scientific(values[0], 2)}\t{format_scientific(values[1], 2)}"
                f"\t{format_scientific(norm, 2)}\n"
            )
            if norm < tol:
                write(f"\nConverged after {iteration} iterations!\n")
                return SystemResult(solution=point, iterations=iteration, norm=norm)
            delta = solve_linear_system_2x2(jacobian(point), values)
            point = tuple(p + d for p, d in zip(point, delta))
    raise ConvergenceError(f"Failed to converge after {max_iter} iterations.")


def main(argv=None) -> int:
    """Solve the two-equation system from (1.5, 1.5) and report the solution."""
    parser = argparse.ArgumentParser(
        description="Solve a 2x2 nonlinear system with Newton's method at 128-bit precision."
    )
    parser.parse_args(argv)

    out = sys.stdout
    with mpmath.workprec(PRECISION):
        guess = tuple(mpmath.mpf(v) for v in DEFAULT_GUESS)
        tolerance = mpmath.mpf(DEFAULT_TOLERANCE)
    out.write("Solving system:\n")
    out.write("f1(x,y) = x^2 + y^2 - 4 = 0\n")
    out.write("f2(x,y) = x^2 - y - 1 = 0\n\n")
    out.write(f"Initial guess: ({format_fixed(guess[0], 10)}, {format_fixed(guess[1], 10)})\n")
    out.write(f"Tolerance: {format_scientific(tolerance, 2)}\n\n")

    try:
        result = newton_system(guess, tolerance, MAX_ITER, out)
    except SingularJacobianError as exc:
        out.write(f"{exc}\nFailed to solve linear system!\n")
        return 0
    except ConvergenceError as exc:
        out.write(f"{exc}\n")
        return 0

    x, y = result.solution
    out.write("\nSolution found:\n")
    out.write(f"x = {format_fixed(x, 25)}\n")
    out.write(f"y = {format_fixed(y, 25)}\n")
    with mpmath.workprec(PRECISION):
        f1, f2 = system_f(result.solution)
    out.write("\nVerification:\n")
    out.write(f"f1(x,y) = {format_scientific(f1, 2)}\n")
    out.write(f"f2(x,y) = {format_scientific(f2, 2)}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
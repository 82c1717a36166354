# mpnewton

Newton's method in arbitrary-precision floating point, built on mpmath.

## Commands

- `mpnewton-single` solves `f(x) = x^3 - 2x - 5 = 0` from the initial guess 2
  at 128-bit precision with tolerance `1e-30`. It prints every iteration, then
  the root to 30 decimals and the residual `f(root)`.
- `mpnewton-system` solves the system

      x^2 + y^2 - 4 = 0
      x^2 - y - 1   = 0

  from the initial guess `(1.5, 1.5)` at 128-bit precision with tolerance
  `1e-25`. Each Newton step solves the 2x2 Jacobian system by Cramer's rule.
  It prints every iteration, the solution to 25 decimals and both residuals.
- `mpnewton-examples` shows multiple-precision arithmetic: basic operations at
  256 bits, elementary functions at `x = 0.5`, pi at 64 and 512 bits, `1/3`
  under four directed rounding modes, special values (infinities, NaN, signed
  zeros, `log(0)`, `sqrt(-1)`) and CPU timing of multiplication, division and
  square root. `--iterations N` sets how many repetitions the timing uses
  (default 10000).

The first two commands take no options besides `--help`; the equations, initial
guesses and tolerances are fixed.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Using the library

    from mpnewton.newton import newton_single, ConvergenceError
    from mpnewton.system import newton_system, SingularJacobianError

    result = newton_single(2, "1e-30")
    print(result.root, result.iterations, result.residual)

    solution = newton_system((1.5, 1.5), "1e-25")
    x, y = solution.solution
    print(x, y, solution.iterations, solution.norm)

Both functions accept `max_iter` (default 100) and `out`, a text stream that
receives the iteration table; with no `out` nothing is written.

`newton_single` raises `ConvergenceError` when the derivative is zero or the
iteration does not converge within `max_iter` steps. `newton_system` raises
`SingularJacobianError` when the Jacobian has a zero determinant and
`ConvergenceError` when it does not converge within `max_iter` steps.

The building blocks are public too: `f` and `df` in `mpnewton.newton`;
`system_f`, `jacobian` and `solve_linear_system_2x2` in `mpnewton.system`.

`mpnewton.examples.divide(a, b, prec, rounding)` returns `a / b` correctly
rounded to `prec` bits in the direction given by a `Rounding` member
(`NEAREST`, `TOWARD_ZERO`, `UP`, `DOWN`). Each example function in that module
prints to `out` (standard output by default) and returns its results as a dict.

`mpnewton.formatting` provides `format_fixed(value, digits)` and
`format_scientific(value, digits)`, which render the exact value of a number
rounded to the requested number of decimals, e.g. `1.23e-30`, and give `inf`,
`-inf` or `nan` for special values.
import io

import mpmath
import pytest

from mpnewton.newton import ConvergenceError
from mpnewton.system import (
    SingularJacobianError,
    SystemResult,
    jacobian,
    main,
    newton_system,
    solve_linear_system_2x2,
    system_f,
)


def test_system_f_at_initial_guess():
    assert system_f((mpmath.mpf(1.5), mpmath.mpf(1.5))) == (0.5, -0.25)


def test_jacobian_entries():
    j = jacobian((mpmath.mpf(3), mpmath.mpf(5)))
    assert j == ((6, 10), (6, -1))


def test_linear_solution_satisfies_system():
    with mpmath.workprec(128):
        j = jacobian((mpmath.mpf(1.5), mpmath.mpf(1.5)))
        f = system_f((mpmath.mpf(1.5), mpmath.mpf(1.5)))
        d0, d1 = solve_linear_system_2x2(j, f)
        for row, fv in zip(j, f):
            assert abs(row[0] * d0 + row[1] * d1 + fv) < mpmath.mpf("1e-35")


def test_singular_matrix_raises():
    with pytest.raises(SingularJacobianError, match="Singular Jacobian matrix!"):
        solve_linear_system_2x2(((1, 2), (2, 4)), (1, 1))


def test_converges_to_solution():
    result = newton_system((1.5, 1.5), "1e-25")
    assert isinstance(result, SystemResult)
    with mpmath.workprec(128):
        f1, f2 = system_f(result.solution)
        assert mpmath.sqrt(f1 * f1 + f2 * f2) < mpmath.mpf("1e-25")
        assert result.norm < mpmath.mpf("1e-25")
    x, y = result.solution
    assert x > 0 and y > 0


def test_solution_agrees_with_independent_solver():
    result = newton_system((1.5, 1.5), "1e-25")
    with mpmath.workprec(128):
        reference = mpmath.findroot(
            [lambda x, y: x**2 + y**2 - 4, lambda x, y: x**2 - y - 1],
            (mpmath.mpf(1.5), mpmath.mpf(1.5)),
        )
        assert abs(result.solution[0] - reference[0]) < mpmath.mpf("1e-20")
        assert abs(result.solution[1] - reference[1]) < mpmath.mpf("1e-20")


def test_iteration_table_written():
    out = io.StringIO()
    result = newton_system((1.5, 1.5), "1e-25", 100, out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Newton Method for System of Equations:"
    assert lines[2].startswith("0\t1.5000000000\t1.5000000000\t")
    assert lines[-1] == f"Converged after {result.iterations} iterations!"


def test_zero_x_gives_singular_jacobian():
    with pytest.raises(SingularJacobianError):
        newton_system((0, 1), "1e-25")


def test_too_few_iterations_raises():
    with pytest.raises(ConvergenceError, match="Failed to converge after 2 iterations"):
        newton_system((1.5, 1.5), "1e-25", 2)


def test_main_reports_solution(capsys):
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Initial guess: (1.5000000000, 1.5000000000)" in captured
    assert "Tolerance: 1.00e-25" in captured
    assert "Solution found:" in captured
    assert "Verification:" in captured
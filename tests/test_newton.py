import io

import mpmath
import pytest

from mpnewton.newton import ConvergenceError, NewtonResult, df, f, main, newton_single


def test_f_and_df_at_integer_points():
    assert f(2) == -1
    assert df(2) == 10
    assert f(0) == -5


def test_converges_below_tolerance():
    result = newton_single(2, "1e-30")
    assert isinstance(result, NewtonResult)
    with mpmath.workprec(128):
        assert abs(f(result.root)) < mpmath.mpf("1e-30")
        assert result.residual == f(result.root)
    assert result.iterations > 0


def test_root_agrees_with_independent_solver():
    result = newton_single(2, "1e-30")
    with mpmath.workprec(128):
        reference = mpmath.findroot(lambda x: x**3 - 2 * x - 5, mpmath.mpf(2))
        assert abs(result.root - reference) < mpmath.mpf("1e-25")


def test_iteration_table_written():
    out = io.StringIO()
    result = newton_single(2, "1e-30", 100, out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "Newton Method Iterations:"
    assert lines[1] == "Iter\tx_n\t\t\tf(x_n)"
    assert lines[2].startswith("0\t2.000000000000000\t")
    rows = [line for line in lines[2:] if line and line[0].isdigit()]
    assert len(rows) == result.iterations + 1
    assert lines[-1] == f"Converged after {result.iterations} iterations!"


def test_too_few_iterations_raises():
    with pytest.raises(ConvergenceError, match="Failed to converge after 1 iterations"):
        newton_single(2, "1e-30", 1)


def test_zero_iterations_raises():
    with pytest.raises(ConvergenceError):
        newton_single(2, "1e-30", 0)


def test_immediate_convergence_with_loose_tolerance():
    result = newton_single(2, 10)
    assert result.iterations == 0
    assert result.root == 2


def test_main_reports_root(capsys):
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith("Solving f(x) = x^3 - 2*x - 5 = 0\n")
    assert "Tolerance: 1.00e-30" in captured
    assert "Root found: " in captured
    assert "Verification f(root) = " in captured
import io

import pytest

from numlab.newton import Quadratic, jacobian, main, newton_method, solve_2x2

CIRCLE = Quadratic(1.0, 1.0, 0.0, 0.0, 0.0, -4.0)
DIAGONAL = Quadratic(0.0, 0.0, 0.0, 1.0, -1.0, 0.0)
GENERAL = Quadratic(1.5, -2.0, 0.5, 3.0, -1.0, 2.0)


def test_value_at_origin_is_constant_term():
    assert GENERAL.value(0.0, 0.0) == GENERAL.f


@pytest.mark.parametrize("x, y", [(0.3, -1.2), (2.0, 0.5), (-1.0, -1.0)])
def test_derivatives_match_finite_differences(x, y):
    h = 1e-6
    num_dx = (GENERAL.value(x + h, y) - GENERAL.value(x - h, y)) / (2 * h)
    num_dy = (GENERAL.value(x, y + h) - GENERAL.value(x, y - h)) / (2 * h)
    assert GENERAL.dx(x, y) == pytest.approx(num_dx, rel=1e-6)
    assert GENERAL.dy(x, y) == pytest.approx(num_dy, rel=1e-6)


def test_jacobian_entries():
    j = jacobian(GENERAL, CIRCLE, 0.7, -0.4)
    assert j == (
        (GENERAL.dx(0.7, -0.4), GENERAL.dy(0.7, -0.4)),
        (CIRCLE.dx(0.7, -0.4), CIRCLE.dy(0.7, -0.4)),
    )


def test_solve_2x2_satisfies_system():
    j = ((3.0, 1.0), (-2.0, 4.0))
    rhs = (5.0, 6.0)
    s = solve_2x2(j, rhs)
    assert j[0][0] * s[0] + j[0][1] * s[1] == pytest.approx(rhs[0])
    assert j[1][0] * s[0] + j[1][1] * s[1] == pytest.approx(rhs[1])


def test_solve_2x2_singular():
    with pytest.raises(ValueError):
        solve_2x2(((1.0, 2.0), (2.0, 4.0)), (1.0, 1.0))


def test_converges_to_root():
    x, y = newton_method(CIRCLE, DIAGONAL, 30, 1.0, 1.0)
    assert CIRCLE.value(x, y) == pytest.approx(0.0, abs=1e-9)
    assert DIAGONAL.value(x, y) == pytest.approx(0.0, abs=1e-9)


def test_zero_iterations_returns_start():
    assert newton_method(CIRCLE, DIAGONAL, 0, 0.25, -3.0) == (0.25, -3.0)


def test_degenerate_jacobian_stops():
    with pytest.warns(RuntimeWarning, match="degenerate"):
        result = newton_method(CIRCLE, DIAGONAL, 5, 0.0, 0.0)
    assert result == (0.0, 0.0)


def test_main_prints_result(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1 0 0 0 -4\n0 0 0 1 -1 0\n1 1\n20\n"))
    assert main([]) == 0
    x, y = newton_method(CIRCLE, DIAGONAL, 20, 1.0, 1.0)
    assert f"Result: x = {x:g}, y = {y:g}" in capsys.readouterr().out


def test_main_reports_degenerate(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1 0 0 0 -4\n0 0 0 1 -1 0\n0 0\n3\n"))
    assert main([]) == 0
    assert "Jacobian is degenerate, stopping." in capsys.readouterr().out
import numpy as np
import numba
import pytest

from itproot import solve, univariate, make_config, InvalidIntervalError


# root around x == -1.76929
@numba.njit
def cubic(x):
    return x**3 - 2 * x + 2


f = univariate(cubic)


def test_solve_default_config():
    root, status, d = solve(f, -100.0, 5.0)
    assert abs(root + 1.76929) < 1e-4
    assert type(root) is np.float64
    assert set(d) == {"n_iters", "n_max", "bracket", "width", "timer"}
    assert d["n_iters"] <= d["n_max"] + 1
    assert d["bracket"][0] <= d["bracket"][1]
    assert d["width"] == d["bracket"][1] - d["bracket"][0]
    assert d["timer"] >= 0


def test_solve_config_keywords():
    root, status, d = solve(f, -100.0, 5.0, f_tol=1e-3, x_tol=1e-3, n0=2)
    assert abs(root + 1.76929) < 1e-3
    assert d["n_max"] == int(np.ceil(np.log2(105 / 1e-3))) + 2


def test_solve_given_config():
    config = make_config(f_tol=1e-3, x_tol=1e-3)
    root, status, d = solve(f, -100.0, 5.0, config=config)
    assert abs(root + 1.76929) < 1e-3


def test_solve_config_and_keywords():
    with pytest.raises(TypeError):
        solve(f, -100.0, 5.0, config=make_config(), x_tol=1e-3)


def test_solve_not_a_config():
    with pytest.raises(TypeError):
        solve(f, -100.0, 5.0, config=dict(x_tol=1e-3))


def test_solve_float32():
    lb, ub = np.float32(-100.0), np.float32(5.0)
    root, status, d = solve(f, lb, ub, f_tol=1e-3, x_tol=1e-3)
    assert type(root) is np.float32
    assert abs(root + 1.76929) < 1e-3


def test_solve_int_bounds():
    root, status, d = solve(f, -100, 5)
    assert type(root) is np.float64


def test_solve_no_diags():
    root, status, d = solve(f, -100.0, 5.0, diags=False)
    assert d == {}


def test_solve_no_sign_change():
    with pytest.warns(RuntimeWarning, match="No sign change"):
        root, status, d = solve(f, -1.0, 5.0)
    assert np.isnan(root)
    assert not status
    assert d["n_iters"] == 0


def test_solve_invalid_interval():
    with pytest.raises(InvalidIntervalError):
        solve(f, 5.0, -100.0)


@pytest.mark.parametrize(
    "kwargs,stop",
    [
        (dict(f_tol=1e-3, x_tol=1e-12), "f_tol"),
        (dict(f_tol=1e-300, x_tol=1e-3), "x_tol"),
        (dict(f_tol=1e-300, x_tol=1e-12, max_iters=2), "max_iters"),
    ],
)
def test_solve_output(capsys, kwargs, stop):
    solve(f, -100.0, 5.0, output=True, **kwargs)
    out = capsys.readouterr().out
    assert out.startswith(f"ITP {stop} done")


def test_solve_quiet(capsys):
    solve(f, -100.0, 5.0)
    assert capsys.readouterr().out == ""


def test_solve_output_without_diags(capsys):
    root, status, d = solve(f, -100.0, 5.0, diags=False, output=True)
    assert d == {}
    assert capsys.readouterr().out.startswith("ITP ")


def test_solve_n_max_matches_solver():
    # Bracket already narrower than x_tol: the loop never runs
    root, status, d = solve(f, -1.8, -1.7, x_tol=0.5)
    assert d["n_max"] == int(np.ceil(np.log2(0.1 / 0.5)))
    assert d["n_max"] < 0
    assert d["n_iters"] == 0
    assert not status
    assert abs(root + 1.75) < 1e-12


def test_solve_overflowing_width():
    with pytest.raises(InvalidIntervalError):
        solve(f, -1e308, 1.5e308)

import numba
import numpy as np
import pytest

from itproot.config import make_config
from itproot.itp import find_root
from itproot.objective import univariate, with_args

tol = 1e-6
config = make_config(f_tol=1e-20, x_tol=tol)


@numba.njit
def univar(x):
    return x - 2.5


@numba.njit
def univar3(x):
    return (x - 2.5) ** 3


# Test function with extra parameters
@numba.njit
def univar_args(x, exp):
    return (x - 2.5) ** exp * (x + 2.5) ** exp


@pytest.mark.parametrize("func", [univar, univar3])
def test_univariate(func):
    root, status = find_root(None, univariate(func), None, 0.0, 6.0, config)
    assert abs(root - 2.5) < tol


def test_univariate_evaluates_fn():
    f = univariate(univar)
    assert f(None, 4.0, None) == univar(4.0)


def test_univariate_cached():
    assert univariate(univar) is univariate(univar)


@pytest.mark.parametrize("args", [(1,), (3,)])
def test_with_args(args):
    root, status = find_root(None, with_args(univar_args), args, 0.0, 6.0, config)
    assert abs(root - 2.5) < tol


# A function which does not change sign at its roots, i.e. a quadratic
def test_with_args_singular():
    root, status = find_root(None, with_args(univar_args), (2,), 0.0, 6.0, config)
    assert np.isnan(root)
    assert not status

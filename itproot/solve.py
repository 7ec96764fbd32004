"""Find a root from Python, with diagnostics on the solution process."""

import numpy as np
import warnings
from time import time

from itproot.config import Config, make_config
from itproot.itp import find_root_diags

# Keyword arguments forwarded to `make_config` when no `config` is given
_CONFIG_KEYS = ("f_tol", "x_tol", "k1", "k2", "n0", "max_iters")


def solve(f, lb, ub, params=None, scratch=None, **kw):
    """Find one root of `f` in `[lb, ub]` by the ITP method.

    Parameters
    ----------
    f : function
        `@numba.njit`'ed function called as `f(scratch, x, params)`.  See
        `itproot.objective` to wrap functions of `x` alone, or of `x` and
        additional arguments.

    lb, ub : float
        Range within which to search, satisfying `lb < ub` and
        `f(lb) * f(ub) < 0`.

    params : any, Default None
        Read-only data passed to every evaluation of `f`.

    scratch : any, Default None
        Working memory that `f` may mutate.

    Returns
    -------
    root : float
        Value of `x` where `f(x) ~ 0`, as the precision of the configuration.
        NaN if `f` does not change sign between `lb` and `ub`.

    status : bool
        True if `abs(f(root)) < f_tol`, False if the search stopped on `x_tol`
        or `max_iters` or failed.

    d : dict

        Diagnostics.  Empty if `diags` is False.

        ``"n_iters"`` : int

            Number of completed iterations.

        ``"n_max"`` : int

            Worst case number of iterations to reach `x_tol`, being the
            bisection bound plus `n0`, as used by the solver.  Can be zero or
            negative when `ub - lb <= x_tol`, in which case no iterations run.

        ``"bracket"`` : tuple of float

            Final bracket `(a, b)`.

        ``"width"`` : float

            Width of the final bracket, `b - a`.

        ``"timer"`` : float

            Time spent in the solver, in seconds.

    Other Parameters
    ----------------
    config : Config

        Tolerances and tuning constants.  If not given, one is built by
        `make_config` from the keyword arguments `f_tol`, `x_tol`, `k1`,
        `k2`, `n0`, `max_iters` (each taking `make_config`'s default when
        absent), in the precision of `lb` and `ub`.

    diags : bool, Default True

        If True, fill the diagnostics dict `d`.

    output : bool, Default False

        If True, print a summary of the solve, whether or not `diags` is True.

    Raises
    ------
    InvalidIntervalError
        If `lb < ub` fails, or `lb`, `ub` or `ub - lb` is not finite.

    Warns
    -----
    RuntimeWarning
        If `f(lb)` and `f(ub)` do not have opposite signs.
    """

    config = kw.get("config")
    diags = kw.get("diags", True)
    output = kw.get("output", False)

    if config is None:
        dtype = np.result_type(lb, ub)
        if not np.issubdtype(dtype, np.floating):
            dtype = np.float64
        config = make_config(dtype, **{k: kw[k] for k in _CONFIG_KEYS if k in kw})
    elif not isinstance(config, Config):
        raise TypeError(f"Expected `config` to be a Config; got {type(config)}")
    else:
        extra = [k for k in _CONFIG_KEYS if k in kw]
        if extra:
            raise TypeError(f"Pass either `config` or {extra}, not both")

    dtype = type(config.x_tol)
    lb, ub = dtype(lb), dtype(ub)

    timer = time()
    root, status, n_iters, a, b = find_root_diags(scratch, f, params, lb, ub, config)
    timer = time() - timer
    root = dtype(root)

    if np.isnan(root):
        warnings.warn(
            f"No sign change of f between lb = {lb} and ub = {ub}; no root found.",
            RuntimeWarning,
            2,
        )

    n_max = _n_max(lb, ub, config)
    width = dtype(b) - dtype(a)

    d = dict()
    if diags:
        d["n_iters"] = n_iters
        d["n_max"] = n_max
        d["bracket"] = (dtype(a), dtype(b))
        d["width"] = width
        d["timer"] = timer

    if output:
        if status:
            stop = "f_tol"
        elif np.isnan(root):
            stop = "no sign change"
        elif n_iters >= config.max_iters:
            stop = "max_iters"
        else:
            stop = "x_tol"
        print(
            f"ITP {stop} done"
            f" | root = {root:.8e}"
            f" | {n_iters:4d} of {n_max:4d} iters"
            f" | width = {width:.4e}"
            f" | {timer:.3f} sec"
        )

    return root, status, d


def _n_max(lb, ub, config):
    # Bisection iteration bound (Theorem 1.1 of Oliveira and Takahashi, 2020) plus
    # slack, as used by find_root_diags.  Negative when ub - lb < x_tol / 2.
    return int(np.ceil(np.log2((ub - lb) / config.x_tol))) + config.n0

"""
Functions for finding the zero of a univariate function by the ITP
(Interpolate, Truncate, Project) method.
"""

import numpy as np
import numba as nb


class InvalidIntervalError(ValueError):
    """The search range does not satisfy `lb < ub` with `lb`, `ub` and `ub - lb` finite."""


@nb.njit
def find_root(scratch, f, params, lb, ub, config):
    """
    Find one zero of a univariate function within a given range, by the ITP method

    This is a bracketed root-finding method, so `f(lb)` and `f(ub)` must differ
    in sign.  If they do, a root is guaranteed to be found, in no more
    iterations than bisection would need plus `config.n0`.

    Parameters
    ----------
    scratch : any
        Working memory that `f` may mutate, e.g. a buffer it reuses between
        evaluations.  Passed through to `f` untouched.  Can be None.
    f : function
        Continuous function, called as `f(scratch, x, params)` and returning a
        float.  Must be deterministic for fixed `x` and `params`.
    params : any
        Read-only data passed unchanged to every evaluation of `f`.  Can be None.
    lb, ub : float
        Range within which to search, satisfying `lb < ub`.
    config : Config
        Tolerances and tuning constants, from `make_config`.

    Returns
    -------
    root : float
        Value of `x` where `f(x) ~ 0`, or NaN if `f(lb)` and `f(ub)` do not
        have strictly opposite signs.
    status : bool
        True if `abs(f(root)) < config.f_tol`.  False if instead the bracket
        shrank to `config.x_tol` or `config.max_iters` was reached, in which
        case `root` is the midpoint of the final bracket.

    Raises
    ------
    InvalidIntervalError
        If `lb < ub` fails, or `lb`, `ub` or `ub - lb` is not finite.  `f` is
        not evaluated.

    Notes
    -----
    `f` should be a `@numba.njit`'ed function.  See `itproot.objective` to
    wrap functions of `x` alone.

    Check `np.isfinite(root)` when `status` is False to distinguish an
    approximate root from a search range lacking a sign change.
    """
    root, status, _, _, _ = find_root_diags(scratch, f, params, lb, ub, config)
    return root, status


@nb.njit
def find_root_diags(scratch, f, params, lb, ub, config):
    """
    As `find_root`, but also report on the final state of the bracket.

    Returns
    -------
    root : float
        See `find_root`.
    status : bool
        See `find_root`.
    n_iters : int
        Number of completed iterations, i.e. bracket updates.  The evaluation
        at `root` that met `f_tol`, if any, is not counted.
    a, b : float
        Final bracket.  Equals `(lb, ub)` if `f` failed to change sign there.
    """

    if not (np.isfinite(lb) and np.isfinite(ub) and lb < ub):
        raise InvalidIntervalError("lb must be smaller than ub, and both finite.")
    if not np.isfinite(ub - lb):
        raise InvalidIntervalError("ub - lb overflows to infinity.")

    f_lb = f(scratch, lb, params)
    f_ub = f(scratch, ub, params)

    # Protection against input range that doesn't have a sign change.
    # See equation 2 of Oliveira and Takahashi (2020).
    if not (np.sign(f_lb) * np.sign(f_ub) < 0.0):
        return np.nan, False, 0, lb, ub

    f_tol = config.f_tol
    x_tol = config.x_tol
    k1 = config.k1
    k2 = config.k2
    max_iters = config.max_iters

    ϵ = x_tol / 2
    n_bin = int(np.ceil(np.log2((ub - lb) / x_tol)))  # Theorem 1.1
    n_max = n_bin + config.n0

    a = lb
    b = ub
    f_a = f_lb
    f_b = f_ub
    C = 2.0 ** (n_max + 1)

    # The first iteration is k == 0.  See the paragraph after equation 16.
    k = 0
    while abs(b - a) > x_tol and k < max_iters:

        # Interpolation: the regula falsi point.  Equation 5.
        x_rf = (a * f_b - b * f_a) / (f_b - f_a)

        # Truncation: perturb x_rf towards the bisection point.  Equation 4.
        x_bin = (a + b) / 2
        σ = np.sign(x_bin - x_rf)
        δ = k1 * abs(b - a) ** k2
        if δ <= abs(x_bin - x_rf):
            x_t = x_rf + σ * δ
        else:
            x_t = x_bin

        # Projection onto the minimax interval [x_bin - r_k, x_bin + r_k],
        # where r_k = ϵ * 2^(n_max - k) - (b - a) / 2.
        C = C / 2
        r_k = ϵ * C - (b - a) / 2
        if abs(x_t - x_bin) > r_k:
            x_itp = x_bin - σ * r_k
        else:
            x_itp = x_t

        # Keep within the original range despite roundoff
        w = min(max(x_itp, lb), ub)

        f_w = f(scratch, w, params)
        if abs(f_w) < f_tol:
            return w, True, k, a, b

        # Update the bracket.  A NaN f_w matches neither sign, ending the search.
        if np.sign(f_w) == np.sign(f_a):
            a = w
            f_a = f_w
        elif np.sign(f_w) == np.sign(f_b):
            b = w
            f_b = f_w
        else:
            a = w
            b = w

        k += 1

    return min(max((a + b) / 2, lb), ub), False, k, a, b


@nb.njit
def find_roots(scratch, f, params, LB, UB, config):
    """
    Find a zero of the same function in each of many search ranges

    Parameters
    ----------
    scratch, f, params, config :
        See `find_root`.  Shared by every problem.
    LB, UB : ndarray
        Lower and upper bounds of the search ranges.  Must have the same shape.

    Returns
    -------
    roots : ndarray of float
        `roots[n]` is the root found in `[LB[n], UB[n]]`, or NaN if there was
        no sign change there.  Same shape as `LB`.
    status : ndarray of bool
        `status[n]` is True if `roots[n]` met `config.f_tol`.
    """

    if LB.shape != UB.shape:
        raise ValueError("LB and UB must have the same shape.")

    roots = np.full(LB.shape, np.nan, dtype=np.float64)
    status = np.zeros(LB.shape, dtype=np.bool_)

    for n in np.ndindex(LB.shape):
        roots[n], status[n] = find_root(scratch, f, params, LB[n], UB[n], config)

    return roots, status

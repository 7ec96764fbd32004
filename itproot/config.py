"""Parameters controlling the ITP root finder."""

from collections import namedtuple
import numbers

import numpy as np

GOLDEN_RATIO = (1.0 + 5.0**0.5) / 2.0

# Stands in for an unbounded iteration cap; still an int64 inside numba.
MAX_ITERS_UNBOUNDED = np.iinfo(np.int64).max


class Config(namedtuple("Config", ["f_tol", "x_tol", "k1", "k2", "n0", "max_iters"])):
    """Immutable parameters for `find_root`.

    Every way of building a Config, including `_replace`, checks that
    `k1 > 0`, `1 <= k2 < 1 + golden ratio`, `n0 >= 0`, `x_tol > 0`,
    `f_tol > 0` and `max_iters >= 0`, in that order, raising ValueError on
    the first that fails.  `n0` and `max_iters` must be ints, else TypeError.

    Prefer `make_config`, which fills in defaults and casts the float fields
    to a chosen precision.
    """

    __slots__ = ()

    def __new__(cls, f_tol, x_tol, k1, k2, n0, max_iters):
        for name, val in (("n0", n0), ("max_iters", max_iters)):
            if isinstance(val, bool) or not isinstance(val, numbers.Integral):
                raise TypeError(f"Expected `{name}` to be an int; got {val!r}")

        if not k1 > 0:
            raise ValueError(f"The following must be true: k1 > 0; got k1 = {k1}")
        if not 1 <= k2 < 1 + GOLDEN_RATIO:
            raise ValueError(
                f"The following must be true: 1 <= k2 < 1 + golden ratio; got k2 = {k2}"
            )
        if not n0 >= 0:
            raise ValueError(f"The following must be true: n0 >= 0; got n0 = {n0}")
        if not x_tol > 0:
            raise ValueError(
                f"The following must be true: x_tol > 0; got x_tol = {x_tol}"
            )
        if not f_tol > 0:
            raise ValueError(
                f"The following must be true: f_tol > 0; got f_tol = {f_tol}"
            )
        if not max_iters >= 0:
            raise ValueError(
                f"The following must be true: max_iters >= 0; got max_iters = {max_iters}"
            )

        return super().__new__(cls, f_tol, x_tol, k1, k2, int(n0), int(max_iters))

    @classmethod
    def _make(cls, iterable):
        # namedtuple's _make, and so _replace, would otherwise skip __new__
        return cls(*iterable)


def make_config(
    dtype=np.float64,
    f_tol=1e-4,
    x_tol=1e-6,
    k1=0.1,
    k2=0.98 * (1.0 + GOLDEN_RATIO),
    n0=0,
    max_iters=None,
):
    """Make a validated configuration for the ITP root finder.

    Usually the ITP algorithm terminates when either `x_tol` or `f_tol` is
    reached; `max_iters` is an additional early stopping condition.

    Parameters
    ----------
    dtype : numpy floating type, Default np.float64
        Precision of the problem.  `f_tol`, `x_tol`, `k1`, `k2` are cast to it.

    f_tol : float, Default 1e-4
        Stop once `abs(f(x)) < f_tol`.  Must be positive.

    x_tol : float, Default 1e-6
        Stop once the bracket width is at most `x_tol`.  Must be positive.

    k1 : float, Default 0.1
        Scale factor of the truncation step.  Must be positive.

    k2 : float, Default 0.98 * (1 + golden ratio)
        Exponent of the truncation step, satisfying `1 <= k2 < 1 + golden ratio`.
        See equation 24 of [1]_.

    n0 : int, Default 0
        Iterations allowed beyond the bisection bound.  Larger values trade
        worst case iteration count for speed on average.  Must be `>= 0`.

    max_iters : int or None, Default None
        Hard cap on the number of iterations.  None means unbounded.

    Returns
    -------
    config : Config
        Namedtuple with fields `f_tol, x_tol, k1, k2, n0, max_iters`, which
        can be passed into `numba.njit`'ed code.

    Notes
    -----
    .. [1] Oliveira, I. F. D. and R. H. C. Takahashi, 2020: An Enhancement of
       the Bisection Method Average Performance Preserving Minmax Optimality.
       ACM Trans. Math. Softw. 47, 1, Article 5.
       https://doi.org/10.1145/3423597
    """

    try:
        is_float = np.issubdtype(dtype, np.floating)
    except TypeError:
        is_float = False
    if not is_float:
        raise TypeError(f"Expected a numpy floating type for `dtype`; got {dtype}")
    dtype = np.dtype(dtype).type

    if max_iters is None:
        max_iters = MAX_ITERS_UNBOUNDED

    return Config(*(dtype(v) for v in (f_tol, x_tol, k1, k2)), n0, max_iters)

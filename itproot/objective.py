"""Adapt functions into the `f(scratch, x, params)` form used by `find_root`"""

import functools as ft
import numba as nb


@ft.lru_cache(maxsize=10)
def univariate(fn):
    """Make a function of `x` alone usable by `find_root`.

    Parameters
    ----------
    fn : function
        `@numba.njit`'ed function taking one float and returning one float.

    Returns
    -------
    f : function
        `@numba.njit`'ed function `f(scratch, x, params)` returning `fn(x)`.
        `scratch` and `params` are ignored, so pass None for each.
    """

    @nb.njit
    def f(scratch, x, params):
        return fn(x)

    return f


@ft.lru_cache(maxsize=10)
def with_args(fn):
    """Make a function taking additional arguments usable by `find_root`.

    Parameters
    ----------
    fn : function
        `@numba.njit`'ed function called as `fn(x, *args)`.

    Returns
    -------
    f : function
        `@numba.njit`'ed function `f(scratch, x, params)` returning
        `fn(x, *params)`.  Pass the additional arguments as a tuple `params`.
        `scratch` is ignored.
    """

    @nb.njit
    def f(scratch, x, params):
        return fn(x, *params)

    return f

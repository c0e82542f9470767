"""
Root-finder
===========

Bracketing solver for monotone scalar equations ``f(x) = target``.

The solver is used to invert distribution functions and the regularized
incomplete gamma/beta functions. It works in two phases:

1. **Bracketing.** Starting from an initial guess ``x0`` the bracket is grown
   towards the side where the root lies. Towards an infinite bound the step
   doubles; towards a finite bound the remaining distance halves. This also
   covers one-sided and two-sided infinite domains.
2. **Refinement.** A Newton step (when a derivative is supplied) or a secant
   step (otherwise) is tried first. The step is rejected in favour of
   bisection when it leaves the bracket or does not shrink fast enough. Wide
   brackets of one sign are bisected geometrically so that tiny and huge
   roots are reached in a bounded number of steps.

Iteration stops when successive iterates agree to ``rel_tol``, or when the
bracket can no longer be split in floating point. Exhausting either budget
raises :class:`~pysatl_distr.errors.ConvergenceError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass, fields
from math import inf, isfinite, isnan, sqrt
from typing import TYPE_CHECKING, Any, Self

from pysatl_distr.errors import ConvergenceError, ParameterNotPositiveError
from pysatl_distr.special._common import EPS

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_distr.types import ScalarFunc

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SolverOptions:
    """
    Tolerances and budgets of :func:`find_root`.

    Parameters
    ----------
    rel_tol : float, default 8 * machine epsilon
        Relative tolerance on ``x``.
    abs_tol : float, default 0.0
        Absolute tolerance on ``x``.
    max_iter : int, default 200
        Maximum number of refinement iterations.
    max_expand : int, default 2100
        Maximum number of bracket expansions. Doubling from 1 overflows after
        about 1024 steps and halving underflows after about 1075, so the
        default never cuts a legitimate search short.
    """

    rel_tol: float = 8 * EPS
    abs_tol: float = 0.0
    max_iter: int = 200
    max_expand: int = 2100

    def __post_init__(self) -> None:
        if not self.rel_tol > 0.0:
            raise ParameterNotPositiveError(
                "rel_tol must be > 0", name="rel_tol", value=self.rel_tol
            )
        if self.max_iter < 1:
            raise ParameterNotPositiveError(
                "max_iter must be >= 1", name="max_iter", value=self.max_iter
            )
        if self.max_expand < 1:
            raise ParameterNotPositiveError(
                "max_expand must be >= 1", name="max_expand", value=self.max_expand
            )

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> Self:
        """Build options from free-form ``**options``, ignoring unrelated keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in options.items() if k in names})


def _split(lo: float, hi: float) -> float:
    """Bisection point of ``[lo, hi]``; geometric for wide single-signed brackets."""
    if lo > 0.0 and hi > 4.0 * lo and isfinite(hi):
        return sqrt(lo) * sqrt(hi)
    if hi < 0.0 and lo < 4.0 * hi and isfinite(lo):
        return -sqrt(-lo) * sqrt(-hi)
    return lo + 0.5 * (hi - lo)


def _initial_guess(lower: float, upper: float) -> float:
    if isfinite(lower) and isfinite(upper):
        return lower + 0.5 * (upper - lower)
    if isfinite(lower):
        return lower + max(1.0, abs(lower))
    if isfinite(upper):
        return upper - max(1.0, abs(upper))
    return 0.0


def find_root(
    f: ScalarFunc,
    target: float = 0.0,
    *,
    fprime: ScalarFunc | None = None,
    x0: float | None = None,
    lower: float = -inf,
    upper: float = inf,
    options: SolverOptions | None = None,
) -> float:
    """
    Solve ``f(x) = target`` for a monotone increasing ``f`` on ``[lower, upper]``.

    Parameters
    ----------
    f : Callable[[float], float]
        Monotone non-decreasing function.
    target : float, default 0.0
        Value to reach.
    fprime : Callable[[float], float], optional
        Derivative of ``f``. Enables Newton steps; secant steps are used otherwise.
    x0 : float, optional
        Initial guess. Defaults to a point inside ``[lower, upper]``.
    lower, upper : float
        Domain of ``f``; either may be infinite.
    options : SolverOptions, optional
        Tolerances and iteration budgets.

    Returns
    -------
    float
        Approximate root.

    Raises
    ------
    ConvergenceError
        If no sign change is found, ``f`` returns NaN, or the iteration
        budget is exhausted.
    """
    opts = SolverOptions() if options is None else options

    def g(x: float) -> float:
        value = f(x) - target
        if isnan(value):
            raise ConvergenceError(f"Function returned NaN at x={x}", name="x", value=x)
        return value

    if x0 is None or not (lower <= x0 <= upper) or not isfinite(x0):
        x0 = _initial_guess(lower, upper)

    x, gx = x0, g(x0)
    if gx == 0.0:
        return x

    if gx < 0.0:
        lo, glo = x, gx
        hi, ghi = _expand(g, x, upper, +1, opts)
        if ghi == 0.0:
            return hi
    else:
        hi, ghi = x, gx
        lo, glo = _expand(g, x, lower, -1, opts)
        if glo == 0.0:
            return lo

    # the other end of the bracket seeds the first secant step
    x_prev, g_prev = (hi, ghi) if x == lo else (lo, glo)
    dx_old = hi - lo

    for _ in range(opts.max_iter):
        candidate: float | None = None
        if fprime is not None:
            slope = fprime(x)
            if slope > 0.0 and isfinite(slope):
                candidate = x - gx / slope
        elif gx != g_prev:
            candidate = x - gx * (x - x_prev) / (gx - g_prev)

        if (
            candidate is None
            or not (lo < candidate < hi)
            or abs(candidate - x) > 0.5 * dx_old
        ):
            candidate = _split(lo, hi)

        dx_old = abs(candidate - x)
        x_prev, g_prev = x, gx
        x, gx = candidate, g(candidate)

        if gx == 0.0:
            return x
        if gx < 0.0:
            lo = x
        else:
            hi = x

        tol = opts.rel_tol * abs(x) + opts.abs_tol
        if abs(x - x_prev) <= tol or hi - lo <= tol:
            return x
        mid = lo + 0.5 * (hi - lo)
        if mid <= lo or mid >= hi:
            return x

    raise ConvergenceError(
        f"Root-finder did not converge in {opts.max_iter} iterations "
        f"(bracket [{lo}, {hi}], target {target})",
        name="max_iter",
        value=opts.max_iter,
    )


def _expand(
    g: ScalarFunc, x0: float, bound: float, direction: int, opts: SolverOptions
) -> tuple[float, float]:
    """
    Walk from ``x0`` towards ``bound`` until ``g`` changes sign.

    Returns the first point reached with the opposite sign and ``g`` there.
    """
    step = max(abs(x0), 1.0)
    for k in range(opts.max_expand):
        if isfinite(bound):
            candidate = bound - (bound - x0) * 0.5 ** (k + 1)
            if candidate == bound or (candidate - x0) * direction <= 0.0:
                candidate = bound
        else:
            candidate = x0 + direction * step
            step *= 2.0
            if not isfinite(candidate):
                break

        value = g(candidate)
        if value * direction >= 0.0:
            if k > 0:
                logger.debug("Bracket found after %d expansions at x=%g", k + 1, candidate)
            return candidate, value
        if candidate == bound:
            break

    raise ConvergenceError(
        f"Could not bracket a root starting from x0={x0} towards {bound}",
        name="max_expand",
        value=opts.max_expand,
    )


__all__ = [
    "SolverOptions",
    "find_root",
]

"""
Beta-family special functions
==============================

- :func:`log_beta`: ``log B(a, b)``.
- :func:`beta_inc`: regularized incomplete beta ``I_x(a, b)``.
- :func:`beta_inc_complement`: ``1 - I_x(a, b) = I_{1-x}(b, a)``.
- :func:`beta_inc_inv`: inverse of ``I_x(a, b)`` in ``x``.

Notes
-----
The symmetry ``I_x(a, b) = 1 - I_{1-x}(b, a)`` keeps the argument below the
mean-like threshold ``(a + 1) / (a + b + 2)``. There the power series is used
when ``max(b*x, x) <= 0.7`` and the continued fraction otherwise.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import exp, isnan, log, log1p, sqrt
from typing import Any

from pysatl_distr.errors import ConvergenceError, DomainError
from pysatl_distr.special._common import (
    EPS,
    FPMIN,
    HALF_LOG_TWO_PI,
    LARGE_SHAPE,
    TINY,
    check_positive,
    check_probability,
    exp_or_inf,
)
from pysatl_distr.special.gamma import deviance_term, log_gamma, stirling_error
from pysatl_distr.special.roots import SolverOptions, find_root

_SERIES_THRESHOLD = 0.7


def log_beta(a: float, b: float) -> float:
    """Natural logarithm of the beta function ``B(a, b)`` for ``a, b > 0``."""
    check_positive("a", a)
    check_positive("b", b)
    return log_gamma(a) + log_gamma(b) - log_gamma(a + b)


def _max_iterations(a: float, b: float) -> int:
    return 500 + int(50.0 * sqrt(max(a, b)))


def _log_power_terms(a: float, b: float, x: float) -> float:
    """
    ``log(x^a (1-x)^b / B(a, b))`` for ``0 < x < 1``.

    When a shape is large the logarithms of ``x^a``, ``(1-x)^b`` and
    ``B(a, b)`` nearly cancel, so the value is assembled from Stirling errors
    and deviance terms around the point ``x = a/(a + b)`` instead.
    """
    if max(a, b) < LARGE_SHAPE:
        return a * log(x) + b * log1p(-x) - log_beta(a, b)
    n = a + b
    return (
        0.5 * (log(a) + log(b) - log(n))
        - HALF_LOG_TWO_PI
        + stirling_error(n)
        - stirling_error(a)
        - stirling_error(b)
        - deviance_term(a, n * x)
        - deviance_term(b, n * (1.0 - x))
    )


def _series(a: float, b: float, x: float) -> float:
    """``I_x(a, b)`` from ``x^a Σ (1-b)_n x^n / (n! (a+n)) / B(a, b)``."""
    term = 1.0
    total = 1.0 / a
    for n in range(1, _max_iterations(a, b) + 1):
        term *= (n - b) * x / n
        contribution = term / (a + n)
        total += contribution
        if abs(contribution) <= EPS * abs(total):
            return exp(_log_power_terms(a, b, x) - b * log1p(-x)) * total
    raise ConvergenceError(
        f"Incomplete beta series did not converge for a={a}, b={b}, x={x}", name="x", value=x
    )


def _continued_fraction(a: float, b: float, x: float) -> float:
    qab = a + b
    qap = a + 1.0
    qam = a - 1.0
    c = 1.0
    d = 1.0 - qab * x / qap
    if abs(d) < FPMIN:
        d = FPMIN
    d = 1.0 / d
    h = d
    for m in range(1, _max_iterations(a, b) + 1):
        m2 = 2 * m
        aa = m * (b - m) * x / ((qam + m2) * (a + m2))
        d = 1.0 + aa * d
        if abs(d) < FPMIN:
            d = FPMIN
        c = 1.0 + aa / c
        if abs(c) < FPMIN:
            c = FPMIN
        d = 1.0 / d
        h *= d * c

        aa = -(a + m) * (qab + m) * x / ((a + m2) * (qap + m2))
        d = 1.0 + aa * d
        if abs(d) < FPMIN:
            d = FPMIN
        c = 1.0 + aa / c
        if abs(c) < FPMIN:
            c = FPMIN
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < EPS:
            return h
    raise ConvergenceError(
        f"Incomplete beta continued fraction did not converge for a={a}, b={b}, x={x}",
        name="x",
        value=x,
    )


def _lower_tail(a: float, b: float, x: float) -> float:
    """``I_x(a, b)`` for ``x`` on the favourable side of the threshold."""
    if max(b * x, x) <= _SERIES_THRESHOLD:
        return _series(a, b, x)
    front = exp(_log_power_terms(a, b, x))
    return front * _continued_fraction(a, b, x) / a


def _beta_pair(a: float, b: float, x: float) -> tuple[float, float]:
    check_positive("a", a)
    check_positive("b", b)
    if isnan(x) or not 0.0 <= x <= 1.0:
        raise DomainError(f"x must be in [0, 1], got {x}", name="x", value=x)
    if x == 0.0:
        return 0.0, 1.0
    if x == 1.0:
        return 1.0, 0.0
    if x <= (a + 1.0) / (a + b + 2.0):
        lower = min(max(_lower_tail(a, b, x), 0.0), 1.0)
        return lower, 1.0 - lower
    upper = min(max(_lower_tail(b, a, 1.0 - x), 0.0), 1.0)
    return 1.0 - upper, upper


def beta_inc(a: float, b: float, x: float) -> float:
    """
    Regularized incomplete beta function ``I_x(a, b)``.

    Parameters
    ----------
    a, b : float
        Shapes, both ``> 0``.
    x : float
        Argument in ``[0, 1]``.

    Raises
    ------
    DomainError
        If a shape is not positive or ``x`` is outside ``[0, 1]``.
    """
    return _beta_pair(a, b, x)[0]


def beta_inc_complement(a: float, b: float, x: float) -> float:
    """``1 - I_x(a, b)``, computed without cancellation."""
    return _beta_pair(a, b, x)[1]


def _beta_inv_seed(a: float, b: float, p: float, q: float) -> float:
    if a >= 1.0 and b >= 1.0:
        t = sqrt(-2.0 * log(min(p, q)))
        s = (2.30753 + t * 0.27061) / (1.0 + t * (0.99229 + t * 0.04481)) - t
        if p < 0.5:
            s = -s
        al = (s * s - 3.0) / 6.0
        h = 2.0 / (1.0 / (2.0 * a - 1.0) + 1.0 / (2.0 * b - 1.0))
        w = s * sqrt(al + h) / h - (1.0 / (2.0 * b - 1.0) - 1.0 / (2.0 * a - 1.0)) * (
            al + 5.0 / 6.0 - 2.0 / (3.0 * h)
        )
        x = a / (a + b * exp(2.0 * w))
    else:
        lna = log(a / (a + b))
        lnb = log(b / (a + b))
        t = exp(a * lna) / a
        u = exp(b * lnb) / b
        w = t + u
        if p < t / w:
            x = (a * w * p) ** (1.0 / a)
        else:
            x = 1.0 - (b * w * q) ** (1.0 / b)
    return min(max(x, TINY), 1.0 - EPS / 2.0)


def beta_inc_inv(a: float, b: float, p: float, **options: Any) -> float:
    """
    Inverse of :func:`beta_inc` in ``x``: solves ``I_x(a, b) = p``.

    Parameters
    ----------
    a, b : float
        Shapes, both ``> 0``.
    p : float
        Probability in ``[0, 1]``.
    **options
        Root-finder settings (see :class:`~pysatl_distr.special.roots.SolverOptions`).
    """
    check_positive("a", a)
    check_positive("b", b)
    check_probability("p", p)
    return _beta_inv(a, b, p, 1.0 - p, options)


def beta_inc_complement_inv(a: float, b: float, q: float, **options: Any) -> float:
    """Solves ``1 - I_x(a, b) = q`` for ``x``."""
    check_positive("a", a)
    check_positive("b", b)
    check_probability("q", q)
    return _beta_inv(a, b, 1.0 - q, q, options)


def _beta_inv(a: float, b: float, p: float, q: float, options: dict[str, Any]) -> float:
    if p == 0.0:
        return 0.0
    if q == 0.0:
        return 1.0

    def density(x: float) -> float:
        if not 0.0 < x < 1.0:
            return 0.0
        # small shapes overflow near the edges; find_root then bisects
        return exp_or_inf(_log_power_terms(a, b, x) - log(x) - log1p(-x))

    solver_options = SolverOptions.from_options(options)
    x0 = _beta_inv_seed(a, b, p, q)
    if p <= q:
        return find_root(
            lambda x: beta_inc(a, b, x),
            p,
            fprime=density,
            x0=x0,
            lower=0.0,
            upper=1.0,
            options=solver_options,
        )
    return find_root(
        lambda x: -beta_inc_complement(a, b, x),
        -q,
        fprime=density,
        x0=x0,
        lower=0.0,
        upper=1.0,
        options=solver_options,
    )


__all__ = [
    "log_beta",
    "beta_inc",
    "beta_inc_complement",
    "beta_inc_inv",
    "beta_inc_complement_inv",
]

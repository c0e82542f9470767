"""
Standard normal functions
=========================

``normal_cdf`` and ``normal_sf`` use the complementary error function, so
both tails are accurate down to the smallest subnormal. The quantile is seeded
by Acklam's rational approximation (relative error about ``1.15e-9``) and
polished with one root-finder pass against :func:`normal_cdf`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import erfc, exp, inf, isnan, log, pi, sqrt
from typing import Any

from pysatl_distr.errors import DomainError
from pysatl_distr.special._common import check_probability
from pysatl_distr.special.roots import SolverOptions, find_root

_SQRT2 = sqrt(2.0)
_INV_SQRT_2PI = 1.0 / sqrt(2.0 * pi)

_A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
_B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549671010115335e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)
_P_LOW = 0.02425


def _check_not_nan(x: float) -> None:
    if isnan(x):
        raise DomainError("x must not be NaN", name="x", value=x)


def normal_pdf(x: float) -> float:
    """Standard normal density."""
    _check_not_nan(x)
    return _INV_SQRT_2PI * exp(-0.5 * x * x)


def normal_cdf(x: float) -> float:
    """Standard normal distribution function ``Φ(x)``."""
    _check_not_nan(x)
    return 0.5 * erfc(-x / _SQRT2)


def normal_sf(x: float) -> float:
    """Standard normal survival function ``1 - Φ(x)`` without cancellation."""
    _check_not_nan(x)
    return 0.5 * erfc(x / _SQRT2)


def _polynomial(coefficients: tuple[float, ...], x: float) -> float:
    result = 0.0
    for coefficient in coefficients:
        result = result * x + coefficient
    return result


def _acklam_lower(p: float) -> float:
    """Acklam's approximation of ``Φ⁻¹(p)`` for ``0 < p <= 0.5``."""
    if p < _P_LOW:
        q = sqrt(-2.0 * log(p))
        return _polynomial(_C, q) / (_polynomial(_D, q) * q + 1.0)
    q = p - 0.5
    r = q * q
    return _polynomial(_A, r) * q / (_polynomial(_B, r) * r + 1.0)


def _lower_quantile(p: float, options: dict[str, Any]) -> float:
    if p == 0.0:
        return -inf
    if p == 0.5:
        return 0.0
    return find_root(
        normal_cdf,
        p,
        fprime=normal_pdf,
        x0=_acklam_lower(p),
        upper=0.0,
        options=SolverOptions.from_options(options),
    )


def normal_ppf(p: float, **options: Any) -> float:
    """
    Standard normal quantile ``Φ⁻¹(p)``.

    Parameters
    ----------
    p : float
        Probability in ``[0, 1]``.
    **options
        Root-finder settings (see :class:`~pysatl_distr.special.roots.SolverOptions`).

    Returns
    -------
    float
        ``-inf`` for ``p = 0``, ``inf`` for ``p = 1``.

    Notes
    -----
    Only the lower half is solved; for ``p > 0.5`` the symmetry
    ``Φ⁻¹(p) = -Φ⁻¹(1 - p)`` is used, ``1 - p`` being exact there.
    """
    check_probability("p", p)
    if p > 0.5:
        return -_lower_quantile(1.0 - p, options)
    return _lower_quantile(p, options)


def normal_isf(q: float, **options: Any) -> float:
    """Standard normal quantile of the complement, ``Φ⁻¹(1 - q)``."""
    return -normal_ppf(q, **options)


__all__ = [
    "normal_pdf",
    "normal_cdf",
    "normal_sf",
    "normal_ppf",
    "normal_isf",
]

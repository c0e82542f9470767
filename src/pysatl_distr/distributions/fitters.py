"""
Conversion Fitters
==================

Fitters build a derived characteristic from already resolved source
characteristics of a distribution. Every fitter has the signature::

    fitter(distribution, sources, /, **options) -> FittedComputationMethod

where ``sources`` maps source names to callables. The returned callables are
array-in, array-out and accept the per-call ``**options`` (tolerances of the
root-finder are read from them).

Continuous inversions (``ppf``, ``isf``) use
:func:`~pysatl_distr.special.roots.find_root` over the distribution support.
Discrete inversions return the smallest support point whose ``cdf`` reaches
``p`` (or whose ``sf`` drops to ``q``), found by
:func:`search_lattice`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_distr.distributions.computation import FittedComputationMethod
from pysatl_distr.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distr.errors import ConvergenceError
from pysatl_distr.special.roots import SolverOptions, find_root
from pysatl_distr.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from pysatl_distr.distributions.computation import Method
    from pysatl_distr.distributions.distribution import Distribution
    from pysatl_distr.types import GenericCharacteristicName, NumericArray

    type Sources = Mapping[GenericCharacteristicName, Method[Any, Any]]


def _as_float_array(values: Any) -> NumericArray:
    return np.asarray(values, dtype=np.float64)


def _map_scalar(func: Callable[[float], float], values: Any) -> NumericArray:
    """Apply a scalar function to every element of ``values`` keeping the shape."""
    arr = _as_float_array(values)
    out = np.empty_like(arr)
    for idx in np.ndindex(arr.shape):
        out[idx] = func(float(arr[idx]))
    return out


def _scalar(method: Method[Any, Any], options: Mapping[str, Any]) -> Callable[[float], float]:
    def _call(x: float) -> float:
        return float(method(np.float64(x), **options))

    return _call


def _support_bounds(distribution: Distribution) -> tuple[float, float]:
    support = distribution.support
    if support is None:
        return -inf, inf
    return support.bounds


# --- Pointwise conversions ---------------------------------------------------


def fit_pdf_to_log_pdf_1C(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """``log_pdf = log(pdf)``; ``-inf`` where the density vanishes."""
    pdf = sources[CharacteristicName.PDF]

    def _log_pdf(x: Any, **options: Any) -> NumericArray:
        with np.errstate(divide="ignore"):
            return np.log(_as_float_array(pdf(x, **options)))

    return FittedComputationMethod(
        target=CharacteristicName.LOG_PDF, sources=[CharacteristicName.PDF], func=_log_pdf
    )


def fit_cdf_to_sf(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """``sf = 1 - cdf``."""
    cdf = sources[CharacteristicName.CDF]

    def _sf(x: Any, **options: Any) -> NumericArray:
        return 1.0 - _as_float_array(cdf(x, **options))

    return FittedComputationMethod(
        target=CharacteristicName.SF, sources=[CharacteristicName.CDF], func=_sf
    )


def fit_sf_to_cdf(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """``cdf = 1 - sf``."""
    sf = sources[CharacteristicName.SF]

    def _cdf(x: Any, **options: Any) -> NumericArray:
        return 1.0 - _as_float_array(sf(x, **options))

    return FittedComputationMethod(
        target=CharacteristicName.CDF, sources=[CharacteristicName.SF], func=_cdf
    )


def fit_pdf_sf_to_hazard_1C(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """``hazard = pdf / sf``; ``+inf`` where ``sf == 0``."""
    pdf = sources[CharacteristicName.PDF]
    sf = sources[CharacteristicName.SF]

    def _hazard(x: Any, **options: Any) -> NumericArray:
        density = _as_float_array(pdf(x, **options))
        survival = _as_float_array(sf(x, **options))
        density, survival = np.broadcast_arrays(density, survival)
        return np.divide(
            density, survival, out=np.full(density.shape, inf), where=survival > 0.0
        )

    return FittedComputationMethod(
        target=CharacteristicName.HAZARD,
        sources=[CharacteristicName.PDF, CharacteristicName.SF],
        func=_hazard,
    )


def fit_pmf_sf_to_hazard_1D(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """Discrete hazard ``pmf / sf``; ``+inf`` where ``sf == 0``."""
    pmf = sources[CharacteristicName.PMF]
    sf = sources[CharacteristicName.SF]

    def _hazard(x: Any, **options: Any) -> NumericArray:
        mass = _as_float_array(pmf(x, **options))
        survival = _as_float_array(sf(x, **options))
        mass, survival = np.broadcast_arrays(mass, survival)
        return np.divide(mass, survival, out=np.full(mass.shape, inf), where=survival > 0.0)

    return FittedComputationMethod(
        target=CharacteristicName.HAZARD,
        sources=[CharacteristicName.PMF, CharacteristicName.SF],
        func=_hazard,
    )


def fit_sf_to_chf(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """Cumulative hazard ``chf = -log(sf)``; ``+inf`` where ``sf == 0``."""
    sf = sources[CharacteristicName.SF]

    def _chf(x: Any, **options: Any) -> NumericArray:
        with np.errstate(divide="ignore"):
            return -np.log(_as_float_array(sf(x, **options)))

    return FittedComputationMethod(
        target=CharacteristicName.CHF, sources=[CharacteristicName.SF], func=_chf
    )


def fit_pmf_to_cdf_1D(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """
    Build ``cdf`` from ``pmf`` on a left-bounded lattice by prefix summation.

    Raises
    ------
    RuntimeError
        If the distribution support is not a left-bounded integer lattice.
    """
    support = distribution.support
    if not isinstance(support, IntegerLatticeDiscreteSupport) or not support.is_left_bounded:
        raise RuntimeError("Left-bounded lattice support is required for pmf->cdf.")
    pmf = sources[CharacteristicName.PMF]

    def _cdf(x: Any, **options: Any) -> NumericArray:
        def _prefix(value: float) -> float:
            points = np.fromiter(support.iter_leq(value), dtype=np.float64)
            if points.size == 0:
                return 0.0
            return float(np.clip(np.sum(pmf(points, **options)), 0.0, 1.0))

        return _map_scalar(_prefix, x)

    return FittedComputationMethod(
        target=CharacteristicName.CDF, sources=[CharacteristicName.PMF], func=_cdf
    )


# --- Continuous inversions ---------------------------------------------------


def fit_cdf_to_ppf_1C(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """
    Quantile by solving ``cdf(x) = p`` over the support.

    ``p = 0`` and ``p = 1`` map to the support endpoints.
    """
    cdf = sources[CharacteristicName.CDF]
    lower, upper = _support_bounds(distribution)

    def _ppf(p: Any, **options: Any) -> NumericArray:
        solver = SolverOptions.from_options(options)
        f = _scalar(cdf, options)

        def _invert(prob: float) -> float:
            if prob <= 0.0:
                return lower
            if prob >= 1.0:
                return upper
            return find_root(f, prob, lower=lower, upper=upper, options=solver)

        return _map_scalar(_invert, p)

    return FittedComputationMethod(
        target=CharacteristicName.PPF, sources=[CharacteristicName.CDF], func=_ppf
    )


def fit_sf_to_isf_1C(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """
    Quantile of the complement by solving ``sf(x) = q`` over the support.

    ``q = 1`` and ``q = 0`` map to the support endpoints.
    """
    sf = sources[CharacteristicName.SF]
    lower, upper = _support_bounds(distribution)

    def _isf(q: Any, **options: Any) -> NumericArray:
        solver = SolverOptions.from_options(options)
        f = _scalar(sf, options)

        def _invert(prob: float) -> float:
            if prob >= 1.0:
                return lower
            if prob <= 0.0:
                return upper
            return find_root(lambda x: -f(x), -prob, lower=lower, upper=upper, options=solver)

        return _map_scalar(_invert, q)

    return FittedComputationMethod(
        target=CharacteristicName.ISF, sources=[CharacteristicName.SF], func=_isf
    )


# --- Discrete inversions -----------------------------------------------------


def search_lattice(
    predicate: Callable[[float], bool],
    support: IntegerLatticeDiscreteSupport,
    *,
    start: float | None = None,
    options: SolverOptions | None = None,
) -> float:
    """
    Smallest lattice point ``k`` with ``predicate(k)`` for a monotone predicate.

    Parameters
    ----------
    predicate : Callable[[float], bool]
        ``False`` below some point of the lattice and ``True`` from it on.
    support : IntegerLatticeDiscreteSupport
        Lattice to search.
    start : float, optional
        Where to start; defaults to the first lattice point (or 0).
    options : SolverOptions, optional
        ``max_expand`` bounds the number of doubling steps.

    Returns
    -------
    float
        The lattice point; the last point of a right-bounded lattice if the
        predicate never holds.

    Raises
    ------
    ConvergenceError
        If the doubling search exhausts ``max_expand`` steps.
    """
    opts = SolverOptions() if options is None else options
    step = support.modulus
    first = support.first()
    last = support.last()

    k = support.floor(0.0 if start is None else start)
    if k is None:
        k = first
    if k is None:
        raise RuntimeError("Cannot search an empty lattice.")

    if predicate(float(k)):
        hi = k
        for _ in range(opts.max_expand):
            if first is not None and hi <= first:
                return float(hi)
            lo = hi - step if first is None else max(hi - step, first)
            if not predicate(float(lo)):
                break
            hi = lo
            step *= 2
        else:
            raise ConvergenceError(
                "Lattice search did not find a lower bracket",
                name="max_expand",
                value=opts.max_expand,
            )
    else:
        lo = k
        for _ in range(opts.max_expand):
            if last is not None and lo >= last:
                return float(last)
            hi = lo + step if last is None else min(lo + step, last)
            if predicate(float(hi)):
                break
            lo = hi
            step *= 2
        else:
            raise ConvergenceError(
                "Lattice search did not find an upper bracket",
                name="max_expand",
                value=opts.max_expand,
            )

    modulus = support.modulus
    while hi - lo > modulus:
        mid = lo + ((hi - lo) // (2 * modulus)) * modulus
        if predicate(float(mid)):
            hi = mid
        else:
            lo = mid
    return float(hi)


def _lattice(distribution: Distribution) -> IntegerLatticeDiscreteSupport:
    support = distribution.support
    if not isinstance(support, IntegerLatticeDiscreteSupport):
        raise RuntimeError("Integer lattice support is required for discrete inversion.")
    return support


def fit_cdf_to_ppf_1D(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """
    Step quantile: the smallest support point ``k`` with ``cdf(k) >= p``.

    ``p = 0`` maps to the first support point and ``p = 1`` to the upper end of
    the support.
    """
    support = _lattice(distribution)
    cdf = sources[CharacteristicName.CDF]
    lower, upper = support.bounds

    def _ppf(p: Any, **options: Any) -> NumericArray:
        solver = SolverOptions.from_options(options)
        f = _scalar(cdf, options)

        def _invert(prob: float) -> float:
            if prob <= 0.0:
                return lower
            if prob >= 1.0:
                return upper
            return search_lattice(lambda k: f(k) >= prob, support, options=solver)

        return _map_scalar(_invert, p)

    return FittedComputationMethod(
        target=CharacteristicName.PPF, sources=[CharacteristicName.CDF], func=_ppf
    )


def fit_sf_to_isf_1D(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """
    Step quantile of the complement: the smallest support point ``k`` with ``sf(k) <= q``.

    ``q = 1`` maps to the first support point and ``q = 0`` to the upper end of
    the support.
    """
    support = _lattice(distribution)
    sf = sources[CharacteristicName.SF]
    lower, upper = support.bounds

    def _isf(q: Any, **options: Any) -> NumericArray:
        solver = SolverOptions.from_options(options)
        f = _scalar(sf, options)

        def _invert(prob: float) -> float:
            if prob >= 1.0:
                return lower
            if prob <= 0.0:
                return upper
            return search_lattice(lambda k: f(k) <= prob, support, options=solver)

        return _map_scalar(_invert, q)

    return FittedComputationMethod(
        target=CharacteristicName.ISF, sources=[CharacteristicName.SF], func=_isf
    )


# --- Summaries ---------------------------------------------------------------


def fit_ppf_to_median(
    distribution: Distribution, sources: Sources, /, **_: Any
) -> FittedComputationMethod[Any, Any]:
    """``median = ppf(0.5)``."""
    ppf = sources[CharacteristicName.PPF]

    def _median(_: Any = None, **options: Any) -> float:
        return float(ppf(np.float64(0.5), **options))

    return FittedComputationMethod(
        target=CharacteristicName.MEDIAN, sources=[CharacteristicName.PPF], func=_median
    )


__all__ = [
    "fit_pdf_to_log_pdf_1C",
    "fit_cdf_to_sf",
    "fit_sf_to_cdf",
    "fit_pdf_sf_to_hazard_1C",
    "fit_pmf_sf_to_hazard_1D",
    "fit_sf_to_chf",
    "fit_pmf_to_cdf_1D",
    "fit_cdf_to_ppf_1C",
    "fit_sf_to_isf_1C",
    "fit_cdf_to_ppf_1D",
    "fit_sf_to_isf_1D",
    "fit_ppf_to_median",
    "search_lattice",
]

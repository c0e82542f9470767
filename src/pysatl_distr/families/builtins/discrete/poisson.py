"""
Poisson distribution family implementation.

Contains the discrete Poisson family parametrized by its rate.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distr.distributions.fitters import search_lattice
from pysatl_distr.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distr.errors import ParameterNotPositiveError
from pysatl_distr.families.parametric_family import ParametricFamily
from pysatl_distr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distr.families.registry import ParametricFamilyRegister
from pysatl_distr.special import gamma_p, gamma_q, log_gamma, normal_ppf
from pysatl_distr.special._common import elementwise
from pysatl_distr.special.roots import SolverOptions
from pysatl_distr.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any

# Half-width of the entropy summation window, in units of sqrt(rate), plus a margin
_ENTROPY_WINDOW = 40.0

_SUPPORT = IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0)


def _cornish_fisher_seed(rate: float, p: float) -> float:
    """Normal approximation with skewness correction to the Poisson quantile."""
    z = normal_ppf(p)
    root = math.sqrt(rate)
    return max(rate + root * (z + (z * z - 1.0) / (6.0 * root)), 0.0)


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Discrete distribution of the number of events in a fixed interval when
    events occur independently at a constant rate λ.

    Probability mass function:
        P(X = k) = λ^k exp(-λ) / k! for k = 0, 1, 2, ...

    The distribution function is P(X ≤ k) = Q(k + 1, λ), the regularized
    upper incomplete gamma function.
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - rate: float (λ)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability mass at x; 0 for negative or non-integer points
        """
        parameters = cast(_Rate, parameters)
        rate = parameters.rate

        on_lattice = (x >= 0) & (x == np.floor(x))
        k = np.where(on_lattice, x, 0.0)
        log_mass = k * math.log(rate) - rate - elementwise(log_gamma, k + 1.0)
        return np.where(on_lattice, np.exp(log_mass), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``Q(⌊x⌋ + 1, λ)``; 0 for x < 0."""
        parameters = cast(_Rate, parameters)
        rate = parameters.rate

        def _cdf(point: float) -> float:
            if point < 0:
                return 0.0
            return gamma_q(math.floor(point) + 1.0, rate)

        return elementwise(_cdf, x)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function ``P(⌊x⌋ + 1, λ)``; 1 for x < 0."""
        parameters = cast(_Rate, parameters)
        rate = parameters.rate

        def _sf(point: float) -> float:
            if point < 0:
                return 1.0
            return gamma_p(math.floor(point) + 1.0, rate)

        return elementwise(_sf, x)

    def ppf(parameters: Parametrization, p: NumericArray, **options: Any) -> NumericArray:
        """
        Percent point function for Poisson distribution.

        The smallest integer ``k`` with ``cdf(k) >= p``, searched from a
        Cornish-Fisher seed. ``p = 0`` gives 0 and ``p = 1`` gives ``inf``.
        """
        parameters = cast(_Rate, parameters)
        rate = parameters.rate
        solver = SolverOptions.from_options(options)

        def _quantile(prob: float) -> float:
            if prob <= 0.0:
                return 0.0
            if prob >= 1.0:
                return math.inf
            return search_lattice(
                lambda k: gamma_q(k + 1.0, rate) >= prob,
                _SUPPORT,
                start=_cornish_fisher_seed(rate, prob),
                options=solver,
            )

        return elementwise(_quantile, p)

    def isf(parameters: Parametrization, q: NumericArray, **options: Any) -> NumericArray:
        """
        Inverse survival function for Poisson distribution.

        The smallest integer ``k`` with ``sf(k) <= q``. ``q = 1`` gives 0 and
        ``q = 0`` gives ``inf``.
        """
        parameters = cast(_Rate, parameters)
        rate = parameters.rate
        solver = SolverOptions.from_options(options)

        def _quantile(prob: float) -> float:
            if prob >= 1.0:
                return 0.0
            if prob <= 0.0:
                return math.inf
            return search_lattice(
                lambda k: gamma_p(k + 1.0, rate) <= prob,
                _SUPPORT,
                start=_cornish_fisher_seed(rate, 1.0 - prob),
                options=solver,
            )

        return elementwise(_quantile, q)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.rate

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.rate

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode ``⌊λ⌋``."""
        parameters = cast(_Rate, parameters)
        return float(math.floor(parameters.rate))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness ``1/√λ``."""
        parameters = cast(_Rate, parameters)
        return 1.0 / math.sqrt(parameters.rate)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess (``1/λ``) kurtosis of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        excess_kurtosis = 1.0 / parameters.rate
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """
        Shannon entropy in nats.

        Summed over ``λ ± (40√λ + 40)``; the mass outside the window is
        negligible in double precision.
        """
        parameters = cast(_Rate, parameters)
        rate = parameters.rate

        half_width = _ENTROPY_WINDOW * math.sqrt(rate) + _ENTROPY_WINDOW
        k = np.arange(max(0.0, math.floor(rate - half_width)), math.ceil(rate + half_width) + 1)
        log_mass = k * math.log(rate) - rate - elementwise(log_gamma, k + 1.0)
        return float(-np.sum(np.exp(log_mass) * log_mass))

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Poisson distribution"""
        return _SUPPORT

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.PDF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        support_by_parametrization=_support,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of Poisson distribution.

        Parameters
        ----------
        rate : float
            Expected number of events (λ)
        """

        rate: float

        @constraint(description="rate > 0", error=ParameterNotPositiveError, parameter="rate")
        def check_rate_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.rate > 0

    ParametricFamilyRegister.register(Poisson)

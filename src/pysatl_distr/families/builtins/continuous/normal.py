"""
Normal distribution family implementation.

Contains the Normal family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.errors import ParameterNotPositiveError
from pysatl_distr.families.parametric_family import ParametricFamily
from pysatl_distr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distr.families.registry import ParametricFamilyRegister
from pysatl_distr.special import normal_cdf, normal_isf, normal_ppf, normal_sf
from pysatl_distr.special._common import elementwise
from pysatl_distr.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

    The distribution and survival functions are computed from the
    complementary error function, the quantile from the kernel's
    standard normal quantile.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization ()
        Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_MeanStd, parameters)

        sigma = parameters.sigma
        mu = parameters.mu

        coefficient = 1.0 / (sigma * np.sqrt(2 * np.pi))
        exponent = -((x - mu) ** 2) / (2 * sigma**2)

        return cast(NumericArray, coefficient * np.exp(exponent))

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Logarithm of the density, exact far into the tails."""
        parameters = cast(_MeanStd, parameters)
        z = (x - parameters.mu) / parameters.sigma
        return cast(NumericArray, -0.5 * z**2 - np.log(parameters.sigma) - 0.5 * np.log(2 * np.pi))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_MeanStd, parameters)

        z = (x - parameters.mu) / parameters.sigma
        return elementwise(normal_cdf, z)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function ``P(X > x)``, accurate in the upper tail."""
        parameters = cast(_MeanStd, parameters)

        z = (x - parameters.mu) / parameters.sigma
        return elementwise(normal_sf, z)

    def ppf(parameters: Parametrization, p: NumericArray, **options: Any) -> NumericArray:
        """
        Percent point function (inverse CDF) for normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (mean)
            - sigma: float (standard deviation)
        p : NumericArray
            Probability from [0, 1]
        **options
            Root-finder settings for the standard normal quantile.

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p
            If p[i] is 0 or 1, then the result[i] is -inf and inf correspondingly
        """
        parameters = cast(_MeanStd, parameters)

        z = elementwise(partial(normal_ppf, **options), p)
        return cast(NumericArray, parameters.mu + parameters.sigma * z)

    def isf(parameters: Parametrization, q: NumericArray, **options: Any) -> NumericArray:
        """Inverse survival function; ``isf(q) = mu - sigma * ppf_std(q)``."""
        parameters = cast(_MeanStd, parameters)

        z = elementwise(partial(normal_isf, **options), q)
        return cast(NumericArray, parameters.mu + parameters.sigma * z)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of normal distribution."""
        parameters = cast(_MeanStd, parameters)
        return parameters.sigma**2

    def location_func(parameters: Parametrization, _: Any) -> float:
        """Mode and median of normal distribution (both equal the mean)."""
        parameters = cast(_MeanStd, parameters)
        return parameters.mu

    def skew_func(_1: Parametrization, _2: Any) -> float:
        """Skewness of normal distribution (always 0)."""
        return 0.0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of normal distribution.

        Parameters
        ----------
        _1 : Parametrization
            Needed by architecture parameter
        excess : bool
            A value defines if there will be raw or excess kurtosis
            default is False

        Returns
        -------
        float
            Kurtosis value
        """
        if not excess:
            return 3.0
        else:
            return 0.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy ``log(σ√(2πe))``."""
        parameters = cast(_MeanStd, parameters)
        return 0.5 * math.log(2 * math.pi * math.e * parameters.sigma**2)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of normal distribution"""
        return ContinuousSupport()

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec", "exponential"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOG_PDF: log_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MODE: location_func,
            CharacteristicName.MEDIAN: location_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        support_by_parametrization=_support,
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        sigma : float
            Standard deviation of the distribution
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0", error=ParameterNotPositiveError, parameter="sigma")
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return self.sigma > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : float
            Mean of the distribution
        tau : float
            Precision parameter (inverse variance)
        """

        mu: float
        tau: float

        @constraint(description="tau > 0", error=ParameterNotPositiveError, parameter="tau")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive."""
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            sigma = math.sqrt(1 / self.tau)
            return _MeanStd(mu=self.mu, sigma=sigma)

    @parametrization(family=Normal, name="exponential")
    class _Exp(Parametrization):
        """
        Exponential family parametrization of normal distribution.
            Uses the form: y = exp(a*x² + b*x + c)

        Parameters
        ----------
        a : float
            Quadratic term coefficient in exponential form
        b : float
            Linear term coefficient in exponential form
        """

        a: float
        b: float

        @property
        def c(self) -> float:
            """
            Calculate the normalization constant c.

            Returns
            -------
            float
                Normalization constant
            """
            return (self.b**2) / (4 * self.a) - (1 / 2) * math.log(math.pi / (-self.a))

        @constraint(description="a < 0", parameter="a")
        def check_a_negative(self) -> bool:
            """Check that quadratic term coefficient is negative."""
            return self.a < 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.
            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            mu = -self.b / (2 * self.a)
            sigma = math.sqrt(-1 / (2 * self.a))
            return _MeanStd(mu=mu, sigma=sigma)

    ParametricFamilyRegister.register(Normal)

"""
Exponential distribution family implementation.

Contains the Exponential family with rate and scale parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
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
from pysatl_distr.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    The exponential distribution is a continuous probability distribution that
    describes the time between events in a Poisson process. It has a single
    parameter: rate (λ) or scale (β = 1/λ).

    Probability density function (rate parametrization):
        f(x) = λ * exp(-λ * x) for x ≥ 0

    The exponential distribution is memoryless: its hazard is the constant λ.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_Rate, parameters)

        lambda_ = parameters.lambda_
        with np.errstate(over="ignore"):
            return np.where(x >= 0, lambda_ * np.exp(-lambda_ * x), 0.0)

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density ``log(λ) - λx`` on ``x ≥ 0``, ``-inf`` elsewhere."""
        parameters = cast(_Rate, parameters)

        lambda_ = parameters.lambda_
        return np.where(x >= 0, math.log(lambda_) - lambda_ * x, -np.inf)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_Rate, parameters)

        lambda_ = parameters.lambda_
        with np.errstate(over="ignore"):
            return np.where(x >= 0, -np.expm1(-lambda_ * x), 0.0)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function ``exp(-λx)``."""
        parameters = cast(_Rate, parameters)

        lambda_ = parameters.lambda_
        with np.errstate(over="ignore"):
            return np.where(x >= 0, np.exp(-lambda_ * x), 1.0)

    def hazard(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Constant hazard ``λ`` on the support."""
        parameters = cast(_Rate, parameters)
        return np.where(x >= 0, parameters.lambda_, 0.0)

    def chf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative hazard ``λx`` on the support."""
        parameters = cast(_Rate, parameters)
        return np.where(x >= 0, parameters.lambda_ * x, 0.0)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (rate parameter)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p:
            - For p = 0: returns 0.0
            - For p = 1: returns np.inf
            - For p in (0, 1): returns -ln(1-p)/λ
        """
        parameters = cast(_Rate, parameters)
        lambda_ = parameters.lambda_

        with np.errstate(divide="ignore", invalid="ignore"):
            return np.where(p < 1.0, -np.log1p(-p) / lambda_, np.inf)

    def isf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """Inverse survival function ``-ln(q)/λ``; ``inf`` at ``q = 0``."""
        parameters = cast(_Rate, parameters)
        lambda_ = parameters.lambda_

        with np.errstate(divide="ignore"):
            return np.where(q > 0.0, -np.log(q) / lambda_, np.inf)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of exponential distribution."""
        parameters = cast(_Rate, parameters)
        return 1.0 / parameters.lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of exponential distribution."""
        parameters = cast(_Rate, parameters)
        return 1.0 / (parameters.lambda_**2)

    def mode_func(_1: Parametrization, _2: Any) -> float:
        """Mode of exponential distribution (always 0)."""
        return 0.0

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Median ``ln(2)/λ``."""
        parameters = cast(_Rate, parameters)
        return math.log(2) / parameters.lambda_

    def skew_func(_1: Parametrization, _2: Any) -> float:
        """Skewness of exponential distribution (always 2)."""
        return 2.0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of exponential distribution.

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
            return 9.0
        else:
            return 6.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy ``1 - log(λ)``."""
        parameters = cast(_Rate, parameters)
        return 1.0 - math.log(parameters.lambda_)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of exponential distribution"""
        return ContinuousSupport(left=0.0)

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOG_PDF: log_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.HAZARD: hazard,
            CharacteristicName.CHF: chf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        support_by_parametrization=_support,
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        lambda_ : float
            Rate parameter (λ) of the distribution
        """

        lambda_: float

        @constraint(description="lambda_ > 0", error=ParameterNotPositiveError, parameter="lambda_")
        def check_lambda_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.lambda_ > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        beta : float
            Scale parameter (β) of the distribution, β = 1/λ
        """

        beta: float

        @constraint(description="beta > 0", error=ParameterNotPositiveError, parameter="beta")
        def check_beta_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Rate parametrization.

            Returns
            -------
            Parametrization
                Rate parametrization instance
            """
            return _Rate(lambda_=1.0 / self.beta)

    ParametricFamilyRegister.register(Exponential)

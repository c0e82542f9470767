"""
Uniform distribution family implementation.

Contains the Uniform family with multiple parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distr.distributions.strategies import DefaultSamplingUnivariateStrategy
from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.errors import InvalidBoundsError, ParameterNotPositiveError
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


def _scaled_width(lower: float, upper: float) -> tuple[float, float]:
    """
    Width of ``[lower, upper]`` together with the factor it was scaled by.

    Returns ``(upper - lower, 1)`` when the difference is finite and
    ``(upper/2 - lower/2, 1/2)`` when it overflows, so that
    ``width / factor == upper - lower`` in exact arithmetic.
    """
    width = upper - lower
    if math.isfinite(width):
        return width, 1.0
    return upper / 2 - lower / 2, 0.5


def configure_uniform_family() -> None:
    """
    Configure and register the Uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    UNIFORM_DOC = """
    Uniform (continuous) distribution.

    The uniform distribution is a continuous probability distribution where
    all intervals of the same length are equally probable. It is defined by
    two parameters: lower bound and upper bound.

    Probability density function:
        f(x) = 1/(upper - lower) for x in [lower, upper], 0 otherwise

    The uniform distribution is often used when there is no prior knowledge
    about the possible values of a variable, representing maximum uncertainty.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for uniform distribution.
            - For x < lower: returns 0
            - For x > upper: returns 0
            - Otherwise: returns (1 / (upper - lower))

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower: float (lower bound)
            - upper: float (upper bound)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_Standard, parameters)

        lower = parameters.lower
        upper = parameters.upper
        width, factor = _scaled_width(lower, upper)

        return np.where((x >= lower) & (x <= upper), factor / width, 0.0)

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density: ``-log(upper - lower)`` inside the support, ``-inf`` outside."""
        parameters = cast(_Standard, parameters)

        lower = parameters.lower
        upper = parameters.upper
        width, factor = _scaled_width(lower, upper)

        return np.where(
            (x >= lower) & (x <= upper), math.log(factor) - math.log(width), -np.inf
        )

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for uniform distribution.
        Uses np.clip for vectorized computation:
            - For x < lower: returns 0
            - For x > upper: returns 1

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower: float (lower bound)
            - upper: float (upper bound)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_Standard, parameters)

        lower = parameters.lower
        upper = parameters.upper
        width, factor = _scaled_width(lower, upper)

        return cast(
            NumericArray, np.clip((x * factor - lower * factor) / width, 0.0, 1.0)
        )

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function, computed from the upper bound."""
        parameters = cast(_Standard, parameters)

        lower = parameters.lower
        upper = parameters.upper
        width, factor = _scaled_width(lower, upper)

        return cast(
            NumericArray, np.clip((upper * factor - x * factor) / width, 0.0, 1.0)
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for uniform distribution.

        For uniform distribution on [lower, upper]:
        - For p = 0: returns lower
        - For p = 1: returns upper
        - For p in (0, 1): returns lower + p × (upper - lower)

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower: float (lower bound)
            - upper: float (upper bound)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p
        """
        parameters = cast(_Standard, parameters)
        lower = parameters.lower
        upper = parameters.upper
        width, factor = _scaled_width(lower, upper)

        step = p * width
        inside = lower + step if factor == 1.0 else lower + step + step
        return np.where(p >= 1.0, upper, inside)

    def isf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """Inverse survival function: ``upper - q × (upper - lower)``."""
        parameters = cast(_Standard, parameters)
        lower = parameters.lower
        upper = parameters.upper
        width, factor = _scaled_width(lower, upper)

        step = q * width
        inside = upper - step if factor == 1.0 else upper - step - step
        return np.where(q >= 1.0, lower, inside)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of uniform distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.lower / 2 + parameters.upper / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of uniform distribution; ``inf`` once it exceeds the float range."""
        parameters = cast(_Standard, parameters)
        width, factor = _scaled_width(parameters.lower, parameters.upper)
        return (width / factor) * (width / factor) / 12

    def mode_func(_1: Parametrization, _2: Any) -> None:
        """Every point of the support is a mode, so none is reported."""
        return None

    def skew_func(_1: Parametrization, _2: Any) -> float:
        """Skewness of uniform distribution (always 0)."""
        return 0.0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of uniform distribution.

        Parameters
        ----------
        _1 : Parametrization
            Needed by architecture parameter
        _2 : Any
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
            return 1.8
        else:
            return -1.2

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy ``log(upper - lower)``."""
        parameters = cast(_Standard, parameters)
        width, factor = _scaled_width(parameters.lower, parameters.upper)
        return math.log(width) - math.log(factor)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of uniform distribution"""
        parameters = cast(_Standard, parameters.transform_to_base_parametrization())
        return ContinuousSupport(
            left=parameters.lower,
            right=parameters.upper,
            left_closed=True,
            right_closed=True,
        )

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth", "minRange"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.LOG_PDF: log_pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.MEDIAN: mean_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        sampling_strategy=DefaultSamplingUnivariateStrategy(),
        support_by_parametrization=_support,
    )
    Uniform.__doc__ = UNIFORM_DOC

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of uniform distribution.

        Parameters
        ----------
        lower : float
            Lower bound of the distribution
        upper : float
            Upper bound of the distribution
        """

        lower: float
        upper: float

        @constraint(description="lower < upper", error=InvalidBoundsError, parameter="upper")
        def check_lower_less_than_upper(self) -> bool:
            """Check that lower bound is less than upper bound."""
            return self.lower < self.upper

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """
        Mean-width parametrization of uniform distribution.

        Parameters
        ----------
        mean : float
            Mean (center) of the distribution
        width : float
            Width of the distribution (upper - lower)
        """

        mean: float
        width: float

        @constraint(description="width > 0", error=ParameterNotPositiveError, parameter="width")
        def check_width_positive(self) -> bool:
            """Check that width is positive."""
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            half_width = self.width / 2
            return _Standard(lower=self.mean - half_width, upper=self.mean + half_width)

    @parametrization(family=Uniform, name="minRange")
    class _MinRange(Parametrization):
        """
        Minimum-range parametrization of uniform distribution.

        Parameters
        ----------
        minimum : float
            Minimum value (lower bound)
        range_val : float
            Range of the distribution (upper - lower)
        """

        minimum: float
        range_val: float

        @constraint(
            description="range_val > 0", error=ParameterNotPositiveError, parameter="range_val"
        )
        def check_range_positive(self) -> bool:
            """Check that range is positive."""
            return self.range_val > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            return _Standard(lower=self.minimum, upper=self.minimum + self.range_val)

    ParametricFamilyRegister.register(Uniform)

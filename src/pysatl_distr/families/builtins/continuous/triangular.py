"""
Triangular distribution family implementation.

Contains the Triangular family defined by its lower limit, mode and upper limit.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.errors import InvalidBoundsError, ParameterOutOfRangeError
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


def configure_triangular_family() -> None:
    """
    Configure and register the Triangular distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.TRIANGULAR):
        return

    TRIANGULAR_DOC = """
    Triangular distribution.

    Continuous distribution on [lower, upper] whose density rises linearly
    from zero at the lower limit to its peak at the mode and falls linearly
    back to zero at the upper limit.

    Probability density function (a = lower, c = mode, b = upper):
        f(x) = 2(x - a) / ((b - a)(c - a))    for a ≤ x < c
        f(x) = 2 / (b - a)                    for x = c
        f(x) = 2(b - x) / ((b - a)(b - c))    for c < x ≤ b

    The mode may coincide with either limit, giving a right or left
    triangle.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for triangular distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lower: float (lower limit)
            - mode: float (peak of the density)
            - upper: float (upper limit)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, 0 outside [lower, upper]
        """
        parameters = cast(_Standard, parameters)
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        width = b - a

        rising = (x >= a) & (x < c)
        falling = (x > c) & (x <= b)
        with np.errstate(divide="ignore", invalid="ignore"):
            left = 2.0 * (x - a) / (width * (c - a))
            right = 2.0 * (b - x) / (width * (b - c))
        return np.where(
            rising, left, np.where(falling, right, np.where(x == c, 2.0 / width, 0.0))
        )

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for triangular distribution.

        Quadratic on each side of the mode:
            - For lower < x ≤ mode: (x - a)² / ((b - a)(c - a))
            - For mode < x < upper: 1 - (b - x)² / ((b - a)(b - c))
        """
        parameters = cast(_Standard, parameters)
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        width = b - a

        with np.errstate(divide="ignore", invalid="ignore"):
            left = (x - a) ** 2 / (width * (c - a))
            right = 1.0 - (b - x) ** 2 / (width * (b - c))
        return np.where(
            x <= a,
            0.0,
            np.where(x <= c, left, np.where(x < b, right, 1.0)),
        )

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function; the tail beyond the mode is computed directly."""
        parameters = cast(_Standard, parameters)
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        width = b - a

        with np.errstate(divide="ignore", invalid="ignore"):
            left = 1.0 - (x - a) ** 2 / (width * (c - a))
            right = (b - x) ** 2 / (width * (b - c))
        return np.where(
            x <= a,
            1.0,
            np.where(x <= c, left, np.where(x < b, right, 0.0)),
        )

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for triangular distribution.

        The branch is chosen by comparing ``p`` with ``F(mode) = (c - a)/(b - a)``:
            - p < F(mode): a + sqrt(p (b - a)(c - a))
            - otherwise:   b - sqrt((1 - p)(b - a)(b - c))
        """
        parameters = cast(_Standard, parameters)
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        width = b - a

        left = a + np.sqrt(p * width * (c - a))
        right = b - np.sqrt((1.0 - p) * width * (b - c))
        return np.where(p * width < c - a, left, right)

    def isf(parameters: Parametrization, q: NumericArray) -> NumericArray:
        """Inverse survival function, inverting each piece of the survival function."""
        parameters = cast(_Standard, parameters)
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        width = b - a

        left = a + np.sqrt((1.0 - q) * width * (c - a))
        right = b - np.sqrt(q * width * (b - c))
        return np.where(q * width > b - c, left, right)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of triangular distribution."""
        parameters = cast(_Standard, parameters)
        return (parameters.lower + parameters.mode + parameters.upper) / 3

    def _spread(parameters: _Standard) -> float:
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        return a * a + b * b + c * c - a * b - a * c - b * c

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of triangular distribution."""
        parameters = cast(_Standard, parameters)
        return _spread(parameters) / 18

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode of triangular distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.mode

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Median of triangular distribution."""
        parameters = cast(_Standard, parameters)
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        if c >= (a + b) / 2:
            return a + math.sqrt((b - a) * (c - a) / 2)
        return b - math.sqrt((b - a) * (b - c) / 2)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of triangular distribution."""
        parameters = cast(_Standard, parameters)
        a, c, b = parameters.lower, parameters.mode, parameters.upper
        numerator = math.sqrt(2) * (a + b - 2 * c) * (2 * a - b - c) * (a - 2 * b + c)
        return numerator / (5 * _spread(parameters) ** 1.5)

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> float:
        """Raw (2.4) or excess (-0.6) kurtosis of triangular distribution."""
        if not excess:
            return 2.4
        else:
            return -0.6

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy ``1/2 + log((b - a)/2)``."""
        parameters = cast(_Standard, parameters)
        return 0.5 + math.log((parameters.upper - parameters.lower) / 2)

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of triangular distribution"""
        parameters = cast(_Standard, parameters)
        return ContinuousSupport(
            left=parameters.lower,
            right=parameters.upper,
            left_closed=True,
            right_closed=True,
        )

    Triangular = ParametricFamily(
        name=FamilyName.TRIANGULAR,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
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
    Triangular.__doc__ = TRIANGULAR_DOC

    @parametrization(family=Triangular, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of triangular distribution.

        Parameters
        ----------
        lower : float
            Lower limit of the support
        mode : float
            Peak of the density, lower ≤ mode ≤ upper
        upper : float
            Upper limit of the support
        """

        lower: float
        mode: float
        upper: float

        @constraint(description="lower < upper", error=InvalidBoundsError, parameter="upper")
        def check_lower_less_than_upper(self) -> bool:
            """Check that the support is a non-degenerate interval."""
            return self.lower < self.upper

        @constraint(
            description="lower <= mode <= upper", error=ParameterOutOfRangeError, parameter="mode"
        )
        def check_mode_inside(self) -> bool:
            """Check that the mode lies within the support."""
            return self.lower <= self.mode <= self.upper

    ParametricFamilyRegister.register(Triangular)

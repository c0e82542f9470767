"""
Chi-squared distribution family implementation.

The chi-squared distribution with ``df`` degrees of freedom is the gamma
distribution with shape ``df/2`` and scale 2.
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
from pysatl_distr.families.builtins.continuous.gamma import (
    gamma_cdf,
    gamma_entropy,
    gamma_isf,
    gamma_log_pdf,
    gamma_ppf,
    gamma_sf,
)
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

_SCALE = 2.0


def configure_chi_squared_family() -> None:
    """
    Configure and register the Chi-squared distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return

    CHI_SQUARED_DOC = """
    Chi-squared distribution.

    Distribution of a sum of ``df`` squared independent standard normal
    variables; ``df`` may be any positive real.

    Probability density function:
        f(x) = x^(ν/2 - 1) exp(-x/2) / (2^(ν/2) Γ(ν/2)) for x > 0
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Probability density function for chi-squared distribution."""
        parameters = cast(_Standard, parameters)
        return np.exp(gamma_log_pdf(parameters.df / 2, _SCALE, x))

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density for chi-squared distribution."""
        parameters = cast(_Standard, parameters)
        return gamma_log_pdf(parameters.df / 2, _SCALE, x)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``P(ν/2, x/2)``."""
        parameters = cast(_Standard, parameters)
        return gamma_cdf(parameters.df / 2, _SCALE, x)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function ``Q(ν/2, x/2)``."""
        parameters = cast(_Standard, parameters)
        return gamma_sf(parameters.df / 2, _SCALE, x)

    def ppf(parameters: Parametrization, p: NumericArray, **options: Any) -> NumericArray:
        """Percent point function ``2 P⁻¹(ν/2, p)``."""
        parameters = cast(_Standard, parameters)
        return gamma_ppf(parameters.df / 2, _SCALE, p, **options)

    def isf(parameters: Parametrization, q: NumericArray, **options: Any) -> NumericArray:
        """Inverse survival function ``2 Q⁻¹(ν/2, q)``."""
        parameters = cast(_Standard, parameters)
        return gamma_isf(parameters.df / 2, _SCALE, q, **options)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of chi-squared distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.df

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of chi-squared distribution."""
        parameters = cast(_Standard, parameters)
        return 2.0 * parameters.df

    def mode_func(parameters: Parametrization, _: Any) -> float | None:
        """Mode ``ν - 2``, defined for ``ν >= 2``."""
        parameters = cast(_Standard, parameters)
        if parameters.df < 2:
            return None
        return parameters.df - 2.0

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness ``√(8/ν)``."""
        parameters = cast(_Standard, parameters)
        return math.sqrt(8.0 / parameters.df)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess (``12/ν``) kurtosis of chi-squared distribution."""
        parameters = cast(_Standard, parameters)
        excess_kurtosis = 12.0 / parameters.df
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy of chi-squared distribution."""
        parameters = cast(_Standard, parameters)
        return gamma_entropy(parameters.df / 2, _SCALE)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of chi-squared distribution"""
        return ContinuousSupport(left=0.0)

    ChiSquared = ParametricFamily(
        name=FamilyName.CHI_SQUARED,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
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
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
            CharacteristicName.ENTROPY: entropy_func,
        },
        support_by_parametrization=_support,
    )
    ChiSquared.__doc__ = CHI_SQUARED_DOC

    @parametrization(family=ChiSquared, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of chi-squared distribution.

        Parameters
        ----------
        df : float
            Degrees of freedom (ν)
        """

        df: float

        @constraint(description="df > 0", error=ParameterNotPositiveError, parameter="df")
        def check_df_positive(self) -> bool:
            """Check that degrees of freedom are positive."""
            return self.df > 0

    ParametricFamilyRegister.register(ChiSquared)

"""
Beta distribution family implementation.

Contains the Beta family on the unit interval.
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
from pysatl_distr.special import (
    beta_inc,
    beta_inc_complement,
    beta_inc_complement_inv,
    beta_inc_inv,
    digamma,
    log_beta,
)
from pysatl_distr.special._common import elementwise
from pysatl_distr.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def _log_density_at_edge(exponent: float, log_norm: float) -> float:
    """Log-density at 0 (or 1) where the factor ``x^(exponent)`` degenerates."""
    if exponent < 0:
        return math.inf
    if exponent == 0:
        return -log_norm
    return -math.inf


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution.

    Continuous distribution on [0, 1] with two positive shape parameters
    α and β.

    Probability density function:
        f(x) = x^(α-1) (1-x)^(β-1) / B(α, β) for 0 ≤ x ≤ 1

    The distribution function is the regularized incomplete beta function
    I_x(α, β).
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density of beta distribution; ``-inf`` outside [0, 1]."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        log_norm = log_beta(a, b)

        inside = (x > 0) & (x < 1)
        safe_x = np.where(inside, x, 0.5)
        interior = (a - 1.0) * np.log(safe_x) + (b - 1.0) * np.log1p(-safe_x) - log_norm
        at_zero = _log_density_at_edge(a - 1.0, log_norm)
        at_one = _log_density_at_edge(b - 1.0, log_norm)
        return np.where(
            inside, interior, np.where(x == 0, at_zero, np.where(x == 1, at_one, -np.inf))
        )

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (first shape)
            - beta: float (second shape)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        return np.exp(log_pdf(parameters, x))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``I_x(α, β)``."""
        parameters = cast(_Standard, parameters)
        return elementwise(
            partial(beta_inc, parameters.alpha, parameters.beta), np.clip(x, 0.0, 1.0)
        )

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function ``1 - I_x(α, β)`` without cancellation."""
        parameters = cast(_Standard, parameters)
        return elementwise(
            partial(beta_inc_complement, parameters.alpha, parameters.beta),
            np.clip(x, 0.0, 1.0),
        )

    def ppf(parameters: Parametrization, p: NumericArray, **options: Any) -> NumericArray:
        """Percent point function via the inverse incomplete beta function."""
        parameters = cast(_Standard, parameters)
        return elementwise(
            partial(beta_inc_inv, parameters.alpha, parameters.beta, **options), p
        )

    def isf(parameters: Parametrization, q: NumericArray, **options: Any) -> NumericArray:
        """Inverse survival function via the inverse complement."""
        parameters = cast(_Standard, parameters)
        return elementwise(
            partial(beta_inc_complement_inv, parameters.alpha, parameters.beta, **options), q
        )

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of beta distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.alpha / (parameters.alpha + parameters.beta)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of beta distribution."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        return a * b / ((a + b) ** 2 * (a + b + 1))

    def mode_func(parameters: Parametrization, _: Any) -> float | None:
        """Mode ``(α - 1)/(α + β - 2)`` for α > 1 and β > 1."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        if a <= 1 or b <= 1:
            return None
        return (a - 1) / (a + b - 2)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of beta distribution."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        return 2 * (b - a) * math.sqrt(a + b + 1) / ((a + b + 2) * math.sqrt(a * b))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess kurtosis of beta distribution."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        numerator = 6 * ((a - b) ** 2 * (a + b + 1) - a * b * (a + b + 2))
        excess_kurtosis = numerator / (a * b * (a + b + 2) * (a + b + 3))
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy of beta distribution."""
        parameters = cast(_Standard, parameters)
        a, b = parameters.alpha, parameters.beta
        return (
            log_beta(a, b)
            - (a - 1) * digamma(a)
            - (b - 1) * digamma(b)
            + (a + b - 2) * digamma(a + b)
        )

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of beta distribution"""
        return ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=True)

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanPrecision"],
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
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of beta distribution.

        Parameters
        ----------
        alpha : float
            First shape parameter (α)
        beta : float
            Second shape parameter (β)
        """

        alpha: float
        beta: float

        @constraint(description="alpha > 0", error=ParameterNotPositiveError, parameter="alpha")
        def check_alpha_positive(self) -> bool:
            """Check that the first shape is positive."""
            return self.alpha > 0

        @constraint(description="beta > 0", error=ParameterNotPositiveError, parameter="beta")
        def check_beta_positive(self) -> bool:
            """Check that the second shape is positive."""
            return self.beta > 0

    @parametrization(family=Beta, name="meanPrecision")
    class _MeanPrecision(Parametrization):
        """
        Mean-precision parametrization of beta distribution.

        Parameters
        ----------
        mean : float
            Mean μ in (0, 1)
        precision : float
            Precision φ = α + β
        """

        mean: float
        precision: float

        @constraint(description="0 < mean < 1", parameter="mean")
        def check_mean_inside(self) -> bool:
            """Check that the mean lies strictly inside the unit interval."""
            return 0 < self.mean < 1

        @constraint(
            description="precision > 0", error=ParameterNotPositiveError, parameter="precision"
        )
        def check_precision_positive(self) -> bool:
            """Check that precision is positive."""
            return self.precision > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            return _Standard(
                alpha=self.mean * self.precision, beta=(1 - self.mean) * self.precision
            )

    ParametricFamilyRegister.register(Beta)

"""
Inverse-gamma distribution family implementation.

If ``Y`` is gamma distributed with shape ``α`` and rate ``β`` then ``1/Y``
is inverse-gamma distributed with shape ``α`` and scale ``β``. Distribution
functions are therefore the incomplete gamma functions at ``β/x``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from math import inf
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
    digamma,
    gamma_p,
    gamma_p_inv,
    gamma_q,
    gamma_q_inv,
    log_gamma,
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


def configure_inverse_gamma_family() -> None:
    """
    Configure and register the Inverse-gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.INVERSE_GAMMA):
        return

    INVERSE_GAMMA_DOC = """
    Inverse-gamma distribution.

    Continuous distribution on the positive half-line with shape α and
    scale β.

    Probability density function:
        f(x) = β^α / Γ(α) · x^(-α-1) · exp(-β/x) for x > 0

    Moments exist only for large enough shapes: the mean needs α > 1, the
    variance α > 2, the skewness α > 3 and the kurtosis α > 4. Below these
    thresholds the moment is reported as None.
    """

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density; ``-inf`` for ``x <= 0``."""
        parameters = cast(_Standard, parameters)
        alpha, beta = parameters.shape, parameters.scale

        positive = x > 0
        safe_x = np.where(positive, x, 1.0)
        with np.errstate(over="ignore"):
            inside = (
                alpha * math.log(beta)
                - log_gamma(alpha)
                - (alpha + 1.0) * np.log(safe_x)
                - beta / safe_x
            )
        return np.where(positive, inside, -np.inf)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for inverse-gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float (α)
            - scale: float (β)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, 0 for x <= 0
        """
        return np.exp(log_pdf(parameters, x))

    def _transformed(beta: float, x: NumericArray) -> NumericArray:
        # β/x on the support; non-positive points map to +inf
        positive = x > 0
        with np.errstate(over="ignore"):
            return np.where(positive, beta / np.where(positive, x, 1.0), np.inf)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``Q(α, β/x)``."""
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape

        return elementwise(lambda t: gamma_q(alpha, t), _transformed(parameters.scale, x))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function ``P(α, β/x)``."""
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape

        return elementwise(lambda t: gamma_p(alpha, t), _transformed(parameters.scale, x))

    def ppf(parameters: Parametrization, p: NumericArray, **options: Any) -> NumericArray:
        """
        Percent point function (inverse CDF) for inverse-gamma distribution.

        Solves ``Q(α, β/x) = p``, i.e. ``x = β / Q⁻¹(α, p)``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float (α)
            - scale: float (β)
        p : NumericArray
            Probability from [0, 1]
        **options
            Root-finder settings.

        Returns
        -------
        NumericArray
            Quantiles; 0 for p = 0 and inf for p = 1
        """
        parameters = cast(_Standard, parameters)
        alpha, beta = parameters.shape, parameters.scale

        def _quantile(prob: float) -> float:
            y = gamma_q_inv(alpha, prob, **options)
            return inf if y == 0.0 else beta / y

        return elementwise(_quantile, p)

    def isf(parameters: Parametrization, q: NumericArray, **options: Any) -> NumericArray:
        """Inverse survival function ``β / P⁻¹(α, q)``."""
        parameters = cast(_Standard, parameters)
        alpha, beta = parameters.shape, parameters.scale

        def _quantile(prob: float) -> float:
            y = gamma_p_inv(alpha, prob, **options)
            return inf if y == 0.0 else beta / y

        return elementwise(_quantile, q)

    def mean_func(parameters: Parametrization, _: Any) -> float | None:
        """Mean ``β/(α - 1)`` for α > 1."""
        parameters = cast(_Standard, parameters)
        alpha, beta = parameters.shape, parameters.scale
        if alpha <= 1:
            return None
        return beta / (alpha - 1)

    def var_func(parameters: Parametrization, _: Any) -> float | None:
        """Variance ``β²/((α - 1)²(α - 2))`` for α > 2."""
        parameters = cast(_Standard, parameters)
        alpha, beta = parameters.shape, parameters.scale
        if alpha <= 2:
            return None
        return beta**2 / ((alpha - 1) ** 2 * (alpha - 2))

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode ``β/(α + 1)``."""
        parameters = cast(_Standard, parameters)
        return parameters.scale / (parameters.shape + 1)

    def skew_func(parameters: Parametrization, _: Any) -> float | None:
        """Skewness ``4√(α - 2)/(α - 3)`` for α > 3."""
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape
        if alpha <= 3:
            return None
        return 4.0 * math.sqrt(alpha - 2) / (alpha - 3)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float | None:
        """
        Raw or excess kurtosis of inverse-gamma distribution.

        The excess kurtosis ``(30α - 66)/((α - 3)(α - 4))`` exists for α > 4.
        """
        parameters = cast(_Standard, parameters)
        alpha = parameters.shape
        if alpha <= 4:
            return None
        excess_kurtosis = (30 * alpha - 66) / ((alpha - 3) * (alpha - 4))
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy ``α + log β + lnΓ(α) - (1 + α)ψ(α)``."""
        parameters = cast(_Standard, parameters)
        alpha, beta = parameters.shape, parameters.scale
        return alpha + math.log(beta) + log_gamma(alpha) - (1 + alpha) * digamma(alpha)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of inverse-gamma distribution"""
        return ContinuousSupport(left=0.0, left_closed=False)

    InverseGamma = ParametricFamily(
        name=FamilyName.INVERSE_GAMMA,
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
    InverseGamma.__doc__ = INVERSE_GAMMA_DOC

    @parametrization(family=InverseGamma, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of inverse-gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter (α)
        scale : float
            Scale parameter (β)
        """

        shape: float
        scale: float

        @constraint(description="shape > 0", error=ParameterNotPositiveError, parameter="shape")
        def check_shape_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.shape > 0

        @constraint(description="scale > 0", error=ParameterNotPositiveError, parameter="scale")
        def check_scale_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.scale > 0

    ParametricFamilyRegister.register(InverseGamma)

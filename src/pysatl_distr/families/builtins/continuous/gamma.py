"""
Gamma distribution family implementation.

Contains the Gamma family with shape-scale and shape-rate parameterizations.
The module-level helpers are shared with the chi-squared family, which is a
gamma distribution with shape ``df/2`` and scale 2.
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


def gamma_log_pdf(shape: float, scale: float, x: NumericArray) -> NumericArray:
    """
    Log-density of the gamma distribution.

    At ``x = 0`` the density is infinite for ``shape < 1``, ``1/scale`` for
    ``shape = 1`` and zero otherwise.
    """
    log_norm = log_gamma(shape) + shape * math.log(scale)
    positive = x > 0
    safe_x = np.where(positive, x, 1.0)
    inside = (shape - 1.0) * np.log(safe_x) - safe_x / scale - log_norm

    if shape < 1.0:
        at_zero = np.inf
    elif shape == 1.0:
        at_zero = -math.log(scale)
    else:
        at_zero = -np.inf
    return np.where(positive, inside, np.where(x == 0, at_zero, -np.inf))


def gamma_cdf(shape: float, scale: float, x: NumericArray) -> NumericArray:
    """``P(shape, x/scale)``; 0 for ``x <= 0``."""
    return elementwise(partial(gamma_p, shape), np.maximum(x, 0.0) / scale)


def gamma_sf(shape: float, scale: float, x: NumericArray) -> NumericArray:
    """``Q(shape, x/scale)``; 1 for ``x <= 0``."""
    return elementwise(partial(gamma_q, shape), np.maximum(x, 0.0) / scale)


def gamma_ppf(shape: float, scale: float, p: NumericArray, **options: Any) -> NumericArray:
    """``scale * P⁻¹(shape, p)``."""
    return cast(NumericArray, scale * elementwise(partial(gamma_p_inv, shape, **options), p))


def gamma_isf(shape: float, scale: float, q: NumericArray, **options: Any) -> NumericArray:
    """``scale * Q⁻¹(shape, q)``."""
    return cast(NumericArray, scale * elementwise(partial(gamma_q_inv, shape, **options), q))


def gamma_entropy(shape: float, scale: float) -> float:
    """Differential entropy ``k + log θ + lnΓ(k) + (1 - k)ψ(k)``."""
    return shape + math.log(scale) + log_gamma(shape) + (1.0 - shape) * digamma(shape)


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Continuous distribution on the positive half-line with shape k and
    scale θ (or rate 1/θ).

    Probability density function:
        f(x) = x^(k-1) exp(-x/θ) / (Γ(k) θ^k) for x > 0

    Distribution and quantile functions are the regularized incomplete
    gamma function and its inverse.
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float (k)
            - scale: float (θ)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_ShapeScale, parameters)
        return np.exp(gamma_log_pdf(parameters.shape, parameters.scale, x))

    def log_pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density of gamma distribution."""
        parameters = cast(_ShapeScale, parameters)
        return gamma_log_pdf(parameters.shape, parameters.scale, x)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function ``P(k, x/θ)``."""
        parameters = cast(_ShapeScale, parameters)
        return gamma_cdf(parameters.shape, parameters.scale, x)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Survival function ``Q(k, x/θ)``."""
        parameters = cast(_ShapeScale, parameters)
        return gamma_sf(parameters.shape, parameters.scale, x)

    def ppf(parameters: Parametrization, p: NumericArray, **options: Any) -> NumericArray:
        """
        Percent point function (inverse CDF) for gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - shape: float (k)
            - scale: float (θ)
        p : NumericArray
            Probability from [0, 1]
        **options
            Root-finder settings.

        Returns
        -------
        NumericArray
            Quantiles; 0 for p = 0 and inf for p = 1
        """
        parameters = cast(_ShapeScale, parameters)
        return gamma_ppf(parameters.shape, parameters.scale, p, **options)

    def isf(parameters: Parametrization, q: NumericArray, **options: Any) -> NumericArray:
        """Inverse survival function ``θ Q⁻¹(k, q)``."""
        parameters = cast(_ShapeScale, parameters)
        return gamma_isf(parameters.shape, parameters.scale, q, **options)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of gamma distribution."""
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape * parameters.scale

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of gamma distribution."""
        parameters = cast(_ShapeScale, parameters)
        return parameters.shape * parameters.scale**2

    def mode_func(parameters: Parametrization, _: Any) -> float | None:
        """Mode ``(k - 1)θ``; the density has no maximum for ``k < 1``."""
        parameters = cast(_ShapeScale, parameters)
        if parameters.shape < 1:
            return None
        return (parameters.shape - 1) * parameters.scale

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness ``2/√k``."""
        parameters = cast(_ShapeScale, parameters)
        return 2.0 / math.sqrt(parameters.shape)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw or excess (``6/k``) kurtosis of gamma distribution."""
        parameters = cast(_ShapeScale, parameters)
        excess_kurtosis = 6.0 / parameters.shape
        return excess_kurtosis if excess else excess_kurtosis + 3.0

    def entropy_func(parameters: Parametrization, _: Any) -> float:
        """Differential entropy of gamma distribution."""
        parameters = cast(_ShapeScale, parameters)
        return gamma_entropy(parameters.shape, parameters.scale)

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of gamma distribution"""
        return ContinuousSupport(left=0.0)

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale", "shapeRate"],
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
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter (k)
        scale : float
            Scale parameter (θ)
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

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        shape : float
            Shape parameter (α = k)
        rate : float
            Rate parameter (β = 1/θ)
        """

        shape: float
        rate: float

        @constraint(description="shape > 0", error=ParameterNotPositiveError, parameter="shape")
        def check_shape_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.shape > 0

        @constraint(description="rate > 0", error=ParameterNotPositiveError, parameter="rate")
        def check_rate_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.rate > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to shape-scale parametrization.

            Returns
            -------
            Parametrization
                Shape-scale parametrization instance
            """
            return _ShapeScale(shape=self.shape, scale=1.0 / self.rate)

    ParametricFamilyRegister.register(Gamma)

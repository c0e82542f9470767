from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from typing import Any, cast

import numpy as np
from mypy_extensions import KwArg

from pysatl_distr.distributions.computation import AnalyticalComputation
from pysatl_distr.distributions.support import (
    ContinuousSupport,
    IntegerLatticeDiscreteSupport,
)
from pysatl_distr.types import CharacteristicName, Kind
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


class DistributionTestBase:
    PDF = CharacteristicName.PDF
    CDF = CharacteristicName.CDF
    SF = CharacteristicName.SF
    PPF = CharacteristicName.PPF
    ISF = CharacteristicName.ISF
    PMF = CharacteristicName.PMF

    def make_uniform_ppf_distribution(
        self,
    ) -> StandaloneEuclideanUnivariateDistribution:
        ppf_func = cast(Callable[[Any, KwArg(Any)], Any], lambda q, **kwargs: q)
        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[Any, Any](target=self.PPF, func=ppf_func),
            ],
            support=ContinuousSupport(0, 1),
        )

    def make_logistic_cdf_distribution(
        self,
    ) -> StandaloneEuclideanUnivariateDistribution:
        def logistic_cdf(x: Any, **_: Any) -> Any:
            return 1.0 / (1.0 + np.exp(-np.asarray(x, dtype=float)))

        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[Any, Any](target=self.CDF, func=logistic_cdf),
            ],
            support=ContinuousSupport(),
        )

    def make_exponential_pdf_cdf_distribution(
        self, rate: float = 2.0
    ) -> StandaloneEuclideanUnivariateDistribution:
        def pdf(x: Any, **_: Any) -> Any:
            x = np.asarray(x, dtype=float)
            return np.where(x >= 0, rate * np.exp(-rate * np.maximum(x, 0.0)), 0.0)

        def cdf(x: Any, **_: Any) -> Any:
            x = np.asarray(x, dtype=float)
            return np.where(x >= 0, -np.expm1(-rate * np.maximum(x, 0.0)), 0.0)

        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[
                AnalyticalComputation[Any, Any](target=self.PDF, func=pdf),
                AnalyticalComputation[Any, Any](target=self.CDF, func=cdf),
            ],
            support=ContinuousSupport(left=0.0),
        )

    def make_discrete_point_pmf_distribution(
        self, is_with_support: bool = True
    ) -> StandaloneEuclideanUnivariateDistribution:
        masses = {0.0: 0.2, 1.0: 0.5, 2.0: 0.3}

        def pmf(x: Any, **_: Any) -> Any:
            return np.vectorize(lambda v: masses.get(float(v), 0.0), otypes=[float])(x)

        support = (
            IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0, max_k=2)
            if is_with_support
            else None
        )

        return StandaloneEuclideanUnivariateDistribution(
            kind=Kind.DISCRETE,
            analytical_computations=[
                AnalyticalComputation[Any, Any](target=self.PMF, func=pmf),
            ],
            support=support,
        )

    @staticmethod
    def make_normal_pdf_function(mu: float, sigma: float) -> Callable[[Any, KwArg(Any)], Any]:
        def pdf(x: Any, **_: Any) -> Any:
            z = (np.asarray(x, dtype=float) - mu) / sigma
            return np.exp(-0.5 * z * z) / (sigma * math.sqrt(2.0 * math.pi))

        return pdf

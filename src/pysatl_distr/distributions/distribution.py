"""
Distribution Interface
======================

The public :class:`Distribution` protocol used by strategies, fitters and the
evaluation facade.

Besides the raw ``query_method`` / ``calculate_characteristic`` pair, the
protocol offers one accessor per characteristic (``pdf``, ``cdf``, ``ppf``,
``mean``, ...). All of them go through
:func:`~pysatl_distr.distributions.evaluation.evaluate`, so argument
validation and result shaping are the same everywhere.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_distr.distributions.evaluation import evaluate
from pysatl_distr.types import CharacteristicName, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_distr.distributions.computation import AnalyticalComputation, Method
    from pysatl_distr.distributions.sampling import Sample
    from pysatl_distr.distributions.strategies import (
        ComputationStrategy,
        SamplingStrategy,
    )
    from pysatl_distr.distributions.support import Support
    from pysatl_distr.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies and fitters."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...
    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any = None, **options: Any
    ) -> Any:
        return evaluate(self, characteristic_name, value, **options)

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)

    @property
    def is_discrete(self) -> bool:
        """``True`` for distributions with a probability mass function."""
        return self.distribution_type.registry_features.get("kind") == Kind.DISCRETE

    # --- pointwise characteristics -----------------------------------------

    def pdf(self, x: Any, **options: Any) -> Any:
        """Probability density at ``x``."""
        return evaluate(self, CharacteristicName.PDF, x, **options)

    def log_pdf(self, x: Any, **options: Any) -> Any:
        """Natural logarithm of the density at ``x``."""
        return evaluate(self, CharacteristicName.LOG_PDF, x, **options)

    def pmf(self, x: Any, **options: Any) -> Any:
        """Probability mass at ``x``."""
        return evaluate(self, CharacteristicName.PMF, x, **options)

    def cdf(self, x: Any, **options: Any) -> Any:
        """``P(X <= x)``."""
        return evaluate(self, CharacteristicName.CDF, x, **options)

    def sf(self, x: Any, **options: Any) -> Any:
        """``P(X > x)``."""
        return evaluate(self, CharacteristicName.SF, x, **options)

    def hazard(self, x: Any, **options: Any) -> Any:
        """Hazard rate ``pdf / sf`` at ``x``."""
        return evaluate(self, CharacteristicName.HAZARD, x, **options)

    def chf(self, x: Any, **options: Any) -> Any:
        """Cumulative hazard ``-log(sf)`` at ``x``."""
        return evaluate(self, CharacteristicName.CHF, x, **options)

    def ppf(self, p: Any, **options: Any) -> Any:
        """Quantile function (inverse ``cdf``)."""
        return evaluate(self, CharacteristicName.PPF, p, **options)

    def isf(self, q: Any, **options: Any) -> Any:
        """Quantile of the complement (inverse ``sf``)."""
        return evaluate(self, CharacteristicName.ISF, q, **options)

    # --- summaries -----------------------------------------------------------

    def mean(self, **options: Any) -> float | None:
        return evaluate(self, CharacteristicName.MEAN, **options)  # type: ignore[no-any-return]

    def var(self, **options: Any) -> float | None:
        return evaluate(self, CharacteristicName.VAR, **options)  # type: ignore[no-any-return]

    def mode(self, **options: Any) -> float | None:
        return evaluate(self, CharacteristicName.MODE, **options)  # type: ignore[no-any-return]

    def median(self, **options: Any) -> float | None:
        return evaluate(self, CharacteristicName.MEDIAN, **options)  # type: ignore[no-any-return]

    def skewness(self, **options: Any) -> float | None:
        return evaluate(self, CharacteristicName.SKEW, **options)  # type: ignore[no-any-return]

    def kurtosis(self, excess: bool = False, **options: Any) -> float | None:
        """Raw kurtosis, or excess kurtosis (raw minus 3) when ``excess`` is set."""
        return evaluate(  # type: ignore[no-any-return]
            self, CharacteristicName.KURT, excess=excess, **options
        )

    def entropy(self, **options: Any) -> float | None:
        """Differential entropy (Shannon entropy for discrete distributions), in nats."""
        return evaluate(self, CharacteristicName.ENTROPY, **options)  # type: ignore[no-any-return]


__all__ = [
    "Distribution",
]

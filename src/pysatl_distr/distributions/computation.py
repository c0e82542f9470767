"""
Computation Primitives
======================

Building blocks used to compute distribution characteristics:

- :class:`AnalyticalComputation`: a closed-form callable provided by the
  distribution directly.
- :class:`ComputationMethod`: a conversion (e.g. ``cdf -> sf``) that is
  *fitted* to a distribution once its source characteristics are resolved.
- :class:`FittedComputationMethod`: the result of fitting, ready to be called.

Notes
-----
- Callables are **array-in, array-out**: they receive a ``float64`` array
  (possibly zero-dimensional) and return an array of the same shape.
  Summary characteristics (mean, variance, ...) ignore their argument and
  return a float or ``None``.
- ``**options`` are free-form and carry numeric tolerances
  (see :class:`~pysatl_distr.special.roots.SolverOptions`) or characteristic
  flags such as ``excess`` for kurtosis.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mypy_extensions import KwArg

from pysatl_distr.types import GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_distr.distributions.distribution import Distribution


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """Fitted conversion method (ready-to-use).

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names the conversion was fitted from.
    func : Callable[[In, KwArg(Any)], Out]
        Callable implementing the fitted conversion.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the fitted conversion."""
        return self.func(data, **options)


type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]
"""Anything a computation strategy may hand back for a characteristic."""

type Fitter[In, Out] = Callable[
    ["Distribution", Mapping[GenericCharacteristicName, Method[Any, Any]], KwArg(Any)],
    FittedComputationMethod[In, Out],
]
"""Signature of a conversion fitter: ``fitter(distribution, sources, **options)``."""


@dataclass(frozen=True, slots=True)
class ComputationMethod[In, Out]:
    """Conversion method factory (to be fitted).

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names. All of them must be resolvable for the
        conversion to apply.
    fitter : Fitter
        Builds a callable conversion for the given distribution from the
        already resolved source methods.

    Methods
    -------
    fit(distribution, sources, **options)
        Fit and return a :class:`FittedComputationMethod`.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Fitter[In, Out]

    def fit(
        self,
        distribution: "Distribution",
        sources: Mapping[GenericCharacteristicName, Method[Any, Any]],
        **options: Any,
    ) -> FittedComputationMethod[In, Out]:
        """Fit and return a :class:`FittedComputationMethod`."""
        missing = [name for name in self.sources if name not in sources]
        if missing:
            raise RuntimeError(
                f"Cannot fit '{self.target}': unresolved sources {', '.join(missing)}."
            )
        return self.fitter(distribution, sources, **options)


__all__ = [
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    "Fitter",
    "Method",
]

"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy`: resolves characteristic methods.
- :class:`DefaultComputationStrategy`: resolves analyticals and otherwise
  fits conversions from the conversion registry on demand.
- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy`: draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates.

Notes
-----
Strategies keep no per-call state, so one instance can be shared by every
distribution of a family and used from several threads.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_distr.distributions.computation import Method
from pysatl_distr.types import CharacteristicName, GenericCharacteristicName

from .registry import conversion_registry
from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

logger = logging.getLogger(__name__)


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Else, try the registry conversions to the target that apply to the
       distribution, in registration order. A conversion is used when all of
       its sources resolve (recursively, by the same rules) without revisiting
       a characteristic already being resolved.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical base or no conversion applies.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve an analytical or fitted method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical base and type.
        **options
            Passed to the fitter(s) when conversions are required.

        Returns
        -------
        Method
            Analytical or fitted callable implementing ``state``.
        """
        return self._resolve(state, distr, frozenset(), options)

    def _resolve(
        self,
        state: GenericCharacteristicName,
        distr: "Distribution",
        resolving: frozenset[GenericCharacteristicName],
        options: Mapping[str, Any],
    ) -> Method[In, Out]:
        analytical = distr.analytical_computations
        if state in analytical:
            return analytical[state]

        if not analytical:
            raise RuntimeError(
                "Distribution provides no analytical computations to ground conversions."
            )

        guard = resolving | {state}
        for method in conversion_registry().conversions(state, distr):
            if any(source in guard for source in method.sources):
                continue
            try:
                sources = {
                    source: self._resolve(source, distr, guard, options)
                    for source in method.sources
                }
                fitted = method.fit(distr, sources, **options)
            except RuntimeError as exc:
                logger.debug(
                    "Conversion %s -> %s is not available: %s",
                    tuple(method.sources),
                    state,
                    exc,
                )
                continue
            return fitted

        raise RuntimeError(f"No conversion path from any analytical characteristic to '{state}'.")


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)``.

    Options
    -------
    seed : int, optional
        Seed of a fresh :func:`numpy.random.default_rng` generator.
    rng : numpy.random.Generator, optional
        Generator to draw from; takes precedence over ``seed``.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}.")
        rng = options.pop("rng", None)
        seed = options.pop("seed", None)
        if rng is None:
            rng = np.random.default_rng(seed)

        ppf = distr.query_method(CharacteristicName.PPF, **options)
        U = rng.random(n)
        vals = np.asarray(ppf(U, **options), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)


__all__ = [
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
]

"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_distr.distributions.distribution import Distribution
from pysatl_distr.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_distr.distributions.computation import AnalyticalComputation
    from pysatl_distr.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_distr.distributions.support import Support
    from pysatl_distr.families.parametric_family import ParametricFamily
    from pysatl_distr.families.parametrizations import Parametrization
    from pysatl_distr.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Represents a concrete distribution with specific, already validated
    parameter values. Instances are immutable: analytical computations are
    bound once by the family when the instance is created.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    _analytical_computations : Mapping[str, AnalyticalComputation]
        Characteristic functions bound to ``parameters``.
    _sampling_strategy : SamplingStrategy
        Strategy used by :meth:`sample`.
    _computation_strategy : ComputationStrategy
        Strategy resolving characteristics.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None
    _analytical_computations: Mapping[
        GenericCharacteristicName, AnalyticalComputation[Any, Any]
    ] = field(repr=False, compare=False)
    _sampling_strategy: SamplingStrategy = field(repr=False, compare=False)
    _computation_strategy: ComputationStrategy[Any, Any] = field(repr=False, compare=False)

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """
        Get the parametric family this distribution belongs to.

        Returns
        -------
        ParametricFamily
            The parametric family of this distribution.
        """
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> ParametrizationName:
        """Name of the parametrization the instance was created with."""
        return self.parameters.name

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Get analytical computations for this distribution."""
        return self._analytical_computations

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        """Get the sampling strategy for this distribution."""
        return self._sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        """Get the computation strategy for this distribution."""
        return self._computation_strategy

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

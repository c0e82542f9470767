"""
Conversion Registry
===================

Global registry of conversions between characteristics. Each conversion is a
:class:`~pysatl_distr.distributions.computation.ComputationMethod`
(``sources -> target``) guarded by an :class:`ApplicabilityConstraint` that
decides, from the distribution type and instance features, whether the
conversion may be used for a given distribution.

The default configuration (see :func:`conversion_registry`) seeds the
univariate conversions:

========== ================== ==========================
target     sources            applies to
========== ================== ==========================
log_pdf    pdf                continuous
sf         cdf                any
cdf        sf                 any
cdf        pmf                discrete, left-bounded
hazard     pdf, sf            continuous
hazard     pmf, sf            discrete
chf        sf                 any
ppf        cdf                continuous / discrete
isf        sf                 continuous / discrete
median     ppf                any
========== ================== ==========================

Notes
-----
- Conversions for the same target are tried in registration order.
- Registering a conversion with the same target, sources and constraint
  replaces the previous one and emits a :class:`UserWarning`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import warnings
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, Self

from pysatl_distr.distributions.computation import ComputationMethod
from pysatl_distr.distributions.fitters import (
    fit_cdf_to_ppf_1C,
    fit_cdf_to_ppf_1D,
    fit_cdf_to_sf,
    fit_pdf_sf_to_hazard_1C,
    fit_pdf_to_log_pdf_1C,
    fit_pmf_sf_to_hazard_1D,
    fit_pmf_to_cdf_1D,
    fit_ppf_to_median,
    fit_sf_to_cdf,
    fit_sf_to_chf,
    fit_sf_to_isf_1C,
    fit_sf_to_isf_1D,
)
from pysatl_distr.types import CharacteristicName, Kind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_distr.distributions.distribution import Distribution
    from pysatl_distr.types import GenericCharacteristicName

logger = logging.getLogger(__name__)


class Constraint(Protocol):
    """Protocol for value-level constraints."""

    def allows(self, value: Any) -> bool:
        """Check if the constraint allows the given value."""
        ...


@dataclass(frozen=True, slots=True)
class SetConstraint:
    """
    Membership in a finite set.

    Parameters
    ----------
    allowed : frozenset[Any] | None
        The set of allowed values. If None, all values are allowed.
    """

    allowed: frozenset[Any] | None = None

    def allows(self, value: Any) -> bool:
        return True if self.allowed is None else (value in self.allowed)


@dataclass(frozen=True, slots=True)
class NumericConstraint:
    """
    Integer value with optional bounds and/or allowed values.

    Parameters
    ----------
    allowed : frozenset[int] | None
        Specific allowed integer values.
    ge, le : int | None
        Inclusive lower and upper bounds.
    """

    allowed: frozenset[int] | None = None
    ge: int | None = None
    le: int | None = None

    def allows(self, value: Any) -> bool:
        if not isinstance(value, int):
            return False
        if self.allowed is not None and value not in self.allowed:
            return False
        if self.ge is not None and value < self.ge:
            return False
        return not (self.le is not None and value > self.le)


@dataclass(frozen=True, slots=True)
class PredicateConstraint:
    """Constraint delegating to an arbitrary predicate on the value."""

    predicate: Any

    def allows(self, value: Any) -> bool:
        return value is not None and bool(self.predicate(value))


@dataclass(frozen=True, slots=True)
class ApplicabilityConstraint:
    """
    Check distribution features at type and instance levels.

    Parameters
    ----------
    distribution_type_feature_constraints : Mapping[str, Constraint]
        Constraints on distribution type features (e.g., kind, dimension),
        read from ``distribution_type.registry_features``.
    distribution_instance_feature_constraints : Mapping[str, Constraint]
        Constraints on distribution instance attributes (e.g., support).
    """

    distribution_type_feature_constraints: Mapping[str, Constraint] = field(
        default_factory=lambda: MappingProxyType({})
    )
    distribution_instance_feature_constraints: Mapping[str, Constraint] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        """Wrap provided mappings into read-only proxies."""
        for name in (
            "distribution_type_feature_constraints",
            "distribution_instance_feature_constraints",
        ):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))

    def allows(self, distr: Distribution) -> bool:
        features = distr.distribution_type.registry_features
        for name, cons in self.distribution_type_feature_constraints.items():
            if not cons.allows(features.get(name, None)):
                return False
        for name, cons in self.distribution_instance_feature_constraints.items():
            if not cons.allows(getattr(distr, name, None)):
                return False
        return True


@dataclass(frozen=True, slots=True)
class ConversionEntry:
    """A registered conversion together with its applicability constraint."""

    method: ComputationMethod[Any, Any]
    constraint: ApplicabilityConstraint = field(default_factory=ApplicabilityConstraint)


class ConversionRegistry:
    """
    Singleton registry of characteristic conversions.

    Public API
    ----------
    add_conversion(method, *, constraint=None)
        Register a conversion (replacing one with the same target and sources).
    conversions(target, distr)
        Conversions producing ``target`` that apply to ``distr``, in order.
    targets()
        All characteristics some conversion can produce.
    """

    _instance: ClassVar[Self | None] = None
    _entries: dict[GenericCharacteristicName, list[ConversionEntry]]

    def __new__(cls) -> Self:
        if cls._instance is None:
            inst = super().__new__(cls)
            inst._entries = {}
            cls._instance = inst
        return cls._instance

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[Any, Any]) -> Self:
        return self

    @classmethod
    def _reset(cls) -> None:
        """Reset the singleton (test helper)."""
        cls._instance = None

    def add_conversion(
        self,
        method: ComputationMethod[Any, Any],
        *,
        constraint: ApplicabilityConstraint | None = None,
    ) -> None:
        """
        Register ``method`` guarded by ``constraint``.

        Parameters
        ----------
        method : ComputationMethod
            Conversion with at least one source.
        constraint : ApplicabilityConstraint, optional
            Applicability rule; a pass-through constraint when omitted.
        """
        if not method.sources:
            raise ValueError(f"Conversion to '{method.target}' must have at least one source.")
        if method.target in method.sources:
            raise ValueError(f"Conversion to '{method.target}' cannot use itself as a source.")

        entry = ConversionEntry(
            method=method,
            constraint=constraint if constraint is not None else ApplicabilityConstraint(),
        )
        entries = self._entries.setdefault(method.target, [])
        for i, existing in enumerate(entries):
            if (
                tuple(existing.method.sources) == tuple(method.sources)
                and existing.constraint == entry.constraint
            ):
                warnings.warn(
                    f"Conversion {tuple(method.sources)} -> {method.target} with the same "
                    "constraint has been already added. It will be replaced",
                    UserWarning,
                    stacklevel=2,
                )
                entries[i] = entry
                return
        entries.append(entry)
        logger.debug("Registered conversion %s -> %s", tuple(method.sources), method.target)

    def conversions(
        self, target: GenericCharacteristicName, distr: Distribution
    ) -> list[ComputationMethod[Any, Any]]:
        """Return the conversions to ``target`` applicable to ``distr``."""
        return [
            entry.method
            for entry in self._entries.get(target, ())
            if entry.constraint.allows(distr)
        ]

    def targets(self) -> frozenset[GenericCharacteristicName]:
        """Return every characteristic at least one conversion can produce."""
        return frozenset(name for name, entries in self._entries.items() if entries)


def _configure(reg: ConversionRegistry) -> None:
    """Default PySATL configuration of the conversion registry."""
    PDF = CharacteristicName.PDF
    PMF = CharacteristicName.PMF
    CDF = CharacteristicName.CDF
    SF = CharacteristicName.SF
    PPF = CharacteristicName.PPF

    dim1 = NumericConstraint(allowed=frozenset({1}))
    continuous_1 = ApplicabilityConstraint(
        distribution_type_feature_constraints={
            "kind": SetConstraint(allowed=frozenset({Kind.CONTINUOUS})),
            "dimension": dim1,
        }
    )
    discrete_1 = ApplicabilityConstraint(
        distribution_type_feature_constraints={
            "kind": SetConstraint(allowed=frozenset({Kind.DISCRETE})),
            "dimension": dim1,
        }
    )
    discrete_left_bounded_1 = ApplicabilityConstraint(
        distribution_type_feature_constraints={
            "kind": SetConstraint(allowed=frozenset({Kind.DISCRETE})),
            "dimension": dim1,
        },
        distribution_instance_feature_constraints={
            "support": PredicateConstraint(lambda s: getattr(s, "is_left_bounded", False)),
        },
    )
    univariate = ApplicabilityConstraint(distribution_type_feature_constraints={"dimension": dim1})

    def method(target: str, sources: list[str], fitter: Any) -> ComputationMethod[Any, Any]:
        return ComputationMethod[Any, Any](target=target, sources=sources, fitter=fitter)

    reg.add_conversion(
        method(CharacteristicName.LOG_PDF, [PDF], fit_pdf_to_log_pdf_1C), constraint=continuous_1
    )
    reg.add_conversion(method(SF, [CDF], fit_cdf_to_sf), constraint=univariate)
    reg.add_conversion(method(CDF, [SF], fit_sf_to_cdf), constraint=univariate)
    reg.add_conversion(method(CDF, [PMF], fit_pmf_to_cdf_1D), constraint=discrete_left_bounded_1)
    reg.add_conversion(
        method(CharacteristicName.HAZARD, [PDF, SF], fit_pdf_sf_to_hazard_1C),
        constraint=continuous_1,
    )
    reg.add_conversion(
        method(CharacteristicName.HAZARD, [PMF, SF], fit_pmf_sf_to_hazard_1D),
        constraint=discrete_1,
    )
    reg.add_conversion(method(CharacteristicName.CHF, [SF], fit_sf_to_chf), constraint=univariate)
    reg.add_conversion(method(PPF, [CDF], fit_cdf_to_ppf_1C), constraint=continuous_1)
    reg.add_conversion(method(PPF, [CDF], fit_cdf_to_ppf_1D), constraint=discrete_1)
    reg.add_conversion(
        method(CharacteristicName.ISF, [SF], fit_sf_to_isf_1C), constraint=continuous_1
    )
    reg.add_conversion(
        method(CharacteristicName.ISF, [SF], fit_sf_to_isf_1D), constraint=discrete_1
    )
    reg.add_conversion(
        method(CharacteristicName.MEDIAN, [PPF], fit_ppf_to_median), constraint=univariate
    )


@lru_cache(maxsize=1)
def conversion_registry() -> ConversionRegistry:
    """
    Return the cached, configured conversion registry (singleton instance).

    Notes
    -----
    Configuration is applied exactly once per process via LRU caching.
    """
    reg = ConversionRegistry()
    _configure(reg)
    return reg


def reset_conversion_registry() -> None:
    """Reset the cached conversion registry."""
    conversion_registry.cache_clear()
    ConversionRegistry._reset()


__all__ = [
    "Constraint",
    "SetConstraint",
    "NumericConstraint",
    "PredicateConstraint",
    "ApplicabilityConstraint",
    "ConversionEntry",
    "ConversionRegistry",
    "conversion_registry",
    "reset_conversion_registry",
]

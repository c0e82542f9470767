"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout the PySATL
distribution engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from math import inf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.

    Provides a feature interface used when selecting conversions
    between characteristics.
    """

    __slots__ = ()

    @property
    def registry_features(self) -> Mapping[str, Any]:
        """
        Get features used by the conversion registry.

        Returns
        -------
        Mapping[str, Any]
            Dictionary of feature names to values.

        Notes
        -----
        Default implementation exposes public dataclass fields.
        """
        data: dict[str, Any] = {}

        fields = getattr(self, "__dataclass_fields__", None)
        if fields is not None:
            for name in fields:
                data[name] = getattr(self, name)

        return data


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        """Check if a single point is in the interval."""
        return bool(self.contains(cast(Number, x)))

    @property
    def bounds(self) -> tuple[float, float]:
        """Endpoints ``(left, right)`` of the interval."""
        return self.left, self.right


type GenericCharacteristicName = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""

type ParametrizationName = str
"""Type alias for parametrization names."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""


class CharacteristicName(StrEnum):
    """
    Enumeration of statistical distribution characteristics.

    This enumeration defines standard names for distribution functions,
    moments, and other statistical characteristics used throughout the
    library.

    Note
    ----------
    Characteristics that a family does not provide analytically are derived
    through the conversion registry when a conversion exists.
    """

    PDF = "pdf"
    LOG_PDF = "log_pdf"
    PMF = "pmf"
    CDF = "cdf"
    SF = "sf"
    HAZARD = "hazard"
    CHF = "chf"
    PPF = "ppf"
    ISF = "isf"
    MEAN = "mean"
    VAR = "var"
    MODE = "mode"
    MEDIAN = "median"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"


class ArgumentKind(StrEnum):
    """
    What the single argument of a characteristic means.

    Attributes
    ----------
    POINT
        A point of the sample space (``pdf``, ``cdf``, ...).
    PROBABILITY
        A probability in ``[0, 1]`` (``ppf``, ``isf``).
    NONE
        No argument (moments and summary statistics).
    """

    POINT = "point"
    PROBABILITY = "probability"
    NONE = "none"


CHARACTERISTIC_ARGUMENTS: Mapping[GenericCharacteristicName, ArgumentKind] = {
    CharacteristicName.PDF: ArgumentKind.POINT,
    CharacteristicName.LOG_PDF: ArgumentKind.POINT,
    CharacteristicName.PMF: ArgumentKind.POINT,
    CharacteristicName.CDF: ArgumentKind.POINT,
    CharacteristicName.SF: ArgumentKind.POINT,
    CharacteristicName.HAZARD: ArgumentKind.POINT,
    CharacteristicName.CHF: ArgumentKind.POINT,
    CharacteristicName.PPF: ArgumentKind.PROBABILITY,
    CharacteristicName.ISF: ArgumentKind.PROBABILITY,
    CharacteristicName.MEAN: ArgumentKind.NONE,
    CharacteristicName.VAR: ArgumentKind.NONE,
    CharacteristicName.MODE: ArgumentKind.NONE,
    CharacteristicName.MEDIAN: ArgumentKind.NONE,
    CharacteristicName.SKEW: ArgumentKind.NONE,
    CharacteristicName.KURT: ArgumentKind.NONE,
    CharacteristicName.ENTROPY: ArgumentKind.NONE,
}
"""Argument kind of every built-in characteristic."""


class FamilyName(StrEnum):
    NORMAL = "Normal"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    TRIANGULAR = "Triangular"
    EXPONENTIAL = "Exponential"
    GAMMA = "Gamma"
    INVERSE_GAMMA = "InverseGamma"
    CHI_SQUARED = "ChiSquared"
    BETA = "Beta"
    POISSON = "Poisson"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "DistributionType",
    "ScalarFunc",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "ArgumentKind",
    "CHARACTERISTIC_ARGUMENTS",
    "FamilyName",
]

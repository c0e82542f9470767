"""
Error Kinds
===========

Exceptions raised by parameter validation, the evaluation facade and the
special-function kernel.

All of them derive from :class:`DistributionError`, which is a
:class:`ValueError`, so callers that only care about "bad input" can catch a
single type. Every exception carries an :class:`ErrorKind` tag together with
the offending parameter name and value.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from enum import StrEnum
from typing import Any, ClassVar


class ErrorKind(StrEnum):
    """Tags of the error record."""

    PARAMETER_NOT_FINITE = "parameter_not_finite"
    PARAMETER_NOT_POSITIVE = "parameter_not_positive"
    PARAMETER_OUT_OF_RANGE = "parameter_out_of_range"
    INVALID_BOUNDS = "invalid_bounds"
    DOMAIN = "domain"
    CONVERGENCE = "convergence"


class DistributionError(ValueError):
    """
    Base class for all engine errors.

    Parameters
    ----------
    message : str
        Human-readable description.
    name : str, optional
        Name of the offending parameter or argument.
    value : Any, optional
        Offending value.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, message: str, *, name: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.name = name
        self.value = value


class ParameterNotFiniteError(DistributionError):
    """A parameter or argument is NaN or infinite."""

    kind = ErrorKind.PARAMETER_NOT_FINITE


class ParameterNotPositiveError(DistributionError):
    """A parameter that must be strictly positive is not."""

    kind = ErrorKind.PARAMETER_NOT_POSITIVE


class ParameterOutOfRangeError(DistributionError):
    """
    A parameter or argument lies outside its admissible range.

    Parameters
    ----------
    lower, upper : float, optional
        Inclusive admissible bounds, when they are known.
    """

    kind = ErrorKind.PARAMETER_OUT_OF_RANGE

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        value: Any = None,
        lower: float | None = None,
        upper: float | None = None,
    ) -> None:
        super().__init__(message, name=name, value=value)
        self.lower = lower
        self.upper = upper


class InvalidBoundsError(ParameterOutOfRangeError):
    """The upper bound of an interval parametrization does not exceed the lower one."""

    kind = ErrorKind.INVALID_BOUNDS


class DomainError(DistributionError):
    """Input lies outside the mathematical domain of a function."""

    kind = ErrorKind.DOMAIN


class ConvergenceError(DistributionError, ArithmeticError):
    """An iterative method exhausted its iteration budget without reaching tolerance."""

    kind = ErrorKind.CONVERGENCE


__all__ = [
    "ErrorKind",
    "DistributionError",
    "ParameterNotFiniteError",
    "ParameterNotPositiveError",
    "ParameterOutOfRangeError",
    "InvalidBoundsError",
    "DomainError",
    "ConvergenceError",
]

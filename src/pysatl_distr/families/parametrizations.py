"""
Parameterization classes and specifications for distribution families.

This module provides the core abstractions for defining different parameterizations
of statistical distributions, including constraints validation and conversion
between parameterization formats.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from math import isfinite
from numbers import Real
from typing import TYPE_CHECKING, ParamSpec

from pysatl_distr.errors import (
    DistributionError,
    ParameterNotFiniteError,
    ParameterOutOfRangeError,
)
from pysatl_distr.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_distr.families.parametric_family import ParametricFamily


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    error : type[DistributionError]
        Exception raised when the constraint does not hold.
    parameter : str, optional
        Parameter the constraint is about; reported in the exception.
    """

    description: str
    check: Callable[[Any], bool]
    error: type[DistributionError] = ParameterOutOfRangeError
    parameter: str | None = None


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    This class defines the interface for parametrizations, including
    parameter validation and conversion to base parametrization format.
    """

    # These attributes are set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Get the name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        if is_dataclass(self):
            return {f.name: getattr(self, f.name) for f in fields(self)}
        ann = getattr(self, "__annotations__", {})
        return {k: getattr(self, k) for k in ann}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all parameters and constraints of this parametrization.

        Every real-valued parameter must be finite first; constraints are
        then checked in declaration order.

        Raises
        ------
        ParameterNotFiniteError
            If a parameter is NaN or infinite.
        DistributionError
            The error type declared by the first failing constraint.
        """
        for name, value in self.parameters.items():
            if isinstance(value, Real) and not isfinite(value):
                raise ParameterNotFiniteError(
                    f"Parameter {name} must be finite, got {value}", name=name, value=value
                )

        for constraint in self._constraints:
            if not constraint.check(self):
                value = getattr(self, constraint.parameter) if constraint.parameter else None
                raise constraint.error(
                    f'Constraint "{constraint.description}" does not hold',
                    name=constraint.parameter,
                    value=value,
                )

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert this parametrization to the base parametrization.

        Returns
        -------
        Parametrization
            Equivalent parameters in the base parametrization.

        Notes
        -----
        Base implementation returns self. Subclasses should override
        if conversion to a different parametrization is needed.
        """
        return self


P = ParamSpec("P")


def constraint(
    description: str,
    *,
    error: type[DistributionError] = ParameterOutOfRangeError,
    parameter: str | None = None,
) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    error : type[DistributionError], default ParameterOutOfRangeError
        Exception raised when the predicate returns False.
    parameter : str, optional
        Name of the parameter the constraint is about.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        setattr(wrapper, "__constraint_error", error)
        setattr(wrapper, "__constraint_parameter", parameter)
        return wrapper

    return decorator


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as a parametrization for a family.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.
    name : str
        Name of the parametrization.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator that registers the parametrization.

    Notes
    -----
    Automatically converts the class to a frozen dataclass if not already one.
    Collects and registers constraint methods marked with @constraint.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        """Collect constraint methods from the class."""
        constraints: list[ParametrizationConstraint] = []
        for attr_name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod):
                raise TypeError(
                    f"@constraint '{attr_name}' must be an instance method, not @staticmethod"
                )
            if isinstance(attr, classmethod):
                raise TypeError(
                    f"@constraint '{attr_name}' must be an instance method, not @classmethod"
                )

            func = attr if callable(attr) and isfunction(attr) else None
            if not func or not getattr(func, "__is_constraint", False):
                continue
            constraints.append(
                ParametrizationConstraint(
                    description=getattr(func, "__constraint_description", func.__name__),
                    check=func,
                    error=getattr(func, "__constraint_error", ParameterOutOfRangeError),
                    parameter=getattr(func, "__constraint_parameter", None),
                )
            )
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator


__all__ = [
    "ParametrizationConstraint",
    "Parametrization",
    "constraint",
    "parametrization",
]

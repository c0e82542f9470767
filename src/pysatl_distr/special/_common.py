"""Shared constants and argument checks of the special-function kernel."""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import sys
from math import exp, inf, isnan, log, pi
from typing import TYPE_CHECKING, Any, cast

import numpy as np

from pysatl_distr.errors import DomainError, ParameterOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_distr.types import NumericArray

EPS = sys.float_info.epsilon
FPMIN = sys.float_info.min / EPS
TINY = sys.float_info.min
LOG_MAX = log(sys.float_info.max)
HALF_LOG_TWO_PI = 0.5 * log(2.0 * pi)
# shapes from which the incomplete gamma/beta prefactors are built from
# Stirling's formula instead of log Γ differences
LARGE_SHAPE = 10.0


def exp_or_inf(value: float) -> float:
    """``exp(value)``, saturating to ``inf`` instead of raising on overflow."""
    return inf if value > LOG_MAX else exp(value)


def check_positive(name: str, value: float) -> None:
    """Raise :class:`DomainError` unless ``value`` is finite and strictly positive."""
    if isnan(value) or not (0.0 < value < float("inf")):
        raise DomainError(f"{name} must be finite and > 0, got {value}", name=name, value=value)


def check_probability(name: str, value: float) -> None:
    """Raise unless ``value`` is a probability in ``[0, 1]``."""
    if isnan(value):
        raise DomainError(f"{name} must not be NaN", name=name, value=value)
    if not 0.0 <= value <= 1.0:
        raise ParameterOutOfRangeError(
            f"{name} must be in [0, 1], got {value}", name=name, value=value, lower=0.0, upper=1.0
        )


def elementwise(func: Callable[..., float], *args: Any) -> NumericArray:
    """Apply a scalar kernel function element-wise with NumPy broadcasting."""
    return cast("NumericArray", np.vectorize(func, otypes=[np.float64])(*args))

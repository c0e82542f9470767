"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL Distr:

- distribution protocol (:mod:`.distribution`);
- evaluation facade (:mod:`.evaluation`);
- conversion fitters (:mod:`.fitters`) and their registry (:mod:`.registry`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- supports (:mod:`.support`);
- pluggable strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .characteristics import GenericCharacteristic
from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .distribution import Distribution
from .evaluation import evaluate
from .registry import ConversionRegistry, conversion_registry, reset_conversion_registry
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    "GenericCharacteristic",
    # distribution
    "Distribution",
    "evaluate",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    # registry
    "ConversionRegistry",
    "conversion_registry",
    "reset_conversion_registry",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]

"""
Distribution Families Configuration
====================================

This module defines and configures parametric distribution families for the PySATL library:

- :class:`Normal Family`: Gaussian distribution with multiple parameterizations.
- :class:`Uniform Family`: Uniform distribution with multiple parameterizations.
- :class:`Triangular Family`: Triangular distribution on a bounded interval.
- :class:`Exponential Family`: Exponential distribution in rate and scale form.
- :class:`Gamma Family`, :class:`ChiSquared Family` and
  :class:`InverseGamma Family`: members of the gamma family.
- :class:`Beta Family`: Beta distribution on the unit interval.
- :class:`Poisson Family`: discrete Poisson distribution.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Characteristics without an analytical form are derived through the
  conversion registry.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_distr.families.builtins import (
    configure_beta_family,
    configure_chi_squared_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_inverse_gamma_family,
    configure_normal_family,
    configure_poisson_family,
    configure_triangular_family,
    configure_uniform_family,
)
from pysatl_distr.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    This function initializes all parametric families with their respective
    parameterizations, characteristics, and sampling strategies. It should be
    called during application startup to make distributions available.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_uniform_family()
    configure_triangular_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_inverse_gamma_family()
    configure_chi_squared_family()
    configure_beta_family()
    configure_poisson_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()

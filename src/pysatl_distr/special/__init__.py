"""
Special-function kernel
=======================

Scalar special functions and the root-finder the built-in families are
computed with:

- gamma family (:mod:`.gamma`): log-gamma, digamma, regularized incomplete
  gamma and its inverses;
- beta family (:mod:`.beta`): log-beta, regularized incomplete beta and its
  inverse;
- standard normal (:mod:`.normal`): density, distribution, survival and
  quantile functions;
- bracketing root-finder (:mod:`.roots`).

All functions take and return Python floats. Use
:func:`~pysatl_distr.special._common.elementwise` to apply them to arrays.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .beta import (
    beta_inc,
    beta_inc_complement,
    beta_inc_complement_inv,
    beta_inc_inv,
    log_beta,
)
from .gamma import digamma, gamma_p, gamma_p_inv, gamma_q, gamma_q_inv, log_gamma
from .normal import normal_cdf, normal_isf, normal_pdf, normal_ppf, normal_sf
from .roots import SolverOptions, find_root

__all__ = [
    # gamma
    "log_gamma",
    "digamma",
    "gamma_p",
    "gamma_q",
    "gamma_p_inv",
    "gamma_q_inv",
    # beta
    "log_beta",
    "beta_inc",
    "beta_inc_complement",
    "beta_inc_inv",
    "beta_inc_complement_inv",
    # normal
    "normal_pdf",
    "normal_cdf",
    "normal_sf",
    "normal_ppf",
    "normal_isf",
    # root-finder
    "SolverOptions",
    "find_root",
]

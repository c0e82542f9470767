"""
Tests for the bracketing root-finder and its options.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_distr.errors import ConvergenceError, ParameterNotPositiveError
from pysatl_distr.special.roots import SolverOptions, find_root


class TestFindRoot:
    def test_cubic_without_derivative(self):
        assert find_root(lambda x: x**3, 8.0) == pytest.approx(2.0, rel=1e-14)

    def test_newton_with_derivative(self):
        root = find_root(math.exp, math.exp(5.0), fprime=math.exp)
        assert root == pytest.approx(5.0, rel=1e-14)

    def test_bounded_domain(self):
        root = find_root(lambda x: x * x, 0.25, lower=0.0, upper=1.0)
        assert root == pytest.approx(0.5, rel=1e-14)

    def test_one_sided_domain_reaches_tiny_roots(self):
        root = find_root(math.log, math.log(1e-200), lower=0.0)
        assert root == pytest.approx(1e-200, rel=1e-12)

    def test_one_sided_domain_reaches_huge_roots(self):
        root = find_root(math.log, math.log(1e200), lower=0.0)
        assert root == pytest.approx(1e200, rel=1e-12)

    def test_initial_guess_is_used(self):
        assert find_root(lambda x: x, 3.0, x0=3.0) == 3.0

    def test_initial_guess_outside_domain_is_replaced(self):
        root = find_root(lambda x: x, 0.5, x0=10.0, lower=0.0, upper=1.0)
        assert root == pytest.approx(0.5, rel=1e-14)

    def test_no_sign_change(self):
        with pytest.raises(ConvergenceError):
            find_root(math.atan, 2.0)

    def test_nan_function(self):
        with pytest.raises(ConvergenceError):
            find_root(lambda x: math.nan, 1.0)

    def test_iteration_budget(self):
        with pytest.raises(ConvergenceError) as exc_info:
            find_root(lambda x: x**3, 2.0, options=SolverOptions(max_iter=1))

        assert exc_info.value.name == "max_iter"

    def test_relative_tolerance(self):
        loose = find_root(lambda x: x**3, 2.0, options=SolverOptions(rel_tol=1e-3))
        assert loose == pytest.approx(2.0 ** (1.0 / 3.0), rel=1e-2)


class TestSolverOptions:
    def test_defaults(self):
        opts = SolverOptions()
        assert opts.rel_tol == pytest.approx(8 * 2.220446049250313e-16)
        assert opts.abs_tol == 0.0
        assert opts.max_iter == 200

    def test_from_options_ignores_unrelated_keys(self):
        opts = SolverOptions.from_options({"max_iter": 10, "excess": True})
        assert opts == SolverOptions(max_iter=10)

    @pytest.mark.parametrize(
        "kwargs", [{"rel_tol": 0.0}, {"max_iter": 0}, {"max_expand": 0}], ids=str
    )
    def test_invalid_options(self, kwargs):
        with pytest.raises(ParameterNotPositiveError):
            SolverOptions(**kwargs)

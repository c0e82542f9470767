"""
Tests for the incomplete beta kernel against scipy.special.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy import special

from pysatl_distr.errors import DomainError, ParameterOutOfRangeError
from pysatl_distr.special import (
    beta_inc,
    beta_inc_complement,
    beta_inc_complement_inv,
    beta_inc_inv,
    log_beta,
)

SHAPE_PAIRS = [
    (0.5, 0.5),
    (1.0, 1.0),
    (2.0, 5.0),
    (5.0, 2.0),
    (0.3, 4.0),
    (10.0, 0.7),
    (50.0, 40.0),
    (1e5, 1e5),
    (1e5, 2e5),
]
POINTS = [0.001, 0.1, 0.3, 0.5, 0.75, 0.999]


@pytest.mark.parametrize("a, b", SHAPE_PAIRS)
def test_log_beta_matches_scipy(a, b):
    assert log_beta(a, b) == pytest.approx(special.betaln(a, b), rel=1e-12, abs=1e-13)


class TestIncompleteBeta:
    @pytest.mark.parametrize("a, b", SHAPE_PAIRS)
    @pytest.mark.parametrize("x", POINTS)
    def test_matches_scipy(self, a, b, x):
        assert beta_inc(a, b, x) == pytest.approx(special.betainc(a, b, x), rel=1e-9, abs=1e-14)
        assert beta_inc_complement(a, b, x) == pytest.approx(
            special.betaincc(a, b, x), rel=1e-9, abs=1e-14
        )

    @pytest.mark.parametrize("a, b", SHAPE_PAIRS)
    @pytest.mark.parametrize("x", POINTS)
    def test_symmetry(self, a, b, x):
        assert beta_inc(a, b, x) == pytest.approx(
            beta_inc_complement(b, a, 1.0 - x), rel=1e-9, abs=1e-14
        )

    def test_uniform_special_case(self):
        for x in (0.0, 0.2, 0.7, 1.0):
            assert beta_inc(1.0, 1.0, x) == pytest.approx(x, abs=1e-15)

    def test_endpoints(self):
        assert (beta_inc(2.0, 3.0, 0.0), beta_inc_complement(2.0, 3.0, 0.0)) == (0.0, 1.0)
        assert (beta_inc(2.0, 3.0, 1.0), beta_inc_complement(2.0, 3.0, 1.0)) == (1.0, 0.0)

    @pytest.mark.parametrize(
        "a, b, x",
        [
            (0.0, 1.0, 0.5),
            (1.0, -2.0, 0.5),
            (1.0, 1.0, -0.1),
            (1.0, 1.0, 1.1),
            (1.0, 1.0, math.nan),
        ],
    )
    def test_domain_errors(self, a, b, x):
        with pytest.raises(DomainError):
            beta_inc(a, b, x)


class TestIncompleteBetaInverse:
    @pytest.mark.parametrize("a, b", SHAPE_PAIRS)
    @pytest.mark.parametrize("p", [1e-10, 0.01, 0.5, 0.9, 1 - 1e-8])
    def test_round_trip(self, a, b, p):
        x = beta_inc_inv(a, b, p)
        assert 0.0 <= x <= 1.0
        assert beta_inc(a, b, x) == pytest.approx(p, rel=1e-8, abs=1e-15)

    @pytest.mark.parametrize("a, b", SHAPE_PAIRS)
    @pytest.mark.parametrize("q", [0.01, 0.5, 0.9])
    def test_complement_round_trip(self, a, b, q):
        x = beta_inc_complement_inv(a, b, q)
        assert beta_inc_complement(a, b, x) == pytest.approx(q, rel=1e-8, abs=1e-15)

    @pytest.mark.parametrize("a, b", [(2.0, 5.0), (0.5, 0.5), (50.0, 40.0)])
    @pytest.mark.parametrize("p", [0.05, 0.5, 0.95])
    def test_matches_scipy(self, a, b, p):
        assert beta_inc_inv(a, b, p) == pytest.approx(special.betaincinv(a, b, p), rel=1e-8)

    def test_endpoints(self):
        assert beta_inc_inv(2.0, 3.0, 0.0) == 0.0
        assert beta_inc_inv(2.0, 3.0, 1.0) == 1.0
        assert beta_inc_complement_inv(2.0, 3.0, 1.0) == 0.0
        assert beta_inc_complement_inv(2.0, 3.0, 0.0) == 1.0

    def test_probability_out_of_range(self):
        with pytest.raises(ParameterOutOfRangeError):
            beta_inc_inv(2.0, 3.0, 1.5)


class TestLargeShapes:
    @pytest.mark.parametrize("a, b", [(1e3, 2e3), (1e5, 1e5), (3e4, 7e4)])
    @pytest.mark.parametrize("k", [-3.0, -0.5, 0.5, 3.0])
    def test_near_the_mean_matches_scipy(self, a, b, k):
        n = a + b
        x = a / n + k * math.sqrt(a * b / (n * n * (n + 1.0)))
        assert beta_inc(a, b, x) == pytest.approx(special.betainc(a, b, x), rel=1e-9)
        assert beta_inc_complement(a, b, x) == pytest.approx(special.betaincc(a, b, x), rel=1e-9)

    def test_symmetric_median(self):
        assert beta_inc(1e5, 1e5, 0.5) == pytest.approx(0.5, rel=1e-10)
        assert beta_inc_complement(1e5, 1e5, 0.5) == pytest.approx(0.5, rel=1e-10)


class TestSmallShapes:
    @pytest.mark.parametrize("a", [1e-3, 1e-4])
    def test_quantile_below_float_range(self, a):
        # the true root is far below the smallest float
        x = beta_inc_inv(a, 3.0, 1e-10)
        assert 0.0 <= x < 1e-300

    def test_tiny_but_representable_quantile(self):
        x = beta_inc_inv(0.01, 3.0, 0.5)
        assert 0.0 < x < 1e-20
        assert beta_inc(0.01, 3.0, x) == pytest.approx(0.5, rel=1e-9)
        assert x == pytest.approx(special.betaincinv(0.01, 3.0, 0.5), rel=1e-6)

    @pytest.mark.parametrize("a", [1e-3, 1e-4])
    @pytest.mark.parametrize("q", [1e-10, 0.001])
    def test_upper_tail_quantiles(self, a, q):
        x = beta_inc_complement_inv(a, 3.0, q)
        assert 0.0 < x < 1.0
        assert beta_inc_complement(a, 3.0, x) == pytest.approx(q, rel=1e-9)

"""
Tests for Inverse-gamma Distribution Family

This module tests the inverse-gamma family, including moments that exist
only for large enough shapes and quantiles over extreme probabilities.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys

import numpy as np
import pytest
from scipy.stats import invgamma

from pysatl_distr.errors import ParameterNotFiniteError, ParameterNotPositiveError
from pysatl_distr.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestInverseGammaFamily(BaseDistributionTest):
    """Test suite for Inverse-gamma distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.inverse_gamma_family = self.family(FamilyName.INVERSE_GAMMA)
        self.dist = self.inverse_gamma_family(shape=5.0, scale=2.0)

    def test_family_properties(self):
        """Test basic properties of inverse-gamma family."""
        assert self.inverse_gamma_family.parametrization_names == ["standard"]
        assert self.dist.parameters.parameters == {"shape": 5.0, "scale": 2.0}

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ParameterNotFiniteError) as info:
            self.inverse_gamma_family(shape=math.nan, scale=1.0)
        assert info.value.name == "shape"

        with pytest.raises(ParameterNotPositiveError, match="shape > 0") as info:
            self.inverse_gamma_family(shape=-1.0, scale=1.0)
        assert info.value.name == "shape"
        assert info.value.value == -1.0

        with pytest.raises(ParameterNotPositiveError, match="scale > 0"):
            self.inverse_gamma_family(shape=1.0, scale=0.0)

    @pytest.mark.parametrize(
        "char_name, scipy_func",
        [
            (CharacteristicName.PDF, invgamma.pdf),
            (CharacteristicName.LOG_PDF, invgamma.logpdf),
            (CharacteristicName.CDF, invgamma.cdf),
            (CharacteristicName.SF, invgamma.sf),
        ],
    )
    def test_pointwise_characteristics(self, char_name, scipy_func):
        """Test pointwise characteristics against scipy."""
        x = np.array([0.05, 0.2, 0.5, 1.0, 3.0, 20.0])

        result = self.dist.calculate_characteristic(char_name, x)

        self.assert_arrays_relatively_equal(result, scipy_func(x, 5.0, scale=2.0))

    def test_values_outside_support(self):
        """Test boundary values at and below zero."""
        assert self.dist.cdf(0.0) == 0.0
        assert self.dist.cdf(-3.0) == 0.0
        assert self.dist.sf(0.0) == 1.0
        assert self.dist.pdf(0.0) == 0.0
        assert self.dist.log_pdf(-1.0) == -math.inf
        assert self.dist.pdf(1e-300) == 0.0

    @pytest.mark.parametrize("shape", [1e-3, 0.05, 0.5, 2.0, 10.0, 1e3, 1e5])
    @pytest.mark.parametrize("scale", [0.5, 3.0])
    @pytest.mark.parametrize("p", [1e-300, 1e-10, 1e-3, 0.5, 0.999, 1 - 1e-10])
    def test_ppf_grid(self, shape, scale, p):
        """Test quantiles over shapes, scales and extreme probabilities."""
        dist = self.inverse_gamma_family(shape=shape, scale=scale)

        x = dist.ppf(p)
        assert x > 0.0
        if x == math.inf:
            # the quantile lies beyond the largest float
            assert dist.cdf(sys.float_info.max) < p
        else:
            assert dist.cdf(x) == pytest.approx(p, rel=1e-8, abs=0.0)

        q = 1.0 - p
        y = dist.isf(q)
        if y == math.inf:
            assert dist.sf(sys.float_info.max) > q
        else:
            assert dist.sf(y) == pytest.approx(q, rel=1e-8, abs=0.0)

    @pytest.mark.parametrize("shape", [1e-3, 1e-4])
    def test_quantiles_of_small_shapes(self, shape):
        """Test quantiles whose exact values exceed the largest float."""
        dist = self.inverse_gamma_family(shape=shape, scale=1.0)

        assert dist.ppf(0.9) == math.inf
        assert dist.isf(0.1) == math.inf
        assert dist.ppf(1e-10) == pytest.approx(invgamma.ppf(1e-10, shape), rel=1e-7)

    @pytest.mark.parametrize("shape", [0.5, 2.0, 10.0])
    @pytest.mark.parametrize("p", [1e-10, 1e-3, 0.5, 0.999])
    def test_ppf_matches_scipy(self, shape, p):
        """Test quantiles against scipy."""
        dist = self.inverse_gamma_family(shape=shape, scale=3.0)
        assert dist.ppf(p) == pytest.approx(invgamma.ppf(p, shape, scale=3.0), rel=1e-7)

    def test_quantile_endpoints(self):
        """Test quantiles at probabilities 0 and 1."""
        assert self.dist.ppf(0.0) == 0.0
        assert self.dist.ppf(1.0) == math.inf
        assert self.dist.isf(1.0) == 0.0
        assert self.dist.isf(0.0) == math.inf

    def test_mean_requires_shape_above_one(self):
        """Test the mean and its existence threshold."""
        assert self.inverse_gamma_family(shape=2.0, scale=1.0).mean() == pytest.approx(1.0)
        assert self.inverse_gamma_family(shape=0.5, scale=1.0).mean() is None
        assert self.inverse_gamma_family(shape=1.0, scale=1.0).mean() is None

    def test_mode(self):
        """Test the mode beta/(alpha + 1)."""
        assert self.inverse_gamma_family(shape=3.0, scale=2.0).mode() == pytest.approx(0.5)

    @pytest.mark.parametrize(
        "shape, has_var, has_skew, has_kurt",
        [
            (2.0, False, False, False),
            (3.0, True, False, False),
            (4.0, True, True, False),
            (4.5, True, True, True),
        ],
    )
    def test_moment_thresholds(self, shape, has_var, has_skew, has_kurt):
        """Test that moments are reported as None below their thresholds."""
        dist = self.inverse_gamma_family(shape=shape, scale=1.0)

        assert (dist.var() is not None) == has_var
        assert (dist.skewness() is not None) == has_skew
        assert (dist.kurtosis() is not None) == has_kurt
        assert (dist.kurtosis(excess=True) is not None) == has_kurt

    def test_summaries(self):
        """Test moments and entropy against scipy."""
        mean, var, skew, kurt = invgamma.stats(5.0, scale=2.0, moments="mvsk")

        assert self.dist.mean() == pytest.approx(float(mean))
        assert self.dist.var() == pytest.approx(float(var))
        assert self.dist.skewness() == pytest.approx(float(skew))
        assert self.dist.kurtosis(excess=True) == pytest.approx(float(kurt))
        assert self.dist.kurtosis() == pytest.approx(float(kurt) + 3.0)
        assert self.dist.entropy() == pytest.approx(invgamma.entropy(5.0, scale=2.0), rel=1e-12)

    def test_median_from_ppf(self):
        """Test the median derived from the quantile function."""
        assert self.dist.median() == pytest.approx(invgamma.median(5.0, scale=2.0), rel=1e-10)

    def test_quantiles_invert_cdf(self):
        """Test ppf and isf round trips over the whole probability range."""
        self.assert_quantiles_invert_cdf(self.dist)
        self.assert_cdf_and_sf_complement(self.dist, np.linspace(0.0, 5.0, 21))

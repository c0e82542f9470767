"""
Tests for Exponential Distribution Family

This module tests the functionality of the exponential distribution family,
including parameterizations, characteristics, and the closed-form hazard.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import expon

from pysatl_distr.errors import ParameterNotPositiveError
from pysatl_distr.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestExponentialFamily(BaseDistributionTest):
    """Test suite for Exponential distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.exponential_family = self.family(FamilyName.EXPONENTIAL)
        self.exponential_dist_example = self.exponential_family(lambda_=0.5)

    def test_family_properties(self):
        """Test basic properties of exponential family."""
        assert self.exponential_family.name == FamilyName.EXPONENTIAL
        assert self.exponential_family.parametrization_names == ["rate", "scale"]
        assert self.exponential_family.base_parametrization_name == "rate"

    def test_scale_parametrization(self):
        """Test that the scale parametrization converts to the rate."""
        dist = self.exponential_family(beta=2.0, parametrization_name="scale")
        base = self.exponential_family.to_base(dist.parameters)

        assert dist.parameters.parameters == {"beta": 2.0}
        assert base.parameters == {"lambda_": 0.5}
        assert dist.mean() == pytest.approx(2.0)
        assert dist.cdf(2.0) == pytest.approx(1 - math.exp(-1))

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ParameterNotPositiveError, match="lambda_ > 0"):
            self.exponential_family(lambda_=0.0)

        with pytest.raises(ParameterNotPositiveError, match="beta > 0"):
            self.exponential_family(beta=-1.0, parametrization_name="scale")

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-1.0, 0.0, 0.5, 1.0, 2.0, 10.0], expon.pdf),
            (CharacteristicName.LOG_PDF, [0.0, 0.5, 1.0, 2.0, 10.0], expon.logpdf),
            (CharacteristicName.CDF, [-1.0, 0.0, 0.5, 1.0, 2.0, 10.0], expon.cdf),
            (CharacteristicName.SF, [-1.0, 0.0, 0.5, 1.0, 2.0, 10.0], expon.sf),
            (CharacteristicName.PPF, [0.0, 0.001, 0.1, 0.5, 0.9, 0.999], expon.ppf),
            (CharacteristicName.ISF, [0.001, 0.1, 0.5, 0.9, 0.999, 1.0], expon.isf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test characteristics against scipy."""
        input_array = np.array(test_data)
        result_array = self.exponential_dist_example.calculate_characteristic(
            char_name, input_array
        )

        assert result_array.shape == input_array.shape
        self.assert_arrays_almost_equal(result_array, scipy_func(input_array, scale=2.0))

    def test_hazard_is_constant(self):
        """Test the closed-form hazard and cumulative hazard."""
        dist = self.exponential_dist_example
        x = np.array([0.0, 1.0, 10.0, 100.0])

        self.assert_arrays_almost_equal(dist.hazard(x), np.full(4, 0.5))
        self.assert_arrays_almost_equal(dist.chf(x), 0.5 * x)
        assert dist.hazard(-1.0) == 0.0
        assert dist.chf(-1.0) == 0.0

    def test_small_probabilities(self):
        """Test that small probabilities keep relative precision."""
        dist = self.exponential_dist_example
        x = np.array([1e-300, 1e-12, 1e-6])

        self.assert_arrays_relatively_equal(dist.cdf(x), expon.cdf(x, scale=2.0), rtol=1e-14)
        self.assert_arrays_relatively_equal(dist.ppf(1e-12), 2e-12, rtol=1e-11)

    def test_quantile_endpoints(self):
        """Test quantiles at probabilities 0 and 1."""
        dist = self.exponential_dist_example

        assert dist.ppf(0.0) == 0.0
        assert dist.ppf(1.0) == math.inf
        assert dist.isf(1.0) == 0.0
        assert dist.isf(0.0) == math.inf

    def test_summaries(self):
        """Test moments and other summaries."""
        dist = self.exponential_dist_example

        assert dist.mean() == pytest.approx(2.0)
        assert dist.var() == pytest.approx(4.0)
        assert dist.mode() == 0.0
        assert dist.median() == pytest.approx(2.0 * math.log(2))
        assert dist.skewness() == pytest.approx(2.0)
        assert dist.kurtosis(excess=True) == pytest.approx(6.0)
        assert dist.kurtosis() == pytest.approx(9.0)
        assert dist.entropy() == pytest.approx(expon.entropy(scale=2.0))

    def test_quantiles_invert_cdf(self):
        """Test ppf and isf round trips over the whole probability range."""
        self.assert_quantiles_invert_cdf(self.exponential_dist_example)
        self.assert_cdf_and_sf_complement(self.exponential_dist_example, np.linspace(-1, 20, 22))

    def test_support(self):
        """Test that the support is the non-negative half-line."""
        support = self.exponential_dist_example.support

        assert support.left == 0.0
        assert support.right == math.inf
        assert support.contains(0.0) is True
        assert support.contains(-1e-9) is False

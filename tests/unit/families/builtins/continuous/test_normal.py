"""
Tests for Normal Distribution Family

This module tests the functionality of the normal distribution family,
including parameterizations, characteristics, and sampling.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.errors import ParameterNotPositiveError, ParameterOutOfRangeError
from pysatl_distr.types import CharacteristicName, FamilyName, UnivariateContinuous

from .base import BaseDistributionTest


class TestNormalFamily(BaseDistributionTest):
    """Test suite for Normal distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.normal_family = self.family(FamilyName.NORMAL)
        self.normal_dist_example = self.normal_family(mu=2.0, sigma=1.5)

    def test_family_properties(self):
        """Test basic properties of normal family."""
        assert self.normal_family.name == FamilyName.NORMAL

        expected_parametrizations = {"meanStd", "meanPrec", "exponential"}
        assert set(self.normal_family.parametrization_names) == expected_parametrizations
        assert self.normal_family.base_parametrization_name == "meanStd"

    def test_mean_std_parametrization_creation(self):
        """Test creation of distribution with standard parametrization."""
        dist = self.normal_family(mu=2.0, sigma=1.5)

        assert dist.family_name == FamilyName.NORMAL
        assert dist.distribution_type == UnivariateContinuous
        assert dist.parameters.parameters == {"mu": 2.0, "sigma": 1.5}
        assert dist.parametrization_name == "meanStd"

    def test_mean_prec_parametrization_creation(self):
        """Test creation of distribution with mean-precision parametrization."""
        dist = self.normal_family(mu=2.0, tau=0.25, parametrization_name="meanPrec")

        assert dist.parameters.parameters == {"mu": 2.0, "tau": 0.25}
        assert dist.parametrization_name == "meanPrec"
        assert dist.var() == pytest.approx(4.0)

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ParameterNotPositiveError, match="sigma > 0"):
            self.normal_family(mu=0, sigma=-1.0)

        with pytest.raises(ParameterNotPositiveError, match="tau > 0"):
            self.normal_family(mu=0, tau=-1.0, parametrization_name="meanPrec")

        with pytest.raises(ParameterOutOfRangeError, match="a < 0"):
            self.normal_family(a=1.0, b=0.0, parametrization_name="exponential")

    @pytest.mark.parametrize(
        "parametrization_name, params, expected_mu, expected_sigma",
        [
            ("meanStd", {"mu": 2.0, "sigma": 1.5}, 2.0, 1.5),
            ("meanPrec", {"mu": 2.0, "tau": 0.25}, 2.0, math.sqrt(1 / 0.25)),
            ("exponential", {"a": -1 / (2 * 1.5**2), "b": 2 / (1.5**2)}, 2.0, 1.5),
        ],
    )
    def test_parametrization_conversions(
        self, parametrization_name, params, expected_mu, expected_sigma
    ):
        """Test conversions between different parameterizations."""
        base_params = self.normal_family.to_base(
            self.normal_family.get_parametrization(parametrization_name)(**params)
        )

        assert abs(base_params.parameters["mu"] - expected_mu) < self.CALCULATION_PRECISION
        assert abs(base_params.parameters["sigma"] - expected_sigma) < self.CALCULATION_PRECISION

    def test_summaries(self):
        """Test moments and other summaries."""
        dist = self.normal_dist_example

        assert dist.mean() == pytest.approx(2.0)
        assert dist.var() == pytest.approx(2.25)
        assert dist.skewness() == 0.0
        assert dist.kurtosis() == 3.0
        assert dist.kurtosis(excess=True) == 0.0
        assert dist.mode() == 2.0
        assert dist.median() == 2.0
        assert dist.entropy() == pytest.approx(norm.entropy(loc=2.0, scale=1.5), rel=1e-12)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.pdf),
            (CharacteristicName.LOG_PDF, [-30.0, 0.0, 2.0, 40.0], norm.logpdf),
            (CharacteristicName.CDF, [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.cdf),
            (CharacteristicName.SF, [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0], norm.sf),
            (
                CharacteristicName.PPF,
                [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999],
                norm.ppf,
            ),
            (
                CharacteristicName.ISF,
                [0.001, 0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99, 0.999],
                norm.isf,
            ),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test that characteristics support array inputs."""
        dist = self.normal_dist_example

        input_array = np.array(test_data)
        result_array = dist.calculate_characteristic(char_name, input_array)

        assert result_array.shape == input_array.shape

        expected_array = scipy_func(input_array, loc=2.0, scale=1.5)

        self.assert_arrays_almost_equal(result_array, expected_array)

    def test_far_tails_keep_relative_precision(self):
        """Test that the tails are not lost to cancellation."""
        dist = self.normal_family(mu=0.0, sigma=1.0)
        x = np.array([-20.0, -10.0, -5.0])

        self.assert_arrays_relatively_equal(dist.cdf(x), norm.cdf(x), rtol=1e-10)
        self.assert_arrays_relatively_equal(dist.sf(-x), norm.sf(-x), rtol=1e-10)

    def test_derived_characteristics(self):
        """Test characteristics resolved through conversions."""
        dist = self.normal_dist_example
        x = np.array([0.0, 2.0, 5.0])

        self.assert_arrays_relatively_equal(
            dist.hazard(x), norm.pdf(x, 2.0, 1.5) / norm.sf(x, 2.0, 1.5)
        )
        self.assert_arrays_relatively_equal(dist.chf(x), -norm.logsf(x, 2.0, 1.5))

    def test_quantiles_invert_cdf(self):
        """Test ppf and isf round trips over the whole probability range."""
        self.assert_quantiles_invert_cdf(self.normal_dist_example)
        self.assert_cdf_and_sf_complement(self.normal_dist_example, np.linspace(-5, 9, 15))

    def test_quantile_endpoints(self):
        """Test quantiles at probabilities 0 and 1."""
        dist = self.normal_dist_example

        assert dist.ppf(0.0) == -math.inf
        assert dist.ppf(1.0) == math.inf
        assert dist.isf(0.0) == math.inf
        assert dist.isf(1.0) == -math.inf

    def test_normal_support(self):
        """Test that normal distribution has correct support (entire real line)."""
        support = self.normal_dist_example.support

        assert isinstance(support, ContinuousSupport)
        assert support.left == float("-inf")
        assert support.right == float("inf")
        assert not support.left_closed
        assert not support.right_closed
        assert support.contains(0) is True
        assert np.all(support.contains(np.array([-500, 0, 5])))

    def test_sampling_matches_moments(self):
        """Test that inverse transform sampling reproduces the moments."""
        sample = self.normal_dist_example.sample(20_000, seed=7)

        assert sample.shape == (20_000, 1)
        assert abs(sample.array.mean() - 2.0) < 0.05
        assert abs(sample.array.std() - 1.5) < 0.05


class TestNormalFamilyEdgeCases(BaseDistributionTest):
    """Test edge cases and error conditions."""

    def setup_method(self):
        """Setup before each test method."""
        self.normal_family = self.family(FamilyName.NORMAL)

    def test_invalid_parameterization(self):
        """Test error for invalid parameterization name."""
        with pytest.raises(KeyError):
            self.normal_family.distribution(parametrization_name="invalid_name", mu=0, sigma=1)

    def test_missing_parameters(self):
        """Test error for missing required parameters."""
        with pytest.raises(TypeError):
            self.normal_family.distribution(mu=0)

    def test_invalid_probability_ppf(self):
        """Test PPF with invalid probability values."""
        dist = self.normal_family(mu=2.0, sigma=1.5)

        with pytest.raises(ParameterOutOfRangeError):
            dist.ppf(-0.1)
        with pytest.raises(ParameterOutOfRangeError):
            dist.ppf(1.1)

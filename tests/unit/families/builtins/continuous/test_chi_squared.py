"""
Tests for Chi-squared Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import chi2

from pysatl_distr.errors import ParameterNotPositiveError
from pysatl_distr.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest

QUANTILE_PROBABILITIES = np.array([0.001, 0.01, 0.1, 0.5, 0.9, 0.99, 0.999])


class TestChiSquaredFamily(BaseDistributionTest):
    """Test suite for Chi-squared distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.chi_squared_family = self.family(FamilyName.CHI_SQUARED)
        self.dist = self.chi_squared_family(df=5.0)

    def test_family_properties(self):
        """Test basic properties of chi-squared family."""
        assert self.chi_squared_family.parametrization_names == ["standard"]
        assert self.dist.parameters.parameters == {"df": 5.0}

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ParameterNotPositiveError, match="df > 0"):
            self.chi_squared_family(df=0.0)

    def test_fractional_degrees_of_freedom(self):
        """Test that non-integer degrees of freedom are accepted."""
        dist = self.chi_squared_family(df=2.5)
        assert dist.cdf(2.0) == pytest.approx(chi2.cdf(2.0, 2.5), rel=1e-12)

    @pytest.mark.parametrize("df", [1.0, 5.0, 30.0])
    @pytest.mark.parametrize(
        "char_name, scipy_func",
        [
            (CharacteristicName.PDF, chi2.pdf),
            (CharacteristicName.LOG_PDF, chi2.logpdf),
            (CharacteristicName.CDF, chi2.cdf),
            (CharacteristicName.SF, chi2.sf),
        ],
    )
    def test_pointwise_characteristics(self, df, char_name, scipy_func):
        """Test pointwise characteristics against scipy."""
        dist = self.chi_squared_family(df=df)
        x = np.array([0.1, 1.0, 4.0, 10.0, 50.0])

        result = dist.calculate_characteristic(char_name, x)

        self.assert_arrays_relatively_equal(result, scipy_func(x, df))

    @pytest.mark.parametrize("df", [1.0, 5.0, 30.0])
    def test_quantiles(self, df):
        """Test ppf and isf against scipy."""
        dist = self.chi_squared_family(df=df)
        p = QUANTILE_PROBABILITIES

        self.assert_arrays_relatively_equal(dist.ppf(p), chi2.ppf(p, df), rtol=1e-8)
        self.assert_arrays_relatively_equal(dist.isf(p), chi2.isf(p, df), rtol=1e-8)

    def test_summaries(self):
        """Test moments and other summaries against scipy."""
        mean, var, skew, kurt = chi2.stats(5.0, moments="mvsk")

        assert self.dist.mean() == pytest.approx(float(mean))
        assert self.dist.var() == pytest.approx(float(var))
        assert self.dist.skewness() == pytest.approx(float(skew))
        assert self.dist.kurtosis(excess=True) == pytest.approx(float(kurt))
        assert self.dist.kurtosis() == pytest.approx(float(kurt) + 3.0)
        assert self.dist.mode() == pytest.approx(3.0)
        assert self.dist.entropy() == pytest.approx(chi2.entropy(5.0), rel=1e-12)
        assert self.chi_squared_family(df=1.0).mode() is None

    def test_quantiles_invert_cdf(self):
        """Test ppf and isf round trips over the whole probability range."""
        self.assert_quantiles_invert_cdf(self.dist)
        self.assert_cdf_and_sf_complement(self.dist, np.linspace(0.0, 30.0, 16))

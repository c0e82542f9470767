"""
Tests for Triangular Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.integrate import quad
from scipy.stats import triang

from pysatl_distr.errors import InvalidBoundsError, ParameterOutOfRangeError
from pysatl_distr.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestTriangularFamily(BaseDistributionTest):
    """Test suite for Triangular distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.triangular_family = self.family(FamilyName.TRIANGULAR)
        self.dist = self.triangular_family(lower=1.0, mode=2.0, upper=5.0)
        self.scipy_kwargs = {"c": 0.25, "loc": 1.0, "scale": 4.0}

    def test_family_properties(self):
        """Test basic properties of triangular family."""
        assert self.triangular_family.parametrization_names == ["standard"]
        assert self.dist.parameters.parameters == {"lower": 1.0, "mode": 2.0, "upper": 5.0}

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(InvalidBoundsError):
            self.triangular_family(lower=2.0, mode=2.0, upper=2.0)

        with pytest.raises(ParameterOutOfRangeError) as info:
            self.triangular_family(lower=0.0, mode=3.0, upper=2.0)
        assert info.value.name == "mode"
        assert not isinstance(info.value, InvalidBoundsError)

    def test_cdf_at_mode(self):
        """Test that the mass left of the mode is (mode - lower)/(upper - lower)."""
        assert self.dist.cdf(2.0) == pytest.approx(0.25)
        assert self.dist.sf(2.0) == pytest.approx(0.75)

    def test_pdf_integrates_to_one(self):
        """Test that the density integrates to one over the support."""
        total, _ = quad(lambda x: self.dist.pdf(x), 1.0, 5.0, points=[2.0])
        assert total == pytest.approx(1.0, abs=1e-10)

    @pytest.mark.parametrize(
        "char_name, test_data, scipy_func",
        [
            (CharacteristicName.PDF, [0.0, 1.0, 1.5, 2.0, 3.0, 5.0, 6.0], triang.pdf),
            (CharacteristicName.CDF, [0.0, 1.0, 1.5, 2.0, 3.0, 5.0, 6.0], triang.cdf),
            (CharacteristicName.SF, [0.0, 1.0, 1.5, 2.0, 3.0, 5.0, 6.0], triang.sf),
            (CharacteristicName.PPF, [0.0, 0.1, 0.25, 0.5, 0.9, 1.0], triang.ppf),
            (CharacteristicName.ISF, [0.0, 0.1, 0.5, 0.75, 0.9, 1.0], triang.isf),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, test_data, scipy_func):
        """Test characteristics against scipy."""
        input_array = np.array(test_data)
        result_array = self.dist.calculate_characteristic(char_name, input_array)

        self.assert_arrays_almost_equal(result_array, scipy_func(input_array, **self.scipy_kwargs))

    def test_summaries(self):
        """Test moments and other summaries against scipy."""
        mean, var, skew, kurt = triang.stats(moments="mvsk", **self.scipy_kwargs)

        assert self.dist.mean() == pytest.approx(float(mean))
        assert self.dist.var() == pytest.approx(float(var))
        assert self.dist.skewness() == pytest.approx(float(skew))
        assert self.dist.kurtosis(excess=True) == pytest.approx(float(kurt))
        assert self.dist.kurtosis() == pytest.approx(2.4)
        assert self.dist.mode() == 2.0
        assert self.dist.median() == pytest.approx(triang.median(**self.scipy_kwargs))
        assert self.dist.entropy() == pytest.approx(triang.entropy(**self.scipy_kwargs))

    @pytest.mark.parametrize("mode", [1.0, 3.0, 5.0])
    def test_quantiles_invert_cdf(self, mode):
        """Test round trips, including a mode at either bound."""
        dist = self.triangular_family(lower=1.0, mode=mode, upper=5.0)

        self.assert_quantiles_invert_cdf(dist, np.array([0.01, 0.1, 0.25, 0.5, 0.75, 0.9, 0.99]))
        self.assert_cdf_and_sf_complement(dist, np.linspace(0.0, 6.0, 13))

    def test_support(self):
        """Test the closed support between the bounds."""
        support = self.dist.support

        assert (support.left, support.right) == (1.0, 5.0)
        assert support.contains(1.0) is True
        assert support.contains(5.0) is True

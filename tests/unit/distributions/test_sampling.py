from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_distr.distributions.sampling import ArraySample
from pysatl_distr.families.configuration import configure_families_register
from pysatl_distr.types import FamilyName, Kind
from tests.unit.distributions.test_basic import DistributionTestBase
from tests.utils.mocks import MockSamplingStrategy, StandaloneEuclideanUnivariateDistribution


class TestSampling(DistributionTestBase):
    def test_sample_uniform_ppf_only_shape_bounds_and_mean(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        n = 1000
        sample = distr.sample(n, seed=1)

        assert sample.shape == (n, 1)
        arr = sample.array
        assert np.isfinite(arr).all()
        assert ((arr >= 0.0) & (arr <= 1.0)).all()

        mean = float(arr.mean())
        assert mean == pytest.approx(0.5, abs=0.1)

    def test_seed_makes_sampling_reproducible(self) -> None:
        distr = self.make_exponential_pdf_cdf_distribution()

        first = distr.sample(50, seed=123).array
        second = distr.sample(50, seed=123).array

        np.testing.assert_array_equal(first, second)

    def test_rng_takes_precedence_over_seed(self) -> None:
        distr = self.make_uniform_ppf_distribution()

        drawn = distr.sample(5, rng=np.random.default_rng(7), seed=1).array
        expected = np.random.default_rng(7).random(5).reshape(5, 1)

        np.testing.assert_array_equal(drawn, expected)

    def test_negative_sample_size(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            self.make_uniform_ppf_distribution().sample(-1)

    def test_discrete_sample_lies_on_support(self) -> None:
        distr = self.make_discrete_point_pmf_distribution()

        arr = distr.sample(200, seed=3).array

        assert set(np.unique(arr)).issubset({0.0, 1.0, 2.0})

    def test_family_sampling_matches_moments(self) -> None:
        distr = configure_families_register().get(FamilyName.EXPONENTIAL)(lambda_=2.0)

        arr = distr.sample(20_000, seed=2024).array

        assert float(arr.mean()) == pytest.approx(0.5, rel=0.05)

    def test_custom_sampling_strategy(self) -> None:
        distr = StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            sampling_strategy=MockSamplingStrategy(),
        )

        assert distr.sample(4).shape == (4, 1)


class TestArraySample:
    def test_rejects_non_2d_data(self) -> None:
        with pytest.raises(ValueError, match="2D"):
            ArraySample(np.zeros(3))

    def test_len_iteration_and_column(self) -> None:
        sample = ArraySample([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])

        assert len(sample) == 3
        assert sample.dimension == 2
        assert [row.tolist() for row in sample] == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
        np.testing.assert_array_equal(sample.column(1), [2.0, 4.0, 6.0])

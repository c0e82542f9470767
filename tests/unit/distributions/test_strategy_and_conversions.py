from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import Any

import numpy as np
import pytest

from pysatl_distr.distributions.computation import (
    AnalyticalComputation,
    FittedComputationMethod,
)
from pysatl_distr.distributions.fitters import fit_pmf_sf_to_hazard_1D
from pysatl_distr.distributions.strategies import DefaultComputationStrategy
from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.types import CharacteristicName, Kind
from tests.unit.distributions.test_basic import DistributionTestBase
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


class TestComputationStrategy(DistributionTestBase):
    def test_analytical_is_preferred(self) -> None:
        distr = self.make_exponential_pdf_cdf_distribution()

        cdf = distr.computation_strategy.query_method(self.CDF, distr)

        assert isinstance(cdf, AnalyticalComputation)
        assert cdf is distr.analytical_computations[self.CDF]

    def test_conversion_is_fitted(self) -> None:
        distr = self.make_exponential_pdf_cdf_distribution()

        sf = distr.computation_strategy.query_method(self.SF, distr)

        assert isinstance(sf, FittedComputationMethod)
        assert list(sf.sources) == [self.CDF]

    def test_no_analytical_computations(self) -> None:
        distr = StandaloneEuclideanUnivariateDistribution(kind=Kind.CONTINUOUS)

        with pytest.raises(RuntimeError, match="no analytical computations"):
            DefaultComputationStrategy().query_method(self.CDF, distr)

    def test_unreachable_characteristic(self) -> None:
        distr = self.make_logistic_cdf_distribution()

        with pytest.raises(RuntimeError, match="No conversion path"):
            distr.query_method(CharacteristicName.MEAN)

    def test_conversion_needs_every_source(self) -> None:
        # hazard needs pdf and sf, but there is no way to pdf from cdf
        distr = self.make_logistic_cdf_distribution()

        with pytest.raises(RuntimeError):
            distr.hazard(0.0)

    def test_sf_only_resolves_cdf_and_ppf(self) -> None:
        def sf(x: Any, **_: Any) -> Any:
            return 1.0 / (1.0 + np.exp(np.asarray(x, dtype=float)))

        distr = StandaloneEuclideanUnivariateDistribution(
            kind=Kind.CONTINUOUS,
            analytical_computations=[AnalyticalComputation[Any, Any](target=self.SF, func=sf)],
            support=ContinuousSupport(),
        )

        assert distr.cdf(0.0) == pytest.approx(0.5)
        assert distr.ppf(0.75) == pytest.approx(math.log(3.0), rel=1e-9)


class TestContinuousConversions(DistributionTestBase):
    def setup_method(self) -> None:
        self.rate = 2.0
        self.distr = self.make_exponential_pdf_cdf_distribution(rate=self.rate)

    def test_sf_from_cdf(self) -> None:
        x = np.array([0.0, 0.5, 1.0, 2.0])
        np.testing.assert_allclose(self.distr.sf(x), np.exp(-self.rate * x), rtol=1e-12)

    def test_log_pdf_from_pdf(self) -> None:
        x = np.array([0.5, 1.0])
        np.testing.assert_allclose(
            self.distr.log_pdf(x), math.log(self.rate) - self.rate * x, rtol=1e-12
        )
        assert self.distr.log_pdf(-1.0) == -math.inf

    def test_hazard_from_pdf_and_sf(self) -> None:
        np.testing.assert_allclose(
            self.distr.hazard([0.25, 0.5, 1.0]), [self.rate] * 3, rtol=1e-9
        )

    def test_chf_from_sf(self) -> None:
        x = np.array([0.25, 0.5, 1.0])
        np.testing.assert_allclose(self.distr.chf(x), self.rate * x, rtol=1e-9)

    @pytest.mark.parametrize("p", [1e-6, 0.1, 0.5, 0.9, 0.999])
    def test_ppf_by_root_finding(self, p: float) -> None:
        expected = -math.log1p(-p) / self.rate
        assert self.distr.ppf(p) == pytest.approx(expected, rel=1e-8)

    def test_ppf_endpoints_are_support_bounds(self) -> None:
        assert self.distr.ppf(0.0) == 0.0
        assert self.distr.ppf(1.0) == math.inf

    @pytest.mark.parametrize("q", [0.9, 0.5, 0.1])
    def test_isf_by_root_finding(self, q: float) -> None:
        expected = -math.log(q) / self.rate
        assert self.distr.isf(q) == pytest.approx(expected, rel=1e-8)

    def test_isf_endpoints_are_support_bounds(self) -> None:
        assert self.distr.isf(1.0) == 0.0
        assert self.distr.isf(0.0) == math.inf

    def test_median_from_ppf(self) -> None:
        assert self.distr.median() == pytest.approx(math.log(2.0) / self.rate, rel=1e-8)

    def test_solver_options_are_forwarded(self) -> None:
        loose = self.distr.ppf(0.5, rel_tol=1e-3)
        assert loose == pytest.approx(math.log(2.0) / self.rate, rel=1e-2)

    def test_logistic_ppf_on_real_line(self) -> None:
        distr = self.make_logistic_cdf_distribution()
        for p in (0.01, 0.3, 0.5, 0.8, 0.999):
            assert distr.ppf(p) == pytest.approx(math.log(p / (1.0 - p)), abs=1e-9)


class TestDiscreteConversions(DistributionTestBase):
    def setup_method(self) -> None:
        self.distr = self.make_discrete_point_pmf_distribution()

    def test_is_discrete(self) -> None:
        assert self.distr.is_discrete

    def test_cdf_from_pmf(self) -> None:
        x = np.array([-1.0, 0.0, 0.5, 1.0, 1.5, 2.0, 10.0])
        np.testing.assert_allclose(
            self.distr.cdf(x), [0.0, 0.2, 0.2, 0.7, 0.7, 1.0, 1.0], atol=1e-12
        )

    def test_cdf_from_pmf_requires_lattice_support(self) -> None:
        distr = self.make_discrete_point_pmf_distribution(is_with_support=False)

        with pytest.raises(RuntimeError):
            distr.cdf(1.0)

    def test_sf_from_cdf(self) -> None:
        np.testing.assert_allclose(self.distr.sf([0.0, 1.0, 2.0]), [0.8, 0.3, 0.0], atol=1e-12)

    @pytest.mark.parametrize(
        "p, expected", [(0.0, 0.0), (0.1, 0.0), (0.2, 0.0), (0.5, 1.0), (0.95, 2.0), (1.0, 2.0)]
    )
    def test_ppf_is_smallest_point_reaching_p(self, p: float, expected: float) -> None:
        assert self.distr.ppf(p) == expected

    @pytest.mark.parametrize("q, expected", [(1.0, 0.0), (0.9, 0.0), (0.5, 1.0), (0.1, 2.0)])
    def test_isf_is_smallest_point_below_q(self, q: float, expected: float) -> None:
        assert self.distr.isf(q) == expected

    def test_hazard(self) -> None:
        assert self.distr.hazard(0.0) == pytest.approx(0.2 / 0.8)
        assert self.distr.hazard(1.0) == pytest.approx(0.5 / 0.3)
        # sf(2) is 0 up to the rounding of 1 - cdf
        assert self.distr.hazard(2.0) > 1e15

    def test_hazard_is_infinite_where_sf_vanishes(self) -> None:
        sources = {
            self.PMF: lambda x, **_: np.array([0.2, 0.5, 0.3, 0.0]),
            self.SF: lambda x, **_: np.array([0.8, 0.3, 0.0, 0.0]),
        }
        hazard = fit_pmf_sf_to_hazard_1D(self.distr, sources)

        np.testing.assert_array_equal(
            hazard([0.0, 1.0, 2.0, 3.0]), [0.25, 0.5 / 0.3, math.inf, math.inf]
        )

    def test_median(self) -> None:
        assert self.distr.median() == 1.0

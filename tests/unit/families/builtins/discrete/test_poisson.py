"""
Tests for Poisson Distribution Family

This module tests the mass and cumulative functions of the Poisson family,
their support checks and the closed-form moments.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import poisson

from pyprobdist.distributions.support import IntegerLatticeDiscreteSupport
from pyprobdist.exceptions import ParameterDomainError, SupportDomainError
from pyprobdist.types import CharacteristicName, FamilyName, UnivariateDiscrete

from ..base import BaseDistributionTest


class TestPoissonFamily(BaseDistributionTest):
    """Test suite for Poisson distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        self.poisson_family = self.family(FamilyName.POISSON)
        self.poisson_dist_example = self.poisson_family(lambda_=2.0)

    def test_family_properties(self):
        assert self.poisson_family.name == FamilyName.POISSON
        assert self.poisson_family.parametrization_names == ["rate"]
        assert self.poisson_family.is_discrete

    def test_creation(self):
        dist = self.poisson_family(2.0)

        assert dist.family_name == FamilyName.POISSON
        assert dist.distribution_type == UnivariateDiscrete
        assert dist.parameters == {"lambda_": 2.0}
        assert dist.parametrization_name == "rate"

    @pytest.mark.parametrize("lambda_", [0, 0.0, -1.0])
    def test_non_positive_rate_is_rejected(self, lambda_):
        with pytest.raises(ParameterDomainError, match="lambda_"):
            self.poisson_family(lambda_=lambda_)

    def test_pmf_at_zero(self):
        assert self.poisson_dist_example.pmf(0) == pytest.approx(math.exp(-2.0), abs=1e-12)

    @pytest.mark.parametrize("lambda_", [0.3, 2.0, 7.5, 20.0])
    def test_pmf_matches_scipy(self, lambda_):
        dist = self.poisson_family(lambda_=lambda_)
        k = np.arange(0, 40)

        self.assert_arrays_almost_equal(dist.pmf(k), poisson.pmf(k, lambda_))

    @pytest.mark.parametrize("k", range(15))
    def test_pmf_is_a_probability(self, k):
        assert 0.0 <= self.poisson_dist_example.pmf(k) <= 1.0

    def test_cdf_is_exact_sum_of_pmf(self):
        dist = self.poisson_family(lambda_=3.7)

        for k in range(25):
            assert dist.cdf(k) == sum(dist.pmf(x) for x in range(k + 1))

    def test_cdf_is_monotone_and_bounded(self):
        values = self.poisson_dist_example.cdf(np.arange(0, 30))

        assert np.all(np.diff(values) >= 0)
        assert values[0] == pytest.approx(math.exp(-2.0))
        assert values[-1] == pytest.approx(1.0)
        assert np.all(values <= 1.0 + 1e-12)

    def test_cdf_matches_scipy(self):
        k = np.arange(0, 20)
        self.assert_arrays_almost_equal(self.poisson_dist_example.cdf(k), poisson.cdf(k, 2.0))

    @pytest.mark.parametrize("k", [171, 250, 1000])
    def test_pmf_far_in_the_tail(self, k):
        mass = self.poisson_dist_example.pmf(k)

        assert 0.0 <= mass <= 1.0
        assert mass == pytest.approx(poisson.pmf(k, 2.0), rel=1e-9)

    def test_cdf_over_a_long_range(self):
        assert self.poisson_dist_example.cdf(200) == pytest.approx(1.0)

    @pytest.mark.parametrize("lambda_", [150.0, 1000.0, 5000.0])
    def test_pmf_for_large_rate(self, lambda_):
        dist = self.poisson_family(lambda_=lambda_)
        k = int(lambda_)

        assert dist.pmf(k) == pytest.approx(poisson.pmf(k, lambda_), rel=1e-9)
        assert dist.cdf(k) == pytest.approx(poisson.cdf(k, lambda_), rel=1e-9)

    def test_sampling_with_large_rate(self):
        dist = self.poisson_family(lambda_=150.0)

        arr = dist.sample(2000, rng=np.random.default_rng(3)).array

        assert float(arr.mean()) == pytest.approx(150.0, abs=1.5)

    @pytest.mark.parametrize("k", [-1, -0.5, 1.5, float("inf"), float("nan")])
    def test_argument_outside_support(self, k):
        with pytest.raises(SupportDomainError):
            self.poisson_dist_example.pmf(k)
        with pytest.raises(SupportDomainError):
            self.poisson_dist_example.cdf(k)

    def test_support_error_names_the_argument(self):
        with pytest.raises(SupportDomainError, match=r"k = -1 must be in \[0,∞\)") as exc:
            self.poisson_dist_example.pmf(-1)

        assert exc.value.name == "k"

    def test_instance_usable_after_support_error(self):
        with pytest.raises(SupportDomainError):
            self.poisson_dist_example.pmf(-1)

        assert self.poisson_dist_example.pmf(0) == pytest.approx(math.exp(-2.0))

    def test_evaluation_is_idempotent(self):
        first = self.poisson_dist_example.pmf(3)
        second = self.poisson_dist_example.pmf(3)

        assert first == second
        assert self.poisson_dist_example.cdf(3) == self.poisson_dist_example.cdf(3)

    @pytest.mark.parametrize(
        "method, expected",
        [
            ("mean", 2.0),
            ("var", 2.0),
            ("median", 2),
            ("mode", 2),
            ("skewness", 2.0**-0.5),
        ],
    )
    def test_moments(self, method, expected):
        actual = getattr(self.poisson_dist_example, method)()
        assert abs(actual - expected) < self.CALCULATION_PRECISION

    def test_kurtosis(self):
        assert self.poisson_dist_example.kurtosis() == pytest.approx(3.5)
        assert self.poisson_dist_example.kurtosis(excess=True) == pytest.approx(0.5)

    @pytest.mark.parametrize("lambda_", [0.5, 1.0, 4.2, 10.0])
    def test_median_formula(self, lambda_):
        dist = self.poisson_family(lambda_=lambda_)
        assert dist.median() == math.floor(lambda_ + 1 / 3 - 0.02 / lambda_)
        assert dist.mode() == math.floor(lambda_)

    def test_moments_match_scipy(self):
        mean, var, skew, kurt = poisson.stats(2.0, moments="mvsk")

        assert self.poisson_dist_example.mean() == pytest.approx(float(mean))
        assert self.poisson_dist_example.var() == pytest.approx(float(var))
        assert self.poisson_dist_example.skewness() == pytest.approx(float(skew))
        assert self.poisson_dist_example.kurtosis(excess=True) == pytest.approx(float(kurt))

    def test_analytical_computations_availability(self):
        comp = self.poisson_dist_example.analytical_computations

        assert set(comp.keys()) == {
            CharacteristicName.PMF,
            CharacteristicName.CDF,
            CharacteristicName.MEAN,
            CharacteristicName.VAR,
            CharacteristicName.MEDIAN,
            CharacteristicName.MODE,
            CharacteristicName.SKEW,
            CharacteristicName.KURT,
        }

    def test_poisson_support(self):
        support = self.poisson_dist_example.support

        assert isinstance(support, IntegerLatticeDiscreteSupport)
        assert support.min_k == 0
        assert support.max_k is None
        assert support.contains(0) is True
        assert support.contains(-1) is False

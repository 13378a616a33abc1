"""
Tests for Binomial Distribution Family
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.stats import binom

from pyprobdist.exceptions import ConstraintViolationError, ParameterDomainError, SupportDomainError
from pyprobdist.types import FamilyName

from ..base import BaseDistributionTest


class TestBinomialFamily(BaseDistributionTest):
    def setup_method(self):
        self.binomial_family = self.family(FamilyName.BINOMIAL)
        self.binomial_dist_example = self.binomial_family(n=10, p=0.3)

    def test_pmf_and_cdf_match_scipy(self):
        k = np.arange(0, 11)

        self.assert_arrays_almost_equal(self.binomial_dist_example.pmf(k), binom.pmf(k, 10, 0.3))
        self.assert_arrays_almost_equal(self.binomial_dist_example.cdf(k), binom.cdf(k, 10, 0.3))

    @pytest.mark.parametrize("n, p, k", [(1100, 0.5, 550), (5000, 0.3, 1500), (2000, 0.01, 0)])
    def test_pmf_for_many_trials(self, n, p, k):
        dist = self.binomial_family(n=n, p=p)

        assert dist.pmf(k) == pytest.approx(binom.pmf(k, n, p), rel=1e-9)

    @pytest.mark.parametrize(
        "p, k, expected",
        [(0.0, 0, 1.0), (0.0, 3, 0.0), (1.0, 10, 1.0), (1.0, 9, 0.0)],
    )
    def test_degenerate_probabilities(self, p, k, expected):
        assert self.binomial_family(n=10, p=p).pmf(k) == expected

    def test_mass_above_n_is_zero(self):
        assert self.binomial_dist_example.pmf(11) == 0.0
        assert self.binomial_dist_example.cdf(25) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "params, error",
        [
            ({"n": -1, "p": 0.5}, ParameterDomainError),
            ({"n": 5, "p": 1.5}, ParameterDomainError),
            ({"n": 2.5, "p": 0.5}, ConstraintViolationError),
        ],
    )
    def test_invalid_parameters(self, params, error):
        with pytest.raises(error):
            self.binomial_family(**params)

    def test_argument_must_be_a_count(self):
        with pytest.raises(SupportDomainError):
            self.binomial_dist_example.pmf(2.5)

    def test_moments_match_scipy(self):
        mean, var, skew, kurt = binom.stats(10, 0.3, moments="mvsk")
        dist = self.binomial_dist_example

        assert dist.mean() == pytest.approx(float(mean))
        assert dist.var() == pytest.approx(float(var))
        assert dist.skewness() == pytest.approx(float(skew))
        assert dist.kurtosis(excess=True) == pytest.approx(float(kurt))
        assert dist.kurtosis() == pytest.approx(float(kurt) + 3)

    def test_median_and_mode(self):
        assert self.binomial_dist_example.median() == binom.median(10, 0.3)
        assert self.binomial_dist_example.mode() == 3
        assert self.binomial_family(n=4, p=1.0).mode() == 4

    def test_support_is_bounded_by_n(self):
        support = self.binomial_dist_example.support
        assert list(support.iter_points()) == list(range(11))

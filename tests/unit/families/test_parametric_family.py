from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import re
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from pyprobdist.distributions import DefaultSamplingUnivariateStrategy, DiscreteInverseTransformStrategy
from pyprobdist.exceptions import (
    CharacteristicNotAvailableError,
    ConstraintViolationError,
    ParameterDomainError,
    SupportDomainError,
)
from pyprobdist.families import ParametricFamily, ParametricFamilyDistribution
from pyprobdist.types import CharacteristicName, UnivariateContinuous, UnivariateDiscrete
from tests.utils.mocks import make_counting_family, make_scale_family


class TestFamilyConstruction:
    def test_base_parametrization_and_plan(self) -> None:
        family = make_scale_family()

        assert family.parametrization_names == ["base", "rate"]
        assert family.base_parametrization_name == "base"
        assert family.distribution_type == UnivariateContinuous
        assert not family.is_discrete
        assert family.support_limits == {"x": "[0,∞)"}

    def test_support_limits_must_have_one_entry(self) -> None:
        with pytest.raises(ValueError, match="exactly one"):
            ParametricFamily(
                name="Broken",
                distr_type=UnivariateContinuous,
                distr_parametrizations=["base"],
                distr_characteristics={},
                support_limits={"x": "[0,1]", "y": "[0,1]"},
            )

    def test_default_sampling_strategy_follows_kind(self) -> None:
        assert isinstance(make_counting_family().sampling_strategy, DiscreteInverseTransformStrategy)
        assert isinstance(
            ParametricFamily(
                name="Plain",
                distr_type=UnivariateContinuous,
                distr_parametrizations=["base"],
                distr_characteristics={},
                support_limits={"x": "(-∞,∞)"},
            ).sampling_strategy,
            DefaultSamplingUnivariateStrategy,
        )

    def test_missing_base_parametrization(self) -> None:
        family = ParametricFamily(
            name="Unregistered",
            distr_type=UnivariateDiscrete,
            distr_parametrizations=["base"],
            distr_characteristics={},
            support_limits={"k": "[0,∞)"},
        )
        with pytest.raises(ValueError, match="not registered"):
            family.distribution(1.0)


class TestDistributionCreation:
    def setup_method(self) -> None:
        self.family = make_scale_family()

    def test_keyword_and_positional_parameters(self) -> None:
        by_name = self.family(scale=2.0)
        by_position = self.family(2.0)

        assert isinstance(by_name, ParametricFamilyDistribution)
        assert by_name.parameters == by_position.parameters == {"scale": 2.0}
        assert by_name.parametrization_name == "base"
        assert by_name.family is self.family
        assert by_name.family_name == "ScaleFamily"

    def test_invalid_parameter_is_rejected_at_construction(self) -> None:
        with pytest.raises(ParameterDomainError, match=re.escape("scale = 0 must be in (0,∞)")):
            self.family(scale=0)

    def test_unknown_parametrization(self) -> None:
        with pytest.raises(KeyError):
            self.family.distribution(parametrization_name="invalid_name", scale=1.0)

    def test_missing_parameters(self) -> None:
        with pytest.raises(TypeError):
            self.family.distribution()

    def test_alternative_parametrization_uses_base_forms(self) -> None:
        distr = self.family(rate=4.0, parametrization_name="rate")

        assert distr.parametrization_name == "rate"
        assert distr.parameters == {"rate": 4.0}
        # pdf only has a base form, mean has a form of its own
        assert distr.pdf(1.0) == pytest.approx(0.25)
        assert distr.mean() == pytest.approx(0.25)

    def test_to_base(self) -> None:
        rate = self.family.get_parametrization("rate")(rate=4.0)  # type: ignore[call-arg]
        base = self.family.to_base(rate)

        assert base.name == "base"
        assert base.parameters == {"scale": 0.25}

    def test_distribution_is_immutable(self) -> None:
        distr = self.family(scale=1.0)

        with pytest.raises(FrozenInstanceError):
            distr.parametrization = distr.parametrization  # type: ignore[misc]
        with pytest.raises(TypeError):
            distr.analytical_computations["cdf"] = distr.analytical_computations["pdf"]  # type: ignore[index]


class TestSupportGuard:
    def setup_method(self) -> None:
        self.continuous = make_scale_family()(scale=3.0)
        self.discrete = make_counting_family()(n=3)

    def test_continuous_argument_outside_support(self) -> None:
        with pytest.raises(SupportDomainError, match=re.escape("x = -1 must be in [0,∞)")):
            self.continuous.pdf(-1)

    def test_instance_usable_after_support_error(self) -> None:
        with pytest.raises(SupportDomainError):
            self.continuous.pdf(-1)

        assert self.continuous.pdf(1.0) == pytest.approx(3.0)

    def test_continuous_array_is_checked_as_a_whole(self) -> None:
        np.testing.assert_array_equal(self.continuous.pdf(np.array([0.0, 1.0])), [3.0, 3.0])

        with pytest.raises(SupportDomainError) as exc:
            self.continuous.pdf(np.array([0.0, -2.0, -3.0]))
        assert exc.value.value == -2.0

    def test_absent_characteristic(self) -> None:
        with pytest.raises(CharacteristicNotAvailableError):
            self.continuous.ppf(0.5)

    def test_discrete_requires_integral_argument(self) -> None:
        with pytest.raises(SupportDomainError, match="ℤ"):
            self.discrete.pmf(1.5)

        with pytest.raises(SupportDomainError, match=re.escape("[0,∞)")):
            self.discrete.pmf(-1)

    def test_discrete_integral_float_is_accepted(self) -> None:
        # the mass function itself asserts it gets an int
        assert self.discrete.pmf(2.0) == pytest.approx(0.25)
        assert self.discrete.pmf(np.int64(2)) == pytest.approx(0.25)

    def test_discrete_array_is_evaluated_elementwise(self) -> None:
        result = self.discrete.pmf(np.array([[0, 1], [3, 5]]))

        assert result.shape == (2, 2)
        np.testing.assert_array_almost_equal(result, [[0.25, 0.25], [0.25, 0.0]])

        with pytest.raises(SupportDomainError):
            self.discrete.pmf(np.array([0.0, 0.5]))

    def test_discrete_constraint(self) -> None:
        with pytest.raises(ConstraintViolationError, match="n is an integer"):
            make_counting_family()(n=2.5)

    def test_check_support_directly(self) -> None:
        family = make_counting_family()

        assert family.check_support(CharacteristicName.PMF, 4.0) == 4
        assert type(family.check_support(CharacteristicName.PMF, 4.0)) is int
        with pytest.raises(SupportDomainError, match=re.escape("[0,1]")):
            family.check_support(CharacteristicName.PPF, 1.5)

"""
Members of parametric families.

A :class:`ParametricFamilyDistribution` is what calling a family returns: the
validated parameters plus the closed forms bound to them, with one method per
characteristic.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from pyprobdist.distributions.distribution import Distribution
from pyprobdist.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pyprobdist.distributions.computation import AnalyticalComputation
    from pyprobdist.distributions.sampling import Sample
    from pyprobdist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pyprobdist.distributions.support import Support
    from pyprobdist.families.parametric_family import ParametricFamily
    from pyprobdist.families.parametrizations import Parametrization
    from pyprobdist.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(frozen=True, slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    One member of a parametric family.

    Instances are immutable: parameters are validated once by the family and
    every characteristic is a pure function of them and its argument.

    Parameters
    ----------
    family : ParametricFamily
        Family this distribution belongs to.
    parametrization : Parametrization
        Validated parameter values.
    _analytical_computations : Mapping[str, AnalyticalComputation]
        Closed-form characteristics bound to ``parametrization``.
    _support : Support or None
        Set the variable lives on, when the family describes it.
    """

    family: ParametricFamily
    parametrization: Parametrization
    _analytical_computations: Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
    _support: Support | None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_analytical_computations", MappingProxyType(dict(self._analytical_computations))
        )

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Closed-form characteristics bound to the parameters (read-only)."""
        return self._analytical_computations

    @property
    def family_name(self) -> str:
        return self.family.name

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameter values by name."""
        return self.parametrization.parameters

    @property
    def parametrization_name(self) -> str:
        return self.parametrization.name

    @property
    def distribution_type(self) -> DistributionType:
        return self.family.distribution_type

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support

    def pdf(self, x: Any) -> Any:
        """Probability density at ``x``."""
        return self.calculate_characteristic(CharacteristicName.PDF, x)

    def pmf(self, k: Any) -> Any:
        """Probability mass at ``k``."""
        return self.calculate_characteristic(CharacteristicName.PMF, k)

    def cdf(self, x: Any) -> Any:
        """Probability ``P(X ≤ x)``."""
        return self.calculate_characteristic(CharacteristicName.CDF, x)

    def ppf(self, p: Any) -> Any:
        """Quantile function, inverse of :meth:`cdf`."""
        return self.calculate_characteristic(CharacteristicName.PPF, p)

    def mean(self) -> Any:
        return self.calculate_characteristic(CharacteristicName.MEAN, None)

    def var(self) -> Any:
        return self.calculate_characteristic(CharacteristicName.VAR, None)

    def median(self) -> Any:
        return self.calculate_characteristic(CharacteristicName.MEDIAN, None)

    def mode(self) -> Any:
        return self.calculate_characteristic(CharacteristicName.MODE, None)

    def skewness(self) -> Any:
        return self.calculate_characteristic(CharacteristicName.SKEW, None)

    def kurtosis(self, excess: bool = False) -> Any:
        """Raw kurtosis, or excess kurtosis when ``excess`` is set."""
        return self.calculate_characteristic(CharacteristicName.KURT, None, excess=excess)

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Draw ``n`` realizations as an ``(n, 1)`` sample.

        Pass ``rng=numpy.random.Generator`` for reproducible draws.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)

"""
The interface strategies see when they work on a distribution.

A distribution owns its bound closed forms, its support and the two
strategies it delegates to. Characteristic lookup and sampling are provided
here in terms of those members, so concrete classes only supply data.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pyprobdist.distributions.computation import AnalyticalComputation
    from pyprobdist.distributions.sampling import Sample
    from pyprobdist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pyprobdist.distributions.support import Support
    from pyprobdist.types import DistributionType, GenericCharacteristicName

    type Computations = Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


@runtime_checkable
class Distribution(Protocol):
    @property
    def distribution_type(self) -> DistributionType: ...
    @property
    def analytical_computations(self) -> Computations: ...
    @property
    def support(self) -> Support | None: ...
    @property
    def computation_strategy(self) -> ComputationStrategy: ...
    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve the callable for a characteristic.

        Raises
        ------
        CharacteristicNotAvailableError
            If the distribution has no closed form for it.
        """
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        """Resolve ``characteristic_name`` and evaluate it at ``value``."""
        method = self.query_method(characteristic_name)
        return method(value, **options)

    def sample(self, n: int, **options: Any) -> Sample:
        return self.sampling_strategy.sample(n, distr=self, **options)

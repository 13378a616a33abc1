"""
Strategies a distribution delegates to.

A computation strategy turns a characteristic name into a callable; a
sampling strategy turns a distribution into draws. Families pick defaults
from their kind:

- :class:`DefaultComputationStrategy` looks the name up among the
  distribution's closed forms.
- :class:`DefaultSamplingUnivariateStrategy` pushes uniform variates
  through ``ppf`` (continuous families).
- :class:`DiscreteInverseTransformStrategy` accumulates ``pmf`` along the
  support until each uniform variate is covered (discrete families).

Sampling options: ``rng``, a :class:`numpy.random.Generator` used for the
uniform variates. A fresh unseeded generator is used when it is omitted.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pyprobdist.exceptions import CharacteristicNotAvailableError
from pyprobdist.types import CharacteristicName

from .sampling import ArraySample, Sample
from .support import DiscreteSupport

if TYPE_CHECKING:
    from pyprobdist.distributions.computation import AnalyticalComputation
    from pyprobdist.types import GenericCharacteristicName

    from .distribution import Distribution


class ComputationStrategy(Protocol):
    def query_method(
        self, state: GenericCharacteristicName, distr: Distribution, **options: Any
    ) -> AnalyticalComputation[Any, Any]: ...


class SamplingStrategy(Protocol):
    def sample(self, n: int, distr: Distribution, **options: Any) -> Sample: ...


class DefaultComputationStrategy:
    """Resolve characteristics from closed forms only; nothing is derived."""

    def query_method(
        self, state: GenericCharacteristicName, distr: Distribution, **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        """
        Return the closed form of ``state``.

        Raises
        ------
        CharacteristicNotAvailableError
            If ``distr`` has no closed form for ``state``. The message lists
            the characteristics it does have.
        """
        computations = distr.analytical_computations
        if state in computations:
            return computations[state]

        available = ", ".join(sorted(computations)) or "none"
        raise CharacteristicNotAvailableError(
            f"No analytical form for '{state}'. Available characteristics: {available}."
        )


def _uniforms(n: int, options: dict[str, Any]) -> np.ndarray[Any, np.dtype[np.float64]]:
    rng: np.random.Generator | None = options.get("rng")
    return (np.random.default_rng() if rng is None else rng).random(n)


class DefaultSamplingUnivariateStrategy:
    """Inverse transform sampling: ``ppf(U)`` with ``U ~ U(0, 1)``."""

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        ppf = distr.query_method(CharacteristicName.PPF)
        draws = np.asarray(ppf(_uniforms(n, options)), dtype=np.float64)
        return ArraySample(draws.reshape(n, 1))


class DiscreteInverseTransformStrategy:
    """
    Inverse transform sampling over an ordered discrete support.

    The variates are visited in ascending order so the support is walked
    once per call, summing ``pmf`` as it goes. A variate left uncovered when
    the support ends, or when the remaining mass underflows to zero, takes
    the last point reached.

    Raises
    ------
    RuntimeError
        If the distribution's support cannot be enumerated in order.
    """

    def sample(self, n: int, distr: Distribution, **options: Any) -> ArraySample:
        support = distr.support
        if not isinstance(support, DiscreteSupport):
            raise RuntimeError("Discrete sampling requires an ordered discrete support.")

        pmf = distr.query_method(CharacteristicName.PMF)
        u = _uniforms(n, options)
        draws = np.empty(n, dtype=np.float64)

        points = support.iter_points()
        current = next(points, None)
        if current is None:
            raise RuntimeError("Discrete sampling requires a non-empty support.")
        cumulative = pmf(current)

        for i in np.argsort(u):
            while u[i] >= cumulative:
                following = next(points, None)
                if following is None:
                    break
                mass = pmf(following)
                if mass == 0.0 and cumulative > 0.0:
                    # the rest of the tail has underflowed
                    break
                current = following
                cumulative += mass
            draws[i] = current

        return ArraySample(draws.reshape(n, 1))


__all__ = [
    "ComputationStrategy",
    "SamplingStrategy",
    "DefaultComputationStrategy",
    "DefaultSamplingUnivariateStrategy",
    "DiscreteInverseTransformStrategy",
]

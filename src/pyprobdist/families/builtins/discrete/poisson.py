"""
Poisson distribution family implementation.

Contains the Poisson family with the rate parametrization.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from scipy.special import xlogy

from pyprobdist.combinatorics import log_factorial
from pyprobdist.distributions.support import IntegerLatticeDiscreteSupport
from pyprobdist.families.parametric_family import ParametricFamily
from pyprobdist.families.parametrizations import Parametrization, parametrization
from pyprobdist.families.registry import ParametricFamilyRegister
from pyprobdist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Probability of a given number of events occurring in a fixed interval of
    time or space when the events occur independently at a known average
    rate λ.

    Probability mass function:
        P(k) = λᵏ e^(−λ) / k!   for k = 0, 1, 2, ...
    """

    def pmf(parameters: Parametrization, k: int) -> float:
        """
        Probability of observing exactly ``k`` events in an interval.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - lambda_: float (average number of events per interval)
        k : int
            Number of events in the interval

        Returns
        -------
        float
            λᵏ e^(−λ) / k!, evaluated as exp(k ln λ − λ − ln k!) so that
            neither λᵏ nor k! overflows for large arguments.
        """
        parameters = cast(_Rate, parameters)

        lambda_ = parameters.lambda_
        return math.exp(xlogy(k, lambda_) - lambda_ - log_factorial(k))

    def cdf(parameters: Parametrization, k: int) -> float:
        """
        Lower cumulative probability P(X ≤ k), the direct sum of ``pmf(0..k)``.
        """
        return sum(pmf(parameters, x) for x in range(k + 1))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.lambda_

    def median_func(parameters: Parametrization, _: Any) -> float:
        """Approximate median ⌊λ + 1/3 − 0.02/λ⌋."""
        parameters = cast(_Rate, parameters)
        lambda_ = parameters.lambda_
        return math.floor(lambda_ + 1 / 3 - 0.02 / lambda_)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Mode ⌊λ⌋ (λ − 1 is a mode as well when λ is an integer)."""
        parameters = cast(_Rate, parameters)
        return math.floor(parameters.lambda_)

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness λ^(−1/2)."""
        parameters = cast(_Rate, parameters)
        return parameters.lambda_**-0.5

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        """Raw (3 + 1/λ) or excess (1/λ) kurtosis."""
        parameters = cast(_Rate, parameters)
        excess_kurtosis = 1 / parameters.lambda_
        return excess_kurtosis if excess else 3 + excess_kurtosis

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Poisson distribution: non-negative integers"""
        return IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0)

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.MEDIAN: median_func,
            CharacteristicName.MODE: mode_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        support_limits={"k": "[0,∞)"},
        support_by_parametrization=_support,
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of Poisson distribution.

        Parameters
        ----------
        lambda_ : float
            Average number of events per interval (λ)
        """

        PARAMETER_LIMITS = {"lambda_": "(0,∞)"}

        lambda_: float

    ParametricFamilyRegister.register(Poisson)

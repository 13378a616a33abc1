"""
Binomial distribution family implementation.

Contains the Binomial family with the trials/probability parametrization.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from scipy.special import xlog1py, xlogy

from pyprobdist.combinatorics import log_binomial
from pyprobdist.distributions.support import IntegerLatticeDiscreteSupport
from pyprobdist.families.parametric_family import ParametricFamily
from pyprobdist.families.parametrizations import Parametrization, constraint, parametrization
from pyprobdist.families.registry import ParametricFamilyRegister
from pyprobdist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    Number of successes in n independent trials, each succeeding with
    probability p.

    Probability mass function:
        P(k) = C(n, k) pᵏ (1 − p)ⁿ⁻ᵏ   for k = 0, 1, ..., n
    """

    def pmf(parameters: Parametrization, k: int) -> float:
        """
        Probability of exactly ``k`` successes; 0 for ``k > n``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        k : int
            Number of successes

        Notes
        -----
        Evaluated in log space; the central C(n, k) alone overflows a float
        once n passes about a thousand.
        """
        parameters = cast(_Standard, parameters)

        n, p = parameters.n, parameters.p
        if k > n:
            return 0.0
        return math.exp(log_binomial(n, k) + xlogy(k, p) + xlog1py(n - k, -p))

    def cdf(parameters: Parametrization, k: int) -> float:
        """Cumulative probability as the direct sum of ``pmf(0..k)``."""
        parameters = cast(_Standard, parameters)
        upper = min(k, int(parameters.n))
        return sum(pmf(parameters, x) for x in range(upper + 1))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.n * parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.n * parameters.p * (1 - parameters.p)

    def median_func(parameters: Parametrization, _: Any) -> float:
        """⌊np⌉, which is a median for every n and p."""
        parameters = cast(_Standard, parameters)
        return round(parameters.n * parameters.p)

    def mode_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        n, p = parameters.n, parameters.p
        return min(math.floor((n + 1) * p), int(n))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        n, p = parameters.n, parameters.p
        return (1 - 2 * p) / math.sqrt(n * p * (1 - p))

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        n, p = parameters.n, parameters.p
        excess_kurtosis = (1 - 6 * p * (1 - p)) / (n * p * (1 - p))
        return excess_kurtosis if excess else 3 + excess_kurtosis

    def _support(parameters: Parametrization) -> IntegerLatticeDiscreteSupport:
        parameters = cast(_Standard, parameters)
        return IntegerLatticeDiscreteSupport(
            residue=0, modulus=1, min_k=0, max_k=int(parameters.n)
        )

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
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
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of binomial distribution.

        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Probability of success in a single trial
        """

        PARAMETER_LIMITS = {"n": "[0,∞)", "p": "[0,1]"}

        n: int
        p: float

        @constraint(description="n is an integer")
        def check_n_integer(self) -> bool:
            return float(self.n).is_integer()

    ParametricFamilyRegister.register(Binomial)

"""
Geometric distribution family implementation.

The variant counted here is the number of failures before the first success.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pyprobdist.distributions.support import IntegerLatticeDiscreteSupport
from pyprobdist.families.parametric_family import ParametricFamily
from pyprobdist.families.parametrizations import Parametrization, parametrization
from pyprobdist.families.registry import ParametricFamilyRegister
from pyprobdist.types import CharacteristicName, FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from typing import Any


def configure_geometric_family() -> None:
    """
    Configure and register the Geometric distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEOMETRIC):
        return

    GEOMETRIC_DOC = """
    Geometric distribution.

    Number of failures k before the first success in a sequence of
    independent trials with success probability p.

    Probability mass function:
        P(k) = (1 − p)ᵏ p   for k = 0, 1, 2, ...

    Cumulative distribution function:
        F(k) = 1 − (1 − p)ᵏ⁺¹
    """

    def pmf(parameters: Parametrization, k: int) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        return (1 - p) ** k * p

    def cdf(parameters: Parametrization, k: int) -> float:
        parameters = cast(_Standard, parameters)
        return 1 - (1 - parameters.p) ** (k + 1)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        return (1 - p) / p

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        return (1 - p) / p**2

    def median_func(parameters: Parametrization, _: Any) -> float:
        """⌈−1 / log₂(1 − p)⌉ − 1, and 0 when p = 1."""
        parameters = cast(_Standard, parameters)
        p = parameters.p
        if p == 1:
            return 0
        return math.ceil(-1 / math.log2(1 - p)) - 1

    def mode_func(_1: Parametrization, _2: Any) -> float:
        return 0

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        return (2 - p) / math.sqrt(1 - p)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        excess_kurtosis = 6 + p**2 / (1 - p)
        return excess_kurtosis if excess else 3 + excess_kurtosis

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0)

    Geometric = ParametricFamily(
        name=FamilyName.GEOMETRIC,
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
    Geometric.__doc__ = GEOMETRIC_DOC

    @parametrization(family=Geometric, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of geometric distribution.

        Parameters
        ----------
        p : float
            Probability of success in a single trial
        """

        PARAMETER_LIMITS = {"p": "(0,1]"}

        p: float

    ParametricFamilyRegister.register(Geometric)

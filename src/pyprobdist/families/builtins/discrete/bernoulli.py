"""
Bernoulli distribution family implementation.
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


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli distribution.

    A single trial that succeeds (k = 1) with probability p and fails
    (k = 0) with probability q = 1 − p.
    """

    def pmf(parameters: Parametrization, k: int) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.p if k == 1 else 1 - parameters.p

    def cdf(parameters: Parametrization, k: int) -> float:
        parameters = cast(_Standard, parameters)
        return 1.0 if k == 1 else 1 - parameters.p

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        return parameters.p * (1 - parameters.p)

    def median_func(parameters: Parametrization, _: Any) -> float:
        """0 for p < ½, 1 for p > ½, ½ for p = ½."""
        parameters = cast(_Standard, parameters)
        p = parameters.p
        if p == 0.5:
            return 0.5
        return 0 if p < 0.5 else 1

    def mode_func(parameters: Parametrization, _: Any) -> float:
        """Smallest mode: 0 unless p > ½."""
        parameters = cast(_Standard, parameters)
        return 1 if parameters.p > 0.5 else 0

    def skew_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        q = 1 - p
        return (q - p) / math.sqrt(p * q)

    def kurt_func(parameters: Parametrization, _: Any, excess: bool = False) -> float:
        parameters = cast(_Standard, parameters)
        p = parameters.p
        q = 1 - p
        excess_kurtosis = (1 - 6 * p * q) / (p * q)
        return excess_kurtosis if excess else 3 + excess_kurtosis

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        return IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0, max_k=1)

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
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
        support_limits={"k": "[0,1]"},
        support_by_parametrization=_support,
    )
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of Bernoulli distribution.

        Parameters
        ----------
        p : float
            Probability of success
        """

        PARAMETER_LIMITS = {"p": "[0,1]"}

        p: float

    ParametricFamilyRegister.register(Bernoulli)

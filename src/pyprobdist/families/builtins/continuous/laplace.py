"""
Laplace distribution family implementation.

Contains the Laplace (double exponential) family with location/scale
parametrization.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pyprobdist.distributions.support import ContinuousSupport
from pyprobdist.families.parametric_family import ParametricFamily
from pyprobdist.families.parametrizations import Parametrization, parametrization
from pyprobdist.families.registry import ParametricFamilyRegister
from pyprobdist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    LAPLACE_DOC = """
    Laplace distribution.

    Also called the double exponential distribution: two exponential
    distributions spliced back to back around the location μ, with scale b.

    Probability density function:
        f(x) = 1/(2b) * exp(-|x - μ| / b)

    Cumulative distribution function:
        F(x) = ½ exp((x - μ) / b)       for x < μ
        F(x) = 1 - ½ exp(-(x - μ) / b)  for x ≥ μ
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for Laplace distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - b: float (scale)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        parameters = cast(_LocationScale, parameters)

        mu, b = parameters.mu, parameters.b
        return cast(NumericArray, np.exp(-np.abs(x - mu) / b) / (2 * b))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for Laplace distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - b: float (scale)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_LocationScale, parameters)

        z = (np.asarray(x, dtype=np.float64) - parameters.mu) / parameters.b
        with np.errstate(over="ignore"):
            result = np.where(z < 0, 0.5 * np.exp(z), 1.0 - 0.5 * np.exp(-z))
        return cast(NumericArray, result[()])

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for Laplace distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: float (location)
            - b: float (scale)
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p:
            - For p ≤ ½: μ + b ln(2p), -inf at p = 0
            - For p > ½: μ - b ln(2 - 2p), inf at p = 1
        """
        parameters = cast(_LocationScale, parameters)

        mu, b = parameters.mu, parameters.b
        p_arr = np.asarray(p, dtype=np.float64)
        with np.errstate(divide="ignore"):
            result = np.where(
                p_arr <= 0.5,
                mu + b * np.log(2 * p_arr),
                mu - b * np.log(2 - 2 * p_arr),
            )
        return cast(NumericArray, result[()])

    def location_func(parameters: Parametrization, _: Any) -> float:
        """Mean, median and mode of Laplace distribution all equal μ."""
        parameters = cast(_LocationScale, parameters)
        return parameters.mu

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Laplace distribution."""
        parameters = cast(_LocationScale, parameters)
        return 2 * parameters.b**2

    def skew_func(_1: Parametrization, _2: Any) -> int:
        """Skewness of Laplace distribution (always 0)."""
        return 0

    def kurt_func(_1: Parametrization, _2: Any, excess: bool = False) -> int:
        """Raw (6) or excess (3) kurtosis of Laplace distribution."""
        return 3 if excess else 6

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["locationScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: location_func,
            CharacteristicName.MEDIAN: location_func,
            CharacteristicName.MODE: location_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
            CharacteristicName.KURT: kurt_func,
        },
        support_limits={"x": "(-∞,∞)"},
        support_by_parametrization=_support,
    )
    Laplace.__doc__ = LAPLACE_DOC

    @parametrization(family=Laplace, name="locationScale")
    class _LocationScale(Parametrization):
        """
        Location-scale parametrization of Laplace distribution.

        Parameters
        ----------
        mu : float
            Location of the peak (μ)
        b : float
            Scale (diversity) of the distribution
        """

        PARAMETER_LIMITS = {"mu": "(-∞,∞)", "b": "(0,∞)"}

        mu: float
        b: float

    ParametricFamilyRegister.register(Laplace)

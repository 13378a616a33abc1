"""
Shared types
============

Names, enums and small value objects used across pyprobdist: distribution
kinds, numeric aliases, the closed real interval type behind every domain
limit, and the names of characteristics and built-in families.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from math import inf, isinf
from typing import Any, cast, overload

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """Whether a distribution puts mass on points or has a density."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True, slots=True)
class DistributionType:
    """
    Kind and dimension shared by every member of a family.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        Number of components of a realization; 1 for univariate families.
    """

    kind: Kind
    dimension: int

    @property
    def is_discrete(self) -> bool:
        return self.kind is Kind.DISCRETE


UnivariateContinuous = DistributionType(kind=Kind.CONTINUOUS, dimension=1)
UnivariateDiscrete = DistributionType(kind=Kind.DISCRETE, dimension=1)

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float
NumericArray = NDArray[NumPyNumber]
BoolArray = NDArray[np.bool_]


def _render_bound(value: float) -> str:
    if isinf(value):
        return "∞" if value > 0 else "-∞"
    return str(int(value)) if float(value).is_integer() else repr(float(value))


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    Interval of the real line, each end open or closed.

    An unbounded end is always open: ``Interval1D(0, inf, True, True)`` is
    ``[0,∞)`` and does not contain ``inf``. NaN is contained in no interval.

    Parameters
    ----------
    left, right : float
        End points; default to the whole real line.
    left_closed, right_closed : bool
        Whether the finite end points belong to the interval.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if isinf(self.left):
            object.__setattr__(self, "left_closed", False)
        if isinf(self.right):
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Membership of a scalar (as ``bool``) or element-wise for an array."""
        values = np.asarray(x)
        above = values >= self.left if self.left_closed else values > self.left
        below = values <= self.right if self.right_closed else values < self.right
        inside = above & below
        if inside.ndim == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def __str__(self) -> str:
        return (
            ("[" if self.left_closed else "(")
            + f"{_render_bound(self.left)},{_render_bound(self.right)}"
            + ("]" if self.right_closed else ")")
        )


type GenericCharacteristicName = str
type ParametrizationName = str


class CharacteristicName(StrEnum):
    """
    Characteristics a family may provide in closed form.

    ``pdf``, ``pmf``, ``cdf`` and ``ppf`` are evaluated at a point and have
    their argument checked; the rest depend on the parameters alone.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    MEDIAN = "median"
    MODE = "mode"
    SKEW = "skewness"
    KURT = "kurtosis"


POINT_CHARACTERISTICS: frozenset[GenericCharacteristicName] = frozenset(
    {
        CharacteristicName.PDF,
        CharacteristicName.PMF,
        CharacteristicName.CDF,
        CharacteristicName.PPF,
    }
)


class FamilyName(StrEnum):
    POISSON = "Poisson"
    BERNOULLI = "Bernoulli"
    BINOMIAL = "Binomial"
    GEOMETRIC = "Geometric"
    LAPLACE = "Laplace"


__all__ = [
    "Kind",
    "DistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "GenericCharacteristicName",
    "ParametrizationName",
    "Interval1D",
    "BoolArray",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "CharacteristicName",
    "POINT_CHARACTERISTICS",
    "FamilyName",
]

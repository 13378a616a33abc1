"""
Supports of distributions.

A support answers "can the variable take this value?" for scalars and
arrays. :class:`ContinuousSupport` is an interval of the real line;
:class:`IntegerLatticeDiscreteSupport` is the set ``{residue + j * modulus}``
cut to ``[min_k, max_k]`` and can be walked in ascending order, which is
what discrete sampling needs.

The limit tables in :mod:`pyprobdist.limits` describe the same sets for
argument validation; supports are the objects distributions expose.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import itertools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, cast, overload, runtime_checkable

import numpy as np

from pyprobdist.types import BoolArray, Interval1D, Number, NumericArray

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support):
    """Support of a continuous univariate distribution, e.g. ``[0,∞)``."""


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def iter_points(self) -> Iterator[int]: ...


@dataclass(frozen=True, slots=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integers congruent to ``residue`` modulo ``modulus`` within
    ``[min_k, max_k]``; a missing bound leaves that side open.

    Raises
    ------
    ValueError
        If ``modulus`` is not positive.
    """

    residue: int
    modulus: int
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError(f"modulus must be a positive integer, got {self.modulus}.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        values = np.asarray(x, dtype=float)
        integral = np.isfinite(values) & (values == np.round(values))
        # non-integral entries are already excluded, park them at 0 for the modulo
        k = np.where(integral, values, 0.0).astype(np.int64)

        inside = integral & ((k - self.residue) % self.modulus == 0)
        if self.min_k is not None:
            inside &= k >= self.min_k
        if self.max_k is not None:
            inside &= k <= self.max_k

        if inside.ndim == 0:
            return bool(inside)
        return cast(BoolArray, inside)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def _lowest_point(self) -> int:
        assert self.min_k is not None
        return self.min_k + (self.residue - self.min_k) % self.modulus

    def iter_points(self) -> Iterator[int]:
        """
        Walk the lattice upwards from its lowest point.

        Raises
        ------
        RuntimeError
            If the lattice has no ``min_k`` and therefore no lowest point.
        """
        if self.min_k is None:
            raise RuntimeError("A lattice without min_k has no lowest point to start from.")

        points = itertools.count(self._lowest_point(), self.modulus)
        if self.max_k is None:
            return points
        return itertools.takewhile(lambda k: k <= cast(int, self.max_k), points)

    def __iter__(self) -> Iterator[int]:
        return self.iter_points()


__all__ = [
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]

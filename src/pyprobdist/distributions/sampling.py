"""
Sample containers returned by sampling strategies.

Every draw is a 2D array: one row per realization, one column per component
of the random variable (a single column for univariate families).
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from typing import Any

    import numpy.typing as npt

    type FloatArray = npt.NDArray[np.floating[Any]]


class Sample(Protocol):
    def __len__(self) -> int: ...
    @property
    def array(self) -> FloatArray: ...
    @property
    def shape(self) -> tuple[int, int]: ...


class ArraySample:
    """
    Sample stored in a ``(n_draws, dimension)`` NumPy array.

    Parameters
    ----------
    data : numpy.ndarray
        Draws, one per row.

    Raises
    ------
    ValueError
        If ``data`` is not two-dimensional.
    """

    __slots__ = ("_data",)

    def __init__(self, data: FloatArray) -> None:
        if np.ndim(data) != 2:
            raise ValueError(f"ArraySample needs a 2D array of draws, got shape {np.shape(data)}.")
        self._data = data

    def __len__(self) -> int:
        return self._data.shape[0]

    def __repr__(self) -> str:
        return f"ArraySample(n={len(self)}, dimension={self.dimension})"

    @property
    def array(self) -> FloatArray:
        return self._data

    @property
    def dimension(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        n, d = self._data.shape
        return n, d

"""
Closed-form characteristics bound to a distribution.

A family keeps one plain function per characteristic, taking the parameters
first. When a distribution is built, each function gets its parameters bound
and is wrapped in an :class:`AnalyticalComputation` tagged with the
characteristic it evaluates.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from pyprobdist.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    One characteristic of one distribution, ready to call.

    Parameters
    ----------
    target : str
        Characteristic evaluated, e.g. ``"cdf"``.
    func : Callable[[In, KwArg(Any)], Out]
        Function of the argument (``None`` for moments) and keyword options.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


__all__ = ["AnalyticalComputation"]

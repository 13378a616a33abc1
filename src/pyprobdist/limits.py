"""
Domain Limits
=============

Parameter and support domains are declared as small static tables mapping a
name to an interval in bracket notation::

    PARAMETER_LIMITS = {"lambda_": "(0,∞)"}
    SUPPORT_LIMITS = {"k": "[0,∞)"}

``[``/``]`` mark an inclusive bound, ``(``/``)`` an exclusive one, and
``∞``/``-∞`` (or ``inf``/``-inf``) an unbounded side. :func:`check_limits`
is the single gate every construction and every evaluation goes through.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import re
from functools import lru_cache
from math import inf
from typing import TYPE_CHECKING

import numpy as np

from pyprobdist.exceptions import DomainError
from pyprobdist.types import Interval1D

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    type Limit = str | Interval1D
    type LimitTable = Mapping[str, Limit]

_BOUND = r"[-+]?(?:∞|inf|\d+(?:\.\d*)?(?:[eE][-+]?\d+)?|\.\d+(?:[eE][-+]?\d+)?)"
_INTERVAL_RE = re.compile(
    rf"^\s*(?P<open>[\[(])\s*(?P<left>{_BOUND})\s*,\s*(?P<right>{_BOUND})\s*(?P<close>[\])])\s*$"
)

PROBABILITY_LIMITS: dict[str, str] = {"p": "[0,1]"}
"""Domain of the argument of every ``ppf``."""


def _parse_bound(token: str) -> float:
    sign = -1.0 if token.startswith("-") else 1.0
    body = token.lstrip("+-")
    if body in ("∞", "inf"):
        return sign * inf
    return sign * float(body)


@lru_cache(maxsize=None)
def parse_interval(notation: str) -> Interval1D:
    """
    Parse bracket notation into an :class:`~pyprobdist.types.Interval1D`.

    Parameters
    ----------
    notation : str
        Interval such as ``"[0,1]"``, ``"(0,∞)"`` or ``"(-inf, 2.5]"``.

    Returns
    -------
    Interval1D
        The parsed interval. Infinite bounds are always open.

    Raises
    ------
    ValueError
        If the notation is malformed or the left bound exceeds the right one.
    """
    match = _INTERVAL_RE.match(notation)
    if match is None:
        raise ValueError(f"Malformed interval notation: {notation!r}")

    left = _parse_bound(match["left"])
    right = _parse_bound(match["right"])
    if left > right:
        raise ValueError(f"Interval {notation!r} has its left bound above its right bound")

    return Interval1D(
        left=left,
        right=right,
        left_closed=match["open"] == "[",
        right_closed=match["close"] == "]",
    )


def resolve_limit(limit: Limit) -> Interval1D:
    """Return ``limit`` as an interval, parsing bracket notation when needed."""
    if isinstance(limit, Interval1D):
        return limit
    return parse_interval(limit)


def check_limits(
    limits: LimitTable,
    values: Mapping[str, Any],
    *,
    error: type[DomainError] = DomainError,
) -> None:
    """
    Check that every named value lies within its declared interval.

    Parameters
    ----------
    limits : Mapping[str, str | Interval1D]
        Domain table, name to interval.
    values : Mapping[str, Any]
        Values to check. Scalars and arrays are accepted; an array passes
        only if every element lies in the interval.
    error : type[DomainError], default DomainError
        Concrete error class to raise, e.g.
        :class:`~pyprobdist.exceptions.ParameterDomainError`.

    Raises
    ------
    DomainError
        ``error`` naming the first offending value and its declared interval.
    KeyError
        If a value has no declared limit.
    """
    for name, value in values.items():
        interval = resolve_limit(limits[name])
        contained = interval.contains(value)

        if np.ndim(contained) == 0:
            if not contained:
                raise error(name, value, str(interval))
            continue

        outside = np.flatnonzero(~np.asarray(contained))
        if outside.size:
            offending = np.asarray(value).ravel()[outside[0]]
            raise error(name, offending.item(), str(interval))


__all__ = [
    "PROBABILITY_LIMITS",
    "parse_interval",
    "resolve_limit",
    "check_limits",
]

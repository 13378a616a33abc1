"""
Counting functions used by the discrete families.

``factorial`` and ``binomial`` return floats: exact for every result a float
can hold and ``inf`` beyond that (``n > 170`` for the factorial). Mass
functions that multiply such coefficients by tiny powers of probabilities
use the logarithmic forms instead, so that ``171!`` times ``2**-171`` does
not become ``inf * 0``.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import comb, gammaln
from scipy.special import factorial as _factorial

from pyprobdist.types import Number

MAX_FACTORIAL_ARGUMENT = 170
"""Largest ``n`` whose factorial is finite in double precision."""


def _as_count(name: str, value: Number) -> int:
    if value < 0 or not float(value).is_integer():
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return int(value)


def factorial(n: Number) -> float:
    """
    ``n!`` as a float.

    Parameters
    ----------
    n : Number
        Non-negative integer; integral floats such as ``3.0`` are accepted.

    Returns
    -------
    float
        ``n!``, correctly rounded for ``n <= 170`` and ``inf`` above.

    Raises
    ------
    ValueError
        If ``n`` is negative or not integral.
    """
    count = _as_count("n", n)
    if count > MAX_FACTORIAL_ARGUMENT:
        return math.inf
    return float(_factorial(count, exact=True))


def binomial(n: Number, k: Number) -> float:
    """``C(n, k)`` as a float; 0 for ``k > n``, ``inf`` when it overflows."""
    exact = comb(_as_count("n", n), _as_count("k", k), exact=True)
    try:
        return float(exact)
    except OverflowError:
        return math.inf


def log_factorial(n: Number) -> float:
    """``ln(n!)``, finite for every non-negative integer ``n``."""
    return float(gammaln(_as_count("n", n) + 1))


def log_binomial(n: Number, k: Number) -> float:
    """``ln C(n, k)``; ``-inf`` for ``k > n``."""
    n, k = _as_count("n", n), _as_count("k", k)
    if k > n:
        return -math.inf
    return float(gammaln(n + 1) - gammaln(k + 1) - gammaln(n - k + 1))


__all__ = [
    "MAX_FACTORIAL_ARGUMENT",
    "factorial",
    "binomial",
    "log_factorial",
    "log_binomial",
]

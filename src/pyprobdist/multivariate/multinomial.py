"""
Multinomial distribution
========================

Probability of observing counts ``x₁, …, x_k`` of k categories in
``n = x₁ + … + x_k`` independent trials, where category i comes up with
probability ``pᵢ``::

              n!
    pmf = ---------- p₁ˣ¹ ⋯ p_kˣᵏ
          x₁! ⋯ x_k!

The function is stateless: counts and probabilities are validated on every
call.

Notes
-----
Probabilities are accepted when their sum rounds half-up to 1 at one decimal
place, so sums in ``[0.95, 1.05)`` are valid. Each probability must lie in
``[0, 1]``. Vectors that are only loosely normalized are evaluated as given
and a :class:`~pyprobdist.exceptions.LooseNormalizationWarning` is emitted.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from typing import TYPE_CHECKING

from scipy.special import xlogy

from pyprobdist.combinatorics import log_factorial
from pyprobdist.exceptions import (
    CardinalityMismatchError,
    InvalidProbabilitiesError,
    LooseNormalizationWarning,
    SupportDomainError,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pyprobdist.types import Number

NORMALIZATION_DECIMALS = 1
"""Decimal places the probability sum is rounded to before comparing with 1."""

NORMALIZATION_WARNING_TOLERANCE = 1e-9
"""Deviation of the raw sum from 1 above which a warning is emitted."""


def _round_half_up(value: float, decimals: int) -> float:
    # round() goes half-to-even on the binary value, which sends 0.95 to 0.9
    scale = 10**decimals
    return math.floor(value * scale + 0.5) / scale


def pmf(frequencies: Sequence[Number], probabilities: Sequence[float]) -> float:
    """
    Multinomial probability mass function.

    Parameters
    ----------
    frequencies : Sequence[Number]
        Observed count of each category, non-negative integers.
    probabilities : Sequence[float]
        Probability of each category, in the same order.

    Returns
    -------
    float
        Probability of observing exactly ``frequencies``.

    Raises
    ------
    CardinalityMismatchError
        If the two sequences differ in length.
    InvalidProbabilitiesError
        If the probabilities do not sum to 1 at one-decimal precision, or
        one of them lies outside ``[0, 1]``.
    SupportDomainError
        If a frequency is negative or not integral.
    """
    if len(frequencies) != len(probabilities):
        raise CardinalityMismatchError(
            f"Number of frequencies ({len(frequencies)}) does not match "
            f"number of probabilities ({len(probabilities)})."
        )

    total = sum(probabilities)
    if _round_half_up(total, NORMALIZATION_DECIMALS) != 1:
        raise InvalidProbabilitiesError(f"Probabilities add up to {total}, not 1.")
    for i, p in enumerate(probabilities):
        if not 0 <= p <= 1:
            raise InvalidProbabilitiesError(f"probabilities[{i}] = {p} is not in [0,1].")
    if abs(total - 1) > NORMALIZATION_WARNING_TOLERANCE:
        warnings.warn(
            f"Probabilities add up to {total}; evaluating without renormalization.",
            LooseNormalizationWarning,
            stacklevel=2,
        )

    for i, x in enumerate(frequencies):
        if x < 0 or not float(x).is_integer():
            raise SupportDomainError(f"frequencies[{i}]", x, "[0,∞) ∩ ℤ")

    # n! and the powers over- and underflow long before their ratio does
    log_mass = log_factorial(sum(frequencies))
    for x, p in zip(frequencies, probabilities, strict=True):
        log_mass += xlogy(x, p) - log_factorial(x)
    return math.exp(log_mass)


__all__ = [
    "NORMALIZATION_DECIMALS",
    "NORMALIZATION_WARNING_TOLERANCE",
    "pmf",
]

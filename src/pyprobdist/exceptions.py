"""
Exceptions and Warnings
=======================

Error taxonomy shared by the validators, the parametric families and the
stateless multivariate functions.

- :class:`DomainError` — a value lies outside its declared interval.
  Raised as :class:`ParameterDomainError` at construction time and as
  :class:`SupportDomainError` at evaluation time.
- :class:`BadDataError` — malformed input data (multinomial vectors).
- :class:`CharacteristicNotAvailableError` — the family has no closed form
  for the requested characteristic.

Domain and data errors derive from :class:`ValueError`, so callers that only
care about "invalid input" can catch that.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any


class PyProbDistError(Exception):
    """Base class for all pyprobdist errors."""


class DomainError(PyProbDistError, ValueError):
    """
    A named value lies outside its declared domain.

    Parameters
    ----------
    name : str
        Name of the offending parameter or argument.
    value : Any
        The rejected value.
    limit : str
        Human-readable domain, e.g. ``"(0,∞)"`` or ``"lower_bound < upper_bound"``.
    """

    def __init__(self, name: str, value: Any, limit: str, message: str | None = None) -> None:
        self.name = name
        self.value = value
        self.limit = limit
        super().__init__(message or f"{name} = {value!r} must be in {limit}")


class ParameterDomainError(DomainError):
    """A distribution parameter violates the parametrization limits."""


class SupportDomainError(DomainError):
    """An evaluation argument lies outside the distribution support."""


class ConstraintViolationError(ParameterDomainError):
    """A cross-parameter constraint of a parametrization does not hold."""

    def __init__(self, description: str, parameters: dict[str, Any]) -> None:
        self.description = description
        super().__init__(
            name=", ".join(parameters),
            value=parameters,
            limit=description,
            message=f'Constraint "{description}" does not hold for {parameters}',
        )


class BadDataError(PyProbDistError, ValueError):
    """Input data has the wrong shape or content."""


class CardinalityMismatchError(BadDataError):
    """Two sequences that must pair up element-wise differ in length."""


class InvalidProbabilitiesError(BadDataError):
    """A probability vector does not describe a distribution."""


class CharacteristicNotAvailableError(PyProbDistError, RuntimeError):
    """The requested characteristic has no analytical form for the distribution."""


class LooseNormalizationWarning(UserWarning):
    """Probabilities passed the rounded normalization check but do not sum to 1."""


__all__ = [
    "PyProbDistError",
    "DomainError",
    "ParameterDomainError",
    "SupportDomainError",
    "ConstraintViolationError",
    "BadDataError",
    "CardinalityMismatchError",
    "InvalidProbabilitiesError",
    "CharacteristicNotAvailableError",
    "LooseNormalizationWarning",
]

"""
Parametrizations of distribution families.

A parametrization is a frozen dataclass holding one way of naming a
family's parameters, e.g. Poisson's ``rate`` with a single ``lambda_``.
Its domain is declared next to the fields::

    @parametrization(family=Poisson, name="rate")
    class Rate(Parametrization):
        PARAMETER_LIMITS = {"lambda_": "(0,∞)"}

        lambda_: float

Rules that tie several parameters together are methods marked with
:func:`constraint`. :meth:`Parametrization.validate` checks the limits
first and the constraints after, so a constraint may rely on every
parameter being in its own domain.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass, fields, is_dataclass
from typing import TYPE_CHECKING

from pyprobdist.exceptions import ConstraintViolationError, ParameterDomainError
from pyprobdist.limits import check_limits

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any, ClassVar

    from pyprobdist.families.parametric_family import ParametricFamily
    from pyprobdist.limits import Limit
    from pyprobdist.types import ParametrizationName

_CONSTRAINT_MARK = "__constraint_description__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """A named predicate over a parametrization instance."""

    description: str
    check: Callable[[Any], bool]


class Parametrization:
    """
    Base class of parametrizations.

    Attributes
    ----------
    PARAMETER_LIMITS : Mapping[str, str | Interval1D]
        Domain of each limited field. Fields left out are unrestricted.
    """

    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]

    PARAMETER_LIMITS: ClassVar[Mapping[str, Limit]] = {}
    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    @property
    def name(self) -> ParametrizationName:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Field values by field name, in declaration order."""
        names = [field.name for field in fields(self)]  # type: ignore[arg-type]
        return {name: getattr(self, name) for name in names}

    @property
    def constraints(self) -> tuple[ParametrizationConstraint, ...]:
        return self._constraints

    def validate(self) -> None:
        """
        Check the parameter limits, then the constraints.

        Raises
        ------
        ParameterDomainError
            For the first parameter outside its limit.
        ConstraintViolationError
            For the first constraint that does not hold.
        """
        values = self.parameters
        check_limits(
            self.PARAMETER_LIMITS,
            {name: values[name] for name in self.PARAMETER_LIMITS},
            error=ParameterDomainError,
        )
        for rule in self._constraints:
            if not rule.check(self):
                raise ConstraintViolationError(rule.description, values)

    def transform_to_base_parametrization(self) -> Parametrization:
        """Equivalent parameters in the family's base parametrization."""
        return self


def constraint[F: Callable[..., bool]](description: str) -> Callable[[F], F]:
    """
    Mark a predicate method as a constraint of its parametrization.

    Parameters
    ----------
    description : str
        Rule in words, e.g. ``"lower_bound < upper_bound"``; it becomes the
        message of the error raised when the rule fails.
    """

    def mark(func: F) -> F:
        setattr(func, _CONSTRAINT_MARK, description)
        return func

    return mark


def constraint_description(obj: object) -> str | None:
    """Description attached by :func:`constraint`, or ``None`` for unmarked objects."""
    return getattr(obj, _CONSTRAINT_MARK, None)


def _collect_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    collected = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if constraint_description(attr.__func__) is not None:
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        description = constraint_description(attr)
        if callable(attr) and description is not None:
            collected.append(ParametrizationConstraint(description=description, check=attr))
    return tuple(collected)


def parametrization(
    *,
    family: ParametricFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization with ``family``.

    The class is turned into a frozen slotted dataclass unless it already is
    a dataclass, and its :func:`constraint` methods are collected.

    Raises
    ------
    TypeError
        If ``PARAMETER_LIMITS`` names a field the class does not have, or a
        constraint is a static or class method.
    ValueError
        If ``family`` already has a parametrization called ``name``.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        field_names = {field.name for field in fields(cls)}
        unknown = sorted(set(cls.PARAMETER_LIMITS) - field_names)
        if unknown:
            raise TypeError(f"PARAMETER_LIMITS of '{name}' name unknown fields: {unknown}")

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)
        family.register_parametrization(name, cls)
        return cls

    return register


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "constraint_description",
    "parametrization",
]

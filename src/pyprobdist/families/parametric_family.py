"""
Parametric families of distributions.

A :class:`ParametricFamily` gathers everything its members share: the kind
of distribution, the ways of naming the parameters, the closed-form
characteristics, and the limits every point argument is checked against.
Calling a family with parameter values validates them and returns an
immutable :class:`~pyprobdist.families.distribution.ParametricFamilyDistribution`.

Characteristics are plain functions ``f(parameters, argument, **options)``.
A function given directly is written for the base parametrization; a dict
``{parametrization_name: function}`` adds forms for other parametrizations.
A distribution built in a non-base parametrization uses the form written
for it when there is one and otherwise converts its parameters to the base
parametrization once and uses the base form.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial, wraps
from typing import TYPE_CHECKING, dataclass_transform

import numpy as np

from pyprobdist.distributions.computation import AnalyticalComputation
from pyprobdist.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    DiscreteInverseTransformStrategy,
)
from pyprobdist.exceptions import SupportDomainError
from pyprobdist.families.distribution import ParametricFamilyDistribution
from pyprobdist.limits import PROBABILITY_LIMITS, check_limits
from pyprobdist.types import POINT_CHARACTERISTICS, CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from pyprobdist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pyprobdist.distributions.support import Support
    from pyprobdist.families.parametrizations import Parametrization
    from pyprobdist.limits import LimitTable
    from pyprobdist.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    type CharacteristicFunction = Callable[..., Any]
    type CharacteristicForms = Mapping[ParametrizationName, CharacteristicFunction]
    type SupportResolver = Callable[[Parametrization], Support | None]


def _no_support(_: Parametrization) -> Support | None:
    return None


class ParametricFamily:
    """
    Family of distributions sharing closed forms and domain limits.

    Parameters
    ----------
    name : str
        Family name, also its key in the family register.
    distr_type : DistributionType
        Kind and dimension of every member.
    distr_parametrizations : list[str]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict
        Characteristic name to a function of the base parametrization, or to
        a ``{parametrization_name: function}`` dict.
    support_limits : Mapping[str, str | Interval1D]
        Exactly one entry naming the argument of ``pdf``/``pmf``/``cdf`` and
        its domain, e.g. ``{"k": "[0,∞)"}``.
    sampling_strategy : SamplingStrategy, optional
        Defaults to inverse transform over ``pmf`` for discrete families and
        over ``ppf`` for continuous ones.
    computation_strategy : ComputationStrategy, optional
        Defaults to closed-form lookup.
    support_by_parametrization : Callable, optional
        Support of the member with the given base parameters.

    Raises
    ------
    ValueError
        If ``support_limits`` does not have exactly one entry.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: Mapping[
            GenericCharacteristicName, CharacteristicForms | CharacteristicFunction
        ],
        support_limits: LimitTable,
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ):
        if len(support_limits) != 1:
            raise ValueError(
                f"support_limits must declare exactly one argument, got {list(support_limits)}"
            )

        self._name = name
        self._distr_type = distr_type
        self.support_limits = dict(support_limits)
        self.parametrization_names = list(distr_parametrizations)
        self.base_parametrization_name = self.parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}
        self._support_resolver = support_by_parametrization or _no_support

        self._forms: dict[GenericCharacteristicName, dict[ParametrizationName, Any]] = {
            characteristic: (
                dict(forms)
                if isinstance(forms, dict)
                else {self.base_parametrization_name: forms}
            )
            for characteristic, forms in distr_characteristics.items()
        }

        self.computation_strategy = computation_strategy or DefaultComputationStrategy()
        if sampling_strategy is None:
            sampling_strategy = (
                DiscreteInverseTransformStrategy()
                if self.is_discrete
                else DefaultSamplingUnivariateStrategy()
            )
        self.sampling_strategy = sampling_strategy

    def __repr__(self) -> str:
        return f"ParametricFamily({self._name!r}, parametrizations={self.parametrization_names})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def distribution_type(self) -> DistributionType:
        return self._distr_type

    @property
    def is_discrete(self) -> bool:
        return self._distr_type.is_discrete

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If no class has been registered under the base name yet.
        """
        if self.base_parametrization_name not in self._parametrizations:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' of {self._name} "
                "is not registered."
            )
        return self._parametrizations[self.base_parametrization_name]

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' of {self._name} is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """Class registered under ``name``; ``KeyError`` if there is none."""
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def check_support(self, characteristic: GenericCharacteristicName, value: Any) -> Any:
        """
        Validate the argument of a point characteristic.

        ``ppf`` takes a probability in ``[0,1]``; ``pdf``, ``pmf`` and ``cdf``
        take a point of ``support_limits``, which for discrete families must
        also be an integer.

        Returns
        -------
        Any
            ``value`` unchanged, except that a discrete scalar comes back as
            a Python ``int``.

        Raises
        ------
        SupportDomainError
            Naming the argument and the first offending element.
        """
        if characteristic == CharacteristicName.PPF:
            check_limits(PROBABILITY_LIMITS, {"p": value}, error=SupportDomainError)
            return value

        check_limits(
            self.support_limits,
            dict.fromkeys(self.support_limits, value),
            error=SupportDomainError,
        )
        if not self.is_discrete:
            return value

        flat = np.asarray(value, dtype=float).ravel()
        fractional = flat[flat != np.floor(flat)]
        if fractional.size:
            ((argument, limit),) = self.support_limits.items()
            raise SupportDomainError(argument, fractional[0].item(), f"{limit} ∩ ℤ")
        return int(flat[0]) if np.ndim(value) == 0 else value

    def _guard(
        self, characteristic: GenericCharacteristicName, func: CharacteristicFunction
    ) -> CharacteristicFunction:
        # discrete closed forms are written for one int at a time
        elementwise = self.is_discrete and characteristic != CharacteristicName.PPF

        @wraps(func)
        def guarded(data: Any, **options: Any) -> Any:
            data = self.check_support(characteristic, data)
            if elementwise and np.ndim(data) > 0:
                points = np.asarray(data)
                values = [func(int(k), **options) for k in points.flat]
                return np.array(values, dtype=np.float64).reshape(points.shape)
            return func(data, **options)

        return guarded

    def _bind(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        own_name = parameters.name
        base_name = self.base_parametrization_name
        base_parameters: Parametrization | None = None
        bound: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}

        for characteristic, forms in self._forms.items():
            if own_name in forms:
                func = partial(forms[own_name], parameters)
            elif base_name in forms:
                if base_parameters is None:
                    base_parameters = self.to_base(parameters)
                func = partial(forms[base_name], base_parameters)
            else:
                continue

            if characteristic in POINT_CHARACTERISTICS:
                func = self._guard(characteristic, func)
            bound[characteristic] = AnalyticalComputation(target=characteristic, func=func)

        return bound

    def distribution(
        self,
        *args: Any,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Build a member of the family.

        Parameters
        ----------
        *args
            Parameter values in field order.
        parametrization_name : str, optional
            Parametrization the values are given in; the base one by default.
        **parameters_values
            Parameter values by field name.

        Raises
        ------
        KeyError
            If ``parametrization_name`` is not registered.
        TypeError
            If values are missing or unknown.
        ParameterDomainError
            If a value is outside its limit or a constraint fails.
        """
        cls = (
            self.base
            if parametrization_name is None
            else self.get_parametrization(parametrization_name)
        )
        parameters = cls(*args, **parameters_values)
        parameters.validate()

        return ParametricFamilyDistribution(
            family=self,
            parametrization=parameters,
            _analytical_computations=self._bind(parameters),
            _support=self._support_resolver(self.to_base(parameters)),
        )

    __call__ = distribution

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Decorator registering a parametrization of this family."""
        from pyprobdist.families.parametrizations import parametrization

        return parametrization(family=self, name=name)

"""
Family register configuration.

:func:`configure_families_register` fills the global
:class:`~pyprobdist.families.registry.ParametricFamilyRegister` with the
built-in families (Poisson, Bernoulli, Binomial, Geometric and Laplace) the
first time it is called and returns the same register afterwards.
:func:`reset_families_register` forgets both the families and the memoized
result, which lets tests start from an empty register.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pyprobdist.families.builtins import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_geometric_family,
    configure_laplace_family,
    configure_poisson_family,
)
from pyprobdist.families.registry import ParametricFamilyRegister

_BUILTIN_CONFIGURATORS = (
    configure_poisson_family,
    configure_bernoulli_family,
    configure_binomial_family,
    configure_geometric_family,
    configure_laplace_family,
)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register every built-in family and return the global register.

    Returns
    -------
    ParametricFamilyRegister
        The process-wide register.
    """
    for configure in _BUILTIN_CONFIGURATORS:
        configure()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """Empty the register and drop the memoized configuration."""
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()

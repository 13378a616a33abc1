"""
Built-in discrete distribution families.

This module contains implementations of discrete parametric families on
the non-negative integers.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"


from pyprobdist.families.builtins.discrete.bernoulli import configure_bernoulli_family
from pyprobdist.families.builtins.discrete.binomial import configure_binomial_family
from pyprobdist.families.builtins.discrete.geometric import configure_geometric_family
from pyprobdist.families.builtins.discrete.poisson import configure_poisson_family

__all__ = [
    "configure_poisson_family",
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_geometric_family",
]

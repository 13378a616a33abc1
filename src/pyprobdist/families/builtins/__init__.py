"""
Built-in distribution families for pyprobdist.

Each ``configure_*_family`` function builds one family and adds it to the
global register; :func:`pyprobdist.families.configure_families_register`
calls all of them.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"


from pyprobdist.families.builtins.continuous import configure_laplace_family
from pyprobdist.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_binomial_family,
    configure_geometric_family,
    configure_poisson_family,
)

__all__ = [
    "configure_poisson_family",
    "configure_bernoulli_family",
    "configure_binomial_family",
    "configure_geometric_family",
    "configure_laplace_family",
]

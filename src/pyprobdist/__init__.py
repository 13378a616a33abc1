"""
pyprobdist
==========

Closed-form probability distributions: probability mass and density
functions, cumulative distribution functions, quantiles and moments of
discrete and continuous parametric families, each guarded by parameter and
support domain checks.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .exceptions import *
from .exceptions import __all__ as _exc_all
from .families import *
from .families import __all__ as _family_all
from .limits import check_limits, parse_interval
from .multivariate import multinomial
from .types import *
from .types import __all__ as _types_all

__version__ = version("pyprobdist")
__all__ = [
    "__version__",
    "check_limits",
    "parse_interval",
    "multinomial",
    *_distr_all,
    *_exc_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _exc_all
del _family_all
del _types_all

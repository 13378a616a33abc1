"""
Multivariate distributions.

Stateless functions that take every parameter on each call:

- :mod:`.multinomial` — multinomial probability mass function.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from . import multinomial

__all__ = ["multinomial"]

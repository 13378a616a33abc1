"""
Unit tests for pyprobdist: domain limits, supports, strategies, parametric
families, the built-in families and the multivariate functions.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

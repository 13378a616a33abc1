"""
Built-in continuous distribution families.
"""

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"


from pyprobdist.families.builtins.continuous.laplace import configure_laplace_family

__all__ = ["configure_laplace_family"]

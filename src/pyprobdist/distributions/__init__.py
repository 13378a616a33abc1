"""
Distribution interfaces shared by every family.

Holds the :class:`Distribution` protocol, the bound closed forms
(:class:`AnalyticalComputation`), supports, sample containers, and the
strategies that resolve characteristics and draw samples.
"""

from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    DiscreteInverseTransformStrategy,
    SamplingStrategy,
)
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    "AnalyticalComputation",
    "Distribution",
    "Sample",
    "ArraySample",
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "DiscreteInverseTransformStrategy",
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]

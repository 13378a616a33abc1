from __future__ import annotations

__copyright__ = "Copyright (c) 2025 pyprobdist contributors"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import islice
from math import inf, nan

import numpy as np
import pytest

from pyprobdist.distributions.support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
            (nan, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
            "nan",
        ],
    )
    def test_continuous_support_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_continuous_support_doesnt_contain_inf(self, infinity):
        # infinite bounds are limits, never points of the support
        support = ContinuousSupport(left=-inf, right=inf, left_closed=True, right_closed=True)
        assert infinity not in support
        assert support.contains(infinity) is False

    def test_continuous_support_contains_array(self):
        result = self.support_example.contains(np.array([-1.0, 0.0, 0.5, 1.0]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, False]

    def test_continuous_support_str(self):
        assert str(ContinuousSupport(left=0.0)) == "[0,∞)"
        assert str(self.support_example) == "[0,1)"

    def test_is_support(self):
        assert isinstance(self.support_example, Support)


class TestIntegerLatticeDiscreteSupport:
    def test_non_negative_integers(self):
        support = IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0)

        assert 0 in support
        assert 7 in support
        assert -1 not in support
        assert 1.5 not in support
        assert inf not in support
        assert nan not in support
        assert list(islice(support.iter_points(), 4)) == [0, 1, 2, 3]

    def test_bounded_lattice(self):
        support = IntegerLatticeDiscreteSupport(residue=1, modulus=2, min_k=0, max_k=7)

        assert next(support.iter_points()) == 1
        assert list(support) == [1, 3, 5, 7]
        assert support.contains(np.array([1, 2, 7, 9])).tolist() == [True, False, True, False]

    def test_empty_bounded_lattice(self):
        support = IntegerLatticeDiscreteSupport(residue=0, modulus=5, min_k=1, max_k=4)

        assert list(support.iter_points()) == []

    def test_left_unbounded_lattice_cannot_be_enumerated(self):
        support = IntegerLatticeDiscreteSupport(residue=0, modulus=1)

        assert -100 in support
        with pytest.raises(RuntimeError, match="min_k"):
            support.iter_points()

    def test_invalid_modulus(self):
        with pytest.raises(ValueError, match="modulus"):
            IntegerLatticeDiscreteSupport(residue=0, modulus=0)

    def test_is_discrete_support(self):
        support = IntegerLatticeDiscreteSupport(residue=0, modulus=1, min_k=0)

        assert isinstance(support, DiscreteSupport)

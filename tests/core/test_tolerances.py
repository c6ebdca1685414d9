"""
Tests for tolerance tiers and allclose().
"""

from fractions import Fraction

import numpy as np
import pytest

from fixedmatrix import Matrix, Vector
from fixedmatrix.core.exceptions import DimensionError
from fixedmatrix.core.tolerances import (
    EXACT,
    FP32,
    FP64,
    allclose,
    select_tolerance,
)


class TestSelectTolerance:

    def test_object_is_exact(self):
        assert select_tolerance(object) is EXACT

    def test_float64(self):
        assert select_tolerance(np.float64) is FP64

    def test_float32(self):
        assert select_tolerance(np.float32) is FP32

    def test_tiers_ordered(self):
        assert EXACT.rtol < FP64.rtol < FP32.rtol


class TestAllclose:

    def test_matrices_within_fp64(self):
        a = Matrix[float, 2, 2]([[1.0, 2.0], [3.0, 4.0]])
        b = Matrix[float, 2, 2]([[1.0 + 1e-14, 2.0], [3.0, 4.0]])
        assert allclose(a, b)

    def test_matrices_outside_fp64(self):
        a = Matrix[float, 2, 2]([[1.0, 2.0], [3.0, 4.0]])
        b = Matrix[float, 2, 2]([[1.001, 2.0], [3.0, 4.0]])
        assert not allclose(a, b)

    def test_exact_requires_equality(self):
        a = Matrix[Fraction, 1, 2]([[Fraction(1, 3), 1]])
        b = Matrix[Fraction, 1, 2]([[Fraction(1, 3), 1]])
        assert allclose(a, b)

    def test_mixed_exact_and_float_uses_float_tier(self):
        a = Matrix[Fraction, 1, 1]([[Fraction(1, 3)]])
        b = Matrix[float, 1, 1]([[1 / 3]])
        assert allclose(a, b)

    def test_explicit_tier(self):
        a = Vector[float, 2]([1.0, 2.0])
        b = Vector[float, 2]([1.00001, 2.0])
        assert not allclose(a, b, FP64)
        assert allclose(a, b, FP32)

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError, match="shape mismatch"):
            allclose(Matrix[float, 2, 2](), Matrix[float, 2, 3]())

"""
Tests for SquareMatrix.determinant and determinant().

Reference values come from hand expansion and scipy.linalg.det.
"""

import warnings
from fractions import Fraction

import numpy as np
import pytest
from scipy import linalg

from fixedmatrix import Matrix, determinant
from fixedmatrix.algebra import _determinant
from fixedmatrix.core.exceptions import DimensionError
from fixedmatrix.core.tolerances import FP64_FACTORIAL


class TestClosedForms:

    def test_1x1(self):
        assert Matrix[float, 1, 1]([[7]]).determinant == 7.0

    def test_2x2(self):
        assert Matrix[float, 2, 2]([[1, 2], [3, 4]]).determinant == -2.0

    def test_3x3(self):
        m = Matrix[float, 3, 3]([[2, 0, 1], [1, 3, 2], [1, 1, 1]])
        # 2*(3-2) - 0 + 1*(1-3) = 0
        assert m.determinant == 0.0

    def test_3x3_nonzero(self):
        m = Matrix[float, 3, 3]([[6, 1, 1], [4, -2, 5], [2, 8, 7]])
        assert m.determinant == pytest.approx(-306.0)

    def test_returns_python_float(self):
        assert type(Matrix[float, 2, 2]().determinant) is float


class TestCofactorExpansion:

    def test_4x4_known(self):
        m = Matrix[float, 4, 4]([
            [1, 0, 2, -1],
            [3, 0, 0, 5],
            [2, 1, 4, -3],
            [1, 0, 5, 0],
        ])
        assert m.determinant == pytest.approx(30.0)

    @pytest.mark.parametrize("n", [4, 5, 6])
    def test_matches_scipy(self, random_square, n):
        m = random_square(n)
        expected = linalg.det(np.asarray(m))
        np.testing.assert_allclose(
            m.determinant, expected,
            rtol=FP64_FACTORIAL.rtol, atol=FP64_FACTORIAL.atol,
        )

    @pytest.mark.parametrize("n", [4, 5])
    def test_exact_rational(self, rational_square, n):
        m = rational_square(n)
        det = m.determinant
        assert isinstance(det, Fraction)
        expected = linalg.det(np.asarray(m).astype(np.float64))
        assert float(det) == pytest.approx(expected, rel=1e-9, abs=1e-9)

    def test_first_cofactor_sign_positive(self):
        # Only A[0][0] contributes; its minor is the identity
        m = Matrix[float, 4, 4]()
        m[0, 0] = 5
        assert m.determinant == 5.0

    def test_alternating_sign(self):
        # Only A[0][1] contributes with sign -1
        m = Matrix[float, 4, 4]([
            [0, 1, 0, 0],
            [1, 0, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ])
        assert m.determinant == -1.0

    def test_receiver_not_mutated(self, random_square):
        m = random_square(5)
        before = m.copy()
        _ = m.determinant
        assert m == before

    def test_large_expansion_warns(self, monkeypatch):
        monkeypatch.setattr(_determinant, 'COFACTOR_WARN_SIZE', 4)
        with pytest.warns(RuntimeWarning, match="4x4"):
            _ = Matrix[float, 4, 4]().determinant

    def test_small_expansion_silent(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert Matrix[float, 5, 5]().determinant == 1.0


class TestDeterminantFunction:

    def test_from_nested_list(self):
        assert determinant([[1, 2], [3, 4]]) == -2.0

    def test_non_square_rejected(self):
        with pytest.raises(DimensionError, match="square"):
            determinant(Matrix[float, 2, 3]())

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
    def test_identity_is_one(self, n):
        assert determinant(Matrix[float, n, n]()) == 1.0

"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_dimension: positive integer dimensions
    - check_index: 0 <= index < bound
    - check_length: exact one-dimensional length
    - check_grid: zero-fill of short input, rejection of oversized input
    - check_rectangular: shape inference, ragged/empty rejection
    - check_same_shape / check_scalar
"""

from fractions import Fraction

import numpy as np
import pytest

from fixedmatrix.core.elements import resolve_element
from fixedmatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)
from fixedmatrix.core.validation import (
    check_dimension,
    check_grid,
    check_index,
    check_length,
    check_rectangular,
    check_same_shape,
    check_scalar,
)


FLOAT = resolve_element(float)
EXACT = resolve_element(Fraction)


# ═══════════════════════════════════════════════════════════════════════
# check_dimension
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDimension:

    def test_positive_int(self):
        assert check_dimension(3, "rows") == 3

    def test_numpy_int(self):
        assert check_dimension(np.int64(2), "rows") == 2

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="rows: must be >= 1"):
            check_dimension(0, "rows")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="positive integer"):
            check_dimension(2.0, "rows")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            check_dimension(True, "rows")


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_in_range(self):
        assert check_index(1, 3, "row") == 1

    def test_upper_bound_exclusive(self):
        with pytest.raises(IndexOutOfRangeError, match=r"\[0, 3\)") as exc_info:
            check_index(3, 3, "row")
        assert exc_info.value.index == 3
        assert exc_info.value.bound == 3

    def test_negative_rejected(self):
        with pytest.raises(IndexOutOfRangeError):
            check_index(-1, 3, "column")

    def test_non_integer_rejected(self):
        with pytest.raises(IndexOutOfRangeError, match="integer index"):
            check_index(1.0, 3, "row")


# ═══════════════════════════════════════════════════════════════════════
# check_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckLength:

    def test_exact_length(self):
        assert check_length((1, 2, 3), 3, "v") == [1, 2, 3]

    def test_short_rejected(self):
        with pytest.raises(DimensionError, match="expected length 3, got 2"):
            check_length([1, 2], 3, "v")

    def test_string_rejected(self):
        with pytest.raises(DimensionError):
            check_length("abc", 3, "v")

    def test_nested_item_rejected(self):
        with pytest.raises(DimensionError, match=r"v\[1\]: expected a scalar"):
            check_length([1, [2, 3], 4], 3, "v")

    def test_zero_dim_array_item_accepted(self):
        items = check_length([np.array(1.0), 2, 3], 3, "v")
        assert len(items) == 3


# ═══════════════════════════════════════════════════════════════════════
# check_grid
# ═══════════════════════════════════════════════════════════════════════


class TestCheckGrid:

    def test_exact_fit(self):
        grid = check_grid([[1, 2], [3, 4]], (2, 2), FLOAT, "values")
        np.testing.assert_array_equal(grid, [[1.0, 2.0], [3.0, 4.0]])
        assert grid.dtype == np.float64

    def test_short_rows_zero_filled(self):
        grid = check_grid([[1], [3, 4]], (2, 2), FLOAT, "values")
        np.testing.assert_array_equal(grid, [[1.0, 0.0], [3.0, 4.0]])

    def test_missing_rows_zero_filled(self):
        grid = check_grid([[1, 2]], (3, 2), FLOAT, "values")
        np.testing.assert_array_equal(grid, [[1, 2], [0, 0], [0, 0]])

    def test_too_many_rows(self):
        with pytest.raises(DimensionError, match="got 3 rows, expected at most 2"):
            check_grid([[1], [2], [3]], (2, 2), FLOAT, "values")

    def test_row_too_long(self):
        with pytest.raises(DimensionError, match=r"values\[1\]: got 3 columns"):
            check_grid([[1, 2], [1, 2, 3]], (2, 2), FLOAT, "values")

    def test_flat_sequence_rejected(self):
        with pytest.raises(DimensionError, match="expected a sequence"):
            check_grid([1, 2], (2, 2), FLOAT, "values")

    def test_3d_array_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_grid(np.zeros((2, 2, 2)), (2, 2), FLOAT, "values")

    def test_non_numeric_element(self):
        with pytest.raises(ValidationError, match="real scalar"):
            check_grid([["a", 1]], (1, 2), FLOAT, "values")

    def test_exact_elements_keep_type(self):
        grid = check_grid([[1, Fraction(1, 3)]], (1, 2), EXACT, "values")
        assert grid.dtype == object
        assert all(isinstance(x, Fraction) for x in grid.ravel())
        assert grid[0, 1] == Fraction(1, 3)


# ═══════════════════════════════════════════════════════════════════════
# check_rectangular
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:

    def test_infers_shape(self):
        assert check_rectangular([[1, 2, 3], [4, 5, 6]], "values") == (2, 3)

    def test_ndarray(self):
        assert check_rectangular(np.ones((4, 1)), "values") == (4, 1)

    def test_ragged_rejected(self):
        with pytest.raises(DimensionError, match="ragged"):
            check_rectangular([[1, 2], [3]], "values")

    def test_empty_rejected(self):
        with pytest.raises(DimensionError, match="empty"):
            check_rectangular([], "values")

    def test_empty_rows_rejected(self):
        with pytest.raises(DimensionError, match="empty"):
            check_rectangular([[], []], "values")


# ═══════════════════════════════════════════════════════════════════════
# check_same_shape / check_scalar
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSameShape:

    def test_equal_passes(self):
        check_same_shape((2, 3), (2, 3), "add")  # no exception

    def test_mismatch(self):
        with pytest.raises(DimensionError, match=r"add: shape mismatch \(2, 3\) vs \(3, 2\)"):
            check_same_shape((2, 3), (3, 2), "add")


class TestCheckScalar:

    @pytest.mark.parametrize("value", [1, 2.5, Fraction(1, 2), np.float32(1.0)])
    def test_real_scalars_pass(self, value):
        check_scalar(value, "value")  # no exception

    @pytest.mark.parametrize("value", [True, 1 + 2j, "1", None, [1]])
    def test_non_scalars_rejected(self, value):
        with pytest.raises(ValidationError, match="value"):
            check_scalar(value, "value")

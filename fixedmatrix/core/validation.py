"""
Input validation utilities for fixedmatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating
or making assumptions about caller intent.

Design principles:
    - Each function validates ONE thing
    - Parameter names included in all error messages
    - Actual and expected values included in all error messages
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from fixedmatrix.core.elements import ElementSpec, is_scalar
from fixedmatrix.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a dimension is a positive integer.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as int

    Raises:
        ValidationError: If value is not an int >= 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a positive integer, got {value!r}"
        )
    if value < 1:
        raise ValidationError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_index(index: Any, bound: int, name: str) -> int:
    """
    Verify 0 <= index < bound.

    Negative indices are rejected: row and column accessors address
    positions, not offsets from the end.

    Raises:
        IndexOutOfRangeError: If index is not an integer in range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfRangeError(
            f"{name}: expected an integer index, got {index!r}",
            bound=bound,
        )
    if not 0 <= index < bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range [0, {bound})",
            index=int(index),
            bound=bound,
        )
    return int(index)


def _is_row_like(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


def check_length(values: Any, length: int, name: str) -> list[Any]:
    """
    Verify a one-dimensional input has exactly `length` items.

    Returns:
        The items as a list

    Raises:
        DimensionError: If values is not a sequence, has the wrong length,
            or holds a nested sequence where a scalar belongs
    """
    if not _is_row_like(values):
        raise DimensionError(
            f"{name}: expected a sequence of length {length}, got {type(values).__name__}"
        )
    items = list(values)
    if len(items) != length:
        raise DimensionError(
            f"{name}: expected length {length}, got {len(items)}"
        )
    for k, item in enumerate(items):
        if _is_row_like(item) and not (isinstance(item, np.ndarray) and item.ndim == 0):
            raise DimensionError(
                f"{name}[{k}]: expected a scalar, got {type(item).__name__}"
            )
    return items


def check_grid(
    values: Any,
    shape: tuple[int, int],
    spec: ElementSpec,
    name: str,
) -> NDArray:
    """
    Convert a nested sequence into a (rows, columns) storage array.

    Rows or trailing elements that are missing are zero-filled. Anything
    that would have to be dropped is an error: more rows than `rows`, a
    row longer than `columns`, or a row that is not a sequence.

    Args:
        values: Nested sequence or 2D array
        shape: Target (rows, columns)
        spec: Element specification used for coercion
        name: Parameter name for error messages

    Returns:
        Fresh storage array of the target shape

    Raises:
        DimensionError: If the input does not fit the target shape
        ValidationError: If an element is not a real scalar
    """
    rows, columns = shape
    if isinstance(values, np.ndarray) and values.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {values.ndim}D with shape {values.shape}"
        )
    if not _is_row_like(values):
        raise DimensionError(
            f"{name}: expected a nested sequence, got {type(values).__name__}"
        )

    outer = list(values)
    if len(outer) > rows:
        raise DimensionError(
            f"{name}: got {len(outer)} rows, expected at most {rows}"
        )

    grid = spec.zeros(shape)
    for i, row in enumerate(outer):
        if not _is_row_like(row):
            raise DimensionError(
                f"{name}[{i}]: expected a sequence, got {type(row).__name__}"
            )
        items = list(row)
        if len(items) > columns:
            raise DimensionError(
                f"{name}[{i}]: got {len(items)} columns, expected at most {columns}"
            )
        for j, value in enumerate(items):
            grid[i, j] = spec.coerce(value)
    return grid


def check_rectangular(values: Any, name: str) -> tuple[int, int]:
    """
    Infer (rows, columns) from a rectangular, non-empty nested sequence.

    Raises:
        DimensionError: If the grid is empty or ragged
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 2:
            raise DimensionError(
                f"{name}: expected 2D array, got {values.ndim}D with shape {values.shape}"
            )
        if values.size == 0:
            raise DimensionError(f"{name}: empty grid, shape {values.shape}")
        return int(values.shape[0]), int(values.shape[1])

    if not _is_row_like(values):
        raise DimensionError(
            f"{name}: expected a nested sequence, got {type(values).__name__}"
        )
    outer = list(values)
    if not outer:
        raise DimensionError(f"{name}: empty grid")
    lengths = []
    for i, row in enumerate(outer):
        if not _is_row_like(row):
            raise DimensionError(
                f"{name}[{i}]: expected a sequence, got {type(row).__name__}"
            )
        lengths.append(len(list(row)))
    if len(set(lengths)) > 1:
        raise DimensionError(f"{name}: ragged rows with lengths {lengths}")
    if lengths[0] == 0:
        raise DimensionError(f"{name}: rows are empty")
    return len(outer), lengths[0]


def check_same_shape(
    lhs_shape: tuple[int, ...],
    rhs_shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionError: If shapes differ
    """
    if tuple(lhs_shape) != tuple(rhs_shape):
        raise DimensionError(
            f"{name}: shape mismatch {tuple(lhs_shape)} vs {tuple(rhs_shape)}"
        )


def check_scalar(value: Any, name: str) -> None:
    """
    Verify value is a real, non-boolean scalar.

    Raises:
        ValidationError: If value is not a real scalar
    """
    if not is_scalar(value):
        raise ValidationError(
            f"{name}: expected a real scalar, got {type(value).__name__}"
        )

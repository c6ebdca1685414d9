"""
Determinant by cofactor expansion.

Sizes 1, 2 and 3 use closed forms. Larger sizes expand along row 0:

    det(A) = sum_i (-1)^i * A[0, i] * det(minor(A, 0, i))

where minor(A, 0, i) deletes row 0 and column i. The work is O(n!); there
is no LU shortcut: only +, - and * are applied, so exact element types
stay exact.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import NDArray


# Expansions at or above this size emit a RuntimeWarning
COFACTOR_WARN_SIZE: int = 9


def cofactor_determinant(grid: NDArray) -> Any:
    """
    Determinant of a square storage array.

    Args:
        grid: (n, n) array; not modified

    Returns:
        The determinant as an element of the grid's dtype
    """
    n = grid.shape[0]
    if n >= COFACTOR_WARN_SIZE:
        warnings.warn(
            f"Cofactor expansion of a {n}x{n} matrix evaluates {n}! terms; "
            f"this may take a long time.",
            RuntimeWarning,
            stacklevel=3,
        )
    return _expand(grid)


def _expand(a: NDArray) -> Any:
    n = a.shape[0]
    if n == 1:
        return a[0, 0]
    if n == 2:
        return a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0]
    if n == 3:
        # Sarrus' rule
        return (
            a[0, 0] * a[1, 1] * a[2, 2]
            + a[0, 1] * a[1, 2] * a[2, 0]
            + a[0, 2] * a[1, 0] * a[2, 1]
            - a[0, 2] * a[1, 1] * a[2, 0]
            - a[0, 1] * a[1, 0] * a[2, 2]
            - a[0, 0] * a[1, 2] * a[2, 1]
        )

    below = a[1:]
    total = 0 if a.dtype == object else a.dtype.type(0)
    sign = 1
    for i in range(n):
        minor = np.delete(below, i, axis=1)
        total = total + sign * a[0, i] * _expand(minor)
        sign = -sign
    return total

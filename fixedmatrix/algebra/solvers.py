"""
Functional API for matrix algebra.

Provides row_reduce() as the diagnostic entry point for Gauss-Jordan
elimination, plus free-function forms of the Matrix members:
determinant(), transpose(), row_echelon(), reduced_row_echelon(), rank().
"""

from __future__ import annotations

from typing import Any

from fixedmatrix.algebra._echelon import gauss_jordan
from fixedmatrix.algebra.matrix import Matrix
from fixedmatrix.algebra.solution import EchelonParams, EchelonSolution
from fixedmatrix.core.compute.timing import Timer
from fixedmatrix.core.exceptions import DimensionError, ValidationError
from fixedmatrix.core.result import Result


def _ensure_matrix(value: Any) -> Matrix:
    """Accept a bound Matrix, or build one from a rectangular grid."""
    if isinstance(value, Matrix):
        return value
    return Matrix.from_grid(value)


def row_reduce(matrix: Any, *, reduced: bool = True) -> EchelonSolution:
    """
    Gauss-Jordan elimination with a trace of pivots and row swaps.

    Parameters
    ----------
    matrix : Matrix or nested sequence
        Input; never modified.
    reduced : bool
        True for reduced row-echelon form, False for row-echelon form.

    Returns
    -------
    EchelonSolution with the reduced matrix, pivots, swaps and rank.
    """
    m = _ensure_matrix(matrix)
    if not isinstance(reduced, bool):
        raise ValidationError(f"reduced: expected bool, got {type(reduced).__name__}")

    timer = Timer()
    timer.start()

    grid = m.elements.copy()
    with timer.section('elimination'):
        trace = gauss_jordan(grid, reduced=reduced)

    timer.stop()

    warnings_list = []
    n_pivots = len(trace.pivots)
    if n_pivots < min(m.shape):
        warnings_list.append(
            f"rank-deficient: {n_pivots} pivots for a {m.rows}x{m.columns} matrix"
        )

    params = EchelonParams(
        matrix=m._from_storage(grid),
        pivots=trace.pivots,
        swaps=trace.swaps,
        exhausted=trace.exhausted,
    )
    result = Result(
        params=params,
        info={
            'method': 'gauss_jordan',
            'reduced': reduced,
            'rank': n_pivots,
            'n_swaps': len(trace.swaps),
            'exhausted': trace.exhausted,
        },
        timing=timer.result(),
        backend_name='gauss_jordan',
        warnings=tuple(warnings_list),
    )
    return EchelonSolution(_result=result)


def row_echelon(matrix: Any) -> Matrix:
    """Row-echelon form of `matrix` as a new matrix."""
    return _ensure_matrix(matrix).row_echelon


def reduced_row_echelon(matrix: Any) -> Matrix:
    """Reduced row-echelon form of `matrix` as a new matrix."""
    return _ensure_matrix(matrix).reduced_row_echelon


def rank(matrix: Any) -> int:
    """Number of pivots in the reduced row-echelon form."""
    return row_reduce(matrix, reduced=True).rank


def transpose(matrix: Any) -> Matrix:
    """Transpose of `matrix` as a new C x R matrix."""
    return _ensure_matrix(matrix).transpose


def determinant(matrix: Any) -> Any:
    """
    Determinant of a square matrix.

    Raises:
        DimensionError: If the matrix is not square
    """
    m = _ensure_matrix(matrix)
    if not m.is_square:
        raise DimensionError(
            f"determinant: requires a square matrix, got {m.rows}x{m.columns}"
        )
    return m.determinant

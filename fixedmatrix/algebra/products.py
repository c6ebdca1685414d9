"""
Matrix products.

multiply() is the generalized (row-by-column) product; it is independent of
the elementwise Hadamard operators on Matrix. matvec() is the matrix-vector
operator behind `matrix * vector`.
"""

from __future__ import annotations

from fixedmatrix.algebra.matrix import Matrix
from fixedmatrix.algebra.vector import Vector, dot
from fixedmatrix.core.exceptions import DimensionError, ValidationError
from fixedmatrix.core.validation import check_same_shape


def multiply(lhs: Matrix, rhs: Matrix) -> Matrix:
    """
    Product of an R1 x S matrix and an S x C2 matrix.

    output[i][j] = dot(lhs.get_row(i), rhs.get_column(j)). O(R1 * C2 * S).
    The result takes the element type of `lhs`.

    Raises:
        DimensionError: If lhs.columns != rhs.rows
    """
    if not isinstance(lhs, Matrix) or not isinstance(rhs, Matrix):
        raise ValidationError(
            f"multiply: expected two matrices, got {type(lhs).__name__} "
            f"and {type(rhs).__name__}"
        )
    if lhs.columns != rhs.rows:
        raise DimensionError(
            f"multiply: shared dimension mismatch, lhs is {lhs.rows}x{lhs.columns} "
            f"but rhs is {rhs.rows}x{rhs.columns}"
        )

    output = Matrix[lhs.element_type, lhs.rows, rhs.columns].zeros()
    columns = [rhs.get_column(j) for j in range(rhs.columns)]
    for i in range(lhs.rows):
        row = lhs.get_row(i)
        for j, column in enumerate(columns):
            output[i, j] = dot(row, column)
    return output


def matvec(matrix: Matrix, vector: Vector) -> Vector:
    """
    Matrix-vector operator: output[i] = dot(vector, matrix.get_row(i)).

    `vector` must have length matrix.rows, and it is dotted with rows of
    length matrix.columns, so the operation is only defined for square
    matrices. On a non-square matrix the dot product's length check raises
    DimensionError.

    Returns:
        Vector of length matrix.rows
    """
    if not isinstance(matrix, Matrix) or not isinstance(vector, Vector):
        raise ValidationError(
            f"matvec: expected a matrix and a vector, got {type(matrix).__name__} "
            f"and {type(vector).__name__}"
        )
    check_same_shape((vector.length,), (matrix.rows,), 'matvec')
    output = Vector[matrix.element_type, matrix.rows]()
    for i in range(matrix.rows):
        output[i] = dot(vector, matrix.get_row(i))
    return output

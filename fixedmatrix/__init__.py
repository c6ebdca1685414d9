"""
fixedmatrix: fixed-dimension dense matrix algebra for Python.

Matrices and vectors carry their element type and dimensions in their type
(Matrix[float, 3, 3], Vector[Fraction, 4]). The package provides
construction, row/column access, elementwise arithmetic, transpose,
determinants by cofactor expansion, Gauss-Jordan row reduction and the
generalized matrix product.

Submodules:
    algebra: Matrix, Vector and the operations on them
    core: Exceptions, validation, element types, tolerances, timing
"""

__version__ = "0.1.0"

from fixedmatrix.algebra import (
    Matrix,
    SquareMatrix,
    Vector,
    dot,
    multiply,
    matvec,
    row_reduce,
    row_echelon,
    reduced_row_echelon,
    transpose,
    determinant,
    rank,
)
from fixedmatrix.core.exceptions import (
    FixedMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    UnsupportedOperationError,
)
from fixedmatrix.core.tolerances import allclose

__all__ = [
    "__version__",
    "Matrix",
    "SquareMatrix",
    "Vector",
    "dot",
    "multiply",
    "matvec",
    "row_reduce",
    "row_echelon",
    "reduced_row_echelon",
    "transpose",
    "determinant",
    "rank",
    "allclose",
    "FixedMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "UnsupportedOperationError",
]

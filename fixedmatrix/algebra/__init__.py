"""
Fixed-dimension matrix and vector algebra.

Public API:
    Matrix[T, R, C]          dense R x C matrix type
    SquareMatrix             base of every Matrix[T, N, N]; has determinant
    Vector[T, N]             fixed-length vector type
    dot(u, v)                dot product
    multiply(A, B)           generalized matrix product (also A @ B)
    matvec(A, v)             matrix-vector operator (also A * v)
    row_reduce(A)            Gauss-Jordan elimination with pivot trace
    row_echelon(A)           row-echelon form
    reduced_row_echelon(A)   reduced row-echelon form
    transpose(A)             transpose
    determinant(A)           determinant (square only)
    rank(A)                  number of pivots
"""

from fixedmatrix.algebra.vector import Vector, dot
from fixedmatrix.algebra.matrix import Matrix, SquareMatrix
from fixedmatrix.algebra.products import multiply, matvec
from fixedmatrix.algebra.solution import EchelonParams, EchelonSolution
from fixedmatrix.algebra.solvers import (
    row_reduce,
    row_echelon,
    reduced_row_echelon,
    transpose,
    determinant,
    rank,
)

__all__ = [
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
    "EchelonParams",
    "EchelonSolution",
]

"""
Fixed-dimension dense matrices.

Matrix[T, R, C] is a dense R x C grid of T stored as R rows. Dimensions are
part of the type: every instance of Matrix[float, 2, 3] has exactly two
rows of three elements. Binding a square shape yields a SquareMatrix
subclass, the only kind of matrix with a determinant.

A matrix also behaves like a raw 2D array (indexing, slicing, row
iteration, numpy.asarray) so geometry code can treat it as a grid.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from fixedmatrix.algebra._determinant import cofactor_determinant
from fixedmatrix.algebra._echelon import gauss_jordan
from fixedmatrix.algebra._shape import bind_type
from fixedmatrix.algebra.vector import Vector
from fixedmatrix.core.compute.parallel import RowBackend, map_rows
from fixedmatrix.core.elements import ElementSpec, is_scalar, resolve_element
from fixedmatrix.core.exceptions import (
    DimensionError,
    UnsupportedOperationError,
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


def _rebuild(element_type: type, rows: int, columns: int, grid: list) -> Matrix:
    return Matrix[element_type, rows, columns](grid)


class Matrix:
    """
    Dense R x C matrix of T.

    Bind the element type and dimensions before constructing:

        >>> M = Matrix[float, 2, 2]
        >>> M([[1, 2], [3, 4]]).determinant
        -2.0

    Construction:
        Matrix[T, R, C]()            identity (partial diagonal if R != C)
        Matrix[T, R, C](x)           every element set to scalar x
        Matrix[T, R, C](other)       copy of a same-shaped matrix
        Matrix[T, R, C](grid)        nested sequence; missing trailing rows
                                     and columns are zero-filled, anything
                                     oversized raises DimensionError
        Matrix.from_grid(grid)       shape inferred from a rectangular grid
    """

    element_type: type | None = None
    rows: int | None = None
    columns: int | None = None
    _spec: ElementSpec | None = None

    def __class_getitem__(cls, params: Any) -> type[Matrix]:
        if cls.rows is not None:
            raise TypeError(f"{cls.__name__} is already bound")
        if not isinstance(params, tuple) or len(params) != 3:
            raise ValidationError(
                f"Matrix[T, rows, columns] expects an element type and two "
                f"dimensions, got {params!r}"
            )
        element_type, rows, columns = params
        spec = resolve_element(element_type)
        rows = check_dimension(rows, 'rows')
        columns = check_dimension(columns, 'columns')
        if cls is SquareMatrix and rows != columns:
            raise DimensionError(
                f"SquareMatrix requires rows == columns, got {rows}x{columns}"
            )
        base = SquareMatrix if rows == columns else Matrix
        return bind_type(
            Matrix,
            (element_type, rows, columns),
            f"Matrix[{spec.name}, {rows}, {columns}]",
            {
                'element_type': element_type,
                'rows': rows,
                'columns': columns,
                '_spec': spec,
            },
            bases=(base,),
        )

    def __init__(self, values: Any = None):
        cls = type(self)
        cls._require_bound()
        spec = cls._spec
        shape = (cls.rows, cls.columns)
        if values is None:
            grid = spec.zeros(shape)
            for k in range(min(shape)):
                grid[k, k] = spec.coerce(1)
            self._elements = grid
        elif isinstance(values, Matrix):
            check_same_shape(values.shape, shape, 'values')
            self._elements = spec.convert(values._elements)
        elif is_scalar(values):
            self._elements = spec.full(shape, values)
        else:
            self._elements = check_grid(values, shape, spec, 'values')

    @classmethod
    def _require_bound(cls) -> None:
        if cls.rows is None:
            raise DimensionError(
                "Matrix: dimensions are not bound; use Matrix[T, rows, columns] "
                "or Matrix.from_grid()"
            )

    @classmethod
    def _from_storage(cls, elements: NDArray) -> Matrix:
        obj = cls.__new__(cls)
        obj._elements = elements
        return obj

    # --- Alternate constructors ---

    @classmethod
    def identity(cls) -> Matrix:
        """1 where row index == column index, 0 elsewhere."""
        return cls()

    @classmethod
    def fill(cls, value: Any) -> Matrix:
        """Every element set to `value`."""
        check_scalar(value, 'value')
        return cls(value)

    @classmethod
    def zeros(cls) -> Matrix:
        return cls(0)

    @classmethod
    def from_grid(cls, values: Any, element_type: type | None = None) -> Matrix:
        """
        Build a matrix from a nested sequence.

        On the unbound Matrix the shape is inferred from `values`, which
        must then be rectangular and non-empty; element_type defaults to
        float. On a bound type the type's own shape and element type apply.
        """
        if cls.rows is None:
            rows, columns = check_rectangular(values, 'values')
            return Matrix[element_type or float, rows, columns](values)
        if element_type is not None and element_type is not cls.element_type:
            raise ValidationError(
                f"from_grid: element_type {element_type.__name__} conflicts with "
                f"{cls.__name__}"
            )
        return cls(values)

    def copy(self) -> Matrix:
        """Independent copy; later mutation of either side is not shared."""
        return self._from_storage(self._elements.copy())

    # --- Shape ---

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    @property
    def elements(self) -> NDArray:
        """The live (rows, columns) storage array."""
        return self._elements

    @classmethod
    def _row_type(cls) -> type[Vector]:
        return Vector[cls.element_type, cls.columns]

    @classmethod
    def _column_type(cls) -> type[Vector]:
        return Vector[cls.element_type, cls.rows]

    # --- Row and column access ---

    def get_row(self, index: int) -> Vector:
        """Copy of row `index` as a Vector of length `columns`."""
        index = check_index(index, self.rows, 'row')
        return self._row_type()._from_storage(self._elements[index].copy())

    def set_row(self, index: int, vector: Any) -> None:
        """Replace row `index`; `vector` must have exactly `columns` items."""
        index = check_index(index, self.rows, 'row')
        self._elements[index, :] = self._line_values(vector, self.columns, 'row')

    def get_column(self, index: int) -> Vector:
        """Copy of column `index` as a Vector of length `rows`."""
        index = check_index(index, self.columns, 'column')
        return self._column_type()._from_storage(self._elements[:, index].copy())

    def set_column(self, index: int, vector: Any) -> None:
        """Replace column `index`; `vector` must have exactly `rows` items."""
        index = check_index(index, self.columns, 'column')
        self._elements[:, index] = self._line_values(vector, self.rows, 'column')

    def _line_values(self, vector: Any, length: int, name: str) -> NDArray:
        if isinstance(vector, Vector):
            check_same_shape((vector.length,), (length,), name)
            return self._spec.convert(vector.components)
        return self._spec.convert(check_length(vector, length, name))

    def assign(self, values: Any) -> None:
        """
        Overwrite every element.

        Accepts a scalar (broadcast), a same-shaped matrix, or a nested
        sequence using the constructor's zero-fill rule. The storage array
        is updated in place, so existing views see the new values.
        """
        if is_scalar(values):
            self._elements[...] = self._spec.coerce(values)
        elif isinstance(values, Matrix):
            check_same_shape(values.shape, self.shape, 'values')
            self._elements[...] = self._spec.convert(values._elements)
        else:
            self._elements[...] = check_grid(values, self.shape, self._spec, 'values')

    # --- Grid protocol ---

    def __getitem__(self, key):
        return self._elements[key]

    def __setitem__(self, key, value) -> None:
        if isinstance(value, (Matrix, Vector)):
            value = np.asarray(value)
        converted = self._spec.convert(value)
        try:
            self._elements[key] = converted
        except ValueError as e:
            raise DimensionError(
                f"cannot assign into {self.rows}x{self.columns} matrix: {e}"
            ) from e

    def __iter__(self):
        return iter(self._elements)

    def __len__(self) -> int:
        return self.rows

    def __array__(self, dtype=None, copy=None):
        if dtype is None and not copy:
            return self._elements
        return np.array(self._elements, dtype=dtype, copy=True)

    def tolist(self) -> list[list[Any]]:
        to_python = self._spec.to_python
        return [[to_python(x) for x in row] for row in self._elements]

    def __reduce__(self):
        return (_rebuild, (self.element_type, self.rows, self.columns, self.tolist()))

    # --- Derived matrices ---

    @property
    def transpose(self) -> Matrix:
        """C x R matrix whose row k is column k of this matrix."""
        output = Matrix[self.element_type, self.columns, self.rows].zeros()
        for k in range(self.columns):
            output.set_row(k, self.get_column(k))
        return output

    @property
    def row_echelon(self) -> Matrix:
        """Row-echelon form by Gauss-Jordan elimination (new matrix)."""
        grid = self._elements.copy()
        gauss_jordan(grid, reduced=False)
        return self._from_storage(grid)

    @property
    def reduced_row_echelon(self) -> Matrix:
        """Reduced row-echelon form by Gauss-Jordan elimination (new matrix)."""
        grid = self._elements.copy()
        gauss_jordan(grid, reduced=True)
        return self._from_storage(grid)

    # --- Elementwise arithmetic ---

    def _elementwise(
        self,
        other: Any,
        ufunc: Callable,
        operation: str,
        backend: RowBackend,
        swap: bool = False,
    ) -> Matrix:
        lhs = self._elements
        rhs = None
        scalar = None
        if isinstance(other, Matrix):
            check_same_shape(self.shape, other.shape, operation)
            rhs = other._elements
            if other._spec != self._spec:
                rhs = self._spec.convert(rhs)
        elif is_scalar(other):
            scalar = self._spec.coerce(other)
        else:
            raise UnsupportedOperationError(
                f"{operation}: unsupported operand type {type(other).__name__}; "
                f"expected {type(self).__name__} or a real scalar",
                operation=operation,
                operand_type=type(other).__name__,
            )

        out = np.empty(self.shape, dtype=lhs.dtype)

        # Each call reads and writes row i only
        def kernel(i: int) -> None:
            operand = scalar if rhs is None else rhs[i]
            if swap:
                out[i] = ufunc(operand, lhs[i])
            else:
                out[i] = ufunc(lhs[i], operand)

        map_rows(kernel, self.rows, backend=backend)
        return self._from_storage(out)

    def add(self, other: Any, *, backend: RowBackend = 'auto') -> Matrix:
        """Elementwise sum with a same-shaped matrix or a scalar."""
        return self._elementwise(other, np.add, 'add', backend)

    def subtract(self, other: Any, *, backend: RowBackend = 'auto') -> Matrix:
        """Elementwise difference with a same-shaped matrix or a scalar."""
        return self._elementwise(other, np.subtract, 'subtract', backend)

    def hadamard_multiply(self, other: Any, *, backend: RowBackend = 'auto') -> Matrix:
        """Elementwise (Hadamard) product with a same-shaped matrix or a scalar."""
        return self._elementwise(other, np.multiply, 'hadamard_multiply', backend)

    def hadamard_divide(self, other: Any, *, backend: RowBackend = 'auto') -> Matrix:
        """
        Elementwise quotient with a same-shaped matrix or a scalar.

        Division by zero follows the element type: IEEE inf/nan for floats,
        ZeroDivisionError for Fraction.
        """
        return self._elementwise(other, np.true_divide, 'hadamard_divide', backend)

    def scale(self, factor: Any, *, backend: RowBackend = 'auto') -> Matrix:
        """Multiply every element by a scalar."""
        if not is_scalar(factor):
            raise UnsupportedOperationError(
                f"scale: expected a real scalar, got {type(factor).__name__}",
                operation='scale',
                operand_type=type(factor).__name__,
            )
        return self._elementwise(factor, np.multiply, 'scale', backend)

    @staticmethod
    def _is_operand(other: Any) -> bool:
        return isinstance(other, Matrix) or is_scalar(other)

    def __add__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._elementwise(other, np.add, 'add', 'auto', swap=True)

    def __sub__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._elementwise(other, np.subtract, 'subtract', 'auto', swap=True)

    def __mul__(self, other):
        if isinstance(other, Vector):
            from fixedmatrix.algebra.products import matvec
            return matvec(self, other)
        if not self._is_operand(other):
            return NotImplemented
        return self.hadamard_multiply(other)

    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._elementwise(other, np.multiply, 'hadamard_multiply', 'auto', swap=True)

    def __truediv__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self.hadamard_divide(other)

    def __rtruediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._elementwise(other, np.true_divide, 'hadamard_divide', 'auto', swap=True)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        from fixedmatrix.algebra.products import multiply
        return multiply(self, other)

    def __neg__(self):
        return self.scale(-1)

    # --- Comparison and display ---

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(self._elements == other._elements))

    __hash__ = None

    def __str__(self) -> str:
        return "\n".join(str(row) for row in self.tolist())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"


class SquareMatrix(Matrix):
    """
    Matrix with rows == columns.

    Matrix[T, N, N] always produces a subclass of this class; the
    determinant exists only here.
    """

    @property
    def determinant(self) -> Any:
        """
        Determinant by cofactor expansion along row 0.

        Closed forms are used for sizes 1 to 3; larger sizes take O(n!)
        time and warn at COFACTOR_WARN_SIZE and above.
        """
        return self._spec.to_python(cofactor_determinant(self._elements))

"""
Fixed-length vectors.

Vector[T, N] is the minimal vector type the matrix core needs: positional
access, elementwise arithmetic and the dot product.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from fixedmatrix.algebra._shape import bind_type
from fixedmatrix.core.elements import ElementSpec, is_scalar, resolve_element
from fixedmatrix.core.exceptions import DimensionError, ValidationError
from fixedmatrix.core.validation import check_dimension, check_length, check_same_shape


class Vector:
    """
    Fixed-length ordered sequence of T.

    Bind the element type and length before constructing:

        >>> v = Vector[float, 3]([1, 2, 3])
        >>> v[0]
        1.0

    Construction:
        Vector[T, N]()        zero vector
        Vector[T, N](x)       every component set to scalar x
        Vector[T, N](seq)     exactly N components
    """

    element_type: type | None = None
    length: int | None = None
    _spec: ElementSpec | None = None

    def __class_getitem__(cls, params: Any) -> type[Vector]:
        if cls.length is not None:
            raise TypeError(f"{cls.__name__} is already bound")
        if not isinstance(params, tuple) or len(params) != 2:
            raise ValidationError(
                f"Vector[T, N] expects an element type and a length, got {params!r}"
            )
        element_type, length = params
        spec = resolve_element(element_type)
        length = check_dimension(length, 'length')
        return bind_type(
            Vector,
            (element_type, length),
            f"Vector[{spec.name}, {length}]",
            {'element_type': element_type, 'length': length, '_spec': spec},
        )

    def __init__(self, values: Any = None):
        cls = type(self)
        if cls.length is None:
            raise DimensionError(
                "Vector: length is not bound; use Vector[T, N] or Vector.of()"
            )
        spec = cls._spec
        n = cls.length
        if values is None:
            self._components = spec.zeros((n,))
        elif is_scalar(values):
            self._components = spec.full((n,), values)
        elif isinstance(values, Vector):
            check_same_shape((values.length,), (n,), 'values')
            self._components = spec.convert(values._components)
        else:
            items = check_length(values, n, 'values')
            components = spec.convert(items)
            if components.shape != (n,):
                raise DimensionError(
                    f"values: expected {n} scalars, got shape {components.shape}"
                )
            self._components = components

    @classmethod
    def of(cls, values: Any, element_type: type = float) -> Vector:
        """Build a vector whose length is taken from `values`."""
        items = list(values)
        return Vector[element_type, len(items)](items)

    @classmethod
    def _from_storage(cls, components: NDArray) -> Vector:
        obj = cls.__new__(cls)
        obj._components = components
        return obj

    # --- Sequence protocol ---

    @property
    def components(self) -> NDArray:
        """The live component array."""
        return self._components

    def __len__(self) -> int:
        return self.length

    def __iter__(self):
        return iter(self._components)

    def __getitem__(self, index):
        return self._components[index]

    def __setitem__(self, index, value) -> None:
        converted = self._spec.convert(value)
        try:
            self._components[index] = converted
        except ValueError as e:
            raise DimensionError(
                f"cannot assign into vector of length {self.length}: {e}"
            ) from e

    def __array__(self, dtype=None, copy=None):
        if dtype is None and not copy:
            return self._components
        return np.array(self._components, dtype=dtype, copy=True)

    def copy(self) -> Vector:
        return self._from_storage(self._components.copy())

    def tolist(self) -> list[Any]:
        return [self._spec.to_python(x) for x in self._components]

    # --- Arithmetic ---

    def _binary(self, other: Any, ufunc: Callable, swap: bool = False) -> Vector:
        if isinstance(other, Vector):
            check_same_shape((self.length,), (other.length,), ufunc.__name__)
            rhs = other._components
            if other._spec != self._spec:
                rhs = self._spec.convert(rhs)
        else:
            rhs = self._spec.coerce(other)
        if swap:
            return self._from_storage(ufunc(rhs, self._components))
        return self._from_storage(ufunc(self._components, rhs))

    @staticmethod
    def _is_operand(other: Any) -> bool:
        return isinstance(other, Vector) or is_scalar(other)

    def __add__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self._binary(other, np.add)

    def __radd__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._binary(other, np.add, swap=True)

    def __sub__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self._binary(other, np.subtract)

    def __rsub__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._binary(other, np.subtract, swap=True)

    def __mul__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self._binary(other, np.multiply)

    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._binary(other, np.multiply, swap=True)

    def __truediv__(self, other):
        if not self._is_operand(other):
            return NotImplemented
        return self._binary(other, np.true_divide)

    def __rtruediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self._binary(other, np.true_divide, swap=True)

    def __neg__(self):
        return self._from_storage(-self._components)

    # --- Comparison and display ---

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        if self.length != other.length:
            return False
        return bool(np.all(self._components == other._components))

    __hash__ = None

    def __str__(self) -> str:
        return str(self.tolist())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tolist()!r})"


def dot(u: Vector, v: Vector) -> Any:
    """
    Dot product sum(u[i] * v[i]).

    Raises:
        DimensionError: If the vectors differ in length
    """
    if not isinstance(u, Vector) or not isinstance(v, Vector):
        raise ValidationError(
            f"dot: expected two vectors, got {type(u).__name__} and {type(v).__name__}"
        )
    check_same_shape((u.length,), (v.length,), 'dot')
    rhs = v._components
    if v._spec != u._spec:
        rhs = u._spec.convert(rhs)
    return u._spec.to_python(np.dot(u._components, rhs))

"""
Element type resolution and coercion.

A matrix or vector type is bound to one element type T. This module maps T
onto NumPy storage and converts incoming values to T.

Resolution rules:
    - int, float, NumPy integers and float64 -> float64 storage.
      Integers are promoted because division is not closed over them.
    - numpy.float32 / numpy.float16 -> kept as that dtype.
    - Other real numbers.Number types (Fraction, Decimal, ...) -> object
      storage holding instances of T, so arithmetic stays exact.
    - bool, complex and non-numeric types are rejected.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import numpy as np
from numpy.typing import NDArray

from fixedmatrix.core.exceptions import DimensionError, ValidationError


_PROMOTED_TO_FLOAT64 = (int, float, np.integer, np.float64)
_KEPT_FLOAT_DTYPES = (np.float32, np.float16)


@dataclass(frozen=True)
class ElementSpec:
    """
    Storage description for one element type.

    Attributes:
        element_type: The type the caller bound (e.g. float, Fraction)
        dtype: NumPy storage dtype (object for exact types)
        exact: True when elements are stored as Python objects of element_type
    """
    element_type: type
    dtype: np.dtype
    exact: bool

    @property
    def name(self) -> str:
        return getattr(self.element_type, '__name__', str(self.element_type))

    def coerce(self, value: Any) -> Any:
        """Convert one scalar to the element type."""
        if not is_scalar(value):
            raise ValidationError(
                f"expected a real scalar for element type {self.name}, "
                f"got {type(value).__name__}"
            )
        if self.exact:
            if isinstance(value, self.element_type):
                return value
            try:
                return self.element_type(value)
            except (TypeError, ValueError, ArithmeticError) as e:
                raise ValidationError(
                    f"cannot convert {value!r} to {self.name}: {e}"
                ) from e
        return self.dtype.type(value)

    def convert(self, values: Any, name: str = 'values') -> Any:
        """
        Convert a scalar or array-like to storage, element by element.

        Scalars come back as a single coerced element, everything else as
        a fresh array of the storage dtype.

        Raises:
            DimensionError: If a nested input is ragged
        """
        if is_scalar(values):
            return self.coerce(values)
        if self.exact:
            try:
                arr = np.asarray(values, dtype=object)
            except ValueError as e:
                raise DimensionError(f"{name}: irregular nested shape: {e}") from e
            out = np.empty(arr.shape, dtype=object)
            for idx, value in np.ndenumerate(arr):
                out[idx] = self.coerce(value)
            return out

        try:
            arr = np.asarray(values)
        except ValueError as e:
            raise DimensionError(f"{name}: irregular nested shape: {e}") from e
        if arr.dtype == object or not (
            np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)
        ):
            if arr.dtype == object:
                # Mixed containers: validate each value so the error names it
                out = np.empty(arr.shape, dtype=self.dtype)
                for idx, value in np.ndenumerate(arr):
                    out[idx] = self.coerce(value)
                return out
            raise ValidationError(
                f"non-numeric dtype {arr.dtype}, expected real values "
                f"for element type {self.name}"
            )
        return arr.astype(self.dtype, copy=True)

    def zeros(self, shape: tuple[int, ...]) -> NDArray:
        return self.full(shape, 0)

    def full(self, shape: tuple[int, ...], value: Any) -> NDArray:
        if self.exact:
            out = np.empty(shape, dtype=object)
            out.fill(self.coerce(value))
            return out
        return np.full(shape, self.coerce(value), dtype=self.dtype)

    def to_python(self, value: Any) -> Any:
        """Unwrap NumPy scalars so results read as plain numbers."""
        if self.exact:
            return value
        return value.item() if isinstance(value, np.generic) else value


def is_scalar(value: Any) -> bool:
    """True for real, non-boolean numbers (Python or NumPy)."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, (complex, np.complexfloating)):
        return False
    return isinstance(value, (numbers.Number, np.number))


@lru_cache(maxsize=None)
def resolve_element(element_type: type) -> ElementSpec:
    """
    Resolve an element type to its storage specification.

    Args:
        element_type: Requested element type

    Returns:
        ElementSpec describing storage and coercion

    Raises:
        ValidationError: If the type is not a supported real scalar type
    """
    if not isinstance(element_type, type):
        raise ValidationError(
            f"element_type: expected a type, got {element_type!r}"
        )
    if issubclass(element_type, (bool, np.bool_)):
        raise ValidationError("element_type: bool is not an arithmetic element type")
    if issubclass(element_type, (complex, np.complexfloating)):
        raise ValidationError(
            f"element_type: complex element types are not supported, got {element_type.__name__}"
        )
    if issubclass(element_type, _KEPT_FLOAT_DTYPES):
        return ElementSpec(element_type, np.dtype(element_type), exact=False)
    if issubclass(element_type, _PROMOTED_TO_FLOAT64):
        return ElementSpec(element_type, np.dtype(np.float64), exact=False)
    if issubclass(element_type, np.number):
        raise ValidationError(
            f"element_type: unsupported NumPy type {element_type.__name__}"
        )
    if issubclass(element_type, numbers.Number):
        return ElementSpec(element_type, np.dtype(object), exact=True)
    raise ValidationError(
        f"element_type: {element_type.__name__} is not a numeric type"
    )

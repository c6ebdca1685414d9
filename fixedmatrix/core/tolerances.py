"""
Tolerance tiers for numerical comparison.

Defines precision expectations for each storage kind:
- EXACT: object storage (Fraction, Decimal); results compare exactly
- FP64: float64 storage
- FP64_FACTORIAL: float64 results of long cofactor expansions
- FP32: float32 / float16 storage

Used by allclose(), the test suite, and callers checking algebraic
identities such as det(AB) = det(A) det(B).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from fixedmatrix.core.exceptions import DimensionError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Rational or decimal storage, no rounding',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision elimination and products',
)

# Cofactor expansion sums n! terms; cancellation grows with n
FP64_FACTORIAL = ToleranceTier(
    rtol=1e-8,
    atol=1e-10,
    name='fp64_factorial',
    description='Double precision, cofactor expansion of size > 3',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single (or half) precision storage',
)


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier appropriate for a storage dtype."""
    dtype = np.dtype(dtype)
    if dtype == object:
        return EXACT
    if dtype == np.float64:
        return FP64
    return FP32


def _as_array(value: Any) -> np.ndarray:
    # Matrix and Vector both implement __array__
    return np.asarray(value)


def allclose(a: Any, b: Any, tolerance: ToleranceTier | None = None) -> bool:
    """
    Approximate elementwise equality of two matrices, vectors or arrays.

    Args:
        a, b: Operands (Matrix, Vector, ndarray or nested sequences)
        tolerance: Tier to apply; defaults to the tier of the coarser
            operand's dtype

    Returns:
        True if shapes match and every element is within tolerance

    Raises:
        DimensionError: If the operands have different shapes
    """
    lhs = _as_array(a)
    rhs = _as_array(b)
    if lhs.shape != rhs.shape:
        raise DimensionError(
            f"allclose: shape mismatch {lhs.shape} vs {rhs.shape}"
        )

    if tolerance is None:
        tiers = [select_tolerance(lhs.dtype), select_tolerance(rhs.dtype)]
        tolerance = max(tiers, key=lambda t: t.rtol)

    if tolerance.rtol == 0.0 and tolerance.atol == 0.0:
        return bool(np.all(lhs == rhs))

    return bool(np.allclose(
        lhs.astype(np.float64),
        rhs.astype(np.float64),
        rtol=tolerance.rtol,
        atol=tolerance.atol,
    ))

"""
Core infrastructure for fixedmatrix.

Shared abstractions and utilities used by the algebra package.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    elements: Element type resolution and coercion
    result: Generic Result[P] envelope
    tolerances: Tolerance tiers and approximate comparison
    compute: Timing and row-parallel execution
"""

from fixedmatrix.core.result import Result
from fixedmatrix.core.exceptions import (
    FixedMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    UnsupportedOperationError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "FixedMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "UnsupportedOperationError",
]

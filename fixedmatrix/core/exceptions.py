"""
Exception hierarchy for fixedmatrix.

All exceptions inherit from FixedMatrixError to allow catching any
library-specific error. Errors that correspond to a builtin category also
inherit from that builtin (IndexError, TypeError) so generic handlers keep
working when a matrix is used as a plain grid.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class FixedMatrixError(Exception):
    """Base exception for all fixedmatrix errors."""
    pass


class ValidationError(FixedMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs (element values, element types,
    backend names, dimensions) fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Shapes are malformed or inconsistent.

    Raised for construction from an oversized or irregular grid, for
    operands whose shapes do not match, for a shared dimension that
    differs between the two factors of a product, and for square-only
    operations requested on a non-square matrix.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index outside the matrix bounds.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound the index had to satisfy
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class UnsupportedOperationError(FixedMatrixError, TypeError):
    """
    Elementwise operation requested with an operand it cannot accept.

    This is a misuse of the API rather than a data problem: the operand is
    neither a matrix of the same type family nor a real scalar.

    Attributes:
        operation: Name of the requested operation (e.g. 'add')
        operand_type: Type name of the rejected operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        operand_type: str | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.operand_type = operand_type

"""
Generic result container for fixedmatrix computations that report more
than a single value.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, termination reason)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a reported result cannot drift
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The operation-specific payload type

    Attributes:
        params: Operation-specific payload (reduced matrix, pivots, ...)
        info: Structured metadata (method, rank, termination)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EchelonParams(matrix=reduced, pivots=((0, 0),), swaps=(), exhausted=False),
        ...     info={'method': 'gauss_jordan', 'reduced': True, 'rank': 1},
        ...     timing={'total_seconds': 0.0001, 'elimination': 0.0001},
        ...     backend_name='gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

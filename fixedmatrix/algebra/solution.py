"""
Row-reduction solution types.

EchelonSolution wraps Result[EchelonParams] and exposes the reduced matrix
together with the pivot and row-swap trace of the elimination.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fixedmatrix.algebra.matrix import Matrix
from fixedmatrix.core.result import Result


@dataclass(frozen=True)
class EchelonParams:
    """
    Payload of a row reduction.

    Attributes:
        matrix: The (reduced) row-echelon form
        pivots: (row, column) of every pivot, in elimination order
        swaps: (row_a, row_b) of every row interchange, in order
        exhausted: True if the pivot search ran off the last column
            before every row had a pivot
    """
    matrix: Matrix
    pivots: tuple[tuple[int, int], ...]
    swaps: tuple[tuple[int, int], ...]
    exhausted: bool


@dataclass
class EchelonSolution:
    """User-facing result of row_reduce()."""
    _result: Result[EchelonParams]

    @property
    def matrix(self) -> Matrix:
        return self._result.params.matrix

    @property
    def pivots(self) -> tuple[tuple[int, int], ...]:
        return self._result.params.pivots

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return tuple(j for _, j in self._result.params.pivots)

    @property
    def swaps(self) -> tuple[tuple[int, int], ...]:
        return self._result.params.swaps

    @property
    def rank(self) -> int:
        """Number of pivots found."""
        return len(self._result.params.pivots)

    @property
    def exhausted(self) -> bool:
        return self._result.params.exhausted

    @property
    def reduced(self) -> bool:
        return self._result.info['reduced']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Short text report: form, rank, pivots, swaps and the matrix."""
        m = self.matrix
        form = "Reduced row-echelon form" if self.reduced else "Row-echelon form"
        lines = [
            f"{form} of a {m.rows}x{m.columns} matrix",
            f"rank: {self.rank}",
            f"pivots: {list(self.pivots)}",
            f"row swaps: {len(self.swaps)}",
        ]
        for w in self.warnings:
            lines.append(f"warning: {w}")
        lines.append(str(m))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"EchelonSolution(shape={self.matrix.shape}, rank={self.rank}, "
            f"reduced={self.reduced})"
        )

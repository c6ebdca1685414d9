"""
Gauss-Jordan elimination kernel.

Operates in place on a storage array. The pivot cursor (i, j) starts at
(0, 0) and the loop runs while i < rows and j < columns:

1. While grid[i, j] == 0, swap in the first row below i with a nonzero
   entry in column j; if there is none, move j one column right. When j
   runs off the last column the grid is returned as it stands.
2. Divide row i by grid[i, j] so the pivot is exactly 1.
3. Subtract grid[r, j] * row i from every row r below i (row-echelon) or
   from every row r != i (reduced row-echelon).
4. Advance i and j.

The zero test is exact. There is no magnitude-based pivot choice and no
tolerance, so float rounding residue counts as a nonzero pivot.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.typing import NDArray


@dataclass(frozen=True)
class EliminationTrace:
    """
    Record of one elimination run.

    Attributes:
        pivots: (row, column) of every pivot, in order
        swaps: (row_a, row_b) of every row interchange, in order
        exhausted: True if the pivot search ran past the last column
            while rows were still left to reduce
    """
    pivots: tuple[tuple[int, int], ...]
    swaps: tuple[tuple[int, int], ...]
    exhausted: bool


def gauss_jordan(grid: NDArray, *, reduced: bool) -> EliminationTrace:
    """
    Reduce `grid` in place to row-echelon or reduced row-echelon form.

    Args:
        grid: (rows, columns) storage array, modified in place
        reduced: Eliminate above the pivot as well as below

    Returns:
        EliminationTrace describing pivots and swaps
    """
    rows, columns = grid.shape
    pivots: list[tuple[int, int]] = []
    swaps: list[tuple[int, int]] = []

    i = 0
    j = 0
    while i < rows and j < columns:
        while grid[i, j] == 0:
            for r in range(i + 1, rows):
                if grid[r, j] != 0:
                    grid[[i, r]] = grid[[r, i]]
                    swaps.append((i, r))
                    break
            else:
                j += 1
                if j >= columns:
                    return EliminationTrace(tuple(pivots), tuple(swaps), exhausted=True)

        pivot = grid[i, j]
        grid[i] = grid[i] / pivot

        targets = range(rows) if reduced else range(i + 1, rows)
        for r in targets:
            if r == i:
                continue
            grid[r] = grid[r] - grid[r, j] * grid[i]

        pivots.append((i, j))
        i += 1
        j += 1

    return EliminationTrace(tuple(pivots), tuple(swaps), exhausted=False)

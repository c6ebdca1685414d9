"""
Row-parallel execution for elementwise operators.

Elementwise matrix operators compute each output row from the matching
input rows only, so rows can be processed in any order or concurrently
and the result is identical to the sequential loop.

Backends:
    serial:  plain loop over row indices
    threads: concurrent.futures thread pool; NumPy releases the GIL inside
             its row kernels for native dtypes
    auto:    threads when the matrix has at least PARALLEL_MIN_ROWS rows,
             serial otherwise
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Literal

from fixedmatrix.core.exceptions import ValidationError


RowBackend = Literal['auto', 'serial', 'threads']

# Below this many rows the pool start-up cost outweighs the work
PARALLEL_MIN_ROWS: int = 256

DEFAULT_MAX_WORKERS: int = min(8, os.cpu_count() or 1)


def select_row_backend(backend: RowBackend, n_rows: int) -> str:
    """
    Resolve a backend preference to 'serial' or 'threads'.

    Raises:
        ValidationError: If backend is not a known choice
    """
    if backend == 'serial':
        return 'serial'
    if backend == 'threads':
        return 'threads'
    if backend == 'auto':
        if n_rows >= PARALLEL_MIN_ROWS and DEFAULT_MAX_WORKERS > 1:
            return 'threads'
        return 'serial'
    raise ValidationError(f"Unknown backend: {backend!r}")


def map_rows(
    func: Callable[[int], None],
    n_rows: int,
    *,
    backend: RowBackend = 'auto',
    max_workers: int | None = None,
) -> None:
    """
    Call func(i) for every row index i in 0 .. n_rows-1.

    func must only touch row i of its output. Exceptions raised by any
    call propagate to the caller.

    Args:
        func: Per-row kernel
        n_rows: Number of rows
        backend: 'auto', 'serial' or 'threads'
        max_workers: Pool size for the thread backend
    """
    if select_row_backend(backend, n_rows) == 'serial':
        for i in range(n_rows):
            func(i)
        return

    workers = max_workers or DEFAULT_MAX_WORKERS
    with ThreadPoolExecutor(max_workers=workers) as pool:
        # list() drains the iterator so worker exceptions are re-raised here
        list(pool.map(func, range(n_rows)))

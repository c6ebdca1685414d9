"""
Shared compute infrastructure for fixedmatrix.

Submodules:
    timing: Execution timing utilities
    parallel: Row-parallel map used by the elementwise operators
"""

from fixedmatrix.core.compute.timing import Timer, timed
from fixedmatrix.core.compute.parallel import (
    PARALLEL_MIN_ROWS,
    RowBackend,
    map_rows,
    select_row_backend,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Row parallelism
    "PARALLEL_MIN_ROWS",
    "RowBackend",
    "map_rows",
    "select_row_backend",
]

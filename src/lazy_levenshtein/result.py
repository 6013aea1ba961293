"""DistanceResult dataclass for lazy Levenshtein comparison output.

This module provides the rich result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

__all__ = ["DistanceResult"]


@dataclass(frozen=True, slots=True, eq=False)
class DistanceResult:
    """Rich result of a compare() call.

    Attributes:
        distance: Edit distance, or ``THRESHOLD_EXCEEDED`` when the threshold
            was exceeded.
        threshold: Threshold the query ran with (``THRESHOLD_EXCEEDED`` when
            unbounded).
        exceeded: True when ``distance`` is the threshold sentinel.
        matrix: Sparse ``(len(a) + 1, len(b) + 1)`` int64 cost matrix.
            Unvisited cells hold ``UNCOMPUTED``.
        computed: Boolean mask of the same shape, True for visited cells.
        diagonals: Sorted indices of every diagonal the query touched.
        computation_time_ms: Wall-clock duration of the query in milliseconds.
    """

    distance: int
    threshold: int
    exceeded: bool
    matrix: np.ndarray
    computed: np.ndarray
    diagonals: list[int]
    computation_time_ms: float

    def cell(self, row: int, col: int) -> int | None:
        """Return the distance at ``(row, col)``, or None if never computed."""
        if not self.computed[row, col]:
            return None
        return int(self.matrix[row, col])

    @property
    def cells_computed(self) -> int:
        """Number of matrix cells the lazy evaluation visited."""
        return int(self.computed.sum())

"""Sparse cost-matrix reconstruction from a DiagonalArena.

Copies the cache of every touched diagonal back into a dense
``(len(a) + 1, len(b) + 1)`` int64 grid.  Cells the lazy evaluation never
visited keep ``UNCOMPUTED``, so the grid shows exactly the work performed.

Placement rules:
- main diagonal:            ``grid[i, i]``
- upper diagonal ``k > 0``: ``grid[i, i + k]``
- lower diagonal ``k < 0``: ``grid[i - k, i]`` (stored transposed)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from lazy_levenshtein.algorithm.config import UNCOMPUTED

if TYPE_CHECKING:
    from lazy_levenshtein.algorithm.diagonal import Diagonal, DiagonalArena

__all__ = ["fill_distance_matrix"]


def _chain(start: Diagonal | None) -> list[Diagonal]:
    """Follow ``further`` links outward from ``start``."""
    chain: list[Diagonal] = []
    current = start
    while current is not None:
        chain.append(current)
        if current.further_index is None:
            break
        current = current.get_further()
    return chain


def fill_distance_matrix(arena: DiagonalArena) -> np.ndarray:
    """Return the sparse cost matrix touched so far in ``arena``.

    Args:
        arena: Arena whose main diagonal was built with ``(a, b)``.

    Returns:
        int64 array of shape ``(len(a) + 1, len(b) + 1)``.
    """
    rows = len(arena.left) + 1
    cols = len(arena.top) + 1
    grid = np.full((rows, cols), UNCOMPUTED, dtype=np.int64)

    main = arena.main
    upper = _chain(main)
    lower = _chain(main.get_closer()) if main.closer_index is not None else []

    for diagonal in upper:
        k = diagonal.index
        for i, value in enumerate(diagonal.cache):
            grid[i, i + k] = value

    for diagonal in lower:
        k = -diagonal.index
        for i, value in enumerate(diagonal.cache):
            grid[i + k, i] = value

    return grid

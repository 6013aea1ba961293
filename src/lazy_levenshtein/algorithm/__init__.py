"""algorithm subpackage: the lazy diagonal Levenshtein algorithm.

Provides the diagonal cache, the per-query arena that owns it, the
sparse matrix reconstruction, and the configuration/sentinel values.
Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from lazy_levenshtein.algorithm import DiagonalArena, THRESHOLD_EXCEEDED

    arena = DiagonalArena("kitten", "sitting", threshold=THRESHOLD_EXCEEDED)
    arena.main.get_further().get(6)   # 3
"""

from __future__ import annotations

from lazy_levenshtein.algorithm.config import (
    THRESHOLD_EXCEEDED,
    UNCOMPUTED,
    DiagonalSide,
    DistanceConfig,
)
from lazy_levenshtein.algorithm.diagonal import (
    Diagonal,
    DiagonalArena,
    InvariantViolation,
)
from lazy_levenshtein.algorithm.matrix import fill_distance_matrix

__all__ = [
    "THRESHOLD_EXCEEDED",
    "UNCOMPUTED",
    "Diagonal",
    "DiagonalArena",
    "DiagonalSide",
    "DistanceConfig",
    "InvariantViolation",
    "fill_distance_matrix",
]

"""Lazy Levenshtein - exact, thresholded edit distance along matrix diagonals."""

from __future__ import annotations

from lazy_levenshtein.algorithm.config import (
    THRESHOLD_EXCEEDED,
    UNCOMPUTED,
    DistanceConfig,
)
from lazy_levenshtein.algorithm.diagonal import InvariantViolation
from lazy_levenshtein.api import (
    calculate_distance,
    compare,
    distance_matrix,
    is_within,
    similarity_score,
)
from lazy_levenshtein.calculator import LazyLevenshtein
from lazy_levenshtein.result import DistanceResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "THRESHOLD_EXCEEDED",
    "UNCOMPUTED",
    "DistanceConfig",
    "DistanceResult",
    "InvariantViolation",
    "LazyLevenshtein",
    "calculate_distance",
    "compare",
    "distance_matrix",
    "is_within",
    "similarity_score",
]

"""Public API functions for lazy-levenshtein.

This module provides the user-facing functions: calculate_distance,
distance_matrix, compare, is_within and similarity_score.  Each call
creates a fresh LazyLevenshtein to guarantee zero global state mutation
between calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from lazy_levenshtein.algorithm.config import THRESHOLD_EXCEEDED, DistanceConfig
from lazy_levenshtein.calculator import LazyLevenshtein
from lazy_levenshtein.result import DistanceResult

__all__ = [
    "calculate_distance",
    "compare",
    "distance_matrix",
    "is_within",
    "similarity_score",
]

# Single-query calculators have nothing to reuse.
_UNCACHED = DistanceConfig(max_cache_size=0)


def calculate_distance(
    a: Sequence[Any],
    b: Sequence[Any],
    threshold: int | None = None,
) -> int:
    """Return the Levenshtein distance between two sequences.

    Args:
        a:         First sequence (str or any indexable sequence of units).
        b:         Second sequence.
        threshold: Optional upper bound.  Computation stops once the
                   distance provably exceeds it.

    Returns:
        The distance, or ``THRESHOLD_EXCEEDED`` when it is above threshold.
    """
    return LazyLevenshtein(config=_UNCACHED).calculate_distance(a, b, threshold)


def distance_matrix(
    a: Sequence[Any],
    b: Sequence[Any],
    threshold: int | None = None,
) -> np.ndarray:
    """Return the sparse cost matrix computed for ``(a, b)``.

    Cells the lazy evaluation never visited hold ``UNCOMPUTED``.

    Args:
        a:         First sequence.
        b:         Second sequence.
        threshold: Optional upper bound.

    Returns:
        int64 array of shape ``(len(a) + 1, len(b) + 1)``.
    """
    return LazyLevenshtein(config=_UNCACHED).distance_matrix(a, b, threshold)


def compare(
    a: Sequence[Any],
    b: Sequence[Any],
    threshold: int | None = None,
) -> DistanceResult:
    """Compare two sequences and return a rich DistanceResult.

    Args:
        a:         First sequence.
        b:         Second sequence.
        threshold: Optional upper bound.

    Returns:
        A ``DistanceResult`` with distance, matrix, computed mask, touched
        diagonals and computation_time_ms populated.
    """
    return LazyLevenshtein(config=_UNCACHED).compare(a, b, threshold)


def is_within(a: Sequence[Any], b: Sequence[Any], threshold: int) -> bool:
    """Return True if ``a`` and ``b`` are at most ``threshold`` edits apart.

    Runs in ``O(|a| * threshold)`` at worst.
    """
    return calculate_distance(a, b, threshold) != THRESHOLD_EXCEEDED


def similarity_score(a: Sequence[Any], b: Sequence[Any]) -> float:
    """Return the normalised similarity of two sequences.

    Defined as::

        1.0 - levenshtein(a, b) / max(len(a), len(b), 1)

    The ``max(..., 1)`` guard keeps two empty sequences at 1.0.

    Returns:
        A float in [0.0, 1.0].  1.0 means identical.
    """
    distance = calculate_distance(a, b)
    return 1.0 - distance / max(len(a), len(b), 1)

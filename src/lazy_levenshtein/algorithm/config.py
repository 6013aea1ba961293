"""Sentinels, DiagonalSide and DistanceConfig for the lazy Levenshtein algorithm.

DistanceConfig is a frozen (immutable) dataclass holding the defaults a
``LazyLevenshtein`` calculator applies to every query.  The two sentinels
are reserved integers that can never be a real distance:

- ``THRESHOLD_EXCEEDED``: returned instead of a distance once the
  threshold is provably exceeded (the largest int64).
- ``UNCOMPUTED``: fills matrix cells the lazy evaluation never touched
  (the smallest int64).  Real distances are never negative.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import StrEnum, auto

import numpy as np

__all__ = ["THRESHOLD_EXCEEDED", "UNCOMPUTED", "DiagonalSide", "DistanceConfig"]

THRESHOLD_EXCEEDED: int = sys.maxsize
UNCOMPUTED: int = int(np.iinfo(np.int64).min)


class DiagonalSide(StrEnum):
    """Which half of the cost matrix a diagonal lies in.

    - MAIN:  index 0, runs from the top-left corner.
    - UPPER: positive indices, ``top`` is the column sequence.
    - LOWER: negative indices, stored with ``left``/``top`` swapped.
    """

    MAIN = auto()
    UPPER = auto()
    LOWER = auto()

    @classmethod
    def of(cls, index: int) -> DiagonalSide:
        if index == 0:
            return cls.MAIN
        return cls.UPPER if index > 0 else cls.LOWER


def resolve_threshold(threshold: int | None) -> int:
    """Validate a caller threshold and map ``None`` to the unbounded value."""
    if threshold is None:
        return THRESHOLD_EXCEEDED
    if isinstance(threshold, bool) or not isinstance(threshold, int | np.integer):
        msg = f"threshold must be an int or None, got {type(threshold).__name__}"
        raise TypeError(msg)
    if threshold < 0:
        msg = f"threshold must be >= 0, got {threshold}"
        raise ValueError(msg)
    return int(threshold)


@dataclass(frozen=True, slots=True)
class DistanceConfig:
    """Immutable configuration for a ``LazyLevenshtein`` calculator.

    Attributes:
        threshold: Default threshold for queries that do not pass one.
            ``None`` means unbounded.
        max_cache_size: Capacity of the calculator's LRU result cache.
            ``0`` disables result caching.
    """

    threshold: int | None = None
    max_cache_size: int = 512

    def __post_init__(self) -> None:
        resolve_threshold(self.threshold)
        size = self.max_cache_size
        if isinstance(size, bool) or not isinstance(size, int | np.integer):
            msg = f"max_cache_size must be an int, got {type(size).__name__}"
            raise TypeError(msg)
        if size < 0:
            msg = f"max_cache_size must be >= 0, got {size}"
            raise ValueError(msg)

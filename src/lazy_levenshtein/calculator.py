"""LazyLevenshtein: facade that turns a distance query into a diagonal lookup.

This is the wiring layer between the raw ``DiagonalArena`` and the public
API.

Architecture:
- Every query builds a fresh ``DiagonalArena`` for ``(a, b, threshold)``.
- The final distance lives on diagonal ``len(b) - len(a)``.  For a
  non-negative target the facade walks ``get_further()`` from the main
  diagonal; for a negative target it steps ``get_closer()`` once (into the
  transposed lower half) and then walks ``get_further()``.
- ``get(min(len(a), len(b)))`` on that diagonal pulls in only the cells
  the answer depends on.
- Any result above the threshold is reported as ``THRESHOLD_EXCEEDED``,
  including results that are just the seeded first cell of a diagonal.
- ``calculate_distance`` results are cached per instance in an LRU cache.
  The cache is a performance detail that never changes a result.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Hashable, Sequence
from typing import Any

import numpy as np
from cachetools import LRUCache

from lazy_levenshtein.algorithm.config import (
    THRESHOLD_EXCEEDED,
    UNCOMPUTED,
    DistanceConfig,
    resolve_threshold,
)
from lazy_levenshtein.algorithm.diagonal import Diagonal, DiagonalArena
from lazy_levenshtein.algorithm.matrix import fill_distance_matrix
from lazy_levenshtein.result import DistanceResult

__all__ = ["LazyLevenshtein"]

logger = logging.getLogger(__name__)


def _check_sequence(value: Any, name: str) -> Sequence[Any]:
    if not isinstance(value, Sequence):
        msg = f"{name} must be a sequence, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _cache_key(a: Sequence[Any], b: Sequence[Any], threshold: int) -> Hashable | None:
    """Build a result-cache key, or None when the units are unhashable."""
    key = (
        a if isinstance(a, str) else tuple(a),
        b if isinstance(b, str) else tuple(b),
        threshold,
    )
    try:
        hash(key)
    except TypeError:
        return None
    return key


class LazyLevenshtein:
    """Lazy, thresholded Levenshtein distance calculator.

    Complexity is ``O(|a| * Dist(a, b))``: ``O(|a|)`` for identical inputs,
    ``O(|a| * |b|)`` for completely different ones, and at most
    ``O(|a| * threshold)`` when a threshold is given.

    Each instance keeps its own LRU cache of ``calculate_distance`` results;
    two instances never share state.

    Example::

        from lazy_levenshtein import LazyLevenshtein, THRESHOLD_EXCEEDED

        calc = LazyLevenshtein()
        calc.calculate_distance("kitten", "sitting")               # 3
        calc.calculate_distance("kitten", "sitting", threshold=2)  # THRESHOLD_EXCEEDED
    """

    def __init__(self, config: DistanceConfig | None = None) -> None:
        """Initialise the calculator.

        Args:
            config: Default threshold and cache capacity.  Defaults to
                ``DistanceConfig()`` (unbounded, 512 cached results).
        """
        self._config: DistanceConfig = config if config is not None else DistanceConfig()
        self._cache: LRUCache[Hashable, int] | None = (
            LRUCache(maxsize=self._config.max_cache_size)
            if self._config.max_cache_size > 0
            else None
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> DistanceConfig:
        return self._config

    @property
    def max_cache_size(self) -> int:
        """The maximum number of results the cache can hold."""
        return 0 if self._cache is None else int(self._cache.maxsize)

    @property
    def curr_cache_size(self) -> int:
        """The current number of results stored in the cache."""
        return 0 if self._cache is None else int(self._cache.currsize)

    def clear_cache(self) -> None:
        if self._cache is not None:
            self._cache.clear()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def calculate_distance(
        self,
        a: Sequence[Any],
        b: Sequence[Any],
        threshold: int | None = None,
    ) -> int:
        """Return the edit distance between ``a`` and ``b``.

        Args:
            a: First sequence (rows of the cost matrix).
            b: Second sequence (columns of the cost matrix).
            threshold: Stop as soon as the distance provably exceeds this
                value.  Defaults to the configured threshold (unbounded
                when that is None as well).

        Returns:
            The distance, or ``THRESHOLD_EXCEEDED`` if it is above the
            threshold.
        """
        a = _check_sequence(a, "a")
        b = _check_sequence(b, "b")
        limit = self._resolve(threshold)

        cache = self._cache
        key = _cache_key(a, b, limit) if cache is not None else None
        if cache is not None and key is not None and key in cache:
            logger.debug("distance cache hit: |a|=%d |b|=%d", len(a), len(b))
            return cache[key]

        distance, _ = self._run(a, b, limit)

        if cache is not None and key is not None:
            cache[key] = distance
        return distance

    def distance_matrix(
        self,
        a: Sequence[Any],
        b: Sequence[Any],
        threshold: int | None = None,
    ) -> np.ndarray:
        """Return the sparse cost matrix the lazy evaluation touched.

        Diagnostic aid: cells never visited hold ``UNCOMPUTED``.  When the
        distance is not the sentinel, ``matrix[len(a), len(b)]`` equals it.

        Args:
            a: First sequence.
            b: Second sequence.
            threshold: As for ``calculate_distance``.

        Returns:
            int64 array of shape ``(len(a) + 1, len(b) + 1)``.
        """
        a = _check_sequence(a, "a")
        b = _check_sequence(b, "b")
        _, arena = self._run(a, b, self._resolve(threshold))
        return fill_distance_matrix(arena)

    def compare(
        self,
        a: Sequence[Any],
        b: Sequence[Any],
        threshold: int | None = None,
    ) -> DistanceResult:
        """Run one query and return a rich ``DistanceResult``.

        Args:
            a: First sequence.
            b: Second sequence.
            threshold: As for ``calculate_distance``.

        Returns:
            A ``DistanceResult`` with distance, matrix, computed mask,
            touched diagonals and timing populated.
        """
        t0 = time.perf_counter()

        a = _check_sequence(a, "a")
        b = _check_sequence(b, "b")
        limit = self._resolve(threshold)
        distance, arena = self._run(a, b, limit)
        matrix = fill_distance_matrix(arena)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        return DistanceResult(
            distance=distance,
            threshold=limit,
            exceeded=distance == THRESHOLD_EXCEEDED,
            matrix=matrix,
            computed=matrix != UNCOMPUTED,
            diagonals=arena.indices(),
            computation_time_ms=elapsed_ms,
        )

    # ------------------------------------------------------------------
    # Query execution
    # ------------------------------------------------------------------

    def _resolve(self, threshold: int | None) -> int:
        if threshold is None:
            return resolve_threshold(self._config.threshold)
        return resolve_threshold(threshold)

    def _run(
        self, a: Sequence[Any], b: Sequence[Any], threshold: int
    ) -> tuple[int, DiagonalArena]:
        """Build the arena, evaluate the result cell and apply the threshold."""
        arena = DiagonalArena(a, b, threshold)
        target = len(b) - len(a)
        result_diagonal = self._result_diagonal(arena, target)

        distance = result_diagonal.get(min(len(a), len(b)))
        if distance > threshold:
            distance = THRESHOLD_EXCEEDED

        logger.debug(
            "lazy levenshtein: |a|=%d |b|=%d target=%d threshold=%s "
            "diagonals=%d distance=%s",
            len(a),
            len(b),
            target,
            "none" if threshold == THRESHOLD_EXCEEDED else threshold,
            len(arena),
            "exceeded" if distance == THRESHOLD_EXCEEDED else distance,
        )
        return distance, arena

    @staticmethod
    def _result_diagonal(arena: DiagonalArena, target: int) -> Diagonal:
        """Walk from the main diagonal to diagonal ``target``."""
        if target >= 0:
            diagonal = arena.main
            for _ in range(target):
                diagonal = diagonal.get_further()
            return diagonal

        diagonal = arena.main.get_closer()
        for _ in range(-target - 1):
            diagonal = diagonal.get_further()
        return diagonal

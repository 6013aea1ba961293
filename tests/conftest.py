"""Shared fixtures: a plain dynamic-programming oracle and a spy helper.

The oracle fills the whole ``(len(a) + 1, len(b) + 1)`` cost matrix the
textbook way, so every cell the lazy algorithm reports can be checked
against it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from lazy_levenshtein.algorithm.diagonal import Diagonal


def reference_matrix(a: Sequence[Any], b: Sequence[Any]) -> list[list[int]]:
    """Full Levenshtein cost matrix, one row per unit of ``a``."""
    rows = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        rows[i][0] = i
    for j in range(len(b) + 1):
        rows[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            substitute = rows[i - 1][j - 1] + (0 if a[i - 1] == b[j - 1] else 1)
            rows[i][j] = min(rows[i - 1][j] + 1, rows[i][j - 1] + 1, substitute)
    return rows


def reference_distance(a: Sequence[Any], b: Sequence[Any]) -> int:
    return reference_matrix(a, b)[len(a)][len(b)]


@pytest.fixture
def reference() -> Callable[[Sequence[Any], Sequence[Any]], int]:
    """Textbook O(|a|*|b|) distance used as an oracle."""
    return reference_distance


@pytest.fixture
def full_matrix() -> Callable[[Sequence[Any], Sequence[Any]], list[list[int]]]:
    """Textbook full cost matrix used as an oracle."""
    return reference_matrix


@pytest.fixture
def extend_calls(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    """Spy on ``Diagonal._extend``; each computed cell appends its diagonal index.

    Calls that only report a missing neighbour are not recorded. The spy
    delegates to the original implementation so results are unchanged.
    """
    calls: list[int] = []
    original_extend = Diagonal._extend

    def spy_extend(self: Diagonal) -> tuple[Diagonal, int] | None:
        missing = original_extend(self)
        if missing is None:
            calls.append(self.index)
        return missing

    monkeypatch.setattr(Diagonal, "_extend", spy_extend)
    return calls

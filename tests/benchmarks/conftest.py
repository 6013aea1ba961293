"""Deterministic sequence generators for performance benchmarks.

All generators produce fixed, reproducible strings. No random values.
Three tiers: 100, 1 000 and 5 000 characters.  Each tier provides a
"similar" pair (a few scattered edits, where the lazy algorithm is close
to linear) and a "dissimilar" pair with no unit in common.

Dissimilar pairs are benchmarked both under a threshold and unbounded.
Unbounded, they touch every diagonal and fall back to ``O(|a| * |b|)``;
the 5 000 tier only runs them with a threshold.
"""

from __future__ import annotations

import pytest

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def generate_text(length: int, offset: int = 0) -> str:
    """Cycle through the alphabet with a stride that avoids short periods."""
    return "".join(_ALPHABET[(i * 7 + offset) % 26] for i in range(length))


def _make_similar(length: int, edits: int = 5) -> tuple[str, str]:
    """Generate a pair that differs by ``edits`` evenly spaced substitutions."""
    left = generate_text(length)
    chars = list(left)
    step = max(length // (edits + 1), 1)
    for k in range(1, edits + 1):
        i = k * step
        chars[i] = "#"
    return left, "".join(chars)


def _make_dissimilar(length: int) -> tuple[str, str]:
    """Generate a pair with no unit in common."""
    return generate_text(length), "#" * length


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_100_similar() -> tuple[str, str]:
    return _make_similar(100)


@pytest.fixture
def pair_100_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(100)


@pytest.fixture
def pair_1000_similar() -> tuple[str, str]:
    return _make_similar(1000)


@pytest.fixture
def pair_1000_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(1000)


@pytest.fixture
def pair_5000_similar() -> tuple[str, str]:
    return _make_similar(5000)


@pytest.fixture
def pair_5000_dissimilar() -> tuple[str, str]:
    return _make_dissimilar(5000)

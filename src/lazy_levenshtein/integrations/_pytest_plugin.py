"""pytest plugin for lazy-levenshtein.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pytest

from lazy_levenshtein import THRESHOLD_EXCEEDED, calculate_distance


@pytest.fixture(scope="session")
def assert_within_edit_distance() -> Any:
    """Fixture that returns a callable edit-distance asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to calculate_distance() which creates a fresh calculator per call).

    Usage in tests::

        def test_typo(assert_within_edit_distance):
            assert_within_edit_distance("recieve", "receive", max_distance=2)

        def test_too_far(assert_within_edit_distance):
            with pytest.raises(AssertionError, match=r"max_distance="):
                assert_within_edit_distance("dump", "facility", max_distance=3)

    Returns:
        A callable ``_assert(actual, expected, max_distance=0) -> None``
        that raises ``AssertionError`` when ``actual`` is more than
        ``max_distance`` edits away from ``expected``.
    """

    def _assert(
        actual: Sequence[Any],
        expected: Sequence[Any],
        max_distance: int = 0,
    ) -> None:
        """Assert that two sequences are at most ``max_distance`` edits apart.

        Args:
            actual:       The sequence produced by the code under test.
            expected:     The expected/reference sequence.
            max_distance: Largest tolerated edit distance.  Defaults to 0
                          (sequences must be equal).

        Raises:
            AssertionError: When the distance exceeds ``max_distance``, with a
                message including the distance, the bound and both sequences.
        """
        distance = calculate_distance(actual, expected, threshold=max_distance)
        if distance == THRESHOLD_EXCEEDED:
            # Failure path only: rerun unbounded to report the real distance.
            distance = calculate_distance(actual, expected)
            raise AssertionError(
                f"sequences too far apart: "
                f"edit distance {distance} exceeds max_distance={max_distance}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}"
            )

    return _assert

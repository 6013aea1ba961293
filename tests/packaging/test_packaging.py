"""Packaging correctness verification for lazy-levenshtein.

Tests validate that:
- The top-level import exposes the documented public API
- Importing the package does not pull in pytest
- py.typed marker is present in the source tree
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the source tree and current installation rather than
building wheels or creating temporary virtualenvs.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseImport:
    """Verify the base install exposes the public API."""

    def test_import_lazy_levenshtein(self) -> None:
        import lazy_levenshtein

        assert hasattr(lazy_levenshtein, "calculate_distance")
        assert hasattr(lazy_levenshtein, "distance_matrix")
        assert hasattr(lazy_levenshtein, "LazyLevenshtein")

    def test_calculate_distance_basic(self) -> None:
        from lazy_levenshtein import calculate_distance

        assert calculate_distance("kitten", "sitting") == 3

    def test_import_does_not_load_pytest(self) -> None:
        """A fresh interpreter importing the package must not import pytest."""
        result = subprocess.run(
            [
                sys.executable,
                "-c",
                "import sys, lazy_levenshtein; print('pytest' in sys.modules)",
            ],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "False"


class TestSourceTree:
    def test_py_typed_marker_present(self) -> None:
        assert (PROJECT_ROOT / "src" / "lazy_levenshtein" / "py.typed").is_file()


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self) -> None:
        """pytest11 entry point must be registered for lazy-levenshtein."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        ll_eps = [ep for ep in pytest11_eps if "lazy_levenshtein" in str(ep.value)]
        assert ll_eps, (
            f"No pytest11 entry point found for lazy-levenshtein. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self) -> None:
        """assert_within_edit_distance fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("lazy_levenshtein.integrations._pytest_plugin")
        assert hasattr(mod, "assert_within_edit_distance")
        assert callable(mod.assert_within_edit_distance)


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self) -> None:
        import lazy_levenshtein

        assert lazy_levenshtein.__version__ == "0.1.0"

    def test_distribution_version_matches(self) -> None:
        from importlib.metadata import version

        assert version("lazy-levenshtein") == "0.1.0"

    def test_all_exports(self) -> None:
        """__all__ must include the documented public API."""
        import lazy_levenshtein

        expected = {
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
        }
        actual = set(lazy_levenshtein.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )

"""Smoke tests for package structure and basic contracts.

These tests run in pre-commit hooks to catch structural issues quickly.
"""

from __future__ import annotations

import importlib.metadata
from pathlib import Path

import pytest


@pytest.mark.smoke
def test_package_metadata_accessible() -> None:
    """Verify package metadata is registered correctly.

    This smoke test catches:
    - Build/install configuration issues
    - Missing pyproject.toml metadata
    - Package name mismatches (district-games vs district_games)
    """
    version = importlib.metadata.version("district-games")
    assert version is not None
    assert len(version) > 0


@pytest.mark.smoke
def test_src_directory_structure() -> None:
    """Verify expected src/ directory structure exists."""
    project_root = Path(__file__).parent.parent.parent

    src_dir = project_root / "src" / "district_games"
    assert src_dir.is_dir(), f"Package directory not found: {src_dir}"
    assert (src_dir / "__init__.py").exists()

    for subpackage in ("cli", "engine", "ingest", "utils"):
        assert (src_dir / subpackage / "__init__.py").exists(), f"Missing subpackage: {subpackage}"

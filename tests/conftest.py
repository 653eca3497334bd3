"""Shared pytest fixtures for radix-colors-tailwind tests."""

import shutil
from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def radix_fixtures_dir(fixtures_dir: Path) -> Path:
    """Return path to the sample Radix stylesheets."""
    return fixtures_dir / "radix"


@pytest.fixture
def radix_source_dir(tmp_path: Path, radix_fixtures_dir: Path) -> Path:
    """Copy the sample Radix stylesheets into a writable source directory."""
    source = tmp_path / "node_modules" / "@radix-ui" / "colors"
    shutil.copytree(radix_fixtures_dir, source)
    return source

"""Pytest configuration and fixtures for Timepoint tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so timepoint can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from timepoint import Locale, TimeConfig, get_locale  # noqa: E402


@pytest.fixture
def en() -> Locale:
    """The bundled English locale."""
    return get_locale("en")


@pytest.fixture
def nb() -> Locale:
    """The bundled Norwegian Bokmål locale."""
    return get_locale("nb")


@pytest.fixture
def morning_config() -> TimeConfig:
    """Configuration with days starting at 06:00."""
    return TimeConfig(day_starts_at=6)

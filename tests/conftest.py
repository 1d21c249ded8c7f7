"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src is on path when running tests without installed package
src = Path(__file__).resolve().parent.parent / "src"
if src.exists() and str(src) not in sys.path:
    sys.path.insert(0, str(src))

from airport_dataset.reference.countries import CountryLanguages  # noqa: E402


@pytest.fixture
def languages() -> CountryLanguages:
    """Small fixed language table so tests do not depend on the bundled JSON."""
    return CountryLanguages({"JP": "ja", "CN": "zh", "TW": "zh", "DE": "de", "FR": "fr"})

"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root and tests dir to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from rhunes.core import RuneTranslator
from rhunes.tables import build_tables
from fixtures.sample_texts import (
    SWEDISH_SENTENCE,
    SWEDISH_RHUNES,
    SWEDISH_READING,
    ENGLISH_SENTENCE,
    ENGLISH_RHUNES,
    ENGLISH_READING,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def tables():
    """Build a fresh set of lookup tables."""
    return build_tables()


@pytest.fixture
def translator(tables):
    """Create a translator over freshly built tables."""
    return RuneTranslator(tables)


@pytest.fixture
def project_root():
    """Path to the project root."""
    return Path(__file__).parent.parent


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def swedish_sample():
    """Swedish sentence, its Rhunes, and its canonical reading."""
    return SWEDISH_SENTENCE, SWEDISH_RHUNES, SWEDISH_READING


@pytest.fixture
def english_sample():
    """English sentence, its Rhunes, and its canonical reading."""
    return ENGLISH_SENTENCE, ENGLISH_RHUNES, ENGLISH_READING

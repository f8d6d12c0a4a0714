"""Pytest configuration and shared fixtures for option-state tests."""

import sys
from pathlib import Path

import pytest

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from option_state import OptionRegistry, Versioned

from tests.fixtures import build_scenario


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def registry() -> OptionRegistry:
    """Create a private registry so tests can reuse option ids freely."""
    return OptionRegistry(name="test")


# ============================================================================
# State Fixtures
# ============================================================================


@pytest.fixture
def scenario() -> Versioned:
    """Freshly built versioned state with versions 0, 3 and 5."""
    return build_scenario()

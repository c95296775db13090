"""
Pytest configuration and shared fixtures for the test suite.
"""

from typing import List

import pytest

from cowmatch.config import MatcherConfig, set_config
from cowmatch.core.intent import SwapIntent

from helpers import BUY, SELL, TOKEN_A, TOKEN_B, TOKEN_C, make_intent


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def test_config() -> MatcherConfig:
    """Create a test configuration."""
    return MatcherConfig(
        match_fee_tier=False,
        batch_size_warning=100,
        log_level="DEBUG",
    )


@pytest.fixture(autouse=True)
def reset_global_config(test_config):
    """Keep the global configuration isolated between tests."""
    set_config(test_config)
    yield
    set_config(None)


# ============================================================================
# Test Data Fixtures
# ============================================================================

@pytest.fixture
def intent_factory():
    """Expose the intent factory to tests."""
    return make_intent


@pytest.fixture
def scenario_intents() -> List[SwapIntent]:
    """One buyer facing two sellers on the same pair."""
    return [
        make_intent(1, BUY, out=100),
        make_intent(2, SELL, out=50),
        make_intent(3, SELL, out=200),
    ]


@pytest.fixture
def mixed_batch() -> List[SwapIntent]:
    """A batch spanning two pairs and both directions."""
    return [
        make_intent(1, BUY, out=100),
        make_intent(2, SELL, out=300),
        make_intent(3, SELL, out=50),
        make_intent(4, BUY, out=10),
        make_intent(5, BUY, pair=(TOKEN_A, TOKEN_C), out=1000),
        make_intent(6, SELL, pair=(TOKEN_A, TOKEN_C), out=None),
        make_intent(7, SELL, pair=(TOKEN_B, TOKEN_C), out=5000),
    ]

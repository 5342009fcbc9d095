"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Test configuration and markers
- Sample handler module names scanned by the discovery tests
- Cancellation fixtures
"""

import pytest
from _pytest.config import Config

from cqrs_base import CancellationTokenSource

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "asyncio: Async tests")
    config.addinivalue_line("markers", "result: Result algebra tests")
    config.addinivalue_line("markers", "discovery: Handler discovery tests")
    config.addinivalue_line("markers", "command: Command handler tests")
    config.addinivalue_line("markers", "query: Query handler tests")


# ============================================================================
# MODULE FIXTURES
# ============================================================================


@pytest.fixture
def users_module() -> str:
    return "tests.fixtures.handlers.users"


@pytest.fixture
def billing_module() -> str:
    return "tests.fixtures.handlers.billing"


@pytest.fixture
def empty_module() -> str:
    return "tests.fixtures.handlers.empty"


@pytest.fixture
def duplicates_module() -> str:
    return "tests.fixtures.duplicate_handlers"


@pytest.fixture
def aliased_module() -> str:
    return "tests.fixtures.aliased_handlers"


# ============================================================================
# CANCELLATION FIXTURES
# ============================================================================


@pytest.fixture
def cancellation_source() -> CancellationTokenSource:
    """Provide a fresh, not yet cancelled, token source."""
    return CancellationTokenSource()

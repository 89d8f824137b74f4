"""Pytest configuration and shared fixtures for optres tests."""

import pytest

from optres import reset
from optres._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def clean_state():
    """Reset global configuration and log hooks around each test."""
    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from optres import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from optres import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from optres import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from optres import Nothing

    return Nothing

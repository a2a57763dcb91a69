"""Shared test fixtures."""

import pytest

from urlmatch.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Reset the global configuration around every test."""
    reset_config()
    yield
    reset_config()

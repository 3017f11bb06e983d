"""Shared fixtures for all tests."""

import pytest
import structlog

from zuul.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings_and_logging():
    """Give every test fresh settings and default structlog configuration."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()

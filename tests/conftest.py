"""Shared fixtures."""

from datetime import datetime, timezone

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """CLI tests configure structlog globally; start every test from defaults."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def now():
    return datetime(2026, 10, 16, 12, 0, 0, tzinfo=timezone.utc)

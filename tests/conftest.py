"""Pytest configuration and shared fixtures."""
import pytest
from datetime import datetime, timezone
from config import config


@pytest.fixture
def span_start():
    """Fixture providing the start instant used by the time span examples."""
    return datetime(2000, 2, 1, 10, 0, 0)


@pytest.fixture
def utc_instant():
    """Fixture returning a factory for UTC datetimes."""
    def make(*args):
        return datetime(*args, tzinfo=timezone.utc)
    return make


@pytest.fixture
def clean_config(monkeypatch):
    """Fixture resetting the global config to its defaults for one test."""
    monkeypatch.setattr(config, "default_timezone", None)
    monkeypatch.setattr(config, "dayfirst", False)
    return config

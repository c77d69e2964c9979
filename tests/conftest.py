import pytest

from usergraph.api import settings


@pytest.fixture
def quiet(monkeypatch):
    """Silence structured event logging for a test."""
    monkeypatch.setattr(settings, "LOG_EVENTS", False)

"""Root conftest for pytest configuration and shared fixtures.

Loaded before both tests/ and the colocated adapter tests, so the fixtures
below are available everywhere.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables — must be set before any track_event module import
# ---------------------------------------------------------------------------
for _name in (
    "TRACK_EVENT_ENABLED",
    "TRACK_EVENT_TRACK_ON_SYNC_ERROR",
    "TRACK_EVENT_SINK_ERROR_POLICY",
    "TRACK_EVENT_REQUIRE_SINK",
):
    os.environ.pop(_name, None)


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def call_order():
    """Counter shared between a fake sink and recorded method calls."""
    from track_event.adapters.tracking.fake import CallOrder

    return CallOrder()


@pytest.fixture
def fake_sink(call_order):
    """Fake tracking sink that records payloads."""
    from track_event.adapters.tracking.fake import FakeTrackingSink

    return FakeTrackingSink(order=call_order)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Give every test the default settings values."""
    from track_event.core.config import Settings, settings

    defaults = Settings()
    for field_name in Settings.model_fields:
        monkeypatch.setattr(settings, field_name, getattr(defaults, field_name))
    yield settings

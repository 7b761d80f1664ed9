"""Unit tests for Settings env var loading."""

import pytest
from pydantic import ValidationError

from track_event.core.config import Settings, SinkErrorPolicy


class TestSettings:
    """Tests for Settings defaults and env loading."""

    def test_defaults(self):
        s = Settings()

        assert s.ENABLED is True
        assert s.TRACK_ON_SYNC_ERROR is False
        assert s.SINK_ERROR_POLICY == SinkErrorPolicy.RAISE
        assert s.REQUIRE_SINK is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("TRACK_EVENT_ENABLED", "false")
        monkeypatch.setenv("TRACK_EVENT_SINK_ERROR_POLICY", "log")
        monkeypatch.setenv("TRACK_EVENT_TRACK_ON_SYNC_ERROR", "true")

        s = Settings()

        assert s.ENABLED is False
        assert s.SINK_ERROR_POLICY == SinkErrorPolicy.LOG
        assert s.TRACK_ON_SYNC_ERROR is True

    def test_invalid_policy_rejected(self, monkeypatch):
        monkeypatch.setenv("TRACK_EVENT_SINK_ERROR_POLICY", "ignore")

        with pytest.raises(ValidationError):
            Settings()

    def test_policy_is_str(self):
        assert SinkErrorPolicy.LOG == "log"

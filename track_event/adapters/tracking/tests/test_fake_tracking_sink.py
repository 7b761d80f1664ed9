"""Tests for FakeTrackingSink, CallOrder and Tracking."""

from dataclasses import FrozenInstanceError

import pytest

from track_event.adapters.tracking import CallOrder, FakeTrackingSink, Tracking
from track_event.core.protocols import TrackingSink


class TestFakeTrackingSink:
    """Tests for FakeTrackingSink."""

    def test_satisfies_protocol(self):
        assert isinstance(FakeTrackingSink(), TrackingSink)

    def test_records_payloads_in_order(self):
        sink = FakeTrackingSink()

        sink.track_event({"a": 1})
        sink.track_event({"b": 2})

        assert sink.payloads == [{"a": 1}, {"b": 2}]
        assert sink.positions == [1, 2]
        assert sink.call_count == 2

    def test_shared_order(self):
        order = CallOrder()
        first, second = FakeTrackingSink(order), FakeTrackingSink(order)

        first.track_event("x")
        assert order.next() == 2
        second.track_event("y")

        assert first.positions == [1]
        assert second.positions == [3]

    def test_error_raised_after_recording(self):
        sink = FakeTrackingSink()
        sink.error = RuntimeError("down")

        with pytest.raises(RuntimeError, match="down"):
            sink.track_event({})

        assert sink.call_count == 1

    def test_clear(self):
        sink = FakeTrackingSink()
        sink.track_event({})

        sink.clear()

        assert sink.calls == []


class TestTracking:
    """Tests for the Tracking holder."""

    def test_from_sink_exposes_track_event(self):
        sink = FakeTrackingSink()
        tracking = Tracking.from_sink(sink)

        tracking.track_event({"event": "x"})

        assert sink.payloads == [{"event": "x"}]

    def test_frozen(self):
        tracking = Tracking(track_event=print)

        with pytest.raises(FrozenInstanceError):
            tracking.track_event = len

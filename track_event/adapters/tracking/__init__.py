"""Tracking sink adapters."""

from track_event.adapters.tracking.fake import CallOrder, FakeTrackingSink, TrackedPayload
from track_event.adapters.tracking.tracking import Tracking

__all__ = ["CallOrder", "FakeTrackingSink", "TrackedPayload", "Tracking"]

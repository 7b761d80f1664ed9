"""Dispatch analytics payloads after instance methods complete."""

from track_event.adapters.tracking import Tracking
from track_event.core.config import Settings, SinkErrorPolicy, settings
from track_event.core.exceptions import TrackEventException, TrackingSinkUnavailableError
from track_event.core.protocols import TrackingContext, TrackingSink
from track_event.decorator import track_event_method, wrap

__all__ = [
    "Settings",
    "SinkErrorPolicy",
    "TrackEventException",
    "Tracking",
    "TrackingContext",
    "TrackingSink",
    "TrackingSinkUnavailableError",
    "settings",
    "track_event_method",
    "wrap",
]

"""Protocol definitions."""

from track_event.core.protocols.tracking import TrackingContext, TrackingSink

__all__ = ["TrackingContext", "TrackingSink"]

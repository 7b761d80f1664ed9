"""The ``props.tracking`` holder a host object exposes to wrapped methods."""

from dataclasses import dataclass
from typing import Any, Callable

from track_event.core.protocols.tracking import TrackingSink


@dataclass(frozen=True)
class Tracking:
    """Nested sink entry read by the wrapper as ``props.tracking.track_event``.

    Usage:
        self.props = {"tracking": Tracking.from_sink(sink)}
    """

    track_event: Callable[[Any], Any]

    @classmethod
    def from_sink(cls, sink: TrackingSink) -> "Tracking":
        """Expose an object implementing TrackingSink."""
        return cls(track_event=sink.track_event)

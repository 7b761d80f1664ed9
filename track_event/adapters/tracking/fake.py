"""Fake tracking sink for testing."""

import itertools
from dataclasses import dataclass
from typing import Any, Optional


class CallOrder:
    """Shared monotonic counter for comparing the order of recorded calls.

    Hand the same instance to a sink and to whatever records method calls,
    then compare the recorded positions.
    """

    def __init__(self) -> None:
        """Start counting at 1."""
        self._counter = itertools.count(1)

    def next(self) -> int:
        """Return the next position."""
        return next(self._counter)


@dataclass
class TrackedPayload:
    """Single recorded track_event call."""

    payload: Any
    position: int


class FakeTrackingSink:
    """In-memory test double for TrackingSink.

    Records all payloads for assertions. Set ``error`` to make every
    call raise after recording.

    Usage:
        sink = FakeTrackingSink()
        panel = Panel(props={"tracking": Tracking.from_sink(sink)})
        panel.submit("x")
        assert sink.payloads == [{"event": "submit"}]
    """

    def __init__(self, order: Optional[CallOrder] = None) -> None:
        """Initialize with empty call list."""
        self._order = order or CallOrder()
        self.calls: list[TrackedPayload] = []
        self.error: Optional[Exception] = None

    def track_event(self, payload: Any) -> None:
        """Record the payload, then raise ``error`` if one is set."""
        self.calls.append(TrackedPayload(payload=payload, position=self._order.next()))
        if self.error is not None:
            raise self.error

    # Test helpers

    @property
    def payloads(self) -> list[Any]:
        """Payloads in the order they were received."""
        return [c.payload for c in self.calls]

    @property
    def positions(self) -> list[int]:
        """Call-order positions of every recorded call."""
        return [c.position for c in self.calls]

    @property
    def call_count(self) -> int:
        """Total number of track_event calls."""
        return len(self.calls)

    def clear(self) -> None:
        """Reset recorded calls."""
        self.calls.clear()

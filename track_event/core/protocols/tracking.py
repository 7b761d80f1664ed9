"""Protocols for the objects a wrapped method reads at dispatch time.

Usage:
    class Checkout:
        def __init__(self, sink: TrackingSink) -> None:
            self.props = {"tracking": Tracking(track_event=sink.track_event)}
            self.state = {"step": 1}

        @track_event_method({"event": "checkout_submitted"})
        def submit(self, cart_id: str) -> str:
            ...
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TrackingSink(Protocol):
    """Receives computed tracking payloads.

    One call per wrapped invocation, with exactly one argument.
    """

    def track_event(self, payload: Any) -> None:
        """Accept a single payload for delivery to an analytics backend."""
        ...


@runtime_checkable
class TrackingContext(Protocol):
    """The instance a wrapped method is called on.

    ``props`` holds a ``tracking`` entry (attribute or mapping key) that
    exposes ``track_event``. An optional ``state`` attribute on the context
    is passed through to tracking-data functions as-is; it is not declared
    here so that contexts without state still match.
    """

    props: Any

"""Shared exceptions module.

Failures raised by a wrapped method are never converted into these; they
reach the caller untouched. These cover misuse of the wrapper itself.
"""

from typing import Optional


class TrackEventException(Exception):
    """Base exception for track_event."""

    pass


class TrackingSinkUnavailableError(TrackEventException):
    """Raised when REQUIRE_SINK is set and the context exposes no sink."""

    def __init__(self, owner: str, message: Optional[str] = "No tracking sink on context"):
        """Create a new TrackingSinkUnavailableError instance.

        Args:
        ----
            owner (str): Name of the context type that was missing the sink.
            message (str, optional): The error message. Has default message.

        """
        self.owner = owner
        self.message = message
        super().__init__(f"{message}: {owner}")

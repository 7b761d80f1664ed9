"""Reads props, state and the tracking sink from a context object.

Nothing here is cached: every call looks the values up again so that side
effects of the wrapped method are visible to tracking-data functions.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from track_event.core.protocols.tracking import TrackingContext

_MISSING = object()


def _field(owner: Any, name: str) -> Any:
    """Look up ``name`` as a mapping key or an attribute."""
    if owner is None:
        return _MISSING
    if isinstance(owner, Mapping):
        return owner.get(name, _MISSING)
    return getattr(owner, name, _MISSING)


def read_props(ctx: TrackingContext) -> Any:
    """Return ``ctx.props`` or None."""
    props = _field(ctx, "props")
    return None if props is _MISSING else props


def read_state(ctx: TrackingContext) -> Any:
    """Return ``ctx.state`` or None when the context has no state."""
    state = _field(ctx, "state")
    return None if state is _MISSING else state


def resolve_sink(ctx: TrackingContext) -> Optional[Callable[[Any], Any]]:
    """Return ``ctx.props.tracking.track_event`` if it is callable, else None."""
    tracking = _field(read_props(ctx), "tracking")
    if tracking is _MISSING:
        return None
    track_event = _field(tracking, "track_event")
    if track_event is _MISSING or not callable(track_event):
        return None
    return track_event

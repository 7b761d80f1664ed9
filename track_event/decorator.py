"""Method decorator that dispatches a tracking payload after the method completes.

The wrapped method runs first. Once its result is known (immediately, or
when a returned future/awaitable settles) the tracking payload is computed
from the instance's current ``props``/``state`` and handed to
``props.tracking.track_event``. The caller sees the original return value
or the identical exception.

Usage:
    class SearchPanel:
        @track_event_method(lambda props, state, args: {"query": args[0]})
        async def search(self, query: str) -> list[str]:
            ...

        reset = wrap({"event": "reset"})(_reset)
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
import logging
from functools import wraps
from typing import Any, Awaitable, Callable, Optional, TypeVar

from track_event.core.config import SinkErrorPolicy, settings
from track_event.core.context import read_props, read_state, resolve_sink
from track_event.core.exceptions import TrackingSinkUnavailableError
from track_event.core.protocols.tracking import TrackingContext

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Called with the original failure (or None) once the method has settled.
_Track = Callable[[Optional[BaseException]], None]

# Marks "no tracking_data given"; None is a valid fixed payload.
_DEFAULT_PAYLOAD = object()

# Failures that count as settlement of a suspended result.
_SETTLED_FAILURES = (Exception, asyncio.CancelledError)


def _method_name(method: Callable[..., Any]) -> str:
    return getattr(method, "__qualname__", None) or getattr(method, "__name__", repr(method))


def _compute_payload(tracking_data: Any, ctx: TrackingContext, args: tuple) -> Any:
    if callable(tracking_data):
        return tracking_data(read_props(ctx), read_state(ctx), args)
    return tracking_data


def _dispatch(tracking_data: Any, ctx: TrackingContext, args: tuple, method_name: str) -> None:
    """Compute the payload from the context as it is now and send it to the sink."""
    sink = resolve_sink(ctx)
    if sink is None:
        if settings.REQUIRE_SINK:
            raise TrackingSinkUnavailableError(type(ctx).__name__)
        logger.debug("No tracking sink on %s, skipping %s", type(ctx).__name__, method_name)
        return

    payload = _compute_payload(tracking_data, ctx, args)
    logger.debug("Dispatching tracking payload for %s", method_name)
    sink(payload)


def _settle_after_tracking(inner: Any, outer: Any, track: _Track) -> None:
    """Done-callback body shared by asyncio and concurrent futures."""
    error: Optional[BaseException]
    if inner.cancelled():
        error = asyncio.CancelledError()
    else:
        error = inner.exception()

    try:
        track(error)
    except Exception as track_error:
        if not outer.done():
            outer.set_exception(track_error)
        return

    if outer.done():
        return
    if inner.cancelled():
        outer.cancel()
    elif error is not None:
        outer.set_exception(error)
    else:
        outer.set_result(inner.result())


def _chain_future(inner: asyncio.Future, track: _Track) -> asyncio.Future:
    """Return a future that settles like ``inner``, after tracking has run.

    Tracking runs from a done-callback, so it fires even when nobody awaits
    the returned future. Cancelling the returned future does not cancel
    ``inner``.
    """
    outer = inner.get_loop().create_future()
    inner.add_done_callback(lambda done: _settle_after_tracking(done, outer, track))
    return outer


def _chain_callback_future(inner: Any, track: _Track) -> concurrent.futures.Future:
    """Same as ``_chain_future`` for objects that only expose ``add_done_callback``.

    Covers ``concurrent.futures.Future`` and look-alikes. Tracking runs in
    whichever thread settles ``inner``.
    """
    outer: concurrent.futures.Future = concurrent.futures.Future()
    inner.add_done_callback(lambda done: _settle_after_tracking(done, outer, track))
    return outer


def _accepts_continuations(result: Any) -> bool:
    return callable(getattr(result, "add_done_callback", None))


async def _await_then_track(awaitable: Awaitable[T], track: _Track) -> T:
    try:
        result = await awaitable
    except _SETTLED_FAILURES as error:
        track(error)
        raise
    track(None)
    return result


def track_event_method(
    tracking_data: Any = _DEFAULT_PAYLOAD,
    *,
    track_on_sync_error: Optional[bool] = None,
    sink_error_policy: Optional[SinkErrorPolicy] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Build a decorator that tracks each call of the decorated method.

    Args:
        tracking_data: Fixed payload, or a function
            ``(props, state, args) -> payload`` called once per invocation
            after the method has completed. ``args`` is the tuple of
            positional arguments after ``self``. Defaults to ``{}``;
            an explicit ``None`` is dispatched as-is.
        track_on_sync_error: Dispatch tracking when the method raises
            before returning. Falls back to ``settings.TRACK_ON_SYNC_ERROR``.
        sink_error_policy: How failures of the sink or of ``tracking_data``
            are handled. Falls back to ``settings.SINK_ERROR_POLICY``.

    Returns:
        A decorator turning a method into its tracked counterpart.
    """
    if tracking_data is _DEFAULT_PAYLOAD:
        tracking_data = {}

    def decorator(method: Callable[..., Any]) -> Callable[..., Any]:
        if not callable(method):
            raise TypeError(f"track_event_method expects a callable, got {type(method).__name__}")

        method_name = _method_name(method)

        def _tracker(ctx: TrackingContext, args: tuple) -> _Track:
            policy = sink_error_policy or settings.SINK_ERROR_POLICY

            def track(original_error: Optional[BaseException]) -> None:
                try:
                    _dispatch(tracking_data, ctx, args, method_name)
                except Exception:
                    # A failed method keeps its own failure; the sink error is only logged.
                    if original_error is None and policy == SinkErrorPolicy.RAISE:
                        raise
                    logger.exception("Tracking dispatch failed for %s", method_name)

            return track

        if inspect.iscoroutinefunction(method):

            @wraps(method)
            async def async_wrapper(ctx: TrackingContext, *args: Any, **kwargs: Any) -> Any:
                if not settings.ENABLED:
                    return await method(ctx, *args, **kwargs)
                return await _await_then_track(method(ctx, *args, **kwargs), _tracker(ctx, args))

            return async_wrapper

        @wraps(method)
        def wrapper(ctx: TrackingContext, *args: Any, **kwargs: Any) -> Any:
            if not settings.ENABLED:
                return method(ctx, *args, **kwargs)

            track = _tracker(ctx, args)
            try:
                result = method(ctx, *args, **kwargs)
            except Exception as error:
                on_sync_error = (
                    settings.TRACK_ON_SYNC_ERROR
                    if track_on_sync_error is None
                    else track_on_sync_error
                )
                if on_sync_error:
                    track(error)
                raise

            if asyncio.isfuture(result):
                return _chain_future(result, track)
            if _accepts_continuations(result):
                return _chain_callback_future(result, track)
            if inspect.isawaitable(result):
                return _await_then_track(result, track)

            track(None)
            return result

        return wrapper

    return decorator


# Explicit higher-order form: wrap(tracking_data)(method) -> wrapped method.
wrap = track_event_method

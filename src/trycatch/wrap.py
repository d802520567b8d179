"""Wrappers that turn raising operations into ``Result`` values.

- ``try_catch``: await an operation the caller already started.
- ``try_catch_fn``: call a thunk (sync or async) and await it if needed.
- ``try_catch_sync``: call a synchronous thunk outside an event loop.

``Exception`` is always captured. ``asyncio.CancelledError`` is captured only
when it belongs to the wrapped operation; if the calling task is itself being
cancelled it propagates. ``KeyboardInterrupt`` and ``SystemExit`` always
propagate.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any, cast

from trycatch._dev_flags import log_failures_enabled, log_tracebacks_enabled
from trycatch.result import Failure, Result, Success

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


def _describe(target: object) -> str:
    try:
        name = getattr(target, "__qualname__", None) or getattr(
            target, "__name__", None
        )
    except Exception:
        name = None
    return name if isinstance(name, str) else type(target).__name__


def _capture[E](op: str, target: object, exc: BaseException) -> Failure[E]:
    if log_failures_enabled():
        logger.debug(
            "%s(%s) captured %s: %s",
            op,
            _describe(target),
            type(exc).__name__,
            exc,
            exc_info=exc if log_tracebacks_enabled() else None,
        )
    return Failure(cast("E", exc))


def _caller_cancelling() -> bool:
    """Return True when the running task has a pending cancellation request."""
    task = asyncio.current_task()
    return task is not None and task.cancelling() > 0


async def try_catch[T, E = Exception](awaitable: Awaitable[T]) -> Result[T, E]:
    """Await *awaitable* and return its outcome as a ``Result``.

    Non-awaitables are not passed through: the ``await`` raises ``TypeError``
    and that becomes the failure.

    Example:
        data, error = await try_catch(client.get(url))
    """
    try:
        data = await awaitable
    except asyncio.CancelledError as exc:
        if _caller_cancelling():
            raise
        return _capture("try_catch", awaitable, exc)
    except Exception as exc:
        return _capture("try_catch", awaitable, exc)
    return Success(data)


async def try_catch_fn[T, E = Exception](
    fn: Callable[[], T | Awaitable[T]],
) -> Result[T, E]:
    """Call *fn* and return its outcome as a ``Result``.

    A synchronous raise is captured before anything is awaited. If *fn*
    returns an awaitable it is awaited inside the same protected region;
    plain values are returned without suspending.

    Example:
        data, error = await try_catch_fn(lambda: parse(payload))
    """
    try:
        value = fn()
        if inspect.isawaitable(value):
            value = await value
    except asyncio.CancelledError as exc:
        if _caller_cancelling():
            raise
        return _capture("try_catch_fn", fn, exc)
    except Exception as exc:
        return _capture("try_catch_fn", fn, exc)
    return Success(cast("T", value))


def try_catch_sync[T, E = Exception](fn: Callable[[], T]) -> Result[T, E]:
    """Call the synchronous *fn* and return its outcome as a ``Result``.

    Awaitables cannot be settled here: a returned coroutine is closed and
    reported as a ``TypeError`` failure.
    """
    try:
        value: Any = fn()
    except Exception as exc:
        return _capture("try_catch_sync", fn, exc)
    if inspect.isawaitable(value):
        if inspect.iscoroutine(value):
            value.close()
        return _capture(
            "try_catch_sync",
            fn,
            TypeError(
                f"{_describe(fn)} returned an awaitable; use try_catch_fn() instead"
            ),
        )
    return Success(cast("T", value))


__all__ = ["try_catch", "try_catch_fn", "try_catch_sync"]

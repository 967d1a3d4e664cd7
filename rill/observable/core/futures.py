"""
Rill Futures - Thin Adapter Over asyncio Futures
================================================

Observables only need four things from a future engine:

- a future already resolved with a plain value
- a future already failed with a reason
- ``then(future, on_fulfilled, on_rejected)``: run exactly one of the two
  callbacks once ``future`` settles and return a new future that reflects
  what that callback returned or raised
- ``never()``: a future that never settles

All callbacks run as done-callbacks, which asyncio schedules through the
loop with ``call_soon``. Nothing here runs user code synchronously.

Cancellation is not a failure. A cancelled source, a cancelled awaitable
returned by a callback, or a callback raising ``CancelledError`` cancels the
resulting future.

Any other exception a callback raises fails the resulting future, including
``BaseException`` subclasses. Only ``KeyboardInterrupt`` and ``SystemExit``
escape. ``StopIteration`` cannot be stored in a future, so it is wrapped in
a ``RuntimeError`` the same way asyncio tasks wrap it.
"""

import asyncio
import inspect
from typing import Any, Callable, Optional


def resolved(value: Any, loop: asyncio.AbstractEventLoop) -> asyncio.Future:
    """Return a future already resolved with ``value``."""
    future = loop.create_future()
    future.set_result(value)
    return future


def rejected(reason: BaseException, loop: asyncio.AbstractEventLoop) -> asyncio.Future:
    """Return a future already failed with ``reason`` (cancelled for ``CancelledError``)."""
    future = loop.create_future()
    _fail(future, reason)
    return future


def _fail(future: asyncio.Future, error: BaseException) -> None:
    """Fail ``future`` with ``error``; ``CancelledError`` cancels it instead."""
    if isinstance(error, asyncio.CancelledError):
        future.cancel()
        return
    if isinstance(error, StopIteration):
        wrapped = RuntimeError(f"StopIteration raised in transform: {error!r}")
        wrapped.__cause__ = error
        error = wrapped
    future.set_exception(error)


def never(loop: Optional[asyncio.AbstractEventLoop] = None) -> asyncio.Future:
    """
    Return a future that never settles.

    Returning it from a transform silences that value for the whole branch
    below the transform. Nothing times it out, so every call keeps one
    pending future alive until the caller drops it.
    """
    if loop is None:
        loop = asyncio.get_running_loop()
    return loop.create_future()


def to_future(value: Any, loop: asyncio.AbstractEventLoop) -> asyncio.Future:
    """Normalize a plain value or an awaitable into a future on ``loop``."""
    if isinstance(value, asyncio.Future):
        return value
    if inspect.isawaitable(value):
        return asyncio.ensure_future(value, loop=loop)
    return resolved(value, loop)


def _adopt(target: asyncio.Future, outcome: Any) -> None:
    """Settle ``target`` with ``outcome``, following it if it is awaitable."""
    if not inspect.isawaitable(outcome):
        target.set_result(outcome)
        return

    inner = asyncio.ensure_future(outcome, loop=target.get_loop())

    def copy_state(settled: asyncio.Future) -> None:
        if target.done():
            return
        if settled.cancelled():
            target.cancel()
            return
        error = settled.exception()
        if error is not None:
            _fail(target, error)
        else:
            target.set_result(settled.result())

    inner.add_done_callback(copy_state)


def then(
    future: asyncio.Future,
    on_fulfilled: Callable[[Any], Any],
    on_rejected: Callable[[BaseException], Any],
) -> asyncio.Future:
    """
    Chain two callbacks onto ``future``.

    Args:
        future: The source future.
        on_fulfilled: Called with the result when ``future`` succeeds.
        on_rejected: Called with the exception when ``future`` fails.

    Returns:
        A new future settled with whatever the callback that ran returned
        (awaited if awaitable), or failed with whatever it raised.
    """
    result = future.get_loop().create_future()

    def settle(source: asyncio.Future) -> None:
        if source.cancelled():
            result.cancel()
            return
        error = source.exception()
        try:
            if error is None:
                outcome = on_fulfilled(source.result())
            else:
                outcome = on_rejected(error)
        except (KeyboardInterrupt, SystemExit):
            raise
        except BaseException as e:
            _fail(result, e)
            return
        _adopt(result, outcome)

    future.add_done_callback(settle)
    return result

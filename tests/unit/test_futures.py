"""Unit tests for the asyncio future adapter."""

import asyncio

import pytest

from rill.observable.core import futures
from tests.utils import run, settle


def _identity(value):
    return value


def _reraise(error):
    raise error


@pytest.mark.unit
def test_resolved_and_rejected_are_already_settled():
    """resolved() and rejected() return futures that are already done"""

    async def scenario():
        loop = asyncio.get_running_loop()
        ok = futures.resolved(1, loop)
        failure = ValueError("no")
        bad = futures.rejected(failure, loop)
        return ok.result(), bad.exception() is failure

    assert run(scenario()) == (1, True)


@pytest.mark.unit
def test_to_future_passes_futures_through_and_wraps_the_rest():
    """Futures are reused, awaitables scheduled, plain values resolved"""

    async def scenario():
        loop = asyncio.get_running_loop()
        existing = loop.create_future()
        same = futures.to_future(existing, loop) is existing

        task = futures.to_future(asyncio.sleep(0, result="slept"), loop)
        plain = futures.to_future([1, 2], loop)
        return same, await task, plain.done(), plain.result()

    assert run(scenario()) == (True, "slept", True, [1, 2])


@pytest.mark.unit
def test_then_runs_success_callback():
    """then() maps a successful result through on_fulfilled"""

    async def scenario():
        loop = asyncio.get_running_loop()
        chained = futures.then(futures.resolved(2, loop), lambda v: v + 1, _reraise)
        return await chained

    assert run(scenario()) == 3


@pytest.mark.unit
def test_then_runs_failure_callback():
    """then() hands a failure to on_rejected and resolves with its result"""

    async def scenario():
        loop = asyncio.get_running_loop()
        source = futures.rejected(KeyError("k"), loop)
        chained = futures.then(source, _identity, lambda e: f"handled {e!r}")
        return await chained

    assert run(scenario()) == "handled KeyError('k')"


@pytest.mark.unit
def test_then_captures_callback_errors():
    """A callback that raises fails the chained future with that error"""

    def explode(value):
        raise ArithmeticError("boom")

    async def scenario():
        loop = asyncio.get_running_loop()
        chained = futures.then(futures.resolved(0, loop), explode, _reraise)
        await settle()
        return chained.exception()

    error = run(scenario())
    assert isinstance(error, ArithmeticError)


@pytest.mark.unit
def test_then_follows_awaitable_outcomes():
    """An awaitable returned by a callback is awaited before the chain settles"""

    async def later(value):
        await asyncio.sleep(0.01)
        return value * 2

    async def scenario():
        loop = asyncio.get_running_loop()
        return await futures.then(futures.resolved(21, loop), later, _reraise)

    assert run(scenario()) == 42


@pytest.mark.unit
def test_then_never_calls_callbacks_synchronously():
    """Callbacks run on a later loop iteration, even for settled futures"""

    async def scenario():
        loop = asyncio.get_running_loop()
        calls = []
        futures.then(futures.resolved(1, loop), calls.append, _reraise)
        before = list(calls)
        await settle()
        return before, calls

    assert run(scenario()) == ([], [1])


@pytest.mark.unit
def test_then_propagates_cancellation():
    """A cancelled source cancels the chained future without calling callbacks"""

    async def scenario():
        loop = asyncio.get_running_loop()
        source = loop.create_future()
        calls = []
        chained = futures.then(source, calls.append, calls.append)
        source.cancel()
        await settle()
        return chained.cancelled(), calls

    assert run(scenario()) == (True, [])


@pytest.mark.unit
def test_never_stays_pending():
    """never() returns a future that does not settle on its own"""

    async def scenario():
        pending = futures.never()
        await asyncio.sleep(0.02)
        return pending.done()

    assert run(scenario()) is False


@pytest.mark.unit
def test_rejected_wraps_stop_iteration_and_cancels_on_cancelled_error():
    """rejected() stores failures futures cannot hold in their closest form"""

    async def scenario():
        loop = asyncio.get_running_loop()
        stopped = futures.rejected(StopIteration(), loop)
        cancelled = futures.rejected(asyncio.CancelledError(), loop)
        return stopped.exception(), cancelled.cancelled()

    error, cancelled = run(scenario())
    assert isinstance(error, RuntimeError)
    assert cancelled is True

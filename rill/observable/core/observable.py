"""
Rill Observable - Repeatable Promise-Style Event Source
=======================================================

A future settles once. An ``Observable`` can be emitted into again and again,
and every emission runs through an asynchronous transform chain built out of
ordinary callbacks. Callbacks may return a value, return an awaitable, or
raise, so mapping, filtering, error handling and backpressure all read like
future chaining.

Nodes form a tree. ``subscribe`` creates a child that owns its own
subscribers; ``emit`` hands a value to each child, the child runs its
transform, and once that settles the child emits the outcome to its own
children.

Example:
    ```python
    import asyncio
    from rill import Observable, rejected

    async def main():
        loop = asyncio.get_running_loop()
        clicks = Observable()
        doubled = clicks.subscribe(lambda x: x * 2)
        doubled.subscribe(print, lambda error: print("failed:", error))

        clicks.emit(1)                                   # prints 2
        clicks.emit(asyncio.sleep(0.1, result=5))        # prints 10 later
        clicks.emit(rejected(ValueError("boom"), loop))  # prints failed: boom

        await asyncio.sleep(0.2)

    asyncio.run(main())
    ```

Backpressure and filtering:
    A transform that returns a future which never settles (see
    ``rill.never``) stops that value on its branch for good. Siblings are not
    affected. Nothing ever times such a future out.
"""

import asyncio
import logging
import threading
import weakref
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from rill.observable.core import futures
from rill.observable.core.abstract.operations import OperatorMixin
from rill.observable.core.errors import UnboundLoopError
from rill.observable.types.common_types import (
    Emittable,
    ErrorFunction,
    Executor,
    TransformFunction,
)
from rill.observable.types.protocols.observable_protocol import Emitter
from rill.observable.types.transform import Transform

T = TypeVar("T")


def _drain(future: asyncio.Future) -> None:
    # Nothing downstream; mark the failure as retrieved so asyncio stays quiet.
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logging.debug(f"Dropped failure at leaf observable: {error!r}")


class Observable(OperatorMixin):
    """
    A repeatedly emittable, subscribable event source.

    Attributes:
        subscribers: Child nodes in subscription order. Owned by this node.
        publisher: The node this one was subscribed from, or ``None`` for a
            root. Held weakly.
    """

    def __init__(
        self,
        executor: Optional[Executor] = None,
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        """
        Create a root observable.

        Args:
            executor: Called right away with this node's bound ``emit`` so it
                can be registered with an outside source (a timer, a socket
                callback, a GUI event).
            loop: Event loop to create futures on. When omitted the running
                loop at emit time is used. Required for ``emit_threadsafe``.
        """
        self.subscribers: List["Observable"] = []
        self._publisher_ref: Optional[weakref.ReferenceType] = None
        self._on_emit = Transform.on_value()
        self._on_error = Transform.on_failure()
        self._next_err: Optional[Callable[[BaseException], None]] = None
        self._loop = loop
        self._lock = threading.RLock()

        if executor is not None:
            executor(self.emit)

    @property
    def publisher(self) -> Optional["Observable"]:
        """The publisher observable of this node."""
        if self._publisher_ref is None:
            return None
        return self._publisher_ref()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """The bound loop, or the running loop if none is bound."""
        if self._loop is not None:
            return self._loop
        return asyncio.get_running_loop()

    def emit(self, value: Emittable = None) -> None:
        """
        Emit a value to every subscriber.

        To emit an error, emit a failed future, for example
        ``emit(rejected(ValueError("reason"), loop))``, so that it reaches
        ``on_error`` callbacks. A plain exception instance is just a value.

        Args:
            value: A plain value, an awaitable, or a future (pending, resolved
                or failed).
        """
        future = futures.to_future(value, self.loop)

        # Length is fixed up front; the list itself is read live.
        i, length = 0, len(self.subscribers)
        if not length:
            future.add_done_callback(_drain)
            return

        while i < length and i < len(self.subscribers):
            subscriber = self.subscribers[i]
            i += 1
            futures.then(
                future, subscriber._on_emit, subscriber._on_error
            ).add_done_callback(subscriber._forward)

    def emit_threadsafe(self, value: Emittable = None) -> None:
        """
        Emit from another thread.

        Raises:
            UnboundLoopError: If the node was created without a ``loop``.
        """
        if self._loop is None:
            raise UnboundLoopError(
                "emit_threadsafe() needs an observable created with loop=..."
            )
        self._loop.call_soon_threadsafe(self.emit, value)

    def _forward(self, settled: asyncio.Future) -> None:
        """Second stage: pass what this node's transform produced onward."""
        if settled.cancelled():
            logging.debug(f"Transform cancelled; value stopped at {self!r}")
            return
        error = settled.exception()
        if error is None:
            self.emit(settled.result())
        else:
            self._next_err(error)

    def subscribe(
        self,
        on_emit: Optional[TransformFunction[T, Any]] = None,
        on_error: Optional[ErrorFunction] = None,
    ) -> "Observable":
        """
        Create a child observable, like ``then`` on a future.

        Args:
            on_emit: Called with each value. Its return value (or what its
                awaitable resolves to) is emitted to the child's subscribers.
                Raising sends the error down instead. Defaults to identity.
            on_error: Called with each failure. Its return value is emitted
                as a normal value, so it can recover. Defaults to passing
                the failure on.

        Returns:
            The new child observable.
        """
        subscriber = Observable(loop=self._loop)
        subscriber._on_emit = Transform.on_value(on_emit)
        subscriber._on_error = Transform.on_failure(on_error)

        def next_err(reason: BaseException) -> None:
            subscriber.emit(futures.rejected(reason, subscriber.loop))

        subscriber._next_err = next_err
        subscriber._publisher_ref = weakref.ref(self)

        with self._lock:
            self.subscribers.append(subscriber)

        return subscriber

    def unsubscribe(self) -> None:
        """
        Detach this node from its publisher.

        Values already dispatched to this node still arrive. The node keeps
        its own subscribers and can still be emitted into directly.
        """
        publisher = self.publisher
        if publisher is None:
            return
        with publisher._lock:
            for i, subscriber in enumerate(publisher.subscribers):
                if subscriber is self:
                    del publisher.subscribers[i]
                    break

    @staticmethod
    def merge(
        iterable: Iterable[Emitter],
        *,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> "Observable":
        """
        Merge multiple observables into one.

        The iterable is consumed once, right away. Observables added to it
        afterwards are not picked up.

        Example:
            ```python
            src = Observable()
            a = src.subscribe(lambda v: v + 1)
            b = src.subscribe(lambda v: asyncio.sleep(0.01, result=v + 2))

            out = Observable.merge([a, b])
            out.subscribe(print)
            ```

        Args:
            iterable: Any finite iterable of observables.
            loop: Optional event loop to bind the merged observable to.

        Returns:
            A new root observable that emits every value and forwards every
            failure emitted by any source.

        Raises:
            TypeError: If an item is not an observable. Nothing is subscribed
                in that case.
        """
        sources = list(iterable)
        for source in sources:
            if not isinstance(source, Emitter):
                raise TypeError(
                    f"merge() expects observables, got {type(source).__name__}"
                )

        def executor(emit: Callable[..., None]) -> None:
            def on_error(error: BaseException) -> None:
                # Runs as a done-callback, so a loop is always running here.
                emit(futures.rejected(error, loop or asyncio.get_running_loop()))

            for source in sources:
                source.subscribe(emit, on_error)

        return Observable(executor, loop=loop)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(subscribers={len(self.subscribers)})"

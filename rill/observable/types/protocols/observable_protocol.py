"""
Rill Emitter Protocol - Structural Interface for Observables
============================================================

Protocols are structural types that define interfaces without requiring
inheritance. ``Emitter`` describes what ``Observable.merge`` needs from its
sources and what any node offers to the code wired into it: something that
can be emitted into and subscribed to.
"""

from typing import Any, List, Optional, Protocol, runtime_checkable

from ..common_types import Emittable, ErrorFunction, T, TransformFunction


@runtime_checkable
class Emitter(Protocol[T]):
    """
    Protocol defining the core emit/subscribe interface.

    Any object with ``emit``, ``subscribe`` and ``unsubscribe`` satisfies it,
    which lets third-party sources take part in ``merge``.
    """

    subscribers: List[Any]

    def emit(self, value: Emittable = None) -> None:
        """Push a value, an awaitable or a failed future to every subscriber."""
        ...

    def subscribe(
        self,
        on_emit: Optional[TransformFunction[T, Any]] = None,
        on_error: Optional[ErrorFunction] = None,
    ) -> "Emitter[Any]":
        """Create and return a child node fed through the given transforms."""
        ...

    def unsubscribe(self) -> None:
        """Detach from the publisher, if any."""
        ...

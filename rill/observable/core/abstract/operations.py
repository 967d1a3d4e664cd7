"""
Rill Operations - Natural Language Operations and Operator Mixins
=================================================================

Everything here is sugar over ``subscribe``. The methods give the common
transform shapes a readable name:

Natural Language Methods:
- `then(func)` - Transform values (equivalent to `>>` operator)
- `requiring(predicate)` - Drop values that fail a check (equivalent to `&` operator)
- `recover(handler)` - Turn failures back into values
- `tap(func)` - Run a side effect and pass the value on unchanged
- `alongside(*others)` - Merge with other observables (equivalent to `+` operator)

Operator Mixins:
- `OperationsMixin` - The natural language methods
- `OperatorMixin` - Adds operator overloading (>>, &, +)
"""

import inspect
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from rill.observable.core import futures
from rill.observable.types.common_types import PredicateFunction

if TYPE_CHECKING:
    from rill.observable.core.observable import Observable

T = TypeVar("T")
U = TypeVar("U")


class OperationsMixin:
    """
    Mixin providing natural language reactive operations.

    Requires the host class to provide ``subscribe`` and ``merge``.
    """

    def then(self, func: Callable[[T], U]) -> "Observable":
        """
        Transform every value with ``func``.

        ``func`` may return a plain value or an awaitable. Failures pass by
        untouched.
        """
        return self.subscribe(func)

    def requiring(self, predicate: PredicateFunction) -> "Observable":
        """
        Keep only values for which ``predicate`` is truthy.

        Rejected values are held on a future that never settles, so nothing
        further down this branch ever sees them. ``predicate`` may be async.
        """

        def gate(value):
            verdict = predicate(value)
            if inspect.isawaitable(verdict):
                return _await_gate(value, verdict)
            return value if verdict else futures.never()

        return self.subscribe(gate)

    def recover(self, handler: Callable[[BaseException], Any]) -> "Observable":
        """
        Handle failures with ``handler``; its result is emitted as a value.

        Values pass by untouched.
        """
        return self.subscribe(None, handler)

    def tap(self, func: Callable[[T], Any]) -> "Observable":
        """Call ``func`` for each value, then pass the original value on."""

        def side_effect(value):
            outcome = func(value)
            if inspect.isawaitable(outcome):
                return _await_then_return(outcome, value)
            return value

        return self.subscribe(side_effect)

    def alongside(self, *others: "Observable") -> "Observable":
        """Merge this observable with ``others`` into a new observable."""
        return type(self).merge([self, *others], loop=self._loop)


async def _await_gate(value, verdict):
    if await verdict:
        return value
    return await futures.never()


async def _await_then_return(outcome, value):
    await outcome
    return value


class OperatorMixin(OperationsMixin):
    """
    Mixin class providing operator overloads for observable classes.

    - `obs >> func` - same as `obs.then(func)`
    - `obs & predicate` - same as `obs.requiring(predicate)`
    - `obs + other` - same as `obs.alongside(other)`
    """

    def __rshift__(self, func: Callable) -> "Observable":
        return self.then(func)

    def __and__(self, predicate: Callable) -> "Observable":
        return self.requiring(predicate)

    def __add__(self, other: "Observable") -> "Observable":
        return self.alongside(other)

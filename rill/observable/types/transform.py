"""
Rill Transform - Optional Callbacks With a Defined Default
==========================================================

Subscribers carry two callbacks, one for values and one for failures. Either
may be omitted. Instead of checking for ``None`` at every dispatch, each
callback is wrapped in a ``Transform`` whose missing function falls back to
a pass-through:

- the success side passes the value through unchanged
- the failure side re-raises the failure, so it keeps propagating

A missing error handler must never swallow an error.
"""

from typing import Any, Callable, Optional


def _identity(value: Any) -> Any:
    return value


def _reraise(error: BaseException) -> Any:
    raise error


class Transform:
    """A callback that may be absent, with a pass-through default."""

    __slots__ = ("func", "_fallback")

    def __init__(
        self, func: Optional[Callable[[Any], Any]], fallback: Callable[[Any], Any]
    ) -> None:
        self.func = func
        self._fallback = fallback

    @classmethod
    def on_value(cls, func: Optional[Callable[[Any], Any]] = None) -> "Transform":
        """Wrap a success callback; absent means identity."""
        return cls(func, _identity)

    @classmethod
    def on_failure(cls, func: Optional[Callable[[Any], Any]] = None) -> "Transform":
        """Wrap an error callback; absent means re-raise."""
        return cls(func, _reraise)

    @property
    def is_pass_through(self) -> bool:
        """True when no callback was given and the default applies."""
        return self.func is None

    def __call__(self, arg: Any) -> Any:
        if self.func is None:
            return self._fallback(arg)
        return self.func(arg)

    def __repr__(self) -> str:
        if self.func is None:
            return f"Transform(<{self._fallback.__name__.lstrip('_')}>)"
        return f"Transform({self.func!r})"

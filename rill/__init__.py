"""
Rill - Repeatable Promise-Style Observables
===========================================

A future settles once. A Rill ``Observable`` can be emitted into over and
over, and every emission flows through a chain of transforms written as
ordinary sync or async callbacks. Mapping, filtering, error propagation and
backpressure all read like future chaining.
"""

from .observable import (
    Emitter,
    Observable,
    RillError,
    Transform,
    UnboundLoopError,
    never,
    rejected,
    resolved,
)

merge = Observable.merge

__all__ = [
    # Core
    "Observable",
    "merge",
    # Futures
    "never",
    "rejected",
    "resolved",
    # Types
    "Emitter",
    "Transform",
    # Exceptions
    "RillError",
    "UnboundLoopError",
]

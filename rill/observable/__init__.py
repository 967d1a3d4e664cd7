"""
Rill Observable Package
=======================

Repeatable, promise-style observables and the types they are built from.
"""

from rill.observable.core import (
    Observable,
    RillError,
    UnboundLoopError,
    never,
    rejected,
    resolved,
)
from rill.observable.types import Emitter, Transform

__all__ = [
    "Emitter",
    "Observable",
    "RillError",
    "Transform",
    "UnboundLoopError",
    "never",
    "rejected",
    "resolved",
]

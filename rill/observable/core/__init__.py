"""
Rill Observable Core Module
===========================

This module contains the core Observable implementation, the future adapter
it is built on and the package's error types.
"""

from rill.observable.core.errors import RillError, UnboundLoopError
from rill.observable.core.futures import never, rejected, resolved
from rill.observable.core.observable import Observable

__all__ = [
    "Observable",
    "RillError",
    "UnboundLoopError",
    "never",
    "rejected",
    "resolved",
]

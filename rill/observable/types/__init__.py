"""
Rill Observable Types
=====================

Shared type aliases, the optional-transform wrapper and protocols.
"""

from .common_types import (
    EmitFunction,
    Emittable,
    ErrorFunction,
    Executor,
    PredicateFunction,
    TransformFunction,
)
from .protocols import Emitter
from .transform import Transform

__all__ = [
    "Emittable",
    "EmitFunction",
    "Emitter",
    "ErrorFunction",
    "Executor",
    "PredicateFunction",
    "Transform",
    "TransformFunction",
]

"""
Rill Common Types - Shared Type Definitions
===========================================

This module contains shared type definitions used across the Rill protocol system.
It helps avoid circular imports and provides a single source of truth for common types.
"""

from typing import Any, Awaitable, Callable, TypeVar, Union

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")
U = TypeVar("U")

# ============================================================================
# EMISSION TYPES
# ============================================================================

# Anything that can be emitted: a plain value, a pending awaitable, or a
# future that already failed.
Emittable = Union[Awaitable[Any], Any]

EmitFunction = Callable[..., None]
Executor = Callable[[EmitFunction], Any]

# ============================================================================
# TRANSFORM FUNCTION TYPES
# ============================================================================

# A transform returns a value, returns an awaitable, or raises.
TransformFunction = Callable[[T], Union[U, Awaitable[U]]]
ErrorFunction = Callable[[BaseException], Any]
PredicateFunction = Callable[[T], Union[bool, Awaitable[bool]]]

"""
Test utilities for Rill.

This package contains shared testing utilities to help write
better, more maintainable tests.
"""

from .async_utils import error_recorder, recorder, run, settle

__all__ = [
    "error_recorder",
    "recorder",
    "run",
    "settle",
]

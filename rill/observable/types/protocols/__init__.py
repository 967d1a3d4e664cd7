"""Structural protocols for Rill observables."""

from .observable_protocol import Emitter

__all__ = ["Emitter"]

"""
Rill Errors
===========

Exception types raised by Rill itself. Failures raised by user transforms are
never wrapped; they travel down the tree as they are.
"""


class RillError(Exception):
    """Base class for errors raised by Rill."""

    pass


class UnboundLoopError(RillError, RuntimeError):
    """Thread-safe emission requested on a node with no bound event loop."""

    pass

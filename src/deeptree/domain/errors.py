from __future__ import annotations

"""
Domain Exceptions.

Filesystem failures are deliberately absent: they surface as plain
OSError from the generator and collector.
"""


class DeeptreeError(Exception):
    """Base class for errors raised by deeptree itself."""


class InvalidDepthError(DeeptreeError, ValueError):
    """Raised when a tree depth is not an integer >= 1."""

    def __init__(self, value: object):
        self.value = value
        super().__init__("Depth must be a positive integer")

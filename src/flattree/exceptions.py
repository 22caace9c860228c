"""Exceptions raised by the flat tree index functions."""
from __future__ import annotations


class FlatTreeError(Exception):
    """Base class for all flattree errors."""


class InvalidIndexError(FlatTreeError, ValueError):
    """Raised when an index, offset or depth argument is outside the 64-bit domain."""


class IndexOverflowError(FlatTreeError, OverflowError):
    """Raised when a computed index does not fit in 64 unsigned bits. Results are never wrapped."""


class NotALeafBoundaryError(FlatTreeError, ValueError):
    """Raised when a prefix length is odd and so does not end on a leaf."""

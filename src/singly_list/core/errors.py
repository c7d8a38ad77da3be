"""Exception hierarchy for the singly linked list.

Absence of an element is reported through ``None`` return values; these
exceptions only signal misuse of the API.
"""

from __future__ import annotations


class SinglyListError(Exception):
    """Base exception for all singly linked list errors."""
    pass


class IndexOutOfRangeError(SinglyListError, IndexError):
    """Raised by insert/delete on an out-of-range index when strict_bounds is set."""
    pass


class BorrowError(SinglyListError, RuntimeError):
    """Raised when the list is accessed while a mutable traversal is active."""
    pass


class ConcurrentModificationError(SinglyListError, RuntimeError):
    """Raised when a read-only traversal observes a structural mutation."""
    pass

"""Singly linked list with owning, read-only and mutable traversal."""

from .core.config import SinglyListConfig
from .core.errors import (
    SinglyListError,
    IndexOutOfRangeError,
    BorrowError,
    ConcurrentModificationError,
)
from .core.sequence import SinglyList
from .components.iterators import IntoIter, Iter, IterMut, ElementRef
from .components.node import Node
from .components.render import render
from .interfaces.sequence import LinkedSequence

__all__ = [
    "SinglyListConfig",
    "SinglyListError",
    "IndexOutOfRangeError",
    "BorrowError",
    "ConcurrentModificationError",
    "SinglyList",
    "IntoIter",
    "Iter",
    "IterMut",
    "ElementRef",
    "Node",
    "render",
    "LinkedSequence",
]

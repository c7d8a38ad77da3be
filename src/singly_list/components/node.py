"""Node container for the singly linked list."""

from __future__ import annotations

from typing import Generic

from ..core.types import T


class Node(Generic[T]):
    """A single element plus the link to its successor.

    A node is referenced by exactly one predecessor: another node, or the
    list handle itself when it is the head.
    """

    __slots__ = ("element", "next")

    def __init__(self, element: T, next: Node[T] | None = None) -> None:
        self.element: T = element
        self.next: Node[T] | None = next

    def __repr__(self) -> str:
        return f"Node(element={self.element!r}, next={getattr(self.next, 'element', None)!r})"

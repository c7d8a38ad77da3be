"""Traversal views over a SinglyList.

Three access modes, each walking head to tail exactly once:

- IntoIter: owning, pops the head on every step
- Iter: read-only, any number may be live at once
- IterMut: exclusive, yields an ElementRef per node
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic

from ..core.errors import BorrowError, ConcurrentModificationError
from ..core.types import T

if TYPE_CHECKING:
    from ..core.sequence import SinglyList
    from .node import Node


class IntoIter(Generic[T]):
    """Consumes the list by popping its head until empty."""

    def __init__(self, seq: SinglyList[T]) -> None:
        self._seq = seq

    def __iter__(self) -> IntoIter[T]:
        return self

    def __next__(self) -> T:
        # Elements may themselves be None, so test emptiness rather than pop()'s result
        if self._seq.is_empty():
            raise StopIteration
        return self._seq.pop()  # type: ignore[return-value]


class Iter(Generic[T]):
    """Read-only traversal.

    Raises ConcurrentModificationError if the list is structurally mutated
    while the traversal is live.
    """

    def __init__(self, seq: SinglyList[T]) -> None:
        self._seq = seq
        self._next: Node[T] | None = seq._head
        self._version = seq._version

    def __iter__(self) -> Iter[T]:
        return self

    def __next__(self) -> T:
        node = self._next
        if node is None:
            raise StopIteration
        if self._seq._mut_borrowed:
            raise BorrowError("cannot iterate while a mutable traversal is active")
        if self._seq._version != self._version:
            self._next = None
            raise ConcurrentModificationError("list mutated during iteration")
        self._next = node.next
        return node.element


class IterMut(Generic[T]):
    """Exclusive traversal yielding writable references to each element.

    Usable as a context manager; the borrow is released on exhaustion,
    close(), or garbage collection.
    """

    def __init__(self, seq: SinglyList[T]) -> None:
        self._active = False
        self._seq = seq
        seq._acquire_mut_borrow()
        self._active = True
        self._next: Node[T] | None = seq._head

    @property
    def active(self) -> bool:
        return self._active

    def __iter__(self) -> IterMut[T]:
        return self

    def __next__(self) -> ElementRef[T]:
        node = self._next
        if node is None:
            self.close()
            raise StopIteration
        self._next = node.next
        return ElementRef(node, self)

    def close(self) -> None:
        if self._active:
            self._active = False
            self._next = None
            self._seq._release_mut_borrow()

    def __enter__(self) -> IterMut[T]:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        self.close()


class ElementRef(Generic[T]):
    """Writable handle on one node's element, valid while its IterMut is active."""

    __slots__ = ("_node", "_owner")

    def __init__(self, node: Node[T], owner: IterMut[T]) -> None:
        self._node = node
        self._owner = owner

    @property
    def value(self) -> T:
        return self._node.element

    @value.setter
    def value(self, element: T) -> None:
        if not self._owner.active:
            raise BorrowError("element reference outlived its mutable traversal")
        self._node.element = element

    def __repr__(self) -> str:
        return f"ElementRef({self._node.element!r})"

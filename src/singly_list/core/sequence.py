"""Singly linked list - main public API.

Owns the node chain, the maintained length, and the access discipline
shared with the traversal views.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic

from .config import SinglyListConfig
from .errors import BorrowError, IndexOutOfRangeError
from .types import Index, T
from ..components.iterators import IntoIter, Iter, IterMut
from ..components.node import Node
from ..components.render import render

logger = logging.getLogger(__name__)


class SinglyList(Generic[T]):
    """Singly linked sequence with O(1) head operations.

    Args:
        config: Optional behaviour configuration

    Public API:
        - push(element): Prepend in O(1)
        - pop(): Remove and return the head element, or None
        - insert(index, element): Splice in at a position, O(index)
        - delete(index): Remove and return the element at a position, or None
        - iter() / iter_mut() / into_iter(): Read-only, mutable and owning traversal

    Invariants:
        - The chain is acyclic and every node has exactly one predecessor
        - length equals the number of nodes reachable from head
        - No mutation while a mutable traversal holds the borrow
    """

    def __init__(self, config: SinglyListConfig | None = None) -> None:
        self.config = config or SinglyListConfig()
        self._head: Node[T] | None = None
        self._length: int = 0
        # Bumped by every structural mutation; read-only views compare against it
        self._version: int = 0
        self._mut_borrowed: bool = False

    @classmethod
    def from_iterable(
        cls, iterable: Iterable[T], config: SinglyListConfig | None = None
    ) -> SinglyList[T]:
        """Build a list whose traversal order matches the iterable's order."""
        seq: SinglyList[T] = cls(config)
        tail: Node[T] | None = None
        for element in iterable:
            node = Node(element)
            if tail is None:
                seq._head = node
            else:
                tail.next = node
            tail = node
            seq._length += 1
        return seq

    @property
    def length(self) -> int:
        self._check_unborrowed("read length")
        return self._length

    def __len__(self) -> int:
        self._check_unborrowed("read length")
        return self._length

    def is_empty(self) -> bool:
        self._check_unborrowed("read length")
        return self._head is None

    def push(self, element: T) -> None:
        """Prepend element; it becomes the new head."""
        self._check_unborrowed("push")
        self._head = Node(element, self._head)
        self._length += 1
        self._version += 1

    def pop(self) -> T | None:
        """Detach the head node and return its element, or None if empty."""
        self._check_unborrowed("pop")
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        self._length -= 1
        self._version += 1
        return node.element

    def insert(self, index: Index, element: T) -> None:
        """Insert element so that it ends up at position index.

        Index 0 behaves as push. If there is no node at index - 1 the call is
        ignored (or raises IndexOutOfRangeError under strict_bounds).
        """
        self._check_unborrowed("insert")
        if index == 0:
            self.push(element)
            return

        prior = self._node_at(index - 1) if index > 0 else None
        if prior is None:
            self._out_of_range("insert", index)
            return

        prior.next = Node(element, prior.next)
        self._length += 1
        self._version += 1

    def delete(self, index: Index) -> T | None:
        """Remove the node at position index and return its element.

        Index 0 behaves as pop. Returns None and leaves the list untouched when
        no node exists at that position (or raises under strict_bounds).
        """
        self._check_unborrowed("delete")
        if index == 0:
            return self.pop()

        prior = self._node_at(index - 1) if index > 0 else None
        if prior is None or prior.next is None:
            self._out_of_range("delete", index)
            return None

        target = prior.next
        prior.next = target.next
        target.next = None
        self._length -= 1
        self._version += 1
        return target.element

    def clear(self) -> None:
        """Release every node, one link at a time."""
        self._check_unborrowed("clear")
        released = self._release_chain()
        self._version += 1
        logger.debug(f"Cleared {released} nodes")

    def iter(self) -> Iter[T]:
        """Read-only traversal from head to tail."""
        self._check_unborrowed("iterate")
        return Iter(self)

    def __iter__(self) -> Iter[T]:
        return self.iter()

    def iter_mut(self) -> IterMut[T]:
        """Mutable traversal yielding an ElementRef per node.

        Holds the exclusive borrow until exhausted, closed, or collected.
        """
        return IterMut(self)

    def into_iter(self) -> IntoIter[T]:
        """Owning traversal; pops every element, leaving the list empty."""
        self._check_unborrowed("consume")
        return IntoIter(self)

    def __repr__(self) -> str:
        return render(self)

    def __del__(self) -> None:
        # Unlink iteratively so long chains are not released recursively
        self._release_chain()

    def _node_at(self, position: int) -> Node[T] | None:
        """Walk from head; None if the chain ends before position."""
        node = self._head
        for _ in range(position):
            if node is None:
                break
            node = node.next
        return node

    def _release_chain(self) -> int:
        node = getattr(self, "_head", None)
        self._head = None
        self._length = 0
        released = 0
        while node is not None:
            node.next, node = None, node.next
            released += 1
        return released

    def _out_of_range(self, op: str, index: Index) -> None:
        if self.config.strict_bounds:
            raise IndexOutOfRangeError(
                f"{op} index {index} out of range for length {self._length}"
            )
        if self.config.log_noops:
            logger.debug(f"Ignored {op} at index {index} (length {self._length})")

    def _check_unborrowed(self, op: str) -> None:
        if self._mut_borrowed:
            raise BorrowError(f"cannot {op} while a mutable traversal is active")

    def _acquire_mut_borrow(self) -> None:
        self._check_unborrowed("start a mutable traversal")
        self._mut_borrowed = True

    def _release_mut_borrow(self) -> None:
        self._mut_borrowed = False

"""Protocol definition for a linked sequence."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ..core.types import T

if TYPE_CHECKING:
    from ..components.iterators import ElementRef


@runtime_checkable
class LinkedSequence(Protocol[T]):
    """Public API of a singly linked sequence."""

    def push(self, element: T) -> None:
        """Prepend element in O(1)."""
        ...

    def pop(self) -> T | None:
        """Remove and return the head element; None when empty."""
        ...

    def insert(self, index: int, element: T) -> None:
        """Splice element in at index; ignored when index - 1 does not exist."""
        ...

    def delete(self, index: int) -> T | None:
        """Remove and return the element at index; None when absent."""
        ...

    def iter(self) -> Iterator[T]:
        """Read-only traversal from head to tail."""
        ...

    def iter_mut(self) -> Iterator[ElementRef[T]]:
        """Exclusive traversal yielding writable element references."""
        ...

    def into_iter(self) -> Iterator[T]:
        """Owning traversal that empties the sequence."""
        ...

    def __len__(self) -> int:
        ...

"""Textual rendering of a list's contents."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..interfaces.sequence import LinkedSequence


def render(seq: LinkedSequence) -> str:
    """Return ``[e0, e1, ..., en]`` using each element's repr.

    Matches ``repr(list(seq))``, so a list can be compared against a
    reference Python list by string.
    """
    parts: list[str] = []
    for element in seq.iter():
        parts.append(repr(element))
    return "[" + ", ".join(parts) + "]"

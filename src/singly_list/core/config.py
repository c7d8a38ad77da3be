"""Configuration for the singly linked list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SinglyListConfig:
    """Tunable behaviour of a SinglyList.

    Attributes:
        strict_bounds: Raise IndexOutOfRangeError on out-of-range insert/delete
            instead of ignoring the call
        log_noops: Emit a DEBUG record whenever an out-of-range call is ignored
    """

    strict_bounds: bool = False
    log_noops: bool = True

"""Common type definitions for the singly linked list.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from typing import TypeVar

# Element type carried by nodes
T = TypeVar("T")

# Zero-based position counted from head
Index = int

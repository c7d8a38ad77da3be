"""Core sequence handle and shared definitions."""

from .sequence import SinglyList

__all__ = ["SinglyList"]

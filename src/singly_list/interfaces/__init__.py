"""Protocol interfaces."""

from .sequence import LinkedSequence

__all__ = ["LinkedSequence"]

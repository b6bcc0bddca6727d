"""Domain modules."""

from . import history

__all__ = ["history"]

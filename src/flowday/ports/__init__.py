"""Ports - interfaces/protocols for external dependencies."""

from .entry_repo import EntryRepository

__all__ = [
    "EntryRepository",
]

"""Adapters - I/O implementations of ports."""

from .json_store import CURRENT_VERSION, JsonEntryStore, read_snapshot

__all__ = [
    "CURRENT_VERSION",
    "JsonEntryStore",
    "read_snapshot",
]

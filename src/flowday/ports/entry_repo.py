"""Entry persistence interface."""

from typing import Protocol

from flowday.core.entry import Entry


class EntryRepository(Protocol):
    """Interface for loading and saving the journal snapshot."""

    def load(self) -> list[Entry]:
        """Load all entries, sorted by date. Returns [] when nothing is stored."""
        ...

    def save(self, entries: list[Entry]) -> None:
        """Persist the full ordered snapshot."""
        ...

    def recents(self) -> list[str]:
        """Recently used emojis, most recent first."""
        ...

    def save_recents(self, recents: list[str]) -> None:
        """Persist the recently used emojis."""
        ...

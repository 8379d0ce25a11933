"""Entry collection logic - ordering, upsert and merge. No I/O."""

from dataclasses import dataclass
from typing import Iterable, Iterator

from .entry import Entry

RECENTS_LIMIT = 24


def sort_by_date(entries: Iterable[Entry]) -> list[Entry]:
    """ISO dates sort lexicographically in calendar order."""
    return sorted(entries, key=lambda e: e.date)


def upsert(entries: Iterable[Entry], entry: Entry) -> list[Entry]:
    """
    Insert an entry or fully replace the one with the same date.

    Pure function - returns a new date-sorted list, the input is left
    as is. No field-level merge happens: callers carry forward whatever
    they want to keep before calling.
    """
    kept = [e for e in entries if e.date != entry.date]
    kept.append(entry)
    return sort_by_date(kept)


def merge_by_newer(local: Iterable[Entry], incoming: Iterable[Entry]) -> list[Entry]:
    """
    Last-write-wins merge of two snapshots.

    An incoming entry replaces the local one only when its updated_at
    is strictly newer.
    """
    by_date = {e.date: e for e in local}
    for entry in incoming:
        current = by_date.get(entry.date)
        if current is None or entry.updated_at > current.updated_at:
            by_date[entry.date] = entry
    return sort_by_date(by_date.values())


def push_recent(recents: list[str], emoji: str, limit: int = RECENTS_LIMIT) -> list[str]:
    """Move an emoji to the front of the recently-used list."""
    return [emoji, *(e for e in recents if e != emoji)][:limit]


@dataclass(frozen=True)
class EntryStore:
    """
    Ordered, immutable snapshot of a journal.

    At most one entry per date, ascending by date. Mutation returns a
    new store; whoever owns the store decides when to persist it.
    """

    entries: tuple[Entry, ...] = ()

    @classmethod
    def empty(cls) -> "EntryStore":
        return cls()

    @classmethod
    def from_entries(cls, entries: Iterable[Entry]) -> "EntryStore":
        """Hydrate from a persisted snapshot, resolving duplicate dates by updated_at."""
        by_date: dict[str, Entry] = {}
        for entry in entries:
            current = by_date.get(entry.date)
            if current is None or entry.updated_at >= current.updated_at:
                by_date[entry.date] = entry
        return cls(tuple(sort_by_date(by_date.values())))

    def upsert(self, entry: Entry) -> "EntryStore":
        return EntryStore(tuple(upsert(self.entries, entry)))

    def get(self, day: str) -> Entry | None:
        for entry in self.entries:
            if entry.date == day:
                return entry
        return None

    def dates(self) -> list[str]:
        return [e.date for e in self.entries]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

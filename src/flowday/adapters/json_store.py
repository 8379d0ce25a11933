"""JSON file storage adapter for the journal."""

import json
import logging
from pathlib import Path

from flowday.core.entry import Entry, entry_from_dict, entry_to_dict
from flowday.core.store import EntryStore

logger = logging.getLogger(__name__)

CURRENT_VERSION = 2
ENTRIES_FILE = "entries.json"
LEGACY_FILE = "flowday_entries_v1.json"
RECENTS_FILE = "recent_emojis.json"


def parse_entries(raw) -> list[Entry]:
    """
    Sanitize persisted records into a valid, date-sorted entry list.

    Records without a valid date are dropped, duplicate dates keep the
    newest record, and every remaining field is normalized.
    """
    if not isinstance(raw, list):
        return []
    entries = [e for e in (entry_from_dict(item) for item in raw) if e is not None]
    dropped = len(raw) - len(entries)
    if dropped:
        logger.warning(f"Dropped {dropped} stored entries without a valid date")
    return list(EntryStore.from_entries(entries))


def read_snapshot(path: Path | str) -> list[Entry]:
    """Read an exported snapshot: a bare JSON array or a versioned wrapper."""
    path = Path(path).expanduser()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to parse snapshot {path}: {e}")
        return []
    if isinstance(data, dict):
        data = data.get("entries")
    return parse_entries(data)


def dump_snapshot(entries: list[Entry]) -> str:
    """Serialize entries as the versioned wrapper."""
    return json.dumps(
        {"version": CURRENT_VERSION, "entries": [entry_to_dict(e) for e in entries]},
        ensure_ascii=False,
        indent=2,
    )


class JsonEntryStore:
    """
    File-based journal storage.

    Implements EntryRepository protocol. The whole journal lives in one
    versioned JSON document; recently used emojis sit next to it.
    Older unversioned files are migrated on first load.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def entries_path(self) -> Path:
        return self.data_dir / ENTRIES_FILE

    @property
    def legacy_path(self) -> Path:
        return self.data_dir / LEGACY_FILE

    @property
    def recents_path(self) -> Path:
        return self.data_dir / RECENTS_FILE

    def _read_json(self, path: Path):
        """Parsed JSON, or None if the file is corrupt."""
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring corrupt file {path}: {e}")
            return None

    def load(self) -> list[Entry]:
        """Load all entries, migrating older formats in place."""
        if self.entries_path.exists():
            data = self._read_json(self.entries_path)
            if isinstance(data, dict) and isinstance(data.get("entries"), list):
                entries = parse_entries(data["entries"])
                if data.get("version") != CURRENT_VERSION:
                    logger.info(f"Upgrading {self.entries_path} to version {CURRENT_VERSION}")
                    self.save(entries)
                return entries
            if isinstance(data, list):
                logger.info(f"Migrating unversioned entries in {self.entries_path}")
                entries = parse_entries(data)
                self.save(entries)
                return entries
            if data is not None:
                logger.warning(f"Unexpected content in {self.entries_path}, starting empty")
            return []

        if self.legacy_path.exists():
            data = self._read_json(self.legacy_path)
            if not isinstance(data, list):
                return []
            entries = parse_entries(data)
            self.save(entries)
            self.legacy_path.unlink()
            logger.info(f"Migrated {len(entries)} entries from {self.legacy_path}")
            return entries

        return []

    def save(self, entries: list[Entry]) -> None:
        """Write the full snapshot."""
        self.entries_path.write_text(dump_snapshot(entries), encoding="utf-8")
        logger.debug(f"Saved {len(entries)} entries to {self.entries_path}")

    def recents(self) -> list[str]:
        """Recently used emojis, most recent first."""
        if not self.recents_path.exists():
            return []
        data = self._read_json(self.recents_path)
        if not isinstance(data, list):
            return []
        return [e for e in data if isinstance(e, str) and e]

    def save_recents(self, recents: list[str]) -> None:
        self.recents_path.write_text(json.dumps(recents, ensure_ascii=False), encoding="utf-8")

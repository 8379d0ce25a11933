"""Shared workflow layer between the CLI and the journal store.

Each mutating workflow loads the snapshot, applies pure core functions,
saves the new snapshot and returns the resulting entry. This is the
boundary where dates are validated and the edit window is enforced.
"""

import logging
import time
from dataclasses import replace
from pathlib import Path

from .adapters.json_store import JsonEntryStore, dump_snapshot, read_snapshot
from .config import DATA_DIR, Config
from .core.emoji_stats import EmojiStats, emoji_stats
from .core.entry import Entry, is_iso_date, remove_emoji_at, set_hue, update_song
from .core.hues import month_hues, monthly_stops
from .core.store import EntryStore, merge_by_newer, push_recent
from .core.window import can_edit, month_key, today_iso, week_window, year_entries
from .ports.entry_repo import EntryRepository

logger = logging.getLogger(__name__)


class EntryLockedError(RuntimeError):
    """Raised when changing a day outside the editable window."""


def get_store(config: Config) -> JsonEntryStore:
    """Resolve data directory from config."""
    if config.data_dir:
        return JsonEntryStore(Path(config.data_dir).expanduser())
    return JsonEntryStore(DATA_DIR)


def now_ms() -> int:
    return int(time.time() * 1000)


def _check_date(day: str) -> None:
    if not is_iso_date(day):
        raise ValueError(f"Invalid date {day!r}, expected YYYY-MM-DD")


def _editable(store: EntryStore, day: str, today: str) -> Entry:
    """Current entry for an editable day, or a fresh one."""
    _check_date(day)
    if not can_edit(day, today):
        raise EntryLockedError(f"{day} is read-only; only today and yesterday can be edited")
    return store.get(day) or Entry(date=day)


def load_entries(config: Config) -> list[Entry]:
    return get_store(config).load()


def record_entry(
    config: Config,
    day: str | None = None,
    emojis: list[str] | None = None,
    hue: int | None = None,
    clear_hue: bool = False,
    title: str | None = None,
    artist: str | None = None,
    clear_song: bool = False,
    today: str | None = None,
    now: int | None = None,
) -> Entry:
    """
    Create or update the entry for a day.

    Fields left as None are carried forward from the stored entry.
    Passing an empty emoji list clears the day (and its hue).
    """
    today = today or today_iso()
    day = day or today
    stamp = now if now is not None else now_ms()

    repo: EntryRepository = get_store(config)
    store = EntryStore.from_entries(repo.load())
    original = _editable(store, day, today)

    entry = original
    if emojis is not None:
        entry = replace(entry, emojis=tuple(emojis), updated_at=stamp)
    if clear_hue:
        entry = set_hue(entry, None, stamp)
    elif hue is not None:
        entry = set_hue(entry, hue, stamp)
    if clear_song:
        entry = replace(entry, song=None, updated_at=stamp)
    elif title is not None or artist is not None:
        entry = update_song(entry, stamp, title=title, artist=artist)

    if entry == original:
        logger.debug(f"No changes for {day}")
        return entry

    repo.save(list(store.upsert(entry)))
    logger.info(f"Saved entry for {day}")

    if emojis:
        recents = repo.recents()
        for emoji in entry.emojis:
            recents = push_recent(recents, emoji, config.recents_limit)
        repo.save_recents(recents)

    return entry


def remove_emoji(
    config: Config,
    index: int,
    day: str | None = None,
    today: str | None = None,
    now: int | None = None,
) -> Entry:
    """Remove one emoji slot from a day."""
    today = today or today_iso()
    day = day or today
    stamp = now if now is not None else now_ms()

    repo: EntryRepository = get_store(config)
    store = EntryStore.from_entries(repo.load())
    original = _editable(store, day, today)

    entry = remove_emoji_at(original, index, stamp)
    if entry is not original:
        repo.save(list(store.upsert(entry)))
        logger.info(f"Removed emoji {index} from {day}")
    return entry


def import_snapshot(config: Config, path: Path | str) -> int:
    """
    Merge an exported snapshot into the journal, newest write wins.

    Returns the number of entries added or replaced.
    """
    repo: EntryRepository = get_store(config)
    local = repo.load()
    merged = merge_by_newer(local, read_snapshot(path))
    changed = len(set(merged) - set(local))
    if changed:
        repo.save(merged)
    logger.info(f"Imported {changed} entries from {path}")
    return changed


def export_snapshot(config: Config) -> str:
    return dump_snapshot(load_entries(config))


# ============== Summaries ==============


def week_summary(config: Config, offset: int = 0, today: str | None = None) -> list[Entry]:
    return week_window(load_entries(config), offset, today)


def month_summary(config: Config, offset: int = 0, today: str | None = None) -> dict:
    """Color families and gradient stops for a month."""
    entries = load_entries(config)
    ym = month_key(offset, today)
    families, empty = month_hues(entries, offset, today)
    return {
        "month": ym,
        "families": [round(h, 1) for h in families],
        "stops": monthly_stops(entries, ym) if not empty else [],
        "empty": empty,
    }


def stats_summary(config: Config, year_offset: int = 0, today: str | None = None) -> EmojiStats:
    return emoji_stats(year_entries(load_entries(config), year_offset, today))

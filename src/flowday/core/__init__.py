"""Functional core - pure business logic with no I/O."""

from .entry import Entry, Song, entry_from_dict, entry_to_dict
from .store import EntryStore, merge_by_newer, push_recent, upsert
from .window import add_days, can_edit, last7, month_key, today_iso, week_window
from .hues import DEFAULT_HUES, month_hues, monthly_stops, monthly_top3
from .emoji_stats import EmojiStats, emoji_stats

__all__ = [
    # Entry
    "Entry",
    "Song",
    "entry_from_dict",
    "entry_to_dict",
    # Store
    "EntryStore",
    "upsert",
    "merge_by_newer",
    "push_recent",
    # Window
    "today_iso",
    "add_days",
    "can_edit",
    "last7",
    "week_window",
    "month_key",
    # Hues
    "DEFAULT_HUES",
    "monthly_top3",
    "monthly_stops",
    "month_hues",
    # Emoji stats
    "EmojiStats",
    "emoji_stats",
]

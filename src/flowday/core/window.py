"""Pure calendar window logic - no I/O dependencies.

Dates are ISO `YYYY-MM-DD` strings on the host's local calendar. Every
function relative to "today" takes an optional `today` so callers can
pin the calendar.
"""

from datetime import date, timedelta
from typing import Iterable

from .entry import Entry

TIMELINE_SPAN = 6
TIMELINE_MIN_DAYS = 13
TIMELINE_MAX_DAYS = 14


def today_iso() -> str:
    """Current local calendar date."""
    return date.today().isoformat()


def add_days(day: str, delta: int) -> str:
    """Calendar date `delta` days away, across month, year and leap boundaries."""
    return (date.fromisoformat(day) + timedelta(days=delta)).isoformat()


def is_today(day: str, today: str | None = None) -> bool:
    return day == (today or today_iso())


def is_yesterday(day: str, today: str | None = None) -> bool:
    return day == add_days(today or today_iso(), -1)


def can_edit(day: str, today: str | None = None) -> bool:
    """Only today's and yesterday's entries accept changes."""
    today = today or today_iso()
    return is_today(day, today) or is_yesterday(day, today)


def last7(entries: Iterable[Entry]) -> list[Entry]:
    """
    The 7 most recently recorded entries, oldest first.

    Not calendar-anchored: gaps between recorded days are ignored.
    """
    latest = sorted(entries, key=lambda e: e.date, reverse=True)[:7]
    return list(reversed(latest))


def week_dates(offset: int, today: str | None = None) -> list[str]:
    """The Monday-to-Sunday dates of the week `offset` weeks back."""
    today = today or today_iso()
    base = date.fromisoformat(today) - timedelta(weeks=offset)
    monday = base - timedelta(days=base.weekday())
    return [(monday + timedelta(days=i)).isoformat() for i in range(7)]


def week_window(entries: Iterable[Entry], offset: int, today: str | None = None) -> list[Entry]:
    """
    Entries for the weekly timeline.

    The current week (offset 0) shows the last 7 recorded entries.
    Earlier weeks always have 7 items; missing days are placeholders.
    """
    if offset == 0:
        return last7(entries)
    by_date = {e.date: e for e in entries}
    return [by_date.get(d) or Entry.placeholder(d) for d in week_dates(offset, today)]


def month_key(offset: int, today: str | None = None) -> str:
    """`YYYY-MM` of the month `offset` months before the current one."""
    current = date.fromisoformat(today or today_iso())
    year, month = divmod(current.year * 12 + current.month - 1 - offset, 12)
    return f"{year:04d}-{month + 1:02d}"


def year_entries(entries: Iterable[Entry], offset: int, today: str | None = None) -> list[Entry]:
    """Entries in scope for the constellation view. Offset 0 means all time."""
    entries = list(entries)
    if offset == 0:
        return entries
    target = date.fromisoformat(today or today_iso()).year - offset
    return [e for e in entries if int(e.date[:4]) == target]


def timeline_days(
    entries: Iterable[Entry], active: str, today: str | None = None
) -> list[tuple[str, Entry | None]]:
    """
    Days around `active` for the scrolling timeline, newest first.

    Covers active-6 .. active+6 without going past today, padded with
    earlier days to at least 13 and capped at 14.
    """
    today = today or today_iso()
    by_date = {e.date: e for e in entries}
    end = min(add_days(active, TIMELINE_SPAN), today)

    days: list[str] = []
    cursor = add_days(active, -TIMELINE_SPAN)
    while cursor <= end:
        days.append(cursor)
        cursor = add_days(cursor, 1)
    if active not in days:
        days.append(active)

    while len(days) < TIMELINE_MIN_DAYS:
        first = min(days) if days else active
        days.insert(0, add_days(first, -1))

    unique = sorted(set(days), reverse=True)[:TIMELINE_MAX_DAYS]
    return [(d, by_date.get(d)) for d in unique]

"""Pure entry domain logic - no I/O dependencies."""

import math
import re
from dataclasses import dataclass, replace
from datetime import date

MAX_EMOJIS = 3

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class Song:
    """A song paired with a day."""

    title: str = ""
    artist: str = ""

    def is_empty(self) -> bool:
        return not self.title.strip() and not self.artist.strip()

    def format(self) -> str:
        """Display form, e.g. 'Title • Artist'."""
        return " • ".join(part for part in (self.title, self.artist) if part)


@dataclass(frozen=True)
class Entry:
    """
    One day in the journal.

    Construction normalizes instead of failing:
    - emojis are trimmed, deduplicated (first seen wins) and capped at 3
    - hue is wrapped into [0, 360) and dropped when there are no emojis
    - song fields are trimmed and an empty song is dropped

    Since dataclasses.replace() goes through __init__, every derived
    entry is normalized the same way.
    """

    date: str
    emojis: tuple[str, ...] = ()
    hue: int | None = None
    song: Song | None = None
    updated_at: int = 0

    def __post_init__(self):
        emojis = normalize_emojis(self.emojis)
        hue = None
        if emojis and self.hue is not None and math.isfinite(self.hue):
            hue = round(self.hue) % 360
        song = None
        if self.song is not None:
            song = Song(title=self.song.title.strip(), artist=self.song.artist.strip())
            if song.is_empty():
                song = None
        object.__setattr__(self, "emojis", emojis)
        object.__setattr__(self, "hue", hue)
        object.__setattr__(self, "song", song)

    @classmethod
    def placeholder(cls, day: str) -> "Entry":
        """Empty entry used to fill gaps in fixed-length windows."""
        return cls(date=day, emojis=(), updated_at=0)

    @property
    def is_empty(self) -> bool:
        return not self.emojis


def normalize_emojis(emojis) -> tuple[str, ...]:
    """Trim, drop blanks, dedupe preserving order, keep the first three."""
    seen: list[str] = []
    for emoji in emojis or ():
        if not isinstance(emoji, str):
            continue
        clean = emoji.strip()
        if clean and clean not in seen:
            seen.append(clean)
    return tuple(seen[:MAX_EMOJIS])


def is_iso_date(value) -> bool:
    """True for a real calendar date written as YYYY-MM-DD."""
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


# ============== Mutators ==============


def set_emoji_at(entry: Entry, index: int, emoji: str, now_ms: int) -> Entry:
    """Put an emoji into a slot. Blank emojis and negative slots leave the entry untouched."""
    clean = emoji.strip()
    if not clean or index < 0:
        return entry
    slots = list(entry.emojis)
    if index < len(slots):
        slots[index] = clean
    else:
        slots.append(clean)
    return replace(entry, emojis=tuple(slots), updated_at=now_ms)


def remove_emoji_at(entry: Entry, index: int, now_ms: int) -> Entry:
    """Remove an emoji slot; the hue goes with the last emoji."""
    if not 0 <= index < len(entry.emojis):
        return entry
    slots = list(entry.emojis)
    del slots[index]
    return replace(entry, emojis=tuple(slots), updated_at=now_ms)


def set_hue(entry: Entry, hue: int | None, now_ms: int) -> Entry:
    """Set or clear the hue. Has no effect on an entry without emojis."""
    if not entry.emojis:
        return entry
    return replace(entry, hue=hue, updated_at=now_ms)


def update_song(
    entry: Entry,
    now_ms: int,
    title: str | None = None,
    artist: str | None = None,
) -> Entry:
    """Merge the given song fields into the existing song."""
    current = entry.song or Song()
    merged = Song(
        title=current.title if title is None else title,
        artist=current.artist if artist is None else artist,
    )
    return replace(entry, song=merged, updated_at=now_ms)


# ============== Serialization ==============


def entry_to_dict(entry: Entry) -> dict:
    """Persisted JSON shape. Absent fields are omitted, not null."""
    data: dict = {"date": entry.date, "emojis": list(entry.emojis)}
    if entry.hue is not None:
        data["hue"] = entry.hue
    if entry.song is not None:
        song = {}
        if entry.song.title:
            song["title"] = entry.song.title
        if entry.song.artist:
            song["artist"] = entry.song.artist
        data["song"] = song
    data["updatedAt"] = entry.updated_at
    return data


def _is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def entry_from_dict(data) -> Entry | None:
    """
    Build an Entry from a persisted record.

    Returns None when the record has no usable date. Every other field
    is coerced: non-list emojis become empty, non-numeric or non-finite hue
    and updatedAt are ignored.
    """
    if not isinstance(data, dict) or not is_iso_date(data.get("date")):
        return None

    emojis = data.get("emojis")
    if not isinstance(emojis, list):
        emojis = []

    hue = data.get("hue")
    if not _is_finite_number(hue):
        hue = None

    song = None
    raw_song = data.get("song")
    if isinstance(raw_song, dict):
        title = raw_song.get("title")
        artist = raw_song.get("artist")
        song = Song(
            title=title if isinstance(title, str) else "",
            artist=artist if isinstance(artist, str) else "",
        )

    updated_at = data.get("updatedAt", 0)
    if not _is_finite_number(updated_at):
        updated_at = 0

    return Entry(
        date=data["date"],
        emojis=tuple(emojis),
        hue=hue,
        song=song,
        updated_at=int(updated_at),
    )

"""Pure hue aggregation - reduces a month's hues to a few color families.

Hue is cyclic (0 and 359 are neighbours), so hues within a family are
averaged on the unit circle rather than arithmetically.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from .entry import Entry
from .window import month_key, today_iso

DEFAULT_HUES = [220, 300, 40]
FAMILY_BIN_SIZE = 30
STOP_BIN_SIZE = 15
MAX_FAMILIES = 3
MAX_STOPS = 5


@dataclass
class HueBin:
    """Hues that fell into one fixed-width angular bucket."""

    index: int
    hues: list[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.hues)


def circular_mean(hues: list[float]) -> float:
    """
    Mean direction of angles in degrees, in [0, 360).

    A single hue comes back unchanged.
    """
    if len(hues) == 1:
        return hues[0]
    x = sum(math.cos(math.radians(h)) for h in hues)
    y = sum(math.sin(math.radians(h)) for h in hues)
    return math.degrees(math.atan2(y, x)) % 360


def _month_hues(entries: Iterable[Entry], year_month: str) -> list[int]:
    return [e.hue % 360 for e in entries if e.date[:7] == year_month and e.hue is not None]


def monthly_top3(
    entries: Iterable[Entry],
    year_month: str | None = None,
    today: str | None = None,
) -> list[float]:
    """
    Up to three representative hues for a month, most common family first.

    Hues are binned into twelve 30-degree buckets, the three fullest
    buckets are kept (ties go to the lower bucket) and each is reduced
    to its circular mean. A month without hues gets DEFAULT_HUES.

    Pure function - no I/O.
    """
    year_month = year_month or (today or today_iso())[:7]
    hues = _month_hues(entries, year_month)
    if not hues:
        return list(DEFAULT_HUES)

    bins = [HueBin(index=i) for i in range(360 // FAMILY_BIN_SIZE)]
    for hue in hues:
        bins[(hue // FAMILY_BIN_SIZE) % len(bins)].hues.append(hue)

    # sorted() is stable, so equal counts keep bucket order
    ranked = sorted((b for b in bins if b.count), key=lambda b: -b.count)[:MAX_FAMILIES]
    return [circular_mean(b.hues) for b in ranked]


def monthly_stops(
    entries: Iterable[Entry],
    year_month: str | None = None,
    today: str | None = None,
) -> list[int]:
    """
    Coarse gradient stops: the five most frequent 15-degree bucket centres.

    No averaging happens here. Same fallback as monthly_top3.
    """
    year_month = year_month or (today or today_iso())[:7]
    hues = _month_hues(entries, year_month)
    if not hues:
        return list(DEFAULT_HUES)

    freq = Counter(
        (math.floor(h / STOP_BIN_SIZE + 0.5) * STOP_BIN_SIZE) % 360 for h in hues
    )
    return [hue for hue, _ in freq.most_common(MAX_STOPS)]


def month_hues(
    entries: Iterable[Entry], offset: int, today: str | None = None
) -> tuple[list[float], bool]:
    """
    Color families for the monthly ribbon, `offset` months back.

    Returns (hues, empty). A month without any hued entry gives
    ([], True) so the caller can show an empty state instead of the
    default palette.
    """
    entries = list(entries)
    ym = month_key(offset, today)
    if not _month_hues(entries, ym):
        return [], True
    return monthly_top3(entries, ym), False

"""Pure emoji usage statistics - no I/O dependencies."""

from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterable

from .entry import Entry

PAIR_SEPARATOR = "__"


def pair_key(a: str, b: str) -> str:
    """Key for a co-occurring pair, in the order given."""
    return f"{a}{PAIR_SEPARATOR}{b}"


@dataclass
class EmojiStats:
    """Per-day emoji frequencies and pair co-occurrences."""

    freq: dict[str, int] = field(default_factory=dict)
    pair: dict[str, int] = field(default_factory=dict)

    def pair_count(self, a: str, b: str) -> int:
        """Co-occurrence count regardless of the order the pair was seen in."""
        return self.pair.get(pair_key(a, b), 0) + self.pair.get(pair_key(b, a), 0)

    def top(self, n: int = 10) -> list[tuple[str, int]]:
        """Most used emojis; ties keep first-seen order."""
        return sorted(self.freq.items(), key=lambda kv: -kv[1])[:n]


def emoji_stats(entries: Iterable[Entry]) -> EmojiStats:
    """
    Count emoji usage across entries.

    Each emoji counts once per day, and every pair within a day's
    deduplicated set counts once for that day.

    Pure function - no I/O.
    """
    stats = EmojiStats()
    for entry in entries:
        unique = list(dict.fromkeys(entry.emojis))
        for emoji in unique:
            stats.freq[emoji] = stats.freq.get(emoji, 0) + 1
        for a, b in combinations(unique, 2):
            key = pair_key(a, b)
            stats.pair[key] = stats.pair.get(key, 0) + 1
    return stats

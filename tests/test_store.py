"""Tests for entry collection logic."""

import pytest

from flowday.core.entry import Entry
from flowday.core.store import EntryStore, merge_by_newer, push_recent, upsert


@pytest.fixture
def entries():
    return [
        Entry(date="2025-01-01", emojis=("😀",), updated_at=1),
        Entry(date="2025-01-03", emojis=("🔥",), updated_at=1),
    ]


class TestUpsert:
    def test_inserts_sorted_by_date(self):
        a = Entry(date="2025-01-02", updated_at=0)
        b = Entry(date="2025-01-01", updated_at=0)
        result = upsert([a], b)
        assert [e.date for e in result] == ["2025-01-01", "2025-01-02"]

    def test_replaces_existing_entry(self):
        a = Entry(date="2025-01-01", emojis=("😀",), updated_at=0)
        updated = Entry(date="2025-01-01", emojis=("🔥",), hue=120, updated_at=1)
        result = upsert([a], updated)
        assert len(result) == 1
        assert result[0].emojis == ("🔥",)
        assert result[0].hue == 120

    def test_full_replacement_not_merge(self):
        a = Entry(date="2025-01-01", emojis=("😀",), hue=200, updated_at=0)
        result = upsert([a], Entry(date="2025-01-01", emojis=("😀",), updated_at=1))
        assert result[0].hue is None

    def test_cleared_emojis_drop_hue(self):
        start = Entry(date="2025-05-01", emojis=("😀", "🔥"), hue=200, updated_at=0)
        cleared = Entry(date="2025-05-01", emojis=(), hue=200, updated_at=1)
        result = upsert([start], cleared)
        assert result[0].hue is None

    def test_idempotent(self, entries):
        e = Entry(date="2025-01-02", emojis=("💡",), updated_at=3)
        once = upsert(entries, e)
        assert upsert(once, e) == once

    def test_does_not_mutate_input(self, entries):
        before = list(entries)
        upsert(entries, Entry(date="2025-01-02", updated_at=3))
        assert entries == before

    def test_dates_strictly_ascending(self, entries):
        result = entries
        for day in ["2025-01-05", "2024-12-31", "2025-01-03", "2025-01-02", "2024-12-31"]:
            result = upsert(result, Entry(date=day, updated_at=9))
        dates = [e.date for e in result]
        assert dates == sorted(set(dates))

    def test_unsorted_input_is_resorted(self):
        unsorted = [Entry(date="2025-01-03"), Entry(date="2025-01-01")]
        result = upsert(unsorted, Entry(date="2025-01-02"))
        assert [e.date for e in result] == ["2025-01-01", "2025-01-02", "2025-01-03"]


class TestMergeByNewer:
    def test_prefers_newer_incoming(self):
        local = [Entry(date="2025-01-01", emojis=("😀",), updated_at=1)]
        incoming = [Entry(date="2025-01-01", emojis=("🔥",), updated_at=2)]
        merged = merge_by_newer(local, incoming)
        assert len(merged) == 1
        assert merged[0].emojis == ("🔥",)

    def test_keeps_newer_local(self):
        local = [Entry(date="2025-01-01", emojis=("😀",), updated_at=5)]
        incoming = [Entry(date="2025-01-01", emojis=("🔥",), updated_at=2)]
        assert merge_by_newer(local, incoming)[0].emojis == ("😀",)

    def test_tie_keeps_local(self):
        local = [Entry(date="2025-01-01", emojis=("😀",), updated_at=2)]
        incoming = [Entry(date="2025-01-01", emojis=("🔥",), updated_at=2)]
        assert merge_by_newer(local, incoming)[0].emojis == ("😀",)

    def test_sorts_by_date(self):
        local = [Entry(date="2025-01-02", emojis=("😀",), updated_at=1)]
        incoming = [Entry(date="2025-01-01", emojis=("🔥",), updated_at=1)]
        merged = merge_by_newer(local, incoming)
        assert [e.date for e in merged] == ["2025-01-01", "2025-01-02"]


class TestEntryStore:
    def test_empty(self):
        store = EntryStore.empty()
        assert len(store) == 0
        assert store.get("2025-01-01") is None

    def test_from_entries_sorts_and_dedupes(self):
        store = EntryStore.from_entries(
            [
                Entry(date="2025-01-02", emojis=("a",), updated_at=5),
                Entry(date="2025-01-01", emojis=("b",), updated_at=1),
                Entry(date="2025-01-02", emojis=("c",), updated_at=3),
            ]
        )
        assert store.dates() == ["2025-01-01", "2025-01-02"]
        assert store.get("2025-01-02").emojis == ("a",)

    def test_upsert_returns_new_store(self, entries):
        store = EntryStore.from_entries(entries)
        updated = store.upsert(Entry(date="2025-01-02", emojis=("💡",)))
        assert len(store) == 2
        assert len(updated) == 3
        assert updated.get("2025-01-02").emojis == ("💡",)

    def test_iterates_in_date_order(self, entries):
        store = EntryStore.from_entries(reversed(entries))
        assert [e.date for e in store] == ["2025-01-01", "2025-01-03"]


class TestPushRecent:
    def test_moves_to_front(self):
        assert push_recent(["a", "b", "c"], "c") == ["c", "a", "b"]

    def test_adds_new(self):
        assert push_recent(["a"], "b") == ["b", "a"]

    def test_caps_length(self):
        recents = [str(i) for i in range(24)]
        result = push_recent(recents, "new")
        assert len(result) == 24
        assert result[0] == "new"
        assert "23" not in result

    def test_custom_limit(self):
        assert push_recent(["a", "b"], "c", limit=2) == ["c", "a"]

"""
Notes API — Note Store Unit Tests
==================================

What:  Tests for NoteStore ordering, lookup, in-place update and removal.
"""

import threading

from notes_api.models.note import Note
from notes_api.store import NoteStore


def make_note(note_id: str, title: str = "t") -> Note:
    ts = "2024-01-15T12:00:00.000Z"
    return Note(id=note_id, title=title, tags=["a"], body="b", created_at=ts, updated_at=ts)


class TestNoteStoreBasics:
    """Append, snapshot and lookup."""

    def setup_method(self):
        self.store = NoteStore()

    def test_starts_empty(self):
        assert len(self.store) == 0
        assert self.store.all() == []

    def test_add_appends_in_order(self):
        for note_id in ("n1", "n2", "n3"):
            self.store.add(make_note(note_id))

        assert [n.id for n in self.store.all()] == ["n1", "n2", "n3"]

    def test_all_returns_snapshot(self):
        """Mutating the returned list must not touch the store."""
        self.store.add(make_note("n1"))
        snapshot = self.store.all()
        snapshot.clear()

        assert len(self.store) == 1

    def test_get_found(self):
        note = make_note("n1")
        self.store.add(note)

        assert self.store.get("n1") is note
        assert self.store.contains("n1")

    def test_get_missing_returns_none(self):
        self.store.add(make_note("n1"))

        assert self.store.get("nope") is None
        assert not self.store.contains("nope")


class TestNoteStoreMutation:
    """In-place update and order-preserving removal."""

    def setup_method(self):
        self.store = NoteStore()
        for note_id in ("n1", "n2", "n3"):
            self.store.add(make_note(note_id))

    def test_update_replaces_fields_in_place(self):
        updated = self.store.update(
            "n2", title="new", tags=["x", "y"], body="new body",
            updated_at="2024-01-15T13:00:00.000Z",
        )

        assert updated is self.store.get("n2")
        assert updated.title == "new"
        assert updated.tags == ["x", "y"]
        assert updated.body == "new body"
        assert updated.updated_at == "2024-01-15T13:00:00.000Z"
        assert updated.created_at == "2024-01-15T12:00:00.000Z"
        assert updated.id == "n2"

    def test_update_missing_returns_none(self):
        assert self.store.update("nope", "t", [], "b", "2024-01-15T13:00:00.000Z") is None

    def test_remove_preserves_order(self):
        assert self.store.remove("n2") is True
        assert [n.id for n in self.store.all()] == ["n1", "n3"]

    def test_remove_missing_returns_false(self):
        assert self.store.remove("nope") is False
        assert len(self.store) == 3

    def test_clear(self):
        self.store.clear()
        assert len(self.store) == 0


def test_concurrent_adds_are_all_kept():
    store = NoteStore()

    def worker(prefix: str):
        for i in range(200):
            store.add(make_note(f"{prefix}-{i}"))

    threads = [threading.Thread(target=worker, args=(f"t{n}",)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(store) == 800

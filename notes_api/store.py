"""
Notes API — In-Memory Note Store
=================================

What:  The authoritative collection of notes for the lifetime of the app.
How:   An ordered list guarded by a single lock. Lookups are linear scans;
       an id → position index can replace them without changing behavior.
Who:   Created by create_app() and attached to `app.state.note_store`.
       Route handlers receive it through the `get_note_store` dependency.
When:  Created empty at startup; discarded with the process. Nothing is
       ever written to disk.

Concurrency:
    Async handlers run to completion on the event loop, but the store may
    also be used from threads (sync endpoints, scripts, tests). Every
    read/scan/mutate sequence therefore runs under `self._lock`.
"""

import logging
import threading
from typing import List, Optional

from fastapi import Request

from notes_api.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """
    Ordered, process-lifetime sequence of Note records.

    Appends go to the end; removal keeps the relative order of the remaining
    notes. No other component keeps its own copy of the collection.
    """

    def __init__(self) -> None:
        self._notes: List[Note] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def add(self, note: Note) -> None:
        """Append a note to the end of the sequence."""
        with self._lock:
            self._notes.append(note)
            logger.debug("Stored note %s (%d total)", note.id, len(self._notes))

    def all(self) -> List[Note]:
        """Snapshot of the current notes, in insertion order."""
        with self._lock:
            return list(self._notes)

    def get(self, note_id: str) -> Optional[Note]:
        """First note whose id matches, or None."""
        with self._lock:
            return self._find(note_id)

    def contains(self, note_id: str) -> bool:
        with self._lock:
            return self._find(note_id) is not None

    def update(
        self,
        note_id: str,
        title: str,
        tags: List[str],
        body: str,
        updated_at: str,
    ) -> Optional[Note]:
        """
        Replace title/tags/body of the matching note in place.

        id and created_at are left untouched. Returns the updated note, or
        None when no note has that id.
        """
        with self._lock:
            note = self._find(note_id)
            if note is None:
                return None
            note.title = title
            note.tags = list(tags)
            note.body = body
            note.updated_at = updated_at
            return note

    def remove(self, note_id: str) -> bool:
        """Remove the matching note. Returns False when no note has that id."""
        with self._lock:
            for index, note in enumerate(self._notes):
                if note.id == note_id:
                    del self._notes[index]
                    return True
            return False

    def clear(self) -> None:
        with self._lock:
            self._notes.clear()

    def _find(self, note_id: str) -> Optional[Note]:
        # Caller must hold self._lock
        for note in self._notes:
            if note.id == note_id:
                return note
        return None


def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency returning the store owned by the running app.

    Usage in routes:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            ...
    """
    return request.app.state.note_store

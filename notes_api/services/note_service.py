"""
Notes API — Note Service (Business Logic)
==========================================

What:  The five note operations: create, list, get, update, delete.
How:   Each method receives the NoteStore it operates on, reads or mutates
       it, and either returns a result or raises a NotesApiError subclass.
Who:   Called by the route handlers in routes/notes.py.

Error Mapping (via global handlers in main.py):
    NotFoundError      → 404 {"status": "fail", "message": ...}
    NoteCreationError  → 500 {"status": "fail", "message": ...}

Create Verification:
    The generated id is attached to the stored note, then looked up again
    right after the append. A failed lookup raises NoteCreationError instead
    of reporting success.
"""

import logging
from typing import List

from notes_api.exceptions import NoteCreationError, NotFoundError
from notes_api.models.note import Note, generate_note_id, utc_timestamp
from notes_api.schemas.note import NotePayload
from notes_api.store import NoteStore

logger = logging.getLogger(__name__)

# Bounded retry for id collisions; token_urlsafe(12) makes even one unlikely
MAX_ID_ATTEMPTS = 5

NOT_FOUND_MESSAGE = "Note not found"
UPDATE_NOT_FOUND_MESSAGE = "Failed to update note. Id not found"
DELETE_NOT_FOUND_MESSAGE = "Failed to delete note. Id not found"


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - create_note(): assign id + timestamps, append, verify
        - list_notes():  every note, in insertion order
        - get_note():    single note or NotFoundError
        - update_note(): overwrite title/tags/body, refresh updated_at
        - delete_note(): remove exactly one note
    """

    def create_note(self, store: NoteStore, payload: NotePayload) -> Note:
        """
        Add a new note to the store.

        Args:
            store:   The note store to append to
            payload: title, tags and body from the request body

        Returns:
            The stored Note (with id, created_at and updated_at assigned)

        Raises:
            NoteCreationError: the note could not be read back by its new id
        """
        note_id = self._new_id(store)
        timestamp = utc_timestamp()

        note = Note(
            id=note_id,
            title=payload.title,
            tags=list(payload.tags),
            body=payload.body,
            created_at=timestamp,
            updated_at=timestamp,
        )
        store.add(note)

        if not store.contains(note_id):
            logger.error("Note %s missing from store right after append", note_id)
            raise NoteCreationError(context={"note_id": note_id})

        logger.info("Note created: %s", note_id)
        return note

    def list_notes(self, store: NoteStore) -> List[Note]:
        """Every stored note, in insertion order."""
        return store.all()

    def get_note(self, store: NoteStore, note_id: str) -> Note:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: no note has that id (→ 404)
        """
        note = store.get(note_id)
        if note is None:
            raise NotFoundError(message=NOT_FOUND_MESSAGE, resource_id=note_id)
        return note

    def update_note(self, store: NoteStore, note_id: str, payload: NotePayload) -> Note:
        """
        Overwrite title, tags and body of an existing note.

        All three fields are replaced from the payload; there is no partial
        update. id and created_at are preserved, updated_at is refreshed.

        Raises:
            NotFoundError: no note has that id (→ 404)
        """
        note = store.update(
            note_id,
            title=payload.title,
            tags=payload.tags,
            body=payload.body,
            updated_at=utc_timestamp(),
        )
        if note is None:
            raise NotFoundError(message=UPDATE_NOT_FOUND_MESSAGE, resource_id=note_id)

        logger.info("Note updated: %s", note_id)
        return note

    def delete_note(self, store: NoteStore, note_id: str) -> None:
        """
        Remove a note from the store.

        Raises:
            NotFoundError: no note has that id (→ 404)
        """
        if not store.remove(note_id):
            raise NotFoundError(message=DELETE_NOT_FOUND_MESSAGE, resource_id=note_id)
        logger.info("Note deleted: %s", note_id)

    def _new_id(self, store: NoteStore) -> str:
        for _ in range(MAX_ID_ATTEMPTS):
            note_id = generate_note_id()
            if not store.contains(note_id):
                return note_id
            logger.warning("Generated note id %s collides with a stored note", note_id)
        raise NoteCreationError(context={"reason": "id_collision"})


# ── Singleton Instance ────────────────────────────────────────────────────
# Stateless; the store is passed on every call
note_service = NoteService()

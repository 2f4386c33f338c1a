"""
Notes API — Note Record
========================

What:  The in-memory representation of a single note.
How:   A plain dataclass held by NoteStore; the API layer converts it into
       NoteResponse (camelCase JSON) before it leaves the process.

Field Notes:
    - id: 16 URL-safe random characters, assigned by NoteService on create
    - tags: ordered list of labels, stored exactly as the client sent them
    - created_at / updated_at: ISO 8601 UTC strings with millisecond precision
      and a trailing "Z" (e.g. "2024-01-15T12:00:00.000Z"). The format is
      fixed-width, so string comparison matches chronological order.
"""

import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

# token_urlsafe(12) → 16 characters
NOTE_ID_BYTES = 12


def generate_note_id() -> str:
    """Returns a fresh random note id."""
    return secrets.token_urlsafe(NOTE_ID_BYTES)


def utc_timestamp() -> str:
    """Current UTC time as an ISO 8601 string, e.g. 2024-01-15T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class Note:
    """
    A note record.

    Lifecycle:
        1. Built by NoteService.create_note() with id and both timestamps set
        2. title/tags/body replaced and updated_at refreshed by update_note()
        3. Removed from the store by delete_note() (no soft delete)
    """

    id: str
    title: str
    body: str
    created_at: str
    updated_at: str
    tags: List[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, updated_at={self.updated_at})>"

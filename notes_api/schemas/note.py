"""
Notes API — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the JSON contract of the /notes endpoints.
How:   FastAPI validates request bodies against NotePayload, serializes the
       envelope models (by alias, so timestamps go out as createdAt/updatedAt)
       and generates the OpenAPI documentation from all of them.

Envelope Shapes:
    201 create:   {"error": false, "status": "success", "message": ..., "data": {"notes": "<id>"}}
    200 list:     {"status": "success", "data": {"notes": [...]}}
    200 detail:   {"status": "success", "data": {"note": {...}}}
    200 mutation: {"status": "success", "message": ...}
    4xx/5xx:      {"status": "fail", "message": ...}
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from notes_api.models.note import Note


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NotePayload(BaseModel):
    """
    Body of POST /notes and PUT /notes/{id}.

    Missing or null fields fall back to empty values; update overwrites all
    three fields from the payload regardless.
    """
    title: str = Field(default="", description="Note title")
    tags: List[str] = Field(default_factory=list, description="Ordered list of labels")
    body: str = Field(default="", description="Note content")

    @field_validator("title", "body", mode="before")
    @classmethod
    def null_text_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_as_empty(cls, v):
        return [] if v is None else v


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Full representation of a stored note."""
    id: str = Field(description="Unique note identifier")
    title: str
    tags: List[str]
    body: str
    created_at: str = Field(alias="createdAt", description="Creation time (UTC ISO 8601)")
    updated_at: str = Field(alias="updatedAt", description="Last update time (UTC ISO 8601)")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_note(cls, note: Note) -> "NoteResponse":
        return cls(
            id=note.id,
            title=note.title,
            tags=list(note.tags),
            body=note.body,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )


class NoteCreatedData(BaseModel):
    notes: str = Field(description="Id of the created note")


class NoteCreatedResponse(BaseModel):
    """Returned by POST /notes with HTTP 201 Created."""
    error: bool = False
    status: str = "success"
    message: str = Field(default="Note added successfully")
    data: NoteCreatedData


class NoteListData(BaseModel):
    notes: List[NoteResponse]


class NoteListResponse(BaseModel):
    """Returned by GET /notes."""
    status: str = "success"
    data: NoteListData


class NoteDetailData(BaseModel):
    note: NoteResponse


class NoteDetailResponse(BaseModel):
    """Returned by GET /notes/{id}."""
    status: str = "success"
    data: NoteDetailData


class MessageResponse(BaseModel):
    """Returned by PUT and DELETE /notes/{id}."""
    status: str = "success"
    message: str


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Fail envelope returned by every error path.

    Example:
        {"status": "fail", "message": "Note not found"}
    """
    status: str = Field(default="fail", description="Always 'fail'")
    message: str = Field(description="Human-readable error description")

"""
Notes API — Notes Route Handlers
=================================

What:  The route table: five (method, path) pairs bound to NoteService calls.
How:   The store is injected with Depends(get_note_store); NoteService does
       the work; each handler builds the success envelope for its route.
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends

from notes_api.schemas.note import (
    ErrorResponse,
    MessageResponse,
    NoteCreatedData,
    NoteCreatedResponse,
    NoteDetailData,
    NoteDetailResponse,
    NoteListData,
    NoteListResponse,
    NotePayload,
    NoteResponse,
)
from notes_api.services.note_service import note_service
from notes_api.store import NoteStore, get_note_store

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(tags=["Notes"])


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteCreatedResponse,
    responses={
        201: {"description": "Note created", "model": NoteCreatedResponse},
        500: {"description": "Note could not be added", "model": ErrorResponse},
    },
    summary="Create a note",
)
async def create_note(
    payload: Optional[NotePayload] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
) -> NoteCreatedResponse:
    """Store a new note; the id and timestamps are assigned server-side."""
    note = note_service.create_note(store, payload or NotePayload())
    return NoteCreatedResponse(
        message="Note added successfully",
        data=NoteCreatedData(notes=note.id),
    )


@router.get(
    "/notes",
    response_model=NoteListResponse,
    summary="List all notes",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> NoteListResponse:
    notes = note_service.list_notes(store)
    return NoteListResponse(
        data=NoteListData(notes=[NoteResponse.from_note(note) for note in notes]),
    )


@router.get(
    "/notes/{note_id}",
    response_model=NoteDetailResponse,
    responses={
        200: {"description": "The note", "model": NoteDetailResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get a single note by id",
)
async def get_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> NoteDetailResponse:
    note = note_service.get_note(store, note_id)
    return NoteDetailResponse(data=NoteDetailData(note=NoteResponse.from_note(note)))


@router.put(
    "/notes/{note_id}",
    response_model=MessageResponse,
    responses={
        200: {"description": "Note updated", "model": MessageResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Replace a note's title, tags and body",
)
async def update_note(
    note_id: str,
    payload: Optional[NotePayload] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
) -> MessageResponse:
    """
    Overwrite all three editable fields from the payload.

    Omitted fields are reset to their empty defaults; there is no partial update.
    A request without a body resets all three.
    """
    note_service.update_note(store, note_id, payload or NotePayload())
    return MessageResponse(message="Note updated successfully")


@router.delete(
    "/notes/{note_id}",
    response_model=MessageResponse,
    responses={
        200: {"description": "Note deleted", "model": MessageResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> MessageResponse:
    note_service.delete_note(store, note_id)
    return MessageResponse(message="Note deleted successfully")

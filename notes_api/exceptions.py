"""
Notes API — Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the note operations.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the `{"status": "fail", "message": ...}` envelope with the
       matching HTTP status code.
Who:   Raised by NoteService; caught by the handlers in main.py.

Exception Hierarchy:
    NotesApiError (base)
    ├── NotFoundError        → 404 Not Found
    └── NoteCreationError    → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NotesApiError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:     Client-facing description, returned in the fail envelope
        context:     Additional debug info (logged but NOT returned to client)
        status_code: HTTP status the global handler responds with
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(NotesApiError):
    """
    Raised when no note with the requested id is in the store.

    When:    GET, PUT or DELETE on /notes/{id} with an unknown id.
    HTTP:    404 Not Found
    """

    status_code = 404

    def __init__(
        self,
        message: str = "Note not found",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = "note"
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class NoteCreationError(NotesApiError):
    """
    Raised when a freshly appended note cannot be found again by its id.

    HTTP:    500 Internal Server Error
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Failed to add note",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

"""
Notes API — Application Package Initializer
============================================

What: Marks the `notes_api` directory as a Python package.
Who:  Used by uvicorn (`uvicorn notes_api.main:app`), pytest and the
      `notes-api` console script.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← create/read/update/delete
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note record + pydantic envelopes
    ├─────────────────────────────────────┤
    │        Store (In-Memory)            │  ← process-lifetime note sequence
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

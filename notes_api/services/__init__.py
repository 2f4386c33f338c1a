# Services package init
"""
Notes API — Services Layer
===========================

What:  Business logic between the routes (HTTP) and the note store.
How:   Services receive the store as an explicit argument on every call,
       so they hold no shared state of their own.

Service Inventory:
    - NoteService: create / list / get / update / delete notes
"""

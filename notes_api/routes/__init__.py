# Routes package init
"""
Notes API — API Routes Package
===============================

Route Inventory:
    - notes.py:  POST   /notes          (create a note)
                 GET    /notes          (list every note)
                 GET    /notes/{id}     (get one note)
                 PUT    /notes/{id}     (replace title/tags/body)
                 DELETE /notes/{id}     (delete one note)

Routes stay thin: they pull the store from the app, call NoteService and
wrap the result in the response envelope. Failures are raised as exceptions
and turned into fail envelopes by the handlers in main.py.
"""

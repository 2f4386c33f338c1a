# Middleware package init
"""
Notes API — Middleware Package
===============================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: assign a correlation id before anything is logged
    2. Logging: one access-log line per request, tagged with that id
    3. CORS: FastAPI's CORSMiddleware (handles preflight, allows any origin)
"""

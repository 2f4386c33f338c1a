"""
Notes API — Server Entry Point
===============================

Usage:
    python -m notes_api
    notes-api                      (console script)

Host and port come from settings (BACKEND_HOST / BACKEND_PORT, default
localhost:5000).
"""

import uvicorn

from notes_api.config import settings


def main() -> None:
    uvicorn.run(
        "notes_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()

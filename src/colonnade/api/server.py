"""
ASGI Entry Point for the Colonnade API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads `.env` before building the application so that settings read at
import time see the same environment as the server.

Usage
-----
Run via the module entry point:
    $ uv run python -m colonnade.api.server

Or via uvicorn directly:
    $ uv run uvicorn colonnade.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from colonnade.api.app import create_app

env_path = Path(".env")
load_dotenv(dotenv_path=env_path)

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    uvicorn.run(
        "colonnade.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()

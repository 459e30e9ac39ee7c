"""
ASGI Entry Point for the RecurViz API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads environment variables from `.env` before the application factory
runs, so the cached settings see them.

Usage
-----
Run via the console script:
    $ recurviz-api

Or via uvicorn directly:
    $ uvicorn recurviz.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from recurviz.api.app import create_app

# Load environment variables from .env BEFORE building the app.
env_path = Path(".env")
load_dotenv(dotenv_path=env_path)

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    uvicorn.run(
        "recurviz.api.server:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_level="info",
    )


if __name__ == "__main__":
    main()

"""Entry point for the Movie API server.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port and log level come from the ``HOST``, ``PORT`` and
``LOG_LEVEL`` environment variables (defaults ``0.0.0.0``, ``8000``
and ``INFO``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from movie_api.app.core.config import settings
from movie_api.app.main import app


async def run_api() -> None:
    """Serve the movie API until the process is stopped."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info("Starting server on %s:%s", settings.host, settings.port)
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()

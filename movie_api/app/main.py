"""
Main entrypoint for the Movie API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``.  Importing the app here makes it easy to run with
uvicorn or another ASGI server, e.g.::

    uvicorn movie_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.movie_service import InMemoryMovieService, MovieService


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, service: Optional[MovieService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.
    service : Optional[MovieService]
        Movie service to serve.  A new in‑memory service with an empty
        store is created when omitted, so every application starts with
        its own movie list.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.movie_service = service if service is not None else InMemoryMovieService()

    # Malformed requests (invalid JSON, missing title, non-integer ids)
    # are reported as 400 instead of FastAPI's default 422.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    # Prefix is empty unless API_PREFIX is set.
    app.include_router(v1_router, prefix=settings.api_prefix)

    logger.info("%s %s ready (prefix '%s')", settings.project_name, settings.api_version, settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()

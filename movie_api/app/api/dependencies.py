"""
FastAPI dependencies shared by the endpoints.

The movie service is created by ``create_app`` and kept on
``app.state``.  Handlers receive it through :func:`get_movie_service`,
which tests may replace with ``app.dependency_overrides``.
"""

from fastapi import Request

from movie_api.app.services.movie_service import MovieService


def get_movie_service(request: Request) -> MovieService:
    """Return the movie service bound to the running application."""
    return request.app.state.movie_service

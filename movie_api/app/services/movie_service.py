"""
Business logic for movies.

``MovieService`` declares the operations the API needs; the
``InMemoryMovieService`` implementation keeps movies in a
:class:`~movie_api.app.core.store.MovieStore`.  Nothing is persisted
and all records disappear on restart.

Not‑found conditions are reported by returning ``None``; deciding
which HTTP status that becomes is left to the API layer.  Deleting an
unknown movie is not an error.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from ..core.store import MovieStore
from ..schemas.movie import MovieCreate, MovieRead, MovieUpdate


logger = logging.getLogger(__name__)


class MovieService(ABC):
    """Operations available on the movie collection."""

    @abstractmethod
    async def get_all_movies(self) -> List[MovieRead]:
        """Return all movies in insertion order."""

    @abstractmethod
    async def get_movie_with_id(self, movie_id: int) -> Optional[MovieRead]:
        """Return a single movie or ``None`` if it does not exist."""

    @abstractmethod
    async def create_movie(self, data: MovieCreate) -> MovieRead:
        """Store a new movie and return it with its assigned id."""

    @abstractmethod
    async def update_movie_with_id(self, movie_id: int, data: MovieUpdate) -> Optional[MovieRead]:
        """Change the title of a movie; ``None`` if it does not exist."""

    @abstractmethod
    async def delete_movie_with_id(self, movie_id: int) -> None:
        """Delete a movie.  Unknown ids are ignored."""


class InMemoryMovieService(MovieService):
    """Movie service backed by an in‑memory store.

    A fresh :class:`MovieStore` is created when none is given, so two
    services never share records or id counters unless they are built
    around the same store.
    """

    def __init__(self, store: Optional[MovieStore] = None) -> None:
        self.store = store if store is not None else MovieStore()

    async def get_all_movies(self) -> List[MovieRead]:
        return [MovieRead.model_validate(movie) for movie in self.store.list()]

    async def get_movie_with_id(self, movie_id: int) -> Optional[MovieRead]:
        movie = self.store.get(movie_id)
        if movie is None:
            logger.debug("Movie %s not found", movie_id)
            return None
        return MovieRead.model_validate(movie)

    async def create_movie(self, data: MovieCreate) -> MovieRead:
        movie = self.store.add(data.title)
        logger.info("Created movie %s '%s'", movie.id, movie.title)
        return MovieRead.model_validate(movie)

    async def update_movie_with_id(self, movie_id: int, data: MovieUpdate) -> Optional[MovieRead]:
        """Replace the title of the movie with ``movie_id``.

        The id itself is immutable; only ``data.title`` is applied.
        """
        movie = self.store.set_title(movie_id, data.title)
        if movie is None:
            logger.debug("Cannot update movie %s: not found", movie_id)
            return None
        logger.info("Updated movie %s, title is now '%s'", movie_id, movie.title)
        return MovieRead.model_validate(movie)

    async def delete_movie_with_id(self, movie_id: int) -> None:
        if self.store.remove(movie_id):
            logger.info("Deleted movie %s", movie_id)
        else:
            logger.debug("Movie %s already absent, nothing to delete", movie_id)

"""
In‑memory movie storage.

``MovieStore`` keeps movie records in a plain list in insertion order
together with the counter used to assign identifiers.  Nothing is
persisted: all records are lost when the process exits.  Lookups are
linear scans over the list, which is fine for the handful of records a
demo holds.

Identifiers start at ``0`` and only ever increase.  Deleting a record
never frees its id for reuse.  The counter belongs to the store
instance, so every store (for example one per test) numbers its
records independently.

All operations hold a single lock, so concurrent requests served from
a thread pool cannot interleave while the list is being modified.
Records handed out by the store are copies; changing them does not
change the stored data.
"""

import threading
from dataclasses import dataclass, replace
from typing import List, Optional


@dataclass
class Movie:
    """A stored movie record."""

    id: int
    title: str


class MovieStore:
    """Ordered in‑memory collection of :class:`Movie` records."""

    def __init__(self, start_id: int = 0) -> None:
        self._movies: List[Movie] = []
        self._next_id = start_id
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    @property
    def next_id(self) -> int:
        """Identifier the next added record will receive."""
        with self._lock:
            return self._next_id

    def list(self) -> List[Movie]:
        """Return copies of all records in insertion order."""
        with self._lock:
            return [replace(movie) for movie in self._movies]

    def add(self, title: str) -> Movie:
        """Store a new record under the next identifier and return it."""
        with self._lock:
            movie = Movie(id=self._next_id, title=title)
            self._next_id += 1
            self._movies.append(movie)
            return replace(movie)

    def get(self, movie_id: int) -> Optional[Movie]:
        """Return the record with ``movie_id`` or ``None``."""
        with self._lock:
            movie = self._find(movie_id)
            return replace(movie) if movie is not None else None

    def set_title(self, movie_id: int, title: str) -> Optional[Movie]:
        """Replace the title of a record in place.

        Returns the updated record, or ``None`` when no record has the
        given id.
        """
        with self._lock:
            movie = self._find(movie_id)
            if movie is None:
                return None
            movie.title = title
            return replace(movie)

    def remove(self, movie_id: int) -> bool:
        """Remove a record; return ``True`` if one was removed."""
        with self._lock:
            movie = self._find(movie_id)
            if movie is None:
                return False
            self._movies.remove(movie)
            return True

    def _find(self, movie_id: int) -> Optional[Movie]:
        # Caller must hold the lock.
        for movie in self._movies:
            if movie.id == movie_id:
                return movie
        return None

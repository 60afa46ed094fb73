"""
Unit tests for the movie service layer.
"""

import asyncio
import unittest

from movie_api.app.core.store import MovieStore
from movie_api.app.schemas.movie import MovieCreate, MovieRead, MovieUpdate
from movie_api.app.services.movie_service import InMemoryMovieService, MovieService


def run(coro):
    return asyncio.run(coro)


class TestInMemoryMovieService(unittest.TestCase):
    """Test the four CRUD operations and single lookup."""

    def setUp(self):
        self.service = InMemoryMovieService()

    def test_is_a_movie_service(self):
        self.assertIsInstance(self.service, MovieService)

    def test_abstract_service_cannot_be_instantiated(self):
        with self.assertRaises(TypeError):
            MovieService()

    def test_create_returns_record_with_id(self):
        movie = run(self.service.create_movie(MovieCreate(title="Inception")))
        self.assertIsInstance(movie, MovieRead)
        self.assertGreaterEqual(movie.id, 0)
        self.assertEqual(movie.title, "Inception")

    def test_get_all_returns_created_movies_in_order(self):
        run(self.service.create_movie(MovieCreate(title="First")))
        run(self.service.create_movie(MovieCreate(title="Second")))
        movies = run(self.service.get_all_movies())
        self.assertEqual([m.title for m in movies], ["First", "Second"])

    def test_update_changes_only_title(self):
        created = run(self.service.create_movie(MovieCreate(title="Old")))
        updated = run(self.service.update_movie_with_id(created.id, MovieUpdate(title="New Title")))
        self.assertEqual(updated.id, created.id)
        self.assertEqual(updated.title, "New Title")

    def test_update_ignores_id_in_payload(self):
        created = run(self.service.create_movie(MovieCreate(title="Old")))
        payload = MovieUpdate.model_validate({"id": 99, "title": "New"})
        updated = run(self.service.update_movie_with_id(created.id, payload))
        self.assertEqual(updated.id, created.id)

    def test_update_unknown_returns_none(self):
        run(self.service.create_movie(MovieCreate(title="Kept")))
        self.assertIsNone(run(self.service.update_movie_with_id(5, MovieUpdate(title="X"))))
        self.assertEqual([m.title for m in run(self.service.get_all_movies())], ["Kept"])

    def test_delete_removes_and_ignores_unknown(self):
        created = run(self.service.create_movie(MovieCreate(title="Gone")))
        run(self.service.delete_movie_with_id(created.id))
        run(self.service.delete_movie_with_id(created.id))
        self.assertEqual(run(self.service.get_all_movies()), [])
        self.assertIsNone(run(self.service.get_movie_with_id(created.id)))

    def test_services_on_one_store_share_records(self):
        store = MovieStore()
        run(InMemoryMovieService(store).create_movie(MovieCreate(title="Shared")))
        movies = run(InMemoryMovieService(store).get_all_movies())
        self.assertEqual([m.title for m in movies], ["Shared"])


if __name__ == "__main__":
    unittest.main()

"""Movie API client.

This module defines a small client wrapper around the Movie API REST
endpoints.  It uses the ``requests`` library internally to make HTTP
calls and exposes one method per operation:

* :meth:`MovieAPI.list_movies` – return all movies.
* :meth:`MovieAPI.get_movie` – fetch a single movie by its identifier.
* :meth:`MovieAPI.create_movie` – add a movie with the given title.
* :meth:`MovieAPI.update_movie` – change the title of a movie.
* :meth:`MovieAPI.delete_movie` – remove a movie.
* :meth:`MovieAPI.health` – read the health check text.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with ``status_code`` and ``message`` keys.  The client does
not raise for HTTP or network errors.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
service behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class MovieAPI:
    """Client for interacting with the Movie API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API including any prefix, e.g.
                ``http://localhost:8000``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server on each request.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None, expect_json: bool = True
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/movies``).
            json_body: JSON body to send with the request.
            expect_json: Parse the response as JSON; otherwise the raw
                text is returned.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if expect_json:
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Movie operations
    # ------------------------------------------------------------------
    def list_movies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all movies.

        Returns:
            A tuple ``(movies, error)``.  ``movies`` is empty on failure.
        """
        data, error = self._request("GET", "/movies")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_movie(self, movie_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single movie by ID."""
        return self._request("GET", f"/movies/{movie_id}")

    def create_movie(self, title: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a movie and return the stored record with its id."""
        return self._request("POST", "/movies", json_body={"title": title})

    def update_movie(self, movie_id: int, title: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Change the title of a movie.

        A missing movie is reported as an error with ``status_code``
        404.
        """
        return self._request("PUT", f"/movies/{movie_id}", json_body={"title": title})

    def delete_movie(self, movie_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a movie.

        Returns:
            A tuple ``(success, error)``.  Deleting an unknown movie
            still succeeds.
        """
        _, error = self._request("DELETE", f"/movies/{movie_id}", expect_json=False)
        if error:
            return False, error
        return True, None

    def health(self) -> Tuple[Optional[str], Optional[Error]]:
        """Return the health check text, normally ``System healthy``."""
        return self._request("GET", "/health", expect_json=False)

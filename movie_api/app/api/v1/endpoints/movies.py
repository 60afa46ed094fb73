"""
Movie endpoints for API v1.

These routes provide CRUD operations over the in‑memory movie list.
Request bodies that are missing or ``null`` are rejected with HTTP
400.  Updating or reading an unknown movie returns HTTP 404, while
deleting one always succeeds so that ``DELETE`` can be repeated
safely.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from movie_api.app.api.dependencies import get_movie_service
from movie_api.app.schemas.movie import MovieCreate, MovieRead, MovieUpdate
from movie_api.app.services.movie_service import MovieService


router = APIRouter()


@router.get("", response_model=List[MovieRead])
async def list_movies(service: MovieService = Depends(get_movie_service)) -> List[MovieRead]:
    """Return all movies in the order they were created."""
    return await service.get_all_movies()


@router.get("/{movie_id}", response_model=MovieRead)
async def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)) -> MovieRead:
    """Retrieve a single movie by ID.

    Returns HTTP 404 if the movie does not exist.  The ``Location``
    header of a created movie points here.
    """
    movie = await service.get_movie_with_id(movie_id)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")
    return movie


@router.post("", response_model=MovieRead, status_code=status.HTTP_201_CREATED)
async def create_movie(
    request: Request,
    response: Response,
    movie_in: Optional[MovieCreate] = Body(None),
    service: MovieService = Depends(get_movie_service),
) -> MovieRead:
    """Create a new movie.

    The server assigns the id; any ``id`` in the body is ignored.  The
    response carries a ``Location`` header with the path of the new
    movie.
    """
    if movie_in is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Request body is required")
    movie = await service.create_movie(movie_in)
    response.headers["Location"] = str(request.app.url_path_for("get_movie", movie_id=movie.id))
    return movie


@router.put("/{movie_id}", response_model=MovieRead)
async def update_movie(
    movie_id: int,
    movie_in: Optional[MovieUpdate] = Body(None),
    service: MovieService = Depends(get_movie_service),
) -> MovieRead:
    """Change the title of an existing movie.

    Returns HTTP 400 without a body and HTTP 404 if the movie does not
    exist.  The id of a movie never changes.
    """
    if movie_in is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Request body is required")
    movie = await service.update_movie_with_id(movie_id, movie_in)
    if movie is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Movie not found")
    return movie


@router.delete("/{movie_id}", status_code=status.HTTP_200_OK, response_class=Response)
async def delete_movie(movie_id: int, service: MovieService = Depends(get_movie_service)) -> Response:
    """Delete a movie.  Unknown ids are ignored and still return 200."""
    await service.delete_movie_with_id(movie_id)
    return Response(status_code=status.HTTP_200_OK)

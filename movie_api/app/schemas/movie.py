"""
Pydantic models for movie data.

``MovieBase`` holds the fields a client may send; ``MovieCreate`` and
``MovieUpdate`` are the request bodies and ``MovieRead`` adds the
server‑assigned ``id`` for responses.  Identifiers are never taken
from a request body: an ``id`` key sent by a client is ignored like
any other unknown field.
"""

from pydantic import BaseModel, Field


class MovieBase(BaseModel):
    title: str = Field(..., examples=["Inception"])


class MovieCreate(MovieBase):
    """Schema for creating a movie."""
    pass


class MovieUpdate(MovieBase):
    """Schema for updating a movie.  Only the title can change."""
    pass


class MovieRead(MovieBase):
    """Schema for reading a movie from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }

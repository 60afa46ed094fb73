"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers.  When new endpoints are
added, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import health, movies

router = APIRouter()

router.include_router(movies.router, prefix="/movies", tags=["movies"])
router.include_router(health.router, prefix="/health", tags=["health"])

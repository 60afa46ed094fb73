"""Health check endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("", response_class=PlainTextResponse)
async def health() -> str:
    """Report that the process is up.  The text never changes."""
    return "System healthy"

"""Health check endpoint."""

from fastapi import APIRouter

from nowshowing.config import settings
from nowshowing.storage import read_snapshot

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str | None]:
    """
    Health check endpoint.

    Returns:
        Status plus when the current snapshot was generated (None before the
        first publish) and its error note, if any
    """
    snapshot = read_snapshot(settings.output_path)
    return {
        "status": "ok",
        "generated_at": snapshot.generated_at.isoformat() if snapshot else None,
        "error": snapshot.error if snapshot else None,
    }

"""Snapshot API endpoint."""

import logging

from fastapi import APIRouter, Response

from nowshowing.config import settings
from nowshowing.pipeline.assembler import failure_snapshot
from nowshowing.storage import read_snapshot

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/snapshot")
async def get_snapshot() -> Response:
    """
    Latest published schedule snapshot.

    Returns:
        The snapshot on disk, or an empty annotated snapshot if none has been
        published yet. Never an error status: widgets polling this URL always
        get a valid document.
    """
    snapshot = read_snapshot(settings.output_path)
    if snapshot is None:
        logger.info(f"No snapshot at {settings.output_path} yet")
        snapshot = failure_snapshot("No snapshot published yet")

    # Serialized by hand so null next_starting/next_finishing stay in the body
    # while unset annotations are left out
    return Response(content=snapshot.to_json(), media_type="application/json")

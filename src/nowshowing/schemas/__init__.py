"""Pydantic schemas for the published snapshot."""

from nowshowing.schemas.snapshot import (
    FinishingResponse,
    ScheduleSnapshot,
    ShowingResponse,
)

__all__ = [
    "FinishingResponse",
    "ScheduleSnapshot",
    "ShowingResponse",
]

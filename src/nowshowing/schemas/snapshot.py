"""Pydantic schemas for the published schedule snapshot."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ShowingResponse(BaseModel):
    """One showing in the day's schedule."""

    model_config = ConfigDict(from_attributes=True)

    film: str
    screen: str | None = None
    start: str  # "HH:MM"
    end: str | None = None  # "HH:MM", only when the source gave one


class FinishingResponse(BaseModel):
    """The showing currently playing, with its explicit or assumed end."""

    model_config = ConfigDict(from_attributes=True)

    film: str
    screen: str | None = None
    start: str
    end: str


class ScheduleSnapshot(BaseModel):
    """
    The published document for one pipeline run.

    ``today_showings`` is always present and ascending by start time.
    ``source``, ``error`` and ``today_block`` are optional and left out of
    the JSON when unset.
    """

    generated_at: datetime
    source: str | None = None
    error: str | None = None
    next_starting: ShowingResponse | None = None
    next_finishing: FinishingResponse | None = None
    today_showings: list[ShowingResponse] = []
    today_block: str | None = None

    def to_json(self) -> str:
        """Serialize for publishing, omitting unset optional annotations."""
        return self.model_dump_json(
            indent=2,
            exclude={
                name
                for name in ("source", "error", "today_block")
                if getattr(self, name) is None
            },
        )

"""Assemble the published snapshot, guaranteeing a valid result on every path."""

import logging
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from nowshowing.config import settings
from nowshowing.extractors import BaseExtractor, extract_candidates
from nowshowing.extractors.models import Showing
from nowshowing.pipeline.events import DerivedEvents, derive_events
from nowshowing.pipeline.normalizer import normalize_candidates
from nowshowing.schemas.snapshot import FinishingResponse, ScheduleSnapshot, ShowingResponse
from nowshowing.utils.clock import minute_of_day

logger = logging.getLogger(__name__)


def cinema_tz() -> ZoneInfo | timezone:
    """The configured cinema timezone, or UTC if it can't be resolved."""
    try:
        return ZoneInfo(settings.timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"Unknown timezone {settings.timezone!r}, falling back to UTC: {e}")
        return timezone.utc


def local_now(now: datetime | None = None) -> datetime:
    """
    Timezone-aware "now" in the cinema's timezone.

    Naive datetimes are taken to already be cinema-local wall-clock time.
    """
    tz = cinema_tz()
    if now is None:
        return datetime.now(tz)
    if now.tzinfo is None:
        return now.replace(tzinfo=tz)
    return now.astimezone(tz)


def render_block(showings: list[Showing]) -> str:
    """One "HH:MM  Title" line per showing, in schedule order."""
    return "\n".join(f"{s.start}  {s.film}" for s in showings)


def assemble_snapshot(
    showings: list[Showing],
    events: DerivedEvents,
    generated_at: datetime,
    source: str | None = None,
    error: str | None = None,
    include_block: bool = True,
) -> ScheduleSnapshot:
    """
    Package the day's showings and derived events into a snapshot.

    Args:
        showings: Normalized showings, ascending by start
        events: Output of derive_events for the same showings
        generated_at: Timestamp of the computation
        source: Which source/strategy produced the data
        error: Failure or degradation note
        include_block: Whether to add the human-readable today_block

    Returns:
        ScheduleSnapshot ready to publish
    """
    next_starting = events.next_starting
    next_finishing = events.next_finishing

    return ScheduleSnapshot(
        generated_at=generated_at,
        source=source,
        error=error,
        next_starting=(
            ShowingResponse.model_validate(next_starting) if next_starting else None
        ),
        next_finishing=(
            FinishingResponse.model_validate(next_finishing) if next_finishing else None
        ),
        today_showings=[ShowingResponse.model_validate(s) for s in showings],
        today_block=render_block(showings) if include_block and showings else None,
    )


def failure_snapshot(
    error: str,
    now: datetime | None = None,
    source: str | None = None,
) -> ScheduleSnapshot:
    """An empty, error-annotated snapshot: still a valid document to publish."""
    return ScheduleSnapshot(
        generated_at=local_now(now),
        source=source,
        error=error,
        next_starting=None,
        next_finishing=None,
        today_showings=[],
    )


def build_snapshot(
    document: Any,
    now: datetime | None = None,
    source: str | None = None,
    extractors: list[BaseExtractor] | None = None,
    default_duration: int | None = None,
    include_block: bool | None = None,
) -> ScheduleSnapshot:
    """
    Run the full pipeline on one document.

    Never raises: any failure inside the pipeline becomes an error-annotated
    empty snapshot.

    Args:
        document: Markup string, plain text, or API (title, times) pairs
        now: Current instant (defaults to the cinema's wall clock)
        source: Name of the source the document came from
        extractors: Strategy chain override
        default_duration: Assumed running time in minutes (uses settings if not provided)
        include_block: Whether to render today_block (uses settings if not provided)

    Returns:
        ScheduleSnapshot
    """
    if default_duration is None:
        default_duration = settings.default_duration_minutes
    if include_block is None:
        include_block = settings.include_today_block

    try:
        moment = local_now(now)
        candidates, strategy = extract_candidates(document, extractors)
        showings = normalize_candidates(candidates)
        events = derive_events(showings, minute_of_day(moment), default_duration)

        label = f"{source}:{strategy}" if source and strategy else (source or strategy)

        snapshot = assemble_snapshot(
            showings,
            events,
            generated_at=moment,
            source=label,
            include_block=include_block,
        )
    except Exception as e:
        logger.error(f"Pipeline failed, publishing empty snapshot: {e}", exc_info=True)
        return failure_snapshot(f"Pipeline error: {e}", now, source)

    logger.info(
        f"Snapshot: {len(snapshot.today_showings)} showings, "
        f"next starting {snapshot.next_starting.start if snapshot.next_starting else None}, "
        f"now showing {snapshot.next_finishing.film if snapshot.next_finishing else None}"
    )
    return snapshot

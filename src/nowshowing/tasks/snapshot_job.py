"""Snapshot job: fetch the schedule, run the pipeline, publish the file."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from nowshowing.config import settings
from nowshowing.pipeline.assembler import build_snapshot, failure_snapshot
from nowshowing.schemas.snapshot import ScheduleSnapshot
from nowshowing.sources import BaseSource, SourceError, get_source
from nowshowing.storage import write_snapshot

logger = logging.getLogger(__name__)


async def acquire(source: BaseSource) -> Any:
    """Fetch the document, wrapping unexpected failures as SourceError."""
    try:
        return await source.fetch()
    except SourceError:
        raise
    except Exception as e:
        raise SourceError(f"{type(e).__name__}: {e}") from e


async def run_snapshot_job(
    source: BaseSource | None = None,
    now: datetime | None = None,
    output_path: str | Path | None = None,
    document: Any = None,
    include_block: bool | None = None,
) -> ScheduleSnapshot:
    """Produce and publish today's snapshot.

    Always writes a file: if the source fails, the published snapshot is
    empty and carries the failure in ``error``.

    Args:
        source: Where to fetch from (uses settings.source_mode if not provided)
        now: Current instant (defaults to the cinema's wall clock)
        output_path: Destination file (uses settings if not provided)
        document: Pre-fetched document; skips acquisition when given
        include_block: Whether to render today_block (uses settings if not provided)

    Returns:
        The published snapshot
    """
    path = output_path or settings.output_path
    snapshot: ScheduleSnapshot | None = None
    source_name = source.name if source else settings.source_mode

    try:
        if document is None:
            if source is None:
                source = get_source(settings.source_mode)
            if source is None:
                raise SourceError(f"Unknown source mode: {settings.source_mode}")

            logger.info(f"Fetching schedule via {source.name}")
            document = await acquire(source)
        else:
            source_name = "file"

        snapshot = build_snapshot(
            document, now=now, source=source_name, include_block=include_block
        )

    except SourceError as e:
        logger.error(f"Acquisition failed, publishing placeholder: {e}")
        snapshot = failure_snapshot(str(e), now, source=source_name)

    except Exception as e:
        logger.error(f"Snapshot job failed, publishing placeholder: {e}", exc_info=True)
        snapshot = failure_snapshot(f"Unexpected error: {e}", now, source=source_name)

    finally:
        if snapshot is None:
            # Cancelled mid-run; still leave a valid document behind
            snapshot = failure_snapshot("Snapshot run was interrupted", now, source=source_name)
        write_snapshot(snapshot, path)

    return snapshot

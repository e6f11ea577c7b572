"""Publishing snapshots to disk."""

import logging
import os
import tempfile
from pathlib import Path

from nowshowing.schemas.snapshot import ScheduleSnapshot

logger = logging.getLogger(__name__)


def write_snapshot(snapshot: ScheduleSnapshot, path: str | Path) -> Path:
    """
    Write a snapshot as UTF-8 JSON.

    The file is written to a temporary sibling and moved into place, so a
    reader never sees a half-written document.

    Args:
        snapshot: Snapshot to publish
        path: Destination file; parent directories are created

    Returns:
        The destination path
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(snapshot.to_json())
            f.write("\n")
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise

    logger.info(f"Wrote {target}")
    return target


def read_snapshot(path: str | Path) -> ScheduleSnapshot | None:
    """Load a previously published snapshot, or None if there isn't a usable one."""
    target = Path(path)
    if not target.exists():
        return None
    try:
        return ScheduleSnapshot.model_validate_json(target.read_text(encoding="utf-8"))
    except Exception as e:
        logger.warning(f"Could not read snapshot {target}: {e}")
        return None

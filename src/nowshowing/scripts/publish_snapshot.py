"""Publish today's schedule snapshot: fetch, parse and write the JSON file."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any

from nowshowing.config import settings
from nowshowing.pipeline.assembler import local_now
from nowshowing.sources import SOURCE_REGISTRY, get_source
from nowshowing.tasks.snapshot_job import run_snapshot_job
from nowshowing.utils.clock import UNPARSABLE, parse_clock

logger = logging.getLogger(__name__)


def load_document(path: Path) -> Any:
    """Read a saved document: JSON files hold API pairs, anything else is text/HTML."""
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    return text


def parse_now(value: str) -> datetime:
    """Today at HH:MM in the cinema's timezone."""
    minutes = parse_clock(value)
    if minutes == UNPARSABLE:
        raise argparse.ArgumentTypeError(f"invalid time {value!r}, expected HH:MM")
    return local_now().replace(hour=minutes // 60, minute=minutes % 60, second=0, microsecond=0)


async def publish(args: argparse.Namespace) -> bool:
    """Run one snapshot and print a summary. Returns False if the file couldn't be written."""
    document = load_document(args.input) if args.input else None
    source = get_source(args.mode) if document is None else None

    try:
        snapshot = await run_snapshot_job(
            source=source,
            now=args.now,
            output_path=args.output,
            document=document,
            include_block=False if args.no_block else None,
        )
    except OSError as e:
        logger.error(f"Could not write snapshot to {args.output}: {e}")
        return False

    print(f"Wrote {args.output}  ({len(snapshot.today_showings)} showings)")
    if snapshot.error:
        print(f"  error: {snapshot.error}")
    if snapshot.next_starting:
        print(f"  next starting:  {snapshot.next_starting.start}  {snapshot.next_starting.film}")
    if snapshot.next_finishing:
        print(
            f"  now showing:    {snapshot.next_finishing.film} "
            f"(until {snapshot.next_finishing.end})"
        )
    return True


def main() -> None:
    parser = argparse.ArgumentParser(
        description=f"Publish today's showtimes for {settings.cinema_name} as JSON."
    )
    parser.add_argument(
        "--mode",
        choices=sorted(SOURCE_REGISTRY),
        default=settings.source_mode,
        help=f"How to fetch the schedule (default: {settings.source_mode})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(settings.output_path),
        metavar="FILE",
        help=f"Where to write the snapshot (default: {settings.output_path})",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        metavar="FILE",
        help="Parse a saved page (HTML/text) or API pairs (.json) instead of fetching",
    )
    parser.add_argument(
        "--now",
        type=parse_now,
        default=None,
        metavar="HH:MM",
        help="Pretend the current time is HH:MM today",
    )
    parser.add_argument(
        "--no-block",
        action="store_true",
        help="Leave today_block out of the snapshot",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(message)s")

    ok = asyncio.run(publish(args))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()

"""Clock-time parsing and formatting.

Times of day are handled as minutes since midnight (0-1439). A token that
cannot be parsed maps to ``UNPARSABLE``, which is larger than any valid
minute so it sorts after every real showing and can be filtered out.
"""

import re
from datetime import datetime

MINUTES_PER_DAY = 24 * 60

# Sorts after every valid minute value
UNPARSABLE = 10**9

_CLOCK_24H = re.compile(r"^(\d{1,2}):(\d{2})$")
_CLOCK_12H = re.compile(r"^(\d{1,2}):(\d{2})\s?([AaPp][Mm])$")

# "18:00", "9:05PM", "9:05 pm" embedded anywhere in a line of text
_CLOCK_TOKEN = re.compile(r"\b(\d{1,2}:\d{2}(?:\s?[AaPp][Mm])?)\b")


def parse_clock(token: str | None) -> int:
    """
    Parse a clock token into minutes since midnight.

    Accepts 24-hour "H:MM"/"HH:MM" and 12-hour "H:MM AM"/"HH:MMpm"
    (case-insensitive, optional space before the meridiem).

    Args:
        token: Raw time token

    Returns:
        Minutes since midnight, or UNPARSABLE if the token has any other shape
    """
    if not token:
        return UNPARSABLE

    text = token.strip()

    m = _CLOCK_24H.match(text)
    if m:
        hour, minute = int(m.group(1)), int(m.group(2))
        if hour > 23 or minute > 59:
            return UNPARSABLE
        return hour * 60 + minute

    m = _CLOCK_12H.match(text)
    if m:
        hour, minute = int(m.group(1)), int(m.group(2))
        period = m.group(3).lower()
        if not (1 <= hour <= 12) or minute > 59:
            return UNPARSABLE
        if period == "am" and hour == 12:
            hour = 0
        elif period == "pm" and hour < 12:
            hour += 12
        return hour * 60 + minute

    return UNPARSABLE


def is_24_hour_token(token: str | None) -> bool:
    """True for a strict "H:MM"/"HH:MM" token that is a real time of day."""
    if not token or not _CLOCK_24H.match(token):
        return False
    return parse_clock(token) != UNPARSABLE


def format_clock(minutes: int) -> str:
    """Format minutes since midnight as zero-padded "HH:MM", wrapping into one day."""
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def to_24_hour(token: str | None) -> str | None:
    """Canonical "HH:MM" form of any parsable token, or None."""
    minutes = parse_clock(token)
    if minutes == UNPARSABLE:
        return None
    return format_clock(minutes)


def minute_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def find_clock_tokens(text: str) -> list[str]:
    """Return every clock token embedded in *text*, in order of appearance."""
    return [m.group(1) for m in _CLOCK_TOKEN.finditer(text)]

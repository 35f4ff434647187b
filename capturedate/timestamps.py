"""Shared functions for converting instants and date-time strings to the reference timezone."""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from .constants import REFERENCE_TZ


EPOCH = datetime(1970, 1, 1)

# Handles raw EXIF (colon dates, space separator) as well as dash/dot dates,
# ISO 8601 'T' separators, fractional seconds and a trailing UTC offset
EXIF_DATETIME_PATTERN = re.compile(
    r'(\d{4})[-:.](\d{2})[-:.](\d{2})[T ](\d{2}):(\d{2}):(\d{2})'
    r'(?:\.\d+)?\s*(Z|[+-]\d{2}:?\d{2})?$'
)
OFFSET_PATTERN = re.compile(r'([+-])(\d{2}):?(\d{2})$')


def to_reference_time(moment: datetime) -> datetime:
    """Normalize an instant to a naive, second-precision datetime at UTC+0.

    Naive input is taken to already be in UTC.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(REFERENCE_TZ).replace(tzinfo=None)
    return moment.replace(microsecond=0)


def from_epoch_millis(millis: int) -> datetime:
    """Convert Unix epoch milliseconds to reference time.

    Uses timedelta arithmetic rather than fromtimestamp() so that any
    non-negative 13-digit value converts on every platform.
    """
    return to_reference_time(EPOCH + timedelta(milliseconds=millis))


def from_epoch_seconds(seconds: float) -> datetime:
    """Convert a Unix timestamp (as found in os.stat results) to reference time."""
    return to_reference_time(datetime.fromtimestamp(seconds, tz=timezone.utc))


def now() -> datetime:
    """Current wall-clock time in reference time."""
    return to_reference_time(datetime.now(timezone.utc))


def parse_utc_offset(offset_str: Optional[str]) -> Optional[timezone]:
    """Parse an offset like '+02:00', '-0400' or 'Z' into a fixed timezone."""
    if not offset_str:
        return None

    offset_str = offset_str.strip()
    if offset_str == 'Z':
        return timezone.utc

    match = OFFSET_PATTERN.match(offset_str)
    if not match:
        return None

    sign = 1 if match.group(1) == '+' else -1
    hours, minutes = int(match.group(2)), int(match.group(3))
    if hours > 23 or minutes > 59:
        return None
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_exif_datetime(value: str, offset: Optional[str] = None) -> Optional[datetime]:
    """Parse an EXIF date-time string into reference time.

    Handles both raw EXIF (2023:06:15 14:30:22) and ISO 8601
    (2023-06-15T14:30:22+02:00) forms. An offset embedded in the value takes
    precedence over the separate ``offset`` argument; without either, the value
    is taken as UTC. Returns None for blank or invalid values such as
    '0000:00:00 00:00:00'.
    """
    match = EXIF_DATETIME_PATTERN.match(value.strip().rstrip('\x00'))
    if not match:
        return None

    try:
        base_dt = datetime(*(int(group) for group in match.group(1, 2, 3, 4, 5, 6)))
    except ValueError:
        return None

    tz = parse_utc_offset(match.group(7)) or parse_utc_offset(offset) or timezone.utc
    return to_reference_time(base_dt.replace(tzinfo=tz))

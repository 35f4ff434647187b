"""
Recognize date-time literals embedded in filenames.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .constants import FORMAT_DASHED, FORMAT_DASHED_DOTTED, FORMAT_STRIPPED
from .timestamps import from_epoch_millis


@dataclass(frozen=True)
class FilenamePattern:
    """A filename regex paired with the format of the literal it captures.

    The regex must match the whole filename with the date literal as group 1.
    A date_format of None marks a 13-digit Unix epoch in milliseconds.
    """

    name: str
    regex: re.Pattern
    date_format: Optional[str]

    def parse(self, filename: str) -> Optional[datetime]:
        """Parse the embedded date-time, or None if absent or not a valid date."""
        match = self.regex.fullmatch(filename)
        if not match:
            return None

        literal = match.group(1)
        if self.date_format is None:
            return from_epoch_millis(int(literal))

        try:
            return datetime.strptime(literal, self.date_format)
        except ValueError:
            # Digits matched but do not form a calendar date-time (e.g. month 13).
            # Feb 30 is not clamped to Feb 28 and hour 24 is not rolled over to the
            # next day, as lenient date parsers do.
            return None


# Tried in this order; the first pattern that yields a valid date-time wins
FILENAME_PATTERNS = (
    FilenamePattern(
        name="dashed-dotted",
        regex=re.compile(r'.*(\d{4}-\d{2}-\d{2} \d{2}\.\d{2}\.\d{2}).*', re.ASCII),
        date_format=FORMAT_DASHED_DOTTED,
    ),
    FilenamePattern(
        name="stripped",
        regex=re.compile(r'.*(\d{8}_\d{6}).*', re.ASCII),
        date_format=FORMAT_STRIPPED,
    ),
    FilenamePattern(
        name="dashed",
        regex=re.compile(r'.*(\d{4}-\d{2}-\d{2}-\d{2}-\d{2}-\d{2}).*', re.ASCII),
        date_format=FORMAT_DASHED,
    ),
    FilenamePattern(
        name="epoch-millis",
        regex=re.compile(r'.*(\d{13}).*', re.ASCII),
        date_format=None,
    ),
)


def date_from_filename(filename: str) -> Optional[datetime]:
    """Get the date-time embedded in a filename, trying each pattern in priority order."""
    for pattern in FILENAME_PATTERNS:
        parsed = pattern.parse(filename)
        if parsed is not None:
            return parsed
    return None


def date_from_path(path: Union[str, Path]) -> Optional[datetime]:
    """Get the date-time embedded in the final component of a path."""
    return date_from_filename(Path(path).name)

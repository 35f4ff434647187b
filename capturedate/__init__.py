"""
capturedate - Resolve the best-effort creation timestamp of photo files.

Tries a date-time literal in the filename, then the EXIF capture time, then
the filesystem creation and modification times, and finally falls back to
the current time. All timestamps are normalized to UTC+0.
"""

__version__ = "1.0.0"


# Public API
from .config import Config
from .constants import DateSource
from .core import DateResolver, ResolvedDate, resolve_creation_date
from .filename import date_from_filename, date_from_path
from .filesystem import creation_time, last_modified_time
from .log import setup_logging
from .metadata import date_from_metadata

__all__ = [ "Config", "DateSource", "DateResolver", "ResolvedDate", "resolve_creation_date",
            "date_from_filename", "date_from_path", "creation_time", "last_modified_time",
            "setup_logging", "date_from_metadata" ]

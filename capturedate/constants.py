"""
Program constants, date source tags, and shared logger/console accessors.
"""

import logging
from datetime import timezone
from enum import Enum
from typing import Optional

from rich.console import Console


PROGRAM = "capturedate"

# All resolved timestamps are expressed at this offset
REFERENCE_TZ = timezone.utc

# Date-time formats embedded in filenames
FORMAT_DASHED_DOTTED = "%Y-%m-%d %H.%M.%S"
FORMAT_STRIPPED = "%Y%m%d_%H%M%S"
FORMAT_DASHED = "%Y-%m-%d-%H-%M-%S"

# EXIF tags read from the Exif sub-IFD
EXIF_DATETIME_ORIGINAL = 0x9003
EXIF_OFFSET_TIME_ORIGINAL = 0x9011


class DateSource(str, Enum):
    """Tag naming the strategy that produced a resolved timestamp."""

    NAME = "NAME"
    META = "META"
    CRTD = "CRTD"
    LSTM = "LSTM"
    UNKN = "UNKN"

    def __str__(self) -> str:
        return self.value


_console: Optional[Console] = None


def get_console() -> Console:
    """Get the shared rich console used for log output."""
    global _console
    if _console is None:
        _console = Console(stderr=True)
    return _console


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the program logger, or a named child of it."""
    if name is None or name == PROGRAM:
        return logging.getLogger(PROGRAM)
    if not name.startswith(f"{PROGRAM}."):
        name = f"{PROGRAM}.{name}"
    return logging.getLogger(name)

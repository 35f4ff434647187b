"""
Filesystem creation and modification times.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .constants import get_logger
from .timestamps import from_epoch_seconds


logger = get_logger("filesystem")


def _birth_time(stat_result: os.stat_result) -> Optional[float]:
    """Native creation time from a stat result, or None where unsupported."""
    birthtime = getattr(stat_result, "st_birthtime", None)
    if birthtime is not None:
        return birthtime
    # On Windows st_ctime is the creation time, not the inode change time
    if os.name == "nt":
        return stat_result.st_ctime
    return None


def creation_time(path: Union[str, Path]) -> Optional[datetime]:
    """Get the filesystem creation time of a file in reference time."""
    file_path = Path(path)
    try:
        birthtime = _birth_time(file_path.stat())
        if birthtime is None:
            logger.error(f"Could not read creation time for path: {file_path} (not supported)")
            return None
        return from_epoch_seconds(birthtime)
    except (OSError, OverflowError, ValueError) as e:
        logger.error(f"Could not read creation time for path: {file_path}: {e}")
        return None


def last_modified_time(path: Union[str, Path]) -> Optional[datetime]:
    """Get the filesystem last-modified time of a file in reference time."""
    file_path = Path(path)
    try:
        return from_epoch_seconds(file_path.stat().st_mtime)
    except (OSError, OverflowError, ValueError) as e:
        logger.error(f"Could not read last modified time for path: {file_path}: {e}")
        return None

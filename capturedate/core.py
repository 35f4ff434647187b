"""
Core creation date resolution.

A file's creation date is taken from the first evidence source that yields a
value, in this order: a date-time literal in the filename, the EXIF capture
time, the filesystem creation time, and the filesystem modification time.
When none of them yields a value, the current time is used.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, Union

from .constants import DateSource, get_logger
from .filename import date_from_path
from .filesystem import creation_time, last_modified_time
from .metadata import date_from_metadata
from .timestamps import now


PathLike = Union[str, Path]
Strategy = Callable[[Path], Optional[datetime]]

DEFAULT_STRATEGIES: Tuple[Tuple[DateSource, Strategy], ...] = (
    (DateSource.NAME, date_from_path),
    (DateSource.META, date_from_metadata),
    (DateSource.CRTD, creation_time),
    (DateSource.LSTM, last_modified_time),
)


@dataclass(frozen=True)
class ResolvedDate:
    """A creation timestamp (naive, UTC+0, second precision) and the source that produced it."""

    timestamp: datetime
    source: DateSource


def first_available(path: Path, strategies: Sequence[Tuple[DateSource, Strategy]],
                    logger: Optional[logging.Logger] = None) -> Optional[ResolvedDate]:
    """Run strategies in order and return the first non-None result.

    A strategy that raises is logged and treated as having no result.
    """
    logger = logger or get_logger()
    for source, strategy in strategies:
        try:
            timestamp = strategy(path)
        except Exception as e:
            logger.error(f"{source} lookup failed for path: {path}: {e}")
            continue

        if timestamp is not None:
            return ResolvedDate(timestamp=timestamp, source=source)

    return None


class DateResolver:
    """Resolves the best-effort creation timestamp of a file."""

    def __init__(self, strategies: Optional[Sequence[Tuple[DateSource, Strategy]]] = None):
        self.strategies = tuple(strategies) if strategies is not None else DEFAULT_STRATEGIES
        self.logger = get_logger()

    def resolve(self, path: PathLike) -> ResolvedDate:
        """Resolve the creation timestamp of a file. Never raises."""
        file_path = Path(path)

        resolved = first_available(file_path, self.strategies, self.logger)
        if resolved is None:
            self.logger.warning(f"Could not determine creation time for path: {file_path}")
            resolved = ResolvedDate(timestamp=now(), source=DateSource.UNKN)

        # Filename dates are the expected case; anything else is worth surfacing
        level = logging.DEBUG if resolved.source is DateSource.NAME else logging.INFO
        self.logger.log(
            level,
            f"{resolved.timestamp.isoformat()}\t{resolved.source}\t{file_path}",
            extra={
                "resolved_at": resolved.timestamp,
                "date_source": resolved.source,
                "file_path": file_path,
            },
        )
        return resolved


_default_resolver = DateResolver()


def resolve_creation_date(path: PathLike) -> ResolvedDate:
    """Resolve the creation timestamp of a file with the default strategies."""
    return _default_resolver.resolve(path)

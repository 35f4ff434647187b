"""
Read the original capture time from embedded image metadata.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import pillow_heif
from PIL import ExifTags, Image, UnidentifiedImageError

from .constants import EXIF_DATETIME_ORIGINAL, EXIF_OFFSET_TIME_ORIGINAL, get_logger
from .timestamps import parse_exif_datetime


logger = get_logger("metadata")

# HEIC/HEIF photos carry the same Exif block as JPEGs
pillow_heif.register_heif_opener()


def read_exif_capture_tags(image_path: Path) -> dict:
    """Return the Exif sub-IFD of an image as a tag-id -> value mapping.

    Raises UnidentifiedImageError for unrecognized formats and OSError for
    unreadable files.
    """
    with Image.open(image_path) as img:
        exif = img.getexif()
        return dict(exif.get_ifd(ExifTags.IFD.Exif))


def _as_text(value) -> Optional[str]:
    if isinstance(value, bytes):
        value = value.decode("ascii", errors="ignore")
    if not isinstance(value, str):
        return None
    return value.strip().rstrip("\x00") or None


def date_from_metadata(path: Union[str, Path]) -> Optional[datetime]:
    """Get the EXIF DateTimeOriginal of an image in reference time.

    The companion OffsetTimeOriginal tag, when present, gives the offset the
    camera recorded; otherwise the value is taken as UTC.
    """
    image_path = Path(path)
    try:
        tags = read_exif_capture_tags(image_path)
    except UnidentifiedImageError:
        logger.error(f"Could not read image metadata for path: {image_path} (unrecognized format)")
        return None
    except Exception as e:
        logger.error(f"Could not read image metadata for path: {image_path}: {e}")
        return None

    date_str = _as_text(tags.get(EXIF_DATETIME_ORIGINAL))
    if not date_str:
        logger.debug(f"No DateTimeOriginal tag found for {image_path}")
        return None

    capture_date = parse_exif_datetime(date_str, _as_text(tags.get(EXIF_OFFSET_TIME_ORIGINAL)))
    if capture_date is None:
        logger.debug(f"Unparseable DateTimeOriginal {date_str!r} for {image_path}")
    return capture_date

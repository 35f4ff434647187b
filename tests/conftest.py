"""
pytest configuration and fixtures for capturedate tests.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

import pillow_heif
import pytest
from PIL import ExifTags, Image

pillow_heif.register_heif_opener()


@pytest.fixture
def test_config_path(tmp_path):
    """Test-specific config path with clean state guarantee."""
    config_dir = tmp_path / "capturedate_test_config"
    config_dir.mkdir()
    return config_dir / "config.yml"


@pytest.fixture
def create_test_files(tmp_path):
    """Helper to create test files with specific properties."""

    def create_files(file_specs: List[dict]) -> Path:
        """Create test files based on specifications.

        Args:
            file_specs: List of dicts with keys:
                - name: filename
                - content: file content (optional)
                - mtime: modification time as aware datetime (optional)

        Returns:
            Path to directory containing created files
        """
        test_dir = tmp_path / "test_files"
        test_dir.mkdir(exist_ok=True)

        for spec in file_specs:
            file_path = test_dir / spec['name']
            file_path.parent.mkdir(parents=True, exist_ok=True)

            content = spec.get('content', b'test file content')
            if isinstance(content, str):
                file_path.write_text(content)
            else:
                file_path.write_bytes(content)

            if 'mtime' in spec:
                mtime = spec['mtime'].timestamp()
                os.utime(file_path, (mtime, mtime))

        return test_dir

    return create_files


@pytest.fixture
def create_image(tmp_path):
    """Helper to create a small image with optional EXIF capture tags.

    The format follows the file extension (.jpg, .png, .heic, ...).
    """

    def create(name: str, date_time_original: Optional[str] = None,
               offset_time_original: Optional[str] = None) -> Path:
        image_path = tmp_path / name
        exif = Image.Exif()
        exif_ifd = {}
        if date_time_original is not None:
            exif_ifd[ExifTags.Base.DateTimeOriginal] = date_time_original
        if offset_time_original is not None:
            exif_ifd[ExifTags.Base.OffsetTimeOriginal] = offset_time_original
        if exif_ifd:
            exif[ExifTags.IFD.Exif] = exif_ifd

        with Image.new("RGB", (16, 16), color=(200, 120, 40)) as img:
            img.save(image_path, exif=exif.tobytes())
        return image_path

    return create


@pytest.fixture
def no_birth_time(monkeypatch):
    """Make the filesystem creation time unsupported on every platform."""
    monkeypatch.setattr("capturedate.filesystem._birth_time", lambda stat_result: None)


@pytest.fixture
def fixed_birth_time(monkeypatch):
    """Report a fixed filesystem creation time for every file."""

    def apply(timestamp: float) -> None:
        monkeypatch.setattr("capturedate.filesystem._birth_time", lambda stat_result: timestamp)

    return apply


@pytest.fixture
def program_caplog(caplog):
    """Capture all capturedate log records, including DEBUG."""
    caplog.set_level(logging.DEBUG, logger="capturedate")
    return caplog

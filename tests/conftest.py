"""Pytest configuration and fixtures."""

import threading
from pathlib import Path
from typing import Any, Dict

import pytest

from sortbydate.config.context import SortConfig
from sortbydate.metadata.dates import ExtractionResult, date_tags, find_date


class FakeExtractor:
    """In-memory stand-in for ExifToolService, keyed by file name."""

    def __init__(self, metadata: Dict[str, Dict[str, Any]] = None):
        self.metadata = metadata or {}
        self.calls = []
        self._lock = threading.Lock()

    def extract_date(self, path: Path, use_file_modify_date: bool = False) -> ExtractionResult:
        with self._lock:
            self.calls.append(path)
        fields = self.metadata.get(Path(path).name, {})
        if not fields:
            return ExtractionResult()
        return find_date(fields, date_tags(use_file_modify_date), path)


class RecordingProgress:
    """Progress sink counting advance() calls."""

    def __init__(self):
        self.count = 0
        self._lock = threading.Lock()

    def advance(self, step: int = 1) -> None:
        with self._lock:
            self.count += step


@pytest.fixture
def fake_extractor():
    """Extractor with no metadata; tests fill .metadata."""
    return FakeExtractor()


@pytest.fixture
def progress():
    """Recording progress sink."""
    return RecordingProgress()


@pytest.fixture
def make_config(tmp_path):
    """Factory building a SortConfig rooted in tmp_path."""

    def _make(output=None, **kwargs) -> SortConfig:
        input_dir = kwargs.pop("input_dir", tmp_path / "input")
        if output is None:
            output = str(tmp_path / "output")
        return SortConfig(input_dir=input_dir, output=output, **kwargs)

    return _make


@pytest.fixture
def media_dir(tmp_path):
    """Input directory holding two sample photos."""
    input_dir = tmp_path / "input"
    input_dir.mkdir()
    (input_dir / "photo1.jpg").write_bytes(b"photo one")
    (input_dir / "photo2.jpg").write_bytes(b"photo two")
    return input_dir


@pytest.fixture
def scenario_metadata():
    """Metadata for media_dir: photo1 has EXIF, photo2 only a modify date."""
    return {
        "photo1.jpg": {
            "DateTimeOriginal": "2023:05:10 14:30:00",
            "FileModifyDate": "2023:06:01 09:00:00+02:00",
        },
        "photo2.jpg": {
            "FileModifyDate": "2024:01:01 12:00:00+00:00",
        },
    }

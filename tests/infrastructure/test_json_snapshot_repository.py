"""Tests for the JSON snapshot repository."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure.json_snapshot_repository import JsonSnapshotRepository


def _write(tmp_path: Path, document) -> Path:
    path = tmp_path / "export.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_fetches_both_collections(tmp_path: Path) -> None:
    """Bookings and expenses should be read from the export."""
    path = _write(
        tmp_path,
        {"bookings": [{"id": "b1"}], "expenses": [{"id": "e1"}]},
    )
    repo = JsonSnapshotRepository(path, logger=MagicMock())

    assert repo.fetch_bookings() == [{"id": "b1"}]
    assert repo.fetch_entries() == [{"id": "e1"}]


def test_missing_collection_is_empty(tmp_path: Path) -> None:
    """An export without expenses should yield no entries."""
    repo = JsonSnapshotRepository(
        _write(tmp_path, {"bookings": []}),
        logger=MagicMock(),
    )

    assert repo.fetch_entries() == []


def test_non_object_records_are_skipped(tmp_path: Path) -> None:
    """Records that are not objects should be dropped with a warning."""
    logger = MagicMock()
    repo = JsonSnapshotRepository(
        _write(tmp_path, {"bookings": [{"id": "b1"}, "junk", 3]}),
        logger=logger,
    )

    assert repo.fetch_bookings() == [{"id": "b1"}]
    logger.warning.assert_called_once()


def test_missing_file_raises_runtime_error(tmp_path: Path) -> None:
    """An unreadable export should raise a descriptive RuntimeError."""
    repo = JsonSnapshotRepository(tmp_path / "nope.json", logger=MagicMock())

    with pytest.raises(RuntimeError, match="Cannot read snapshot file"):
        repo.fetch_bookings()


def test_invalid_json_raises_runtime_error(tmp_path: Path) -> None:
    """Malformed JSON should raise a descriptive RuntimeError."""
    path = tmp_path / "broken.json"
    path.write_text("{", encoding="utf-8")
    repo = JsonSnapshotRepository(path, logger=MagicMock())

    with pytest.raises(RuntimeError, match="Invalid JSON"):
        repo.fetch_entries()


def test_top_level_must_be_object(tmp_path: Path) -> None:
    """A JSON array at the top level is not a valid export."""
    repo = JsonSnapshotRepository(_write(tmp_path, []), logger=MagicMock())

    with pytest.raises(RuntimeError, match="must hold a JSON object"):
        repo.fetch_entries()

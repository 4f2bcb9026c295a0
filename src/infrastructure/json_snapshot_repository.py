"""Snapshot adapter reading a back-office JSON export."""

import json
from collections.abc import Mapping
from pathlib import Path

from src.application.ports.snapshots import (
    BookingSnapshotPort,
    LedgerSnapshotPort,
)
from src.infrastructure.logging.logger import get_app_logger


class JsonSnapshotRepository(BookingSnapshotPort, LedgerSnapshotPort):
    """Read-only records from ``{"bookings": [...], "expenses": [...]}``."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            path: Path to the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()
        self._document: Mapping | None = None

    def fetch_bookings(self) -> list[Mapping]:
        return self._collection("bookings")

    def fetch_entries(self) -> list[Mapping]:
        return self._collection("expenses")

    def _collection(self, name: str) -> list[Mapping]:
        items = self._load().get(name) or []
        records = [item for item in items if isinstance(item, Mapping)]
        if len(records) != len(items):
            self._logger.warning(
                f"Skipped {len(items) - len(records)} non-object "
                f"{name} records in {self._path}"
            )
        return records

    def _load(self) -> Mapping:
        if self._document is None:
            try:
                document = json.loads(self._path.read_text(encoding="utf-8"))
            except OSError as exc:
                raise RuntimeError(
                    f"Cannot read snapshot file {self._path}: {exc}"
                ) from exc
            except ValueError as exc:
                raise RuntimeError(
                    f"Invalid JSON in snapshot file {self._path}: {exc}"
                ) from exc
            if not isinstance(document, Mapping):
                raise RuntimeError(
                    f"Snapshot file {self._path} must hold a JSON object"
                )
            self._document = document
        return self._document


__all__ = ["JsonSnapshotRepository"]

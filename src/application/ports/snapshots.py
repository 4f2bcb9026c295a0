"""Application ports for read-only record snapshots."""

from collections.abc import Mapping
from typing import Protocol


class BookingSnapshotPort(Protocol):
    """Port returning the current collection of booking records."""

    def fetch_bookings(self) -> list[Mapping]:
        """Return booking records with their back-office field names."""


class LedgerSnapshotPort(Protocol):
    """Port returning the current collection of ledger entry records."""

    def fetch_entries(self) -> list[Mapping]:
        """Return ledger entry records with their back-office field names."""


__all__ = ["BookingSnapshotPort", "LedgerSnapshotPort"]

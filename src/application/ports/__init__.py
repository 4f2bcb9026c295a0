"""Application ports package."""

from .database import DatabaseEnginePort
from .sinks import LedgerEntrySinkPort, PricingChangeSinkPort
from .snapshots import BookingSnapshotPort, LedgerSnapshotPort

__all__ = [
    "BookingSnapshotPort",
    "DatabaseEnginePort",
    "LedgerEntrySinkPort",
    "LedgerSnapshotPort",
    "PricingChangeSinkPort",
]

"""Application ports receiving records produced by the engine."""

from collections.abc import Mapping
from typing import Protocol


class PricingChangeSinkPort(Protocol):
    """Port notified with the full pricing record after recalculation."""

    def publish(self, record: Mapping) -> None:
        """Receive a ``pricing`` record including ``paymentStatus``."""


class LedgerEntrySinkPort(Protocol):
    """Port storing ledger entry records built from pending bookings."""

    def save_entry(self, record: Mapping) -> str:
        """Store a ledger entry record and return its identifier."""


__all__ = ["PricingChangeSinkPort", "LedgerEntrySinkPort"]

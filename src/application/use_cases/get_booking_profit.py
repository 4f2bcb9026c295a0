"""Use case computing booking profit against matching ledger entries."""

from src.application.ports.snapshots import (
    BookingSnapshotPort,
    LedgerSnapshotPort,
)
from src.domain.models.ledger import AggregatedBookingProfit
from src.domain.services.matching import find_matching_entry
from src.domain.services.profit import (
    compute_aggregated_booking_profit,
    profit_badge,
)
from src.domain.services.records import (
    booking_from_record,
    ledger_entry_from_record,
)
from src.infrastructure.logging.logger import get_app_logger


class GetBookingProfitUseCase:
    """Aggregate the profit of bookings, optionally for a single boat."""

    def __init__(
        self,
        bookings_port: BookingSnapshotPort,
        ledger_port: LedgerSnapshotPort,
        logger=None,
    ) -> None:
        self._bookings_port = bookings_port
        self._ledger_port = ledger_port
        self._logger = logger or get_app_logger()

    def execute(self, boat_name: str | None = None) -> AggregatedBookingProfit:
        """Return aggregated booking profit.

        Args:
            boat_name: Optional boat filter, compared case-insensitively.

        Returns:
            AggregatedBookingProfit: Totals over the selected bookings.
        """
        bookings = [
            booking_from_record(record)
            for record in self._bookings_port.fetch_bookings()
        ]
        if boat_name:
            wanted = boat_name.casefold()
            bookings = [
                booking
                for booking in bookings
                if (booking.boat_name or "").casefold() == wanted
            ]
        entries = [
            ledger_entry_from_record(record)
            for record in self._ledger_port.fetch_entries()
        ]

        result = compute_aggregated_booking_profit(
            (booking, find_matching_entry(booking, entries))
            for booking in bookings
        )
        self._logger.info(
            f"Booking profit computed: bookings={result.booking_count}, "
            f"net_profit={result.total_net_profit}, "
            f"badge={profit_badge(result.average_profit_margin)}"
        )
        return result


__all__ = ["GetBookingProfitUseCase"]

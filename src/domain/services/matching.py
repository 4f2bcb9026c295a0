"""Pairing bookings with ledger entries."""

from collections.abc import Iterable, Sequence

from src.domain.constants import (
    DEFAULT_EXPENSE_CHANNELS,
    DEFAULT_INCOME_CHANNELS,
)
from src.domain.models.ledger import Booking, LedgerEntry
from src.utils.date_utils import format_record_date


def _same_boat(left: str | None, right: str | None) -> bool:
    return bool(left and right) and left.casefold() == right.casefold()


def find_matching_entry(
    booking: Booking,
    entries: Sequence[LedgerEntry],
) -> LedgerEntry | None:
    """Return the ledger entry recorded for ``booking``, if any.

    An entry linked by ``booking_id`` wins; otherwise an entry on the same
    date for the same boat (case-insensitive) is accepted.
    """
    if booking.id:
        for entry in entries:
            if entry.booking_id == booking.id:
                return entry
    if booking.booking_date is None or not booking.boat_name:
        return None
    for entry in entries:
        if entry.entry_date == booking.booking_date and _same_boat(
            entry.boat_name,
            booking.boat_name,
        ):
            return entry
    return None


def find_pending_bookings(
    bookings: Iterable[Booking],
    entries: Sequence[LedgerEntry],
) -> list[Booking]:
    """Return bookings that have no ledger entry yet."""
    return [
        booking
        for booking in bookings
        if find_matching_entry(booking, entries) is None
    ]


def build_ledger_entry_record(booking: Booking) -> dict[str, object]:
    """Build the ledger entry record that starts tracking ``booking``.

    Every channel starts at zero and ``profitTotal`` is left for manual
    entry. Owner payouts stay on the linked booking and are not copied into
    ``suma1``/``suma2``.
    """
    record: dict[str, object] = {
        "data": format_record_date(booking.booking_date),
        "numeleBarci": booking.boat_name or "",
        "companieBarci": booking.boat_company or "",
        "bookingId": booking.id,
    }
    for channel in DEFAULT_INCOME_CHANNELS + DEFAULT_EXPENSE_CHANNELS:
        record[channel] = 0.0
    record["profitTotal"] = 0.0
    return record


__all__ = [
    "find_matching_entry",
    "find_pending_bookings",
    "build_ledger_entry_record",
]

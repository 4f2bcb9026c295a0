"""Tests for PromotePendingBookingsUseCase."""

from datetime import datetime
from unittest.mock import MagicMock

from src.application.use_cases.promote_pending_bookings import (
    PromotePendingBookingsUseCase,
)
from src.domain.models.ledger import TimeBucket

NOW = datetime(2026, 10, 17, 12, 0)


def _ports():
    bookings = MagicMock()
    bookings.fetch_bookings.return_value = [
        {
            "id": "past",
            "bookingDetails": {"date": "2026-10-01", "boatName": "Aurora"},
            "ownerPayments": {"firstPayment": {"amount": 400}},
        },
        {
            "id": "future",
            "bookingDetails": {"date": "2026-11-01", "boatName": "Aurora"},
        },
        {
            "id": "done",
            "bookingDetails": {"date": "2026-10-02", "boatName": "Aurora"},
        },
    ]
    ledger = MagicMock()
    ledger.fetch_entries.return_value = [
        {"id": "e1", "data": "2026-10-02", "numeleBarci": "AURORA"},
    ]
    sink = MagicMock()
    sink.save_entry.side_effect = lambda record: f"new-{record['bookingId']}"
    return bookings, ledger, sink


def test_execute_promotes_pending_bookings_in_default_buckets() -> None:
    """Past and current pending bookings should get a ledger entry."""
    bookings, ledger, sink = _ports()
    use_case = PromotePendingBookingsUseCase(
        bookings,
        ledger,
        sink,
        logger=MagicMock(),
    )

    result = use_case.execute(now=NOW)

    assert result.created == ("new-past",)
    assert result.promoted_booking_ids == ("past",)
    assert result.skipped_booking_ids == ("future",)
    record = sink.save_entry.call_args.args[0]
    assert record["bookingId"] == "past"
    assert record["suma1"] == 0.0
    assert record["data"] == "2026-10-01"


def test_execute_honours_requested_buckets() -> None:
    """Only pending bookings in the requested buckets are promoted."""
    bookings, ledger, sink = _ports()
    use_case = PromotePendingBookingsUseCase(
        bookings,
        ledger,
        sink,
        logger=MagicMock(),
    )

    result = use_case.execute(buckets=[TimeBucket.FUTURE], now=NOW)

    assert result.promoted_booking_ids == ("future",)
    assert result.skipped_booking_ids == ("past",)

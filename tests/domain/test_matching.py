"""Tests for booking and ledger entry pairing."""

from datetime import date
from decimal import Decimal

from src.domain.models.ledger import Booking, LedgerEntry, OwnerPaymentLeg
from src.domain.models.pricing import PricingState
from src.domain.services.matching import (
    build_ledger_entry_record,
    find_matching_entry,
    find_pending_bookings,
)
from src.domain.services.profit import compute_entry_profit
from src.domain.services.records import ledger_entry_from_record


def _booking(booking_id: str, day: int, boat: str | None) -> Booking:
    return Booking(
        id=booking_id,
        booking_date=date(2026, 7, day),
        pricing=PricingState(),
        boat_name=boat,
        boat_company="Blue Charters",
        owner_legs=(
            OwnerPaymentLeg("firstPayment", Decimal("400")),
            OwnerPaymentLeg("secondPayment", Decimal("250.5")),
        ),
    )


def _entry(entry_id: str, day: int, boat: str | None, booking_id=None):
    return LedgerEntry(
        id=entry_id,
        entry_date=date(2026, 7, day),
        boat_name=boat,
        booking_id=booking_id,
    )


def test_booking_id_match_wins() -> None:
    """An entry linked by booking id should be preferred."""
    booking = _booking("b1", 3, "Sea Breeze")
    entries = [
        _entry("by-date", 3, "sea breeze"),
        _entry("by-id", 9, "Other", booking_id="b1"),
    ]

    assert find_matching_entry(booking, entries).id == "by-id"


def test_date_and_boat_fallback_is_case_insensitive() -> None:
    """Without a link, same date and boat name should match."""
    booking = _booking("b1", 3, "Sea Breeze")
    entries = [_entry("e1", 4, "Sea Breeze"), _entry("e2", 3, "SEA BREEZE")]

    assert find_matching_entry(booking, entries).id == "e2"


def test_no_match_without_boat_name() -> None:
    """A booking without a boat name can only match by id."""
    booking = _booking("b1", 3, None)

    assert find_matching_entry(booking, [_entry("e1", 3, None)]) is None


def test_find_pending_bookings() -> None:
    """Bookings without any entry are pending."""
    done = _booking("b1", 3, "Sea Breeze")
    pending = _booking("b2", 5, "Aurora")

    result = find_pending_bookings(
        [done, pending],
        [_entry("e1", 1, None, booking_id="b1")],
    )

    assert result == [pending]


def test_build_ledger_entry_record_starts_at_zero() -> None:
    """New entries should link the booking with every channel at zero."""
    record = build_ledger_entry_record(_booking("b2", 5, "Aurora"))

    assert record["data"] == "2026-07-05"
    assert record["numeleBarci"] == "Aurora"
    assert record["companieBarci"] == "Blue Charters"
    assert record["bookingId"] == "b2"
    assert record["suma1"] == 0.0
    assert record["suma2"] == 0.0
    assert record["sumUpIulian"] == 0.0
    assert record["skipperCost"] == 0.0
    assert record["profitTotal"] == 0.0


def test_promoted_entry_counts_owner_payouts_once() -> None:
    """Profit of a promoted entry should deduct each owner leg once."""
    booking = Booking(
        id="b3",
        booking_date=date(2026, 7, 8),
        pricing=PricingState(),
        boat_name="Aurora",
        owner_legs=(
            OwnerPaymentLeg("firstPayment", Decimal("500"), marked_paid=True),
            OwnerPaymentLeg("secondPayment", Decimal("300")),
        ),
    )
    entry = ledger_entry_from_record(
        {"id": "e3", **build_ledger_entry_record(booking)}
    )

    profit = compute_entry_profit(entry, booking)

    assert profit.calculated_expenses == Decimal("0")
    assert profit.owner.owner_total_due == Decimal("800")
    assert profit.projected_profit == Decimal("-800")
    assert profit.net_profit == Decimal("-500")

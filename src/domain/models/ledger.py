"""Domain models for bookings, ledger entries and reconciliation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.models.pricing import PricingState, ReconciliationWarning


class TimeBucket(str, Enum):
    """Display window of a record relative to "now"."""

    PAST = "past"
    CURRENT = "current"
    FUTURE = "future"


@dataclass(frozen=True)
class OwnerPaymentLeg:
    """One payout owed to a boat owner for a booking.

    Attributes:
        key: ``firstPayment``, ``secondPayment`` or ``transferPayment``.
        amount: Amount owed on this leg.
        marked_paid: Explicit paid flag from the record.
        acknowledgement: Signature or receipt artifact reference, if any.
        date: Payout date.
        paid_by: Who handed over the money.
        invoice: Invoice reference.
    """

    key: str
    amount: Decimal = Decimal("0")
    marked_paid: bool = False
    acknowledgement: str | None = None
    date: date | None = None
    paid_by: str | None = None
    invoice: str | None = None

    @property
    def paid(self) -> bool:
        return self.marked_paid or bool(self.acknowledgement)


@dataclass(frozen=True)
class Booking:
    """Read-only view of a charter booking."""

    id: str
    booking_date: date | None
    pricing: PricingState
    boat_name: str | None = None
    boat_company: str | None = None
    client_name: str | None = None
    transfer_required: bool = False
    owner_legs: tuple[OwnerPaymentLeg, ...] = ()
    raw_date: object = None


@dataclass(frozen=True)
class LedgerEntry:
    """Date-stamped income/expense record.

    ``profit_total`` is entered by hand and is never replaced by computed
    profit figures.
    """

    id: str
    entry_date: date | None
    income: dict[str, Decimal] = field(default_factory=dict)
    expenses: dict[str, Decimal] = field(default_factory=dict)
    booking_id: str | None = None
    boat_name: str | None = None
    boat_company: str | None = None
    profit_total: Decimal = Decimal("0")
    raw_date: object = None


@dataclass(frozen=True)
class OwnerLegDetail:
    """Breakdown line for one owner payment leg.

    ``applicable`` is False for legs whose amount is zero or negative; such
    legs are shown as "n/a" rather than omitted.
    """

    amount: Decimal
    applicable: bool
    paid: bool
    date: date | None = None
    paid_by: str | None = None
    invoice: str | None = None


@dataclass(frozen=True)
class OwnerPaymentSummary:
    """Amounts owed to and paid to a boat owner for one booking."""

    owner_total_due: Decimal
    owner_paid_amount: Decimal
    owner_outstanding_amount: Decimal
    breakdown: dict[str, OwnerLegDetail] = field(default_factory=dict)
    warnings: tuple[ReconciliationWarning, ...] = ()

    @classmethod
    def empty(cls) -> "OwnerPaymentSummary":
        return cls(
            owner_total_due=Decimal("0"),
            owner_paid_amount=Decimal("0"),
            owner_outstanding_amount=Decimal("0"),
        )


@dataclass(frozen=True)
class EntryProfit:
    """Computed profit figures for one ledger entry."""

    entry_id: str
    entry_date: date | None
    calculated_income: Decimal
    calculated_expenses: Decimal
    owner: OwnerPaymentSummary
    net_profit: Decimal
    projected_profit: Decimal
    recorded_profit: Decimal
    booking_id: str | None = None
    warnings: tuple[ReconciliationWarning, ...] = ()

    def to_record(self) -> dict[str, object]:
        """Return plain numeric fields for report consumers."""
        return {
            "id": self.entry_id,
            "date": self.entry_date.isoformat() if self.entry_date else "",
            "bookingId": self.booking_id or "",
            "calculatedIncome": float(self.calculated_income),
            "calculatedExpenses": float(self.calculated_expenses),
            "ownerTotalDue": float(self.owner.owner_total_due),
            "ownerPaidAmount": float(self.owner.owner_paid_amount),
            "ownerOutstandingAmount": float(
                self.owner.owner_outstanding_amount
            ),
            "netProfit": float(self.net_profit),
            "projectedProfit": float(self.projected_profit),
            "profitTotal": float(self.recorded_profit),
        }


@dataclass(frozen=True)
class LedgerSummary:
    """Totals folded from a set of entry profits."""

    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    total_owner_paid: Decimal = Decimal("0")
    total_owner_outstanding: Decimal = Decimal("0")
    total_net_profit: Decimal = Decimal("0")
    total_recorded_profit: Decimal = Decimal("0")
    entry_count: int = 0

    def __add__(self, other: "LedgerSummary") -> "LedgerSummary":
        if not isinstance(other, LedgerSummary):
            return NotImplemented
        return LedgerSummary(
            total_income=self.total_income + other.total_income,
            total_expenses=self.total_expenses + other.total_expenses,
            total_owner_paid=self.total_owner_paid + other.total_owner_paid,
            total_owner_outstanding=(
                self.total_owner_outstanding + other.total_owner_outstanding
            ),
            total_net_profit=self.total_net_profit + other.total_net_profit,
            total_recorded_profit=(
                self.total_recorded_profit + other.total_recorded_profit
            ),
            entry_count=self.entry_count + other.entry_count,
        )

    def to_record(self) -> dict[str, object]:
        """Return plain numeric fields for report consumers."""
        return {
            "totalIncome": float(self.total_income),
            "totalExpenses": float(self.total_expenses),
            "totalOwnerPaid": float(self.total_owner_paid),
            "totalOwnerOutstanding": float(self.total_owner_outstanding),
            "totalNetProfit": float(self.total_net_profit),
            "totalProfit": float(self.total_recorded_profit),
            "entryCount": self.entry_count,
        }


@dataclass(frozen=True)
class BucketedRecord:
    """A record placed in a time bucket for one bucketing pass."""

    bucket: TimeBucket
    record: object
    record_date: date | None
    date_parsed: bool


@dataclass(frozen=True)
class BookingProfit:
    """Profit of a booking measured against its matching ledger entry."""

    booking_id: str
    revenue: Decimal
    expenses: Decimal
    owner_payments: Decimal
    operational_expenses: Decimal
    gross_profit: Decimal
    net_profit: Decimal
    profit_margin: Decimal
    has_expense_data: bool


@dataclass(frozen=True)
class AggregatedBookingProfit:
    """Booking profit totals over a set of bookings."""

    total_revenue: Decimal
    total_expenses: Decimal
    total_owner_payments: Decimal
    total_operational_expenses: Decimal
    total_gross_profit: Decimal
    total_net_profit: Decimal
    average_profit_margin: Decimal
    booking_count: int
    bookings_with_expenses: int

    @property
    def bookings_without_expenses(self) -> int:
        return self.booking_count - self.bookings_with_expenses


__all__ = [
    "TimeBucket",
    "OwnerPaymentLeg",
    "Booking",
    "LedgerEntry",
    "OwnerLegDetail",
    "OwnerPaymentSummary",
    "EntryProfit",
    "LedgerSummary",
    "BucketedRecord",
    "BookingProfit",
    "AggregatedBookingProfit",
]

"""Profit figures for ledger entries and bookings."""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from logging import Logger

from src.domain.constants import OPERATIONAL_CHANNELS, OWNER_PAYOUT_CHANNELS
from src.domain.models.ledger import (
    AggregatedBookingProfit,
    Booking,
    BookingProfit,
    EntryProfit,
    LedgerEntry,
    OwnerPaymentSummary,
)
from src.domain.services.aggregation import (
    calculated_expenses,
    calculated_income,
    sum_channels,
)
from src.domain.services.owner_payments import reconcile_owner_payments
from src.utils.decimal_utils import coerce_decimal

_HUNDRED = Decimal("100")
_ZERO_THRESHOLD = Decimal("0.00001")

# Lower margin bounds (percent) of each profitability badge, best first.
_BADGES = (
    (Decimal("30"), "Excellent"),
    (Decimal("15"), "Good"),
    (Decimal("5"), "Fair"),
    (Decimal("0"), "Low"),
)


def compute_entry_profit(
    entry: LedgerEntry,
    booking: Booking | None = None,
    logger: Logger | None = None,
) -> EntryProfit:
    """Compute realized and projected profit of a ledger entry.

    Owner figures come from the linked booking's owner legs; an entry
    without a booking carries no owner figures. The manually recorded
    ``profit_total`` is returned alongside, never replaced.

    Args:
        entry: Ledger entry to evaluate.
        booking: Booking linked to the entry, if any.
        logger: Optional logger used for warnings.

    Returns:
        EntryProfit: Income, expenses, owner summary and both profits.
    """
    income = calculated_income(entry, logger=logger)
    expenses = calculated_expenses(entry, logger=logger)
    if booking is not None:
        owner = reconcile_owner_payments(booking, logger=logger)
    else:
        owner = OwnerPaymentSummary.empty()

    base = income.total - expenses.total
    return EntryProfit(
        entry_id=entry.id,
        entry_date=entry.entry_date,
        calculated_income=income.total,
        calculated_expenses=expenses.total,
        owner=owner,
        net_profit=base - owner.owner_paid_amount,
        projected_profit=base - owner.owner_total_due,
        recorded_profit=entry.profit_total,
        booking_id=entry.booking_id,
        warnings=income.warnings + expenses.warnings + owner.warnings,
    )


def compute_booking_profit(
    booking: Booking,
    entry: LedgerEntry | None = None,
) -> BookingProfit:
    """Compute the profit of a booking against its matching ledger entry.

    Revenue is the agreed price. Without a matching entry the whole revenue
    counts as profit and ``has_expense_data`` is False.
    """
    revenue = coerce_decimal(booking.pricing.agreed_price)
    if entry is None:
        return BookingProfit(
            booking_id=booking.id,
            revenue=revenue,
            expenses=Decimal("0"),
            owner_payments=Decimal("0"),
            operational_expenses=Decimal("0"),
            gross_profit=revenue,
            net_profit=revenue,
            profit_margin=_HUNDRED,
            has_expense_data=False,
        )

    owner = sum_channels(entry.expenses, OWNER_PAYOUT_CHANNELS).total
    operational = sum_channels(entry.expenses, OPERATIONAL_CHANNELS).total
    total_expenses = owner + operational
    net = revenue - owner - operational
    margin = Decimal("0") if revenue == 0 else net / revenue * _HUNDRED
    return BookingProfit(
        booking_id=booking.id,
        revenue=revenue,
        expenses=total_expenses,
        owner_payments=owner,
        operational_expenses=operational,
        gross_profit=revenue - total_expenses,
        net_profit=net,
        profit_margin=margin,
        has_expense_data=True,
    )


@dataclass
class _BookingProfitTotals:
    revenue: Decimal = Decimal("0")
    expenses: Decimal = Decimal("0")
    owner: Decimal = Decimal("0")
    operational: Decimal = Decimal("0")
    margin: Decimal = Decimal("0")
    count: int = 0
    with_expenses: int = 0


def compute_aggregated_booking_profit(
    pairs: Iterable[tuple[Booking, LedgerEntry | None]],
) -> AggregatedBookingProfit:
    """Aggregate booking profit over ``(booking, entry)`` pairs.

    The average margin only covers bookings with expense data.

    Args:
        pairs: Bookings with their matching entry or None.

    Returns:
        AggregatedBookingProfit: Totals and counts over all pairs.
    """
    totals = _BookingProfitTotals()
    for booking, entry in pairs:
        profit = compute_booking_profit(booking, entry)
        totals.revenue += profit.revenue
        totals.expenses += profit.expenses
        totals.owner += profit.owner_payments
        totals.operational += profit.operational_expenses
        totals.count += 1
        if profit.has_expense_data:
            totals.with_expenses += 1
            totals.margin += profit.profit_margin

    average = (
        totals.margin / totals.with_expenses
        if totals.with_expenses
        else Decimal("0")
    )
    return AggregatedBookingProfit(
        total_revenue=totals.revenue,
        total_expenses=totals.expenses,
        total_owner_payments=totals.owner,
        total_operational_expenses=totals.operational,
        total_gross_profit=totals.revenue - totals.expenses,
        total_net_profit=totals.revenue - totals.owner - totals.operational,
        average_profit_margin=average,
        booking_count=totals.count,
        bookings_with_expenses=totals.with_expenses,
    )


def profit_badge(margin: Decimal) -> str:
    """Return the profitability label for a margin percentage."""
    for bound, label in _BADGES:
        if margin >= bound:
            return label
    return "Loss"


def percent_change(current: object, previous: object) -> Decimal:
    """Return the signed change from ``previous`` to ``current`` in percent.

    A previous value of (nearly) zero yields 0 rather than an infinite change.
    """
    now = coerce_decimal(current)
    before = coerce_decimal(previous)
    if abs(before) < _ZERO_THRESHOLD:
        return Decimal("0")
    return (now - before) / abs(before) * _HUNDRED


__all__ = [
    "compute_entry_profit",
    "compute_booking_profit",
    "compute_aggregated_booking_profit",
    "profit_badge",
    "percent_change",
]

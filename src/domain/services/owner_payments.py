"""Boat-owner payout reconciliation for a booking."""

from decimal import Decimal
from logging import Logger

from src.domain.models.ledger import (
    Booking,
    OwnerLegDetail,
    OwnerPaymentLeg,
    OwnerPaymentSummary,
)
from src.domain.models.pricing import ReconciliationWarning
from src.domain.services.validation import validate_owner_leg_sign

_BASE_LEGS = ("firstPayment", "secondPayment")
_TRANSFER_LEG = "transferPayment"


def owner_leg_keys(booking: Booking) -> tuple[str, ...]:
    """Return the legs a booking carries; the transfer leg needs a transfer."""
    if booking.transfer_required:
        return _BASE_LEGS + (_TRANSFER_LEG,)
    return _BASE_LEGS


def reconcile_owner_payments(
    booking: Booking,
    logger: Logger | None = None,
) -> OwnerPaymentSummary:
    """Build the owner payment summary of a booking.

    Legs with an amount of zero or less stay in the breakdown as not
    applicable and do not count towards the due or paid totals. A leg is
    paid when it is flagged paid or carries an acknowledgement.

    Args:
        booking: Booking whose owner legs are reconciled.
        logger: Optional logger used for warnings.

    Returns:
        OwnerPaymentSummary: Due, paid and outstanding amounts with the
        per-leg breakdown.
    """
    legs = {leg.key: leg for leg in booking.owner_legs}
    due = Decimal("0")
    paid = Decimal("0")
    breakdown: dict[str, OwnerLegDetail] = {}
    warnings: list[ReconciliationWarning] = []

    for key in owner_leg_keys(booking):
        leg = legs.get(key) or OwnerPaymentLeg(key=key)
        warning = validate_owner_leg_sign(key, leg.amount, booking.id, logger)
        if warning is not None:
            warnings.append(warning)
        applicable = leg.amount > 0
        if applicable:
            due += leg.amount
            if leg.paid:
                paid += leg.amount
        breakdown[key] = OwnerLegDetail(
            amount=leg.amount,
            applicable=applicable,
            paid=leg.paid,
            date=leg.date,
            paid_by=leg.paid_by,
            invoice=leg.invoice,
        )

    return OwnerPaymentSummary(
        owner_total_due=due,
        owner_paid_amount=paid,
        owner_outstanding_amount=max(Decimal("0"), due - paid),
        breakdown=breakdown,
        warnings=tuple(warnings),
    )


__all__ = ["owner_leg_keys", "reconcile_owner_payments"]

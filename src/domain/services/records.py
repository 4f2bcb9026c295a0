"""Mapping between persisted plain records and domain models.

Records keep the back-office field names (``bookingDetails.date``,
``pricing.firstPayment.excludeVAT``, ``numeleBarci`` ...). Reading is
lenient: missing or malformed values fall back to defaults so one bad
record never stops a batch.
"""

from collections.abc import Mapping
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_EXPENSE_CHANNELS,
    DEFAULT_INCOME_CHANNELS,
    OWNER_LEG_KEYS,
)
from src.domain.models.ledger import Booking, LedgerEntry, OwnerPaymentLeg
from src.domain.models.pricing import (
    Installment,
    PaymentMethod,
    PaymentStatus,
    PricingPolicy,
    PricingState,
)
from src.utils.date_utils import format_record_date, parse_record_date
from src.utils.decimal_utils import coerce_decimal

_EMPTY: Mapping = {}


def _mapping(value) -> Mapping:
    return value if isinstance(value, Mapping) else _EMPTY


_TRUE_STRINGS = frozenset({"true", "1", "yes", "y", "on"})


def _flag(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().casefold() in _TRUE_STRINGS
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    return False


def _text(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def installment_from_record(
    raw: Mapping | None,
    default_method: PaymentMethod,
    default_percentage: Decimal | None = None,
) -> Installment:
    """Build an installment; a receipt date on an unreceived one is dropped."""
    raw = _mapping(raw)
    received = _flag(raw.get("received"))
    percentage = raw.get("percentage")
    return Installment(
        amount=coerce_decimal(raw.get("amount")),
        method=PaymentMethod.parse(raw.get("method"), default_method),
        received=received,
        date=parse_record_date(raw.get("date")) if received else None,
        exclude_vat=_flag(raw.get("excludeVAT")),
        percentage=(
            coerce_decimal(percentage)
            if percentage not in (None, "")
            else default_percentage
        ),
        use_custom_amount=_flag(raw.get("useCustomAmount")),
    )


def installment_to_record(installment: Installment) -> dict[str, object]:
    record: dict[str, object] = {
        "amount": float(installment.amount),
        "method": installment.method.value,
        "received": installment.received,
        "date": format_record_date(installment.date),
        "excludeVAT": installment.exclude_vat,
        "useCustomAmount": installment.use_custom_amount,
    }
    if installment.percentage is not None:
        record["percentage"] = float(installment.percentage)
    return record


def pricing_state_from_record(raw: Mapping | None) -> PricingState:
    """Build a pricing state from a ``pricing`` record.

    A missing or zero ``agreedPrice`` falls back to ``finalPrice``.

    Args:
        raw: The ``pricing`` sub-record of a booking, or None.

    Returns:
        PricingState: State with stored derived fields as read.
    """
    raw = _mapping(raw)
    try:
        status = PaymentStatus(raw.get("paymentStatus"))
    except ValueError:
        status = PaymentStatus.NO_PAYMENT
    return PricingState(
        agreed_price=coerce_decimal(
            raw.get("agreedPrice") or raw.get("finalPrice")
        ),
        pricing_type=PricingPolicy.parse(raw.get("pricingType")),
        first_payment=installment_from_record(
            raw.get("firstPayment"),
            PaymentMethod.CASH,
        ),
        second_payment=installment_from_record(
            raw.get("secondPayment"),
            PaymentMethod.POS,
        ),
        payment_status=status,
        total_paid=coerce_decimal(raw.get("totalPaid")),
    )


def pricing_state_to_record(state: PricingState) -> dict[str, object]:
    """Return the full ``pricing`` record published on recalculation."""
    return {
        "agreedPrice": float(state.agreed_price),
        "pricingType": state.pricing_type.value,
        "firstPayment": installment_to_record(state.first_payment),
        "secondPayment": installment_to_record(state.second_payment),
        "paymentStatus": state.payment_status.value,
        "totalPaid": float(state.total_paid),
    }


def _acknowledgement(signature) -> str | None:
    if not signature:
        return None
    if isinstance(signature, Mapping):
        return _text(signature.get("url")) or "signed"
    return _text(signature)


def owner_leg_from_record(key: str, raw: Mapping | None) -> OwnerPaymentLeg:
    raw = _mapping(raw)
    return OwnerPaymentLeg(
        key=key,
        amount=coerce_decimal(raw.get("amount")),
        marked_paid=_flag(raw.get("paid")),
        acknowledgement=_acknowledgement(raw.get("signature")),
        date=parse_record_date(raw.get("date")),
        paid_by=_text(raw.get("paidBy")),
        invoice=_text(raw.get("invoice")),
    )


def booking_from_record(record: Mapping) -> Booking:
    """Build a booking view from a ``bookings`` record."""
    details = _mapping(record.get("bookingDetails"))
    owner = _mapping(record.get("ownerPayments"))
    raw_date = details.get("date")
    client_name = record.get("clientName") or _mapping(
        record.get("clientDetails")
    ).get("name")
    return Booking(
        id=str(record.get("id") or ""),
        booking_date=parse_record_date(raw_date),
        pricing=pricing_state_from_record(record.get("pricing")),
        boat_name=_text(details.get("boatName")),
        boat_company=_text(details.get("boatCompany")),
        client_name=_text(client_name),
        transfer_required=_flag(
            _mapping(record.get("transfer")).get("required")
        ),
        owner_legs=tuple(
            owner_leg_from_record(key, owner.get(key))
            for key in OWNER_LEG_KEYS
            if key in owner
        ),
        raw_date=raw_date,
    )


def _channels(record: Mapping, names: tuple[str, ...]) -> dict[str, Decimal]:
    return {
        name: coerce_decimal(record.get(name))
        for name in names
        if name in record
    }


def ledger_entry_from_record(record: Mapping) -> LedgerEntry:
    """Build a ledger entry from an ``expenses`` record."""
    raw_date = record.get("data") or record.get("dataCompanie")
    return LedgerEntry(
        id=str(record.get("id") or ""),
        entry_date=parse_record_date(raw_date),
        income=_channels(record, DEFAULT_INCOME_CHANNELS),
        expenses=_channels(record, DEFAULT_EXPENSE_CHANNELS),
        booking_id=_text(record.get("bookingId")),
        boat_name=_text(record.get("numeleBarci")),
        boat_company=_text(record.get("companieBarci")),
        profit_total=coerce_decimal(record.get("profitTotal")),
        raw_date=raw_date,
    )


__all__ = [
    "installment_from_record",
    "installment_to_record",
    "pricing_state_from_record",
    "pricing_state_to_record",
    "owner_leg_from_record",
    "booking_from_record",
    "ledger_entry_from_record",
]

"""Domain models for charter pricing."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.constants import DEFAULT_FIRST_PERCENTAGE


class PricingPolicy(str, Enum):
    """Formula governing how an agreed price splits into two installments."""

    STANDARD = "standard"
    CUSTOM = "custom"
    FULL_VAT_DISCOUNT = "full-vat-discount"
    SPLIT_VAT = "split-vat"

    @classmethod
    def parse(cls, raw) -> "PricingPolicy":
        """Return the policy for a stored value, defaulting to standard."""
        if isinstance(raw, cls):
            return raw
        try:
            return cls(str(raw or "").strip().lower())
        except ValueError:
            return cls.STANDARD


class PaymentMethod(str, Enum):
    """Installment payment channel, valued by its persisted string."""

    CASH = "cash"
    POS = "pos"
    TRANSFER = "transfer"
    PAYMENT_LINK = "payment_link"
    ALT_LINK = "Sabadell_link"

    @classmethod
    def parse(
        cls,
        raw,
        default: "PaymentMethod",
    ) -> "PaymentMethod":
        """Return the method for a stored value or ``default`` when unknown."""
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower().replace("-", "_")
        return _METHOD_ALIASES.get(key, default)


_METHOD_ALIASES = {
    "cash": PaymentMethod.CASH,
    "pos": PaymentMethod.POS,
    "transfer": PaymentMethod.TRANSFER,
    "payment_link": PaymentMethod.PAYMENT_LINK,
    "sabadell_link": PaymentMethod.ALT_LINK,
    "alt_link": PaymentMethod.ALT_LINK,
}


class PaymentStatus(str, Enum):
    """Client payment status derived from installment receipt flags."""

    COMPLETED = "Completed"
    PARTIAL = "Partial"
    NO_PAYMENT = "No Payment"


@dataclass(frozen=True)
class Installment:
    """One staged client payment.

    Attributes:
        amount: Installment amount.
        method: Payment channel.
        received: Whether the money arrived.
        date: Receipt date; only set for received installments.
        exclude_vat: Whether VAT is removed from this installment.
        percentage: Share of the agreed price (first installment only).
        use_custom_amount: Whether ``amount`` overrides the policy formula.
    """

    amount: Decimal = Decimal("0")
    method: PaymentMethod = PaymentMethod.CASH
    received: bool = False
    date: date | None = None
    exclude_vat: bool = False
    percentage: Decimal | None = None
    use_custom_amount: bool = False

    def __post_init__(self) -> None:
        if self.date is not None and not self.received:
            raise ValueError(
                "Installment receipt date requires received=True"
            )

    def mark_received(self, on: date) -> "Installment":
        """Return a copy marked received on ``on``."""
        return replace(self, received=True, date=on)

    def mark_pending(self) -> "Installment":
        """Return a copy marked not received, without a receipt date."""
        return replace(self, received=False, date=None)


def _default_first_payment() -> Installment:
    return Installment(
        method=PaymentMethod.CASH,
        percentage=DEFAULT_FIRST_PERCENTAGE,
    )


def _default_second_payment() -> Installment:
    return Installment(method=PaymentMethod.POS)


@dataclass(frozen=True)
class PricingState:
    """Pricing of one bookable unit (one boat-leg).

    ``payment_status`` and ``total_paid`` are derived fields refreshed by
    ``src.domain.services.payment_split.apply_payment_split``.
    """

    agreed_price: Decimal = Decimal("0")
    pricing_type: PricingPolicy = PricingPolicy.STANDARD
    first_payment: Installment = field(default_factory=_default_first_payment)
    second_payment: Installment = field(
        default_factory=_default_second_payment
    )
    payment_status: PaymentStatus = PaymentStatus.NO_PAYMENT
    total_paid: Decimal = Decimal("0")


@dataclass(frozen=True)
class ReconciliationWarning:
    """Invariant breach attached to a computation result.

    Attributes:
        code: Stable machine-readable code.
        message: Human readable description.
        subject: Identifier of the record or field concerned.
    """

    code: str
    message: str
    subject: str | None = None


@dataclass(frozen=True)
class PaymentSplit:
    """Installment amounts produced by the split calculator."""

    first_amount: Decimal
    second_amount: Decimal
    warnings: tuple[ReconciliationWarning, ...] = ()

    @property
    def total(self) -> Decimal:
        return self.first_amount + self.second_amount


@dataclass(frozen=True)
class ClientBalance:
    """What the client owes for one unit and how much has arrived."""

    agreed_total: Decimal
    total_paid: Decimal
    outstanding: Decimal


__all__ = [
    "PricingPolicy",
    "PaymentMethod",
    "PaymentStatus",
    "Installment",
    "PricingState",
    "ReconciliationWarning",
    "PaymentSplit",
    "ClientBalance",
]

"""Tests for multi-unit price propagation."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models.pricing import (
    Installment,
    PaymentMethod,
    PaymentStatus,
    PricingPolicy,
    PricingState,
)
from src.domain.services.payment_split import apply_payment_split
from src.domain.services.propagation import (
    PricingTemplate,
    new_unit_from_template,
    propagate_pricing,
)


def _source() -> PricingState:
    return apply_payment_split(
        PricingState(
            agreed_price=Decimal("2000"),
            pricing_type=PricingPolicy.STANDARD,
            first_payment=Installment(
                method=PaymentMethod.TRANSFER,
                percentage=Decimal("40"),
            ),
        )
    )


def _received_target() -> PricingState:
    return apply_payment_split(
        PricingState(
            agreed_price=Decimal("800"),
            first_payment=Installment(
                received=True,
                date=date(2026, 6, 1),
                percentage=Decimal("50"),
            ),
        )
    )


def test_propagate_copies_pricing_and_keeps_receipts() -> None:
    """Targets take the source pricing but keep their own receipts."""
    source = _source()
    target = _received_target()

    result = propagate_pricing([source, target], 0)

    assert result[0] is source
    updated = result[1]
    assert updated.agreed_price == Decimal("2000")
    assert updated.first_payment.method is PaymentMethod.TRANSFER
    assert updated.first_payment.amount == Decimal("800.00")
    assert updated.second_payment.amount == Decimal("1200.00")
    assert updated.first_payment.received is True
    assert updated.first_payment.date == date(2026, 6, 1)
    assert updated.payment_status is PaymentStatus.PARTIAL
    assert updated.total_paid == Decimal("800.00")


def test_propagate_does_not_leak_source_receipts() -> None:
    """A received source installment should not mark targets received."""
    source = apply_payment_split(
        PricingState(
            agreed_price=Decimal("1000"),
            first_payment=Installment(received=True, date=date(2026, 1, 2)),
        )
    )
    target = apply_payment_split(PricingState(agreed_price=Decimal("10")))

    updated = propagate_pricing([target, source], 1)[0]

    assert updated.first_payment.received is False
    assert updated.first_payment.date is None
    assert updated.payment_status is PaymentStatus.NO_PAYMENT


def test_propagate_rejects_unknown_index() -> None:
    """Asking for a missing source unit should raise IndexError."""
    with pytest.raises(IndexError):
        propagate_pricing([_source()], 3)


def test_template_rejects_unknown_preserved_fields() -> None:
    """Preserved fields must name installment fields."""
    with pytest.raises(ValueError):
        PricingTemplate(source=_source(), preserved=frozenset({"colour"}))


def test_new_unit_resets_amounts_and_receipts() -> None:
    """A cloned unit keeps its configuration but not price or receipts."""
    unit = new_unit_from_template(_received_target())

    assert unit.agreed_price == Decimal("0")
    assert unit.first_payment.amount == Decimal("0")
    assert unit.second_payment.amount == Decimal("0")
    assert unit.first_payment.received is False
    assert unit.first_payment.date is None
    assert unit.first_payment.percentage == Decimal("50")
    assert unit.payment_status is PaymentStatus.NO_PAYMENT
    assert unit.total_paid == Decimal("0")

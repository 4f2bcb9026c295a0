"""Tests for payment status resolution."""

from dataclasses import replace
from decimal import Decimal

import pytest

from src.domain.models.pricing import PaymentStatus, PricingState
from src.domain.services.payment_status import (
    resolve_payment_status,
    resolve_state_status,
)


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        (True, True, PaymentStatus.COMPLETED),
        (True, False, PaymentStatus.PARTIAL),
        (False, True, PaymentStatus.PARTIAL),
        (False, False, PaymentStatus.NO_PAYMENT),
    ],
)
def test_resolve_payment_status_maps_flags(first, second, expected) -> None:
    """Every flag combination should map to exactly one status."""
    assert resolve_payment_status(first, second) is expected


def test_status_ignores_amounts() -> None:
    """Amounts, even zero or negative, should not affect the status."""
    state = PricingState()
    state = replace(
        state,
        first_payment=replace(
            state.first_payment,
            amount=Decimal("-10"),
            received=True,
        ),
        second_payment=replace(state.second_payment, amount=Decimal("0")),
    )

    assert resolve_state_status(state) is PaymentStatus.PARTIAL


def test_status_values_match_records() -> None:
    """Status values should be the strings stored in records."""
    assert [status.value for status in PaymentStatus] == [
        "Completed",
        "Partial",
        "No Payment",
    ]

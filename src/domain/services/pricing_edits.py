"""Edits applied to a pricing state from the booking form."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from src.domain.models.pricing import Installment, PricingPolicy, PricingState

FIRST = "firstPayment"
SECOND = "secondPayment"


def change_pricing_policy(
    state: PricingState,
    policy: PricingPolicy,
) -> PricingState:
    """Switch the pricing policy.

    Moving to ``custom`` clears the agreed price, both amounts, the VAT flags
    and the custom-amount override; other switches keep every input.
    """
    if policy is not PricingPolicy.CUSTOM:
        return replace(state, pricing_type=policy)
    return replace(
        state,
        pricing_type=policy,
        agreed_price=Decimal("0"),
        first_payment=replace(
            state.first_payment,
            amount=Decimal("0"),
            exclude_vat=False,
            use_custom_amount=False,
        ),
        second_payment=replace(
            state.second_payment,
            amount=Decimal("0"),
            exclude_vat=False,
        ),
    )


def set_custom_amount_override(
    state: PricingState,
    enabled: bool,
) -> PricingState:
    """Toggle the first-installment override; the first amount is cleared."""
    return replace(
        state,
        first_payment=replace(
            state.first_payment,
            use_custom_amount=enabled,
            amount=Decimal("0"),
        ),
    )


def set_installment_received(
    state: PricingState,
    which: str,
    received: bool,
    on: date,
) -> PricingState:
    """Mark an installment received (stamped ``on``) or pending (no date).

    Args:
        state: Pricing state to edit.
        which: ``firstPayment`` or ``secondPayment``.
        received: New receipt flag.
        on: Receipt date used when ``received`` is True.

    Returns:
        PricingState: Edited state.

    Raises:
        ValueError: If ``which`` names no installment.
    """
    installment = _installment(state, which)
    updated = (
        installment.mark_received(on) if received
        else installment.mark_pending()
    )
    return _with_installment(state, which, updated)


def update_installment(
    state: PricingState,
    which: str,
    **changes,
) -> PricingState:
    """Replace installment fields such as amount, method or percentage."""
    updated = replace(_installment(state, which), **changes)
    return _with_installment(state, which, updated)


def _installment(state: PricingState, which: str) -> Installment:
    if which == FIRST:
        return state.first_payment
    if which == SECOND:
        return state.second_payment
    raise ValueError(f"Unknown installment: {which}")


def _with_installment(
    state: PricingState,
    which: str,
    installment: Installment,
) -> PricingState:
    if which == FIRST:
        return replace(state, first_payment=installment)
    return replace(state, second_payment=installment)


__all__ = [
    "FIRST",
    "SECOND",
    "change_pricing_policy",
    "set_custom_amount_override",
    "set_installment_received",
    "update_installment",
]

"""Payment split calculator for a single bookable unit.

Each pricing policy maps the agreed price to a pair of installment amounts.
The rules are registered per policy in ``_SPLIT_RULES``; the module refuses
to import if a policy has no rule.
"""

from collections.abc import Callable
from dataclasses import replace
from decimal import Decimal

from src.domain.constants import DEFAULT_FIRST_PERCENTAGE, ROUNDING_TOLERANCE
from src.domain.models.pricing import (
    ClientBalance,
    PaymentSplit,
    PricingPolicy,
    PricingState,
    ReconciliationWarning,
)
from src.domain.services.payment_status import resolve_payment_status
from src.domain.services.vat import exclude_vat, include_vat
from src.utils.decimal_utils import round_money

_HUNDRED = Decimal("100")
_ZERO = Decimal("0")

SplitRule = Callable[[PricingState], tuple[Decimal, Decimal]]


def _first_share(state: PricingState) -> Decimal:
    percentage = state.first_payment.percentage
    if percentage is None:
        percentage = DEFAULT_FIRST_PERCENTAGE
    return state.agreed_price * (percentage / _HUNDRED)


def _custom_rule(state: PricingState) -> tuple[Decimal, Decimal]:
    return state.first_payment.amount, state.second_payment.amount


def _standard_rule(state: PricingState) -> tuple[Decimal, Decimal]:
    first = _first_share(state)
    return first, state.agreed_price - first


def _full_vat_discount_rule(state: PricingState) -> tuple[Decimal, Decimal]:
    # The agreed price is VAT-inclusive and converted once.
    first = exclude_vat(_first_share(state))
    return first, exclude_vat(state.agreed_price) - first


def _split_vat_rule(state: PricingState) -> tuple[Decimal, Decimal]:
    first = _first_share(state)
    effective_first = first
    if state.first_payment.exclude_vat:
        first = exclude_vat(first)
        effective_first = include_vat(first)
    return first, state.agreed_price - effective_first


_SPLIT_RULES: dict[PricingPolicy, SplitRule] = {
    PricingPolicy.CUSTOM: _custom_rule,
    PricingPolicy.STANDARD: _standard_rule,
    PricingPolicy.FULL_VAT_DISCOUNT: _full_vat_discount_rule,
    PricingPolicy.SPLIT_VAT: _split_vat_rule,
}

_missing_rules = set(PricingPolicy) - set(_SPLIT_RULES)
if _missing_rules:
    raise RuntimeError(f"No split rule for policies: {_missing_rules}")


def split_inputs(state: PricingState) -> tuple:
    """Return the inputs whose change triggers a re-derivation."""
    return (
        state.pricing_type,
        state.agreed_price,
        state.first_payment.percentage,
        state.first_payment.use_custom_amount,
        state.first_payment.amount,
    )


def compute_payment_split(state: PricingState) -> PaymentSplit:
    """Compute the two installment amounts for a pricing state.

    Args:
        state: Pricing state holding the policy and its inputs.

    Returns:
        PaymentSplit: Amounts rounded to cents, with any invariant warnings.
    """
    policy = state.pricing_type
    override = (
        policy is not PricingPolicy.CUSTOM
        and state.first_payment.use_custom_amount
    )
    if override:
        first = state.first_payment.amount
        second = max(_ZERO, state.agreed_price - first)
    else:
        first, second = _SPLIT_RULES[policy](state)

    split = PaymentSplit(
        first_amount=round_money(first),
        second_amount=round_money(second),
    )
    return replace(split, warnings=_split_warnings(state, split))


def _split_warnings(
    state: PricingState,
    split: PaymentSplit,
) -> tuple[ReconciliationWarning, ...]:
    warnings: list[ReconciliationWarning] = []
    for key, amount in (
        ("firstPayment", split.first_amount),
        ("secondPayment", split.second_amount),
    ):
        if amount < 0:
            warnings.append(
                ReconciliationWarning(
                    code="negative_installment",
                    message=f"{key} amount is negative: {amount}",
                    subject=key,
                )
            )
    if (
        state.pricing_type is not PricingPolicy.CUSTOM
        and split.total - state.agreed_price > ROUNDING_TOLERANCE
    ):
        warnings.append(
            ReconciliationWarning(
                code="split_exceeds_agreed_price",
                message=(
                    f"Installments total {split.total} exceeds agreed "
                    f"price {state.agreed_price}"
                ),
                subject="pricing",
            )
        )
    return tuple(warnings)


def compute_total_paid(state: PricingState) -> Decimal:
    """Return the sum of received installment amounts."""
    total = _ZERO
    if state.first_payment.received:
        total += state.first_payment.amount
    if state.second_payment.received:
        total += state.second_payment.amount
    return total


def apply_payment_split(state: PricingState) -> PricingState:
    """Store the computed split and refresh derived fields.

    Returns the very same object when nothing changes, so callers can skip
    downstream notifications with an identity check.

    Args:
        state: Pricing state to derive.

    Returns:
        PricingState: Updated state, or ``state`` itself when unchanged.
    """
    split = compute_payment_split(state)
    first = state.first_payment
    second = state.second_payment
    if first.amount != split.first_amount:
        first = replace(first, amount=split.first_amount)
    if second.amount != split.second_amount:
        second = replace(second, amount=split.second_amount)
    candidate = replace(state, first_payment=first, second_payment=second)
    status = resolve_payment_status(first.received, second.received)
    total_paid = compute_total_paid(candidate)
    if (
        first is state.first_payment
        and second is state.second_payment
        and status is state.payment_status
        and total_paid == state.total_paid
    ):
        return state
    return replace(candidate, payment_status=status, total_paid=total_paid)


def compute_client_balance(state: PricingState) -> ClientBalance:
    """Return what the client owes, has paid and still owes for a unit.

    For the ``custom`` policy the agreed total is the sum of the two
    installments, since the agreed price is not used.
    """
    if state.pricing_type is PricingPolicy.CUSTOM or not state.agreed_price:
        agreed_total = state.first_payment.amount + state.second_payment.amount
    else:
        agreed_total = state.agreed_price
    total_paid = compute_total_paid(state)
    return ClientBalance(
        agreed_total=agreed_total,
        total_paid=total_paid,
        outstanding=max(_ZERO, agreed_total - total_paid),
    )


__all__ = [
    "split_inputs",
    "compute_payment_split",
    "compute_total_paid",
    "apply_payment_split",
    "compute_client_balance",
]

"""Client payment status resolution."""

from src.domain.models.pricing import PaymentStatus, PricingState


def resolve_payment_status(
    first_received: bool,
    second_received: bool,
) -> PaymentStatus:
    """Derive the payment status from the two receipt flags.

    Args:
        first_received: Whether the first installment arrived.
        second_received: Whether the second installment arrived.

    Returns:
        PaymentStatus: Completed, Partial or No Payment.
    """
    if first_received and second_received:
        return PaymentStatus.COMPLETED
    if first_received or second_received:
        return PaymentStatus.PARTIAL
    return PaymentStatus.NO_PAYMENT


def resolve_state_status(state: PricingState) -> PaymentStatus:
    """Derive the payment status of a pricing state."""
    return resolve_payment_status(
        state.first_payment.received,
        state.second_payment.received,
    )


__all__ = ["resolve_payment_status", "resolve_state_status"]

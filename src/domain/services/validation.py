"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.models.pricing import ReconciliationWarning


def validate_channel_sign(
    channel: str,
    amount: Decimal,
    subject: str | None,
    logger: Logger | None = None,
) -> ReconciliationWarning | None:
    """Flag negative channel amounts without clamping them.

    Negative values are accepted as corrections but need explicit intent,
    so they are reported to the caller and, when given, to the logger.

    Args:
        channel: Income or expense channel name.
        amount: Channel amount.
        subject: Identifier of the record carrying the channel.
        logger: Optional logger used for warnings.

    Returns:
        ReconciliationWarning | None: Warning when the amount is negative.
    """
    if amount >= 0:
        return None
    message = f"Negative amount on channel={channel}: {amount}"
    if logger is not None:
        logger.warning(f"{message} (record={subject})")
    return ReconciliationWarning(
        code="negative_channel",
        message=message,
        subject=subject,
    )


def validate_owner_leg_sign(
    leg_key: str,
    amount: Decimal,
    subject: str | None,
    logger: Logger | None = None,
) -> ReconciliationWarning | None:
    """Flag owner payment legs carrying a negative amount."""
    if amount >= 0:
        return None
    message = f"Negative owner payment on leg={leg_key}: {amount}"
    if logger is not None:
        logger.warning(f"{message} (booking={subject})")
    return ReconciliationWarning(
        code="negative_owner_leg",
        message=message,
        subject=subject,
    )


__all__ = ["validate_channel_sign", "validate_owner_leg_sign"]

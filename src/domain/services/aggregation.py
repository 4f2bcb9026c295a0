"""Revenue and expense aggregation for ledger entries."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    DEFAULT_EXPENSE_CHANNELS,
    DEFAULT_INCOME_CHANNELS,
)
from src.domain.models.ledger import LedgerEntry
from src.domain.models.pricing import ReconciliationWarning
from src.domain.services.validation import validate_channel_sign
from src.utils.decimal_utils import coerce_decimal


@dataclass(frozen=True)
class ChannelTotal:
    """Sum over a channel set with the warnings raised while summing."""

    total: Decimal
    warnings: tuple[ReconciliationWarning, ...] = ()


def sum_channels(
    values: Mapping[str, object],
    channels: Iterable[str],
    *,
    subject: str | None = None,
    logger: Logger | None = None,
) -> ChannelTotal:
    """Sum the named channels of a mapping.

    Args:
        values: Channel amounts keyed by channel name.
        channels: Channel names to include; absent channels count as 0.
        subject: Identifier of the record, used in warnings.
        logger: Optional logger used for warnings.

    Returns:
        ChannelTotal: Total and negative-amount warnings.
    """
    total = Decimal("0")
    warnings: list[ReconciliationWarning] = []
    for channel in channels:
        amount = coerce_decimal(values.get(channel))
        warning = validate_channel_sign(channel, amount, subject, logger)
        if warning is not None:
            warnings.append(warning)
        total += amount
    return ChannelTotal(total=total, warnings=tuple(warnings))


def calculated_income(
    entry: LedgerEntry,
    channels: Iterable[str] = DEFAULT_INCOME_CHANNELS,
    logger: Logger | None = None,
) -> ChannelTotal:
    """Return the total of an entry's income channels."""
    return sum_channels(
        entry.income,
        channels,
        subject=entry.id,
        logger=logger,
    )


def calculated_expenses(
    entry: LedgerEntry,
    channels: Iterable[str] = DEFAULT_EXPENSE_CHANNELS,
    logger: Logger | None = None,
) -> ChannelTotal:
    """Return the total of an entry's expense channels."""
    return sum_channels(
        entry.expenses,
        channels,
        subject=entry.id,
        logger=logger,
    )


__all__ = [
    "ChannelTotal",
    "sum_channels",
    "calculated_income",
    "calculated_expenses",
]

"""VAT conversion helpers.

Amounts are not rounded here; callers round at presentation or storage.
"""

from decimal import Decimal

from src.domain.constants import VAT_RATE


def exclude_vat(gross_amount: Decimal) -> Decimal:
    """Return the VAT-exclusive part of a VAT-inclusive amount."""
    return gross_amount / (Decimal("1") + VAT_RATE)


def include_vat(net_amount: Decimal) -> Decimal:
    """Return the VAT-inclusive equivalent of a VAT-exclusive amount."""
    return net_amount * (Decimal("1") + VAT_RATE)


__all__ = ["exclude_vat", "include_vat"]

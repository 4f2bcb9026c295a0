"""Helpers for Decimal normalization."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")

_NON_NUMERIC = re.compile(r"[^0-9.,-]")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Currency symbols are ignored; anything that cannot be read as a number
    becomes zero.

    Args:
        value: Raw numeric value from a record or form field.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, (int, float)):
        candidate = Decimal(str(value))
        return candidate if candidate.is_finite() else Decimal("0")
    if isinstance(value, str):
        return _parse_amount_text(value)
    return Decimal("0")


def round_money(value: Decimal) -> Decimal:
    """Round an amount to cents, half away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def _parse_amount_text(raw: str) -> Decimal:
    try:
        direct = Decimal(raw.strip())
    except InvalidOperation:
        pass
    else:
        return direct if direct.is_finite() else Decimal("0")
    cleaned = _NON_NUMERIC.sub("", raw)
    if not cleaned:
        return Decimal("0")
    last_dot = cleaned.rfind(".")
    last_comma = cleaned.rfind(",")
    if last_dot > -1 and last_comma > -1:
        if last_dot > last_comma:
            # 1,234.56
            cleaned = cleaned.replace(",", "")
        else:
            # 1.234,56
            cleaned = cleaned.replace(".", "").replace(",", ".")
    elif last_comma > -1 and last_comma > len(cleaned) - 4:
        cleaned = cleaned.replace(",", ".")
    else:
        cleaned = cleaned.replace(",", "")
    try:
        parsed = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    return parsed if parsed.is_finite() else Decimal("0")


__all__ = ["CENT", "coerce_decimal", "round_money"]

"""Helpers for reading record dates."""

from datetime import date, datetime


def parse_record_date(value) -> date | None:
    """Read a record date from the shapes the back office stores.

    Accepts ``date``/``datetime`` objects, ISO strings (``YYYY-MM-DD`` or a
    full timestamp) and timestamp objects exposing ``to_datetime()`` or
    ``ToDatetime()``.

    Args:
        value: Raw date value from a record.

    Returns:
        date | None: Calendar date, or None when the value is unusable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return _parse_iso(value.strip())
    for attr in ("to_datetime", "ToDatetime"):
        converter = getattr(value, attr, None)
        if callable(converter):
            converted = converter()
            if isinstance(converted, datetime):
                return converted.date()
    return None


def format_record_date(value: date | None) -> str:
    """Return the ISO form used in persisted records ('' when missing)."""
    if value is None:
        return ""
    return value.isoformat()


def _parse_iso(text: str) -> date | None:
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


__all__ = ["parse_record_date", "format_record_date"]

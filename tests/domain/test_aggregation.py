"""Tests for revenue and expense aggregation."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models.ledger import LedgerEntry
from src.domain.services.aggregation import (
    calculated_expenses,
    calculated_income,
    sum_channels,
)


def test_income_sums_known_channels_only() -> None:
    """Income should add the named channels and treat absent ones as 0."""
    entry = LedgerEntry(
        id="e1",
        entry_date=None,
        income={
            "sumUpIulian": Decimal("100"),
            "stripeAlin": Decimal("50.50"),
            "cashAlin": Decimal("25"),
        },
    )

    result = calculated_income(entry)

    assert result.total == Decimal("175.50")
    assert result.warnings == ()


def test_expenses_sum_cost_components() -> None:
    """Expenses should cover owner, crew, fuel and commission channels."""
    entry = LedgerEntry(
        id="e1",
        entry_date=None,
        expenses={
            "suma1": Decimal("300"),
            "skipperCost": Decimal("120"),
            "fuelCost": Decimal("80"),
            "comisioane": Decimal("40"),
            "colaboratori": Decimal("10"),
        },
    )

    assert calculated_expenses(entry).total == Decimal("550")


def test_negative_channel_is_kept_and_flagged() -> None:
    """Negative channel values count as corrections and raise a warning."""
    logger = MagicMock()
    entry = LedgerEntry(
        id="e7",
        entry_date=None,
        income={"cashIulian": Decimal("-30"), "sumUpAlin": Decimal("100")},
    )

    result = calculated_income(entry, logger=logger)

    assert result.total == Decimal("70")
    assert [w.code for w in result.warnings] == ["negative_channel"]
    assert result.warnings[0].subject == "e7"
    logger.warning.assert_called_once()


def test_sum_channels_coerces_raw_values() -> None:
    """Raw text, None and garbage should be coerced before summing."""
    values = {"a": "1.234,50", "b": None, "c": "n/a", "d": 10}

    result = sum_channels(values, ("a", "b", "c", "d", "e"))

    assert result.total == Decimal("1244.50")

"""Folding entry profits into ledger summaries."""

from collections.abc import Iterable
from functools import reduce

from src.domain.models.ledger import EntryProfit, LedgerSummary


def summarize_profit(profit: EntryProfit) -> LedgerSummary:
    """Return the single-entry summary of ``profit``."""
    return LedgerSummary(
        total_income=profit.calculated_income,
        total_expenses=profit.calculated_expenses,
        total_owner_paid=profit.owner.owner_paid_amount,
        total_owner_outstanding=profit.owner.owner_outstanding_amount,
        total_net_profit=profit.net_profit,
        total_recorded_profit=profit.recorded_profit,
        entry_count=1,
    )


def accumulate(profits: Iterable[EntryProfit]) -> LedgerSummary:
    """Fold entry profits into one summary.

    The fold is a per-entry sum, so the summary of a union of disjoint sets
    equals the sum of their summaries.
    """
    return reduce(
        lambda total, profit: total + summarize_profit(profit),
        profits,
        LedgerSummary(),
    )


__all__ = ["summarize_profit", "accumulate"]

"""Domain package for pricing and reconciliation rules and core models."""

from .constants import (
    DEFAULT_EXPENSE_CHANNELS,
    DEFAULT_INCOME_CHANNELS,
    VAT_RATE,
)
from .models import (
    Booking,
    EntryProfit,
    Installment,
    LedgerEntry,
    LedgerSummary,
    OwnerPaymentSummary,
    PaymentStatus,
    PricingPolicy,
    PricingState,
    ReconciliationWarning,
    TimeBucket,
)
from .services import (
    accumulate,
    apply_payment_split,
    bucket_records,
    compute_entry_profit,
    compute_payment_split,
    reconcile_owner_payments,
    resolve_payment_status,
)

__all__ = [
    "Booking",
    "EntryProfit",
    "Installment",
    "LedgerEntry",
    "LedgerSummary",
    "OwnerPaymentSummary",
    "PaymentStatus",
    "PricingPolicy",
    "PricingState",
    "ReconciliationWarning",
    "TimeBucket",
    "DEFAULT_EXPENSE_CHANNELS",
    "DEFAULT_INCOME_CHANNELS",
    "VAT_RATE",
    "accumulate",
    "apply_payment_split",
    "bucket_records",
    "compute_entry_profit",
    "compute_payment_split",
    "reconcile_owner_payments",
    "resolve_payment_status",
]

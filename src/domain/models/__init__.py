"""Domain models package."""

from .ledger import (
    AggregatedBookingProfit,
    Booking,
    BookingProfit,
    BucketedRecord,
    EntryProfit,
    LedgerEntry,
    LedgerSummary,
    OwnerLegDetail,
    OwnerPaymentLeg,
    OwnerPaymentSummary,
    TimeBucket,
)
from .pricing import (
    ClientBalance,
    Installment,
    PaymentMethod,
    PaymentSplit,
    PaymentStatus,
    PricingPolicy,
    PricingState,
    ReconciliationWarning,
)

__all__ = [
    "AggregatedBookingProfit",
    "Booking",
    "BookingProfit",
    "BucketedRecord",
    "ClientBalance",
    "EntryProfit",
    "Installment",
    "LedgerEntry",
    "LedgerSummary",
    "OwnerLegDetail",
    "OwnerPaymentLeg",
    "OwnerPaymentSummary",
    "PaymentMethod",
    "PaymentSplit",
    "PaymentStatus",
    "PricingPolicy",
    "PricingState",
    "ReconciliationWarning",
    "TimeBucket",
]

"""Application use cases package."""

from .get_booking_profit import GetBookingProfitUseCase
from .pricing_debouncer import PricingChangeDebouncer
from .promote_pending_bookings import (
    PromotePendingBookingsUseCase,
    PromotionResult,
)
from .recalculate_pricing import RecalculatePricingUseCase
from .reconcile_ledger import ReconcileLedgerUseCase, ReconciliationReport

__all__ = [
    "GetBookingProfitUseCase",
    "PricingChangeDebouncer",
    "PromotePendingBookingsUseCase",
    "PromotionResult",
    "RecalculatePricingUseCase",
    "ReconcileLedgerUseCase",
    "ReconciliationReport",
]

"""Domain constants for charter pricing and reconciliation."""

from decimal import Decimal

VAT_RATE = Decimal("0.21")

# Installments may drift from the agreed price by rounding only.
ROUNDING_TOLERANCE = Decimal("0.01")

DEFAULT_FIRST_PERCENTAGE = Decimal("30")

# Days from today covered by the "current" window (today and tomorrow).
CURRENT_WINDOW_DAYS = 2

DEFAULT_INCOME_CHANNELS = (
    "sumUpIulian",
    "stripeIulian",
    "caixaJustEnjoy",
    "sumUpAlin",
    "stripeAlin",
    "cashIulian",
    "cashAlin",
)

DEFAULT_EXPENSE_CHANNELS = (
    "suma1",
    "suma2",
    "sumaIntegral",
    "skipperCost",
    "transferCost",
    "fuelCost",
    "boatExpense",
    "comisioane",
    "colaboratori",
)

# Boat-owner payout components recorded on a ledger entry.
OWNER_PAYOUT_CHANNELS = ("suma1", "suma2", "sumaIntegral")

OPERATIONAL_CHANNELS = (
    "skipperCost",
    "transferCost",
    "fuelCost",
    "boatExpense",
    "comisioane",
    "colaboratori",
)

OWNER_LEG_KEYS = ("firstPayment", "secondPayment", "transferPayment")


__all__ = [
    "VAT_RATE",
    "ROUNDING_TOLERANCE",
    "DEFAULT_FIRST_PERCENTAGE",
    "CURRENT_WINDOW_DAYS",
    "DEFAULT_INCOME_CHANNELS",
    "DEFAULT_EXPENSE_CHANNELS",
    "OWNER_PAYOUT_CHANNELS",
    "OPERATIONAL_CHANNELS",
    "OWNER_LEG_KEYS",
]

"""Domain services package."""

from .aggregation import calculated_expenses, calculated_income, sum_channels
from .bucketing import (
    BucketingContext,
    BucketingResult,
    bucket_records,
    classify_bucket,
)
from .matching import (
    build_ledger_entry_record,
    find_matching_entry,
    find_pending_bookings,
)
from .owner_payments import owner_leg_keys, reconcile_owner_payments
from .payment_split import (
    apply_payment_split,
    compute_client_balance,
    compute_payment_split,
    compute_total_paid,
    split_inputs,
)
from .payment_status import resolve_payment_status, resolve_state_status
from .pricing_edits import (
    change_pricing_policy,
    set_custom_amount_override,
    set_installment_received,
    update_installment,
)
from .profit import (
    compute_aggregated_booking_profit,
    compute_booking_profit,
    compute_entry_profit,
    percent_change,
    profit_badge,
)
from .propagation import (
    PricingTemplate,
    new_unit_from_template,
    propagate_pricing,
)
from .summary import accumulate, summarize_profit
from .validation import validate_channel_sign, validate_owner_leg_sign
from .vat import exclude_vat, include_vat

__all__ = [
    "BucketingContext",
    "BucketingResult",
    "PricingTemplate",
    "accumulate",
    "apply_payment_split",
    "bucket_records",
    "build_ledger_entry_record",
    "calculated_expenses",
    "calculated_income",
    "change_pricing_policy",
    "classify_bucket",
    "compute_aggregated_booking_profit",
    "compute_booking_profit",
    "compute_client_balance",
    "compute_entry_profit",
    "compute_payment_split",
    "compute_total_paid",
    "exclude_vat",
    "find_matching_entry",
    "find_pending_bookings",
    "include_vat",
    "new_unit_from_template",
    "owner_leg_keys",
    "percent_change",
    "profit_badge",
    "propagate_pricing",
    "reconcile_owner_payments",
    "resolve_payment_status",
    "resolve_state_status",
    "set_custom_amount_override",
    "set_installment_received",
    "split_inputs",
    "sum_channels",
    "summarize_profit",
    "update_installment",
    "validate_channel_sign",
    "validate_owner_leg_sign",
]

"""Propagation of one unit's pricing to sibling units of a booking.

A multi-boat booking prices each boat separately. "Apply to all" copies the
source unit's policy, agreed price and installment configuration onto every
other unit, while each unit keeps its own receipt facts. "Add boat" starts a
new unit from the last one with its amounts and receipts reset.
"""

from collections.abc import Sequence
from dataclasses import dataclass, fields, replace
from decimal import Decimal

from src.domain.models.pricing import Installment, PricingState
from src.domain.services.payment_split import apply_payment_split

# Installment facts owned by the target unit during propagation.
PRESERVED_FIELDS = frozenset({"received", "date"})

# Fields cleared when a new unit is cloned from an existing one.
RESET_FIELDS = frozenset({"agreed_price", "amount", "received", "date"})

_INSTALLMENT_FIELDS = frozenset(f.name for f in fields(Installment))


@dataclass(frozen=True)
class PricingTemplate:
    """Immutable pricing source with an explicit set of preserved fields.

    Attributes:
        source: Pricing state copied onto targets.
        preserved: Installment fields taken from the target instead.
    """

    source: PricingState
    preserved: frozenset[str] = PRESERVED_FIELDS

    def __post_init__(self) -> None:
        unknown = self.preserved - _INSTALLMENT_FIELDS
        if unknown:
            raise ValueError(f"Unknown installment fields: {sorted(unknown)}")

    def apply_to(self, target: PricingState) -> PricingState:
        """Return ``target`` repriced from the template and re-derived."""
        repriced = replace(
            self.source,
            first_payment=self._merge(
                self.source.first_payment,
                target.first_payment,
            ),
            second_payment=self._merge(
                self.source.second_payment,
                target.second_payment,
            ),
            payment_status=target.payment_status,
            total_paid=target.total_paid,
        )
        return apply_payment_split(repriced)

    def _merge(self, source: Installment, target: Installment) -> Installment:
        kept = {name: getattr(target, name) for name in self.preserved}
        if not kept.get("received", source.received):
            kept["date"] = None
        return replace(source, **kept)


def propagate_pricing(
    units: Sequence[PricingState],
    source_index: int,
) -> list[PricingState]:
    """Apply the pricing of ``units[source_index]`` to every other unit.

    Args:
        units: Pricing states of the sibling units.
        source_index: Index of the unit whose pricing is copied.

    Returns:
        list[PricingState]: New list; the source unit is returned untouched.

    Raises:
        IndexError: If ``source_index`` is out of range.
    """
    if not -len(units) <= source_index < len(units):
        raise IndexError(f"No unit at index {source_index}")
    source_index %= len(units)
    template = PricingTemplate(source=units[source_index])
    return [
        unit if index == source_index else template.apply_to(unit)
        for index, unit in enumerate(units)
    ]


def new_unit_from_template(
    template_unit: PricingState,
    reset: frozenset[str] = RESET_FIELDS,
) -> PricingState:
    """Build a fresh unit from an existing one, clearing ``reset`` fields.

    Policy, percentage, methods and VAT flags carry over; with the default
    reset set the new unit has no price, no amounts and no receipts.
    """
    state = template_unit
    if "agreed_price" in reset:
        state = replace(state, agreed_price=Decimal("0"))
    state = replace(
        state,
        first_payment=_reset_installment(state.first_payment, reset),
        second_payment=_reset_installment(state.second_payment, reset),
    )
    return apply_payment_split(state)


def _reset_installment(
    installment: Installment,
    reset: frozenset[str],
) -> Installment:
    changes: dict[str, object] = {}
    if "amount" in reset:
        changes["amount"] = Decimal("0")
    if "date" in reset:
        changes["date"] = None
    if "received" in reset:
        changes["received"] = False
        changes["date"] = None
    return replace(installment, **changes)


__all__ = [
    "PRESERVED_FIELDS",
    "RESET_FIELDS",
    "PricingTemplate",
    "propagate_pricing",
    "new_unit_from_template",
]

"""Use case driving an interactive pricing edit session."""

from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import date
from decimal import Decimal

from src.application.ports.sinks import PricingChangeSinkPort
from src.application.use_cases.pricing_debouncer import PricingChangeDebouncer
from src.domain.models.pricing import (
    PaymentSplit,
    PricingPolicy,
    PricingState,
)
from src.domain.services.payment_split import (
    apply_payment_split,
    compute_payment_split,
    split_inputs,
)
from src.domain.services.pricing_edits import (
    change_pricing_policy,
    set_custom_amount_override,
    set_installment_received,
    update_installment,
)
from src.domain.services.records import pricing_state_to_record
from src.infrastructure.logging.logger import get_app_logger

PricingEdit = Callable[[PricingState], PricingState]


class RecalculatePricingUseCase:
    """Apply pricing edits, re-derive the split and report the result.

    Every edit yields a fully derived state. Derived records go through a
    debouncer, so a burst of edits reaches the sink as one record carrying
    the latest inputs. A record equal to the last published one is not
    published again. A stored state with stale amounts or status is
    re-derived when the session opens and queued like an edit.
    """

    def __init__(
        self,
        state: PricingState,
        sink: PricingChangeSinkPort,
        debouncer: PricingChangeDebouncer | None = None,
        logger=None,
    ) -> None:
        """Initialize the edit session.

        Args:
            state: Pricing state being edited.
            sink: Port receiving the recalculated pricing record.
            debouncer: Optional debouncer; defaults to a 300 ms window.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._sink = sink
        self._debouncer = debouncer or PricingChangeDebouncer()
        self._logger = logger or get_app_logger()
        self._state = apply_payment_split(state)
        self._last_published: Mapping | None = None
        if self._state != state:
            self._logger.info("Stored pricing re-derived on session start")
            self._debouncer.push(pricing_state_to_record(self._state))

    @property
    def state(self) -> PricingState:
        return self._state

    def split(self) -> PaymentSplit:
        """Return the split of the current state with its warnings."""
        return compute_payment_split(self._state)

    def apply(self, edit: PricingEdit) -> PricingState:
        """Apply one edit and queue the derived record when it changed."""
        edited = edit(self._state)
        if split_inputs(edited) != split_inputs(self._state):
            self._logger.info(
                f"Pricing inputs changed: type={edited.pricing_type.value}, "
                f"agreed={edited.agreed_price}"
            )
        derived = apply_payment_split(edited)
        if derived == self._state:
            return self._state
        self._state = derived
        self._debouncer.push(pricing_state_to_record(derived))
        return derived

    def set_agreed_price(self, amount: Decimal) -> PricingState:
        return self.apply(lambda state: replace(state, agreed_price=amount))

    def change_policy(self, policy: PricingPolicy) -> PricingState:
        return self.apply(lambda state: change_pricing_policy(state, policy))

    def set_custom_amount(self, enabled: bool) -> PricingState:
        return self.apply(
            lambda state: set_custom_amount_override(state, enabled)
        )

    def update_installment(self, which: str, **changes) -> PricingState:
        return self.apply(
            lambda state: update_installment(state, which, **changes)
        )

    def set_received(
        self,
        which: str,
        received: bool,
        on: date | None = None,
    ) -> PricingState:
        """Mark an installment received (today unless ``on``) or pending."""
        receipt_date = on or date.today()
        return self.apply(
            lambda state: set_installment_received(
                state,
                which,
                received,
                receipt_date,
            )
        )

    def poll(self) -> bool:
        """Publish the queued record once the debounce window has passed.

        Returns:
            bool: True when a record was published.
        """
        return self._publish(self._debouncer.poll())

    def flush(self) -> bool:
        """Publish the queued record immediately."""
        return self._publish(self._debouncer.flush())

    def execute(self, *edits: PricingEdit) -> PricingState:
        """Apply ``edits`` in order and publish the final record.

        Args:
            *edits: Functions mapping a pricing state to an edited state.

        Returns:
            PricingState: Derived state after the last edit.
        """
        for edit in edits:
            self.apply(edit)
        self.flush()
        return self._state

    def _publish(self, record: Mapping | None) -> bool:
        if record is None or record == self._last_published:
            return False
        self._sink.publish(record)
        self._last_published = record
        self._logger.info(
            f"Pricing published: status={record['paymentStatus']}, "
            f"totalPaid={record['totalPaid']}"
        )
        return True


__all__ = ["PricingEdit", "RecalculatePricingUseCase"]

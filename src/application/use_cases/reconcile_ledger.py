"""Use case reconciling ledger entries into bucketed profit summaries."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime

from src.application.ports.snapshots import (
    BookingSnapshotPort,
    LedgerSnapshotPort,
)
from src.domain.models.ledger import (
    Booking,
    EntryProfit,
    LedgerEntry,
    LedgerSummary,
    TimeBucket,
)
from src.domain.models.pricing import ReconciliationWarning
from src.domain.services.bucketing import BucketingContext, bucket_records
from src.domain.services.matching import find_pending_bookings
from src.domain.services.profit import compute_entry_profit
from src.domain.services.records import (
    booking_from_record,
    ledger_entry_from_record,
)
from src.domain.services.summary import accumulate
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ReconciliationReport:
    """Result of one reconciliation pass.

    Attributes:
        generated_at: The single "now" every record was bucketed against.
        profits: Entry profits grouped by bucket.
        bucket_summaries: Summary of each bucket.
        selected_buckets: Buckets folded into ``selected_summary``.
        selected_summary: Summary over the selected buckets.
        pending_bookings: Bookings without a ledger entry, by bucket.
        warnings: Every warning raised during the pass.
    """

    generated_at: datetime
    profits: dict[TimeBucket, list[EntryProfit]]
    bucket_summaries: dict[TimeBucket, LedgerSummary]
    selected_buckets: tuple[TimeBucket, ...]
    selected_summary: LedgerSummary
    pending_bookings: dict[TimeBucket, list[Booking]] = field(
        default_factory=dict
    )
    warnings: tuple[ReconciliationWarning, ...] = ()

    def to_record(self) -> dict[str, object]:
        """Return plain fields for report consumers."""
        return {
            "generatedAt": self.generated_at.isoformat(),
            "selectedBuckets": [bucket.value for bucket in self.selected_buckets],
            "summary": self.selected_summary.to_record(),
            "buckets": {
                bucket.value: {
                    "summary": self.bucket_summaries[bucket].to_record(),
                    "entries": [
                        profit.to_record() for profit in self.profits[bucket]
                    ],
                    "pendingBookings": [
                        booking.id
                        for booking in self.pending_bookings.get(bucket, [])
                    ],
                }
                for bucket in TimeBucket
            },
            "warnings": [
                {
                    "code": warning.code,
                    "message": warning.message,
                    "subject": warning.subject,
                }
                for warning in self.warnings
            ],
        }


class ReconcileLedgerUseCase:
    """Reconcile ledger entries against bookings and bucket the results."""

    def __init__(
        self,
        bookings_port: BookingSnapshotPort,
        ledger_port: LedgerSnapshotPort,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the use case.

        Args:
            bookings_port: Port providing booking records.
            ledger_port: Port providing ledger entry records.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Source of "now" when ``execute`` receives none.
        """
        self._bookings_port = bookings_port
        self._ledger_port = ledger_port
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(
        self,
        buckets: Iterable[TimeBucket] | None = None,
        now: datetime | None = None,
    ) -> ReconciliationReport:
        """Return the reconciliation report.

        Args:
            buckets: Buckets folded into the selected summary; all when None.
            now: Instant to bucket against; captured once when None.

        Returns:
            ReconciliationReport: Profits, summaries, pending bookings and
            warnings of the pass.
        """
        context = BucketingContext(now=now or self._clock())
        selected = tuple(buckets) if buckets is not None else tuple(TimeBucket)

        bookings = [
            booking_from_record(record)
            for record in self._bookings_port.fetch_bookings()
        ]
        entries = [
            ledger_entry_from_record(record)
            for record in self._ledger_port.fetch_entries()
        ]
        by_id = {booking.id: booking for booking in bookings if booking.id}

        warnings: list[ReconciliationWarning] = []
        pairs: list[tuple[LedgerEntry, EntryProfit]] = []
        for entry in entries:
            booking = by_id.get(entry.booking_id) if entry.booking_id else None
            profit = compute_entry_profit(entry, booking, self._logger)
            warnings.extend(profit.warnings)
            pairs.append((entry, profit))

        placed = bucket_records(
            pairs,
            context,
            date_getter=lambda pair: pair[0].raw_date,
            subject_getter=lambda pair: pair[0].id,
            logger=self._logger,
        )
        warnings.extend(placed.warnings)
        profits = {
            bucket: [pair[1] for pair in group]
            for bucket, group in placed.partition().items()
        }

        pending = bucket_records(
            find_pending_bookings(bookings, entries),
            context,
            date_getter=lambda booking: booking.raw_date,
            subject_getter=lambda booking: booking.id,
            logger=self._logger,
        )
        warnings.extend(pending.warnings)

        summaries = {
            bucket: accumulate(group) for bucket, group in profits.items()
        }
        selected_summary = accumulate(
            profit for bucket in selected for profit in profits[bucket]
        )

        self._logger.info(
            f"Ledger reconciled: entries={len(entries)}, "
            f"bookings={len(bookings)}, "
            f"net_profit={selected_summary.total_net_profit}, "
            f"warnings={len(warnings)}"
        )

        return ReconciliationReport(
            generated_at=context.now,
            profits=profits,
            bucket_summaries=summaries,
            selected_buckets=selected,
            selected_summary=selected_summary,
            pending_bookings=pending.partition(),
            warnings=tuple(warnings),
        )


__all__ = ["ReconcileLedgerUseCase", "ReconciliationReport"]

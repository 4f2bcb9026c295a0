"""Use case creating ledger entries for bookings that have none yet."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime

from src.application.ports.sinks import LedgerEntrySinkPort
from src.application.ports.snapshots import (
    BookingSnapshotPort,
    LedgerSnapshotPort,
)
from src.domain.models.ledger import TimeBucket
from src.domain.services.bucketing import BucketingContext, bucket_records
from src.domain.services.matching import (
    build_ledger_entry_record,
    find_pending_bookings,
)
from src.domain.services.records import (
    booking_from_record,
    ledger_entry_from_record,
)
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_PROMOTION_BUCKETS = (TimeBucket.PAST, TimeBucket.CURRENT)


@dataclass(frozen=True)
class PromotionResult:
    """Outcome of a promotion run.

    Attributes:
        created: Identifiers returned by the sink for the new entries.
        promoted_booking_ids: Bookings that received an entry.
        skipped_booking_ids: Pending bookings outside the chosen buckets.
    """

    created: tuple[str, ...]
    promoted_booking_ids: tuple[str, ...]
    skipped_booking_ids: tuple[str, ...]


class PromotePendingBookingsUseCase:
    """Start a ledger entry for every pending booking in chosen buckets."""

    def __init__(
        self,
        bookings_port: BookingSnapshotPort,
        ledger_port: LedgerSnapshotPort,
        sink: LedgerEntrySinkPort,
        logger=None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._bookings_port = bookings_port
        self._ledger_port = ledger_port
        self._sink = sink
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(
        self,
        buckets: Iterable[TimeBucket] = DEFAULT_PROMOTION_BUCKETS,
        now: datetime | None = None,
    ) -> PromotionResult:
        """Promote pending bookings dated in ``buckets``.

        Args:
            buckets: Buckets whose pending bookings are promoted.
            now: Instant to bucket against; captured once when None.

        Returns:
            PromotionResult: Created entry ids and promoted/skipped bookings.
        """
        wanted = set(buckets)
        context = BucketingContext(now=now or self._clock())
        bookings = [
            booking_from_record(record)
            for record in self._bookings_port.fetch_bookings()
        ]
        entries = [
            ledger_entry_from_record(record)
            for record in self._ledger_port.fetch_entries()
        ]
        placed = bucket_records(
            find_pending_bookings(bookings, entries),
            context,
            date_getter=lambda booking: booking.raw_date,
            subject_getter=lambda booking: booking.id,
            logger=self._logger,
        )

        created: list[str] = []
        promoted: list[str] = []
        skipped: list[str] = []
        for item in placed.records:
            booking = item.record
            if item.bucket not in wanted:
                skipped.append(booking.id)
                continue
            created.append(
                self._sink.save_entry(build_ledger_entry_record(booking))
            )
            promoted.append(booking.id)

        self._logger.info(
            f"Pending bookings promoted: created={len(created)}, "
            f"skipped={len(skipped)}"
        )
        return PromotionResult(
            created=tuple(created),
            promoted_booking_ids=tuple(promoted),
            skipped_booking_ids=tuple(skipped),
        )


__all__ = [
    "DEFAULT_PROMOTION_BUCKETS",
    "PromotePendingBookingsUseCase",
    "PromotionResult",
]

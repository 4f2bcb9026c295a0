"""Past / current / future classification of dated records.

Buckets are never stored. Each pass captures "now" once and classifies every
record against that single instant.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from logging import Logger

from src.domain.constants import CURRENT_WINDOW_DAYS
from src.domain.models.ledger import BucketedRecord, TimeBucket
from src.domain.models.pricing import ReconciliationWarning
from src.utils.date_utils import parse_record_date


def _as_day(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


def classify_bucket(record_date: date, today: date) -> TimeBucket:
    """Return the bucket of ``record_date`` relative to ``today``.

    ``current`` covers today and tomorrow; everything earlier is ``past``
    and everything from the day after tomorrow on is ``future``. Datetimes
    are truncated to their calendar day.
    """
    record_date = _as_day(record_date)
    today = _as_day(today)
    if record_date < today:
        return TimeBucket.PAST
    if record_date < today + timedelta(days=CURRENT_WINDOW_DAYS):
        return TimeBucket.CURRENT
    return TimeBucket.FUTURE


@dataclass(frozen=True)
class BucketingContext:
    """One bucketing pass anchored to a single captured instant."""

    now: datetime

    @classmethod
    def capture(cls) -> "BucketingContext":
        return cls(now=datetime.now())

    @property
    def today(self) -> date:
        return self.now.date()

    def classify(self, raw_date: object) -> tuple[TimeBucket, date | None]:
        """Classify a raw record date; unusable dates land in ``current``."""
        parsed = parse_record_date(raw_date)
        if parsed is None:
            return TimeBucket.CURRENT, None
        return classify_bucket(parsed, self.today), parsed


@dataclass(frozen=True)
class BucketingResult:
    """Records of one pass with the warnings raised while placing them."""

    records: tuple[BucketedRecord, ...] = ()
    warnings: tuple[ReconciliationWarning, ...] = ()

    def in_bucket(self, bucket: TimeBucket) -> list[object]:
        return [item.record for item in self.records if item.bucket == bucket]

    def partition(self) -> dict[TimeBucket, list[object]]:
        groups: dict[TimeBucket, list[object]] = {
            bucket: [] for bucket in TimeBucket
        }
        for item in self.records:
            groups[item.bucket].append(item.record)
        return groups


def bucket_records(
    records: Iterable[object],
    context: BucketingContext,
    date_getter: Callable[[object], object],
    subject_getter: Callable[[object], str | None] = lambda record: None,
    logger: Logger | None = None,
) -> BucketingResult:
    """Place every record in exactly one bucket.

    Args:
        records: Records to classify.
        context: Pass context holding the captured "now".
        date_getter: Returns the raw date of a record.
        subject_getter: Returns the identifier used in warnings.
        logger: Optional logger used for warnings.

    Returns:
        BucketingResult: One bucketed item per input record, in input order.
    """
    placed: list[BucketedRecord] = []
    warnings: list[ReconciliationWarning] = []
    for record in records:
        raw_date = date_getter(record)
        bucket, parsed = context.classify(raw_date)
        if parsed is None:
            subject = subject_getter(record)
            message = f"Unparseable date {raw_date!r}; placed in current"
            if logger is not None:
                logger.warning(f"{message} (record={subject})")
            warnings.append(
                ReconciliationWarning(
                    code="unparseable_date",
                    message=message,
                    subject=subject,
                )
            )
        placed.append(
            BucketedRecord(
                bucket=bucket,
                record=record,
                record_date=parsed,
                date_parsed=parsed is not None,
            )
        )
    return BucketingResult(records=tuple(placed), warnings=tuple(warnings))


__all__ = [
    "classify_bucket",
    "BucketingContext",
    "BucketingResult",
    "bucket_records",
]

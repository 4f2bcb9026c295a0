"""CLI adapter printing the bucketed ledger reconciliation report."""

from datetime import date, datetime, time
import os

from src.domain.models.ledger import LedgerSummary, TimeBucket
from src.infrastructure.container import build_reconcile_ledger_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_buckets(value: str | None, logger) -> list[TimeBucket] | None:
    """Parse a comma-separated list of bucket names.

    Args:
        value: Bucket names such as ``past,current``.
        logger: Logger used for warnings.

    Returns:
        list[TimeBucket] | None: Selected buckets, or None for all.
    """
    if not value:
        return None
    buckets = []
    for raw in value.split(","):
        name = raw.strip().lower()
        if not name:
            continue
        try:
            buckets.append(TimeBucket(name))
        except ValueError:
            logger.warning(
                f"Unknown bucket '{name}'. Expected past, current or future."
            )
    return buckets or None


def _parse_date(value: str | None, logger) -> datetime | None:
    """Parse an ISO date string into the start of that day.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        datetime | None: Parsed instant or None when invalid.
    """
    if not value:
        return None
    try:
        return datetime.combine(date.fromisoformat(value), time.min)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _format_summary(label: str, summary: LedgerSummary) -> str:
    return (
        f"{label}: entries={summary.entry_count}, "
        f"income={summary.total_income}, "
        f"expenses={summary.total_expenses}, "
        f"owner_paid={summary.total_owner_paid}, "
        f"owner_outstanding={summary.total_owner_outstanding}, "
        f"net_profit={summary.total_net_profit}, "
        f"recorded_profit={summary.total_recorded_profit}"
    )


def main() -> None:
    """Run the reconciliation and print one line per bucket."""
    logger = get_app_logger()
    buckets = _parse_buckets(os.getenv("REPORT_BUCKETS"), logger)
    now = _parse_date(os.getenv("REPORT_DATE"), logger)
    get_usage_logger().info(
        f"Reconciliation report requested: buckets={buckets}, date={now}"
    )

    try:
        use_case = build_reconcile_ledger_use_case()
        report = use_case.execute(buckets=buckets, now=now)
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    print(f"Reconciliation as of {report.generated_at.date().isoformat()}")
    for bucket in TimeBucket:
        pending = len(report.pending_bookings.get(bucket, []))
        print(
            _format_summary(bucket.value, report.bucket_summaries[bucket])
            + f", pending_bookings={pending}"
        )
    selected = ",".join(bucket.value for bucket in report.selected_buckets)
    print(_format_summary(f"selected[{selected}]", report.selected_summary))
    if report.warnings:
        print(f"Warnings: {len(report.warnings)}")
        for warning in report.warnings:
            print(f"- {warning.code} ({warning.subject}): {warning.message}")


if __name__ == "__main__":  # pragma: no cover
    main()

"""CLI adapter creating ledger entries for pending bookings."""

from src.infrastructure.container import build_promote_bookings_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Run the pending booking promotion use case."""
    logger = get_app_logger()
    try:
        use_case = build_promote_bookings_use_case()
        result = use_case.execute()
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"Pending bookings promoted: {list(result.promoted_booking_ids)}"
    )
    print(
        f"Created {len(result.created)} ledger entries "
        f"for pending bookings ({len(result.skipped_booking_ids)} skipped)."
    )


if __name__ == "__main__":  # pragma: no cover
    main()

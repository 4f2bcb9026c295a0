"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.sinks import (
    LedgerEntrySinkPort,
    PricingChangeSinkPort,
)
from src.application.use_cases.get_booking_profit import (
    GetBookingProfitUseCase,
)
from src.application.use_cases.pricing_debouncer import PricingChangeDebouncer
from src.application.use_cases.promote_pending_bookings import (
    PromotePendingBookingsUseCase,
)
from src.application.use_cases.recalculate_pricing import (
    RecalculatePricingUseCase,
)
from src.application.use_cases.reconcile_ledger import ReconcileLedgerUseCase
from src.domain.models.pricing import PricingState
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.records_repository_factory import (
    create_records_repository,
)
from src.infrastructure.settings import EngineSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_records_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: EngineSettings | None = None,
):
    """Return the configured records repository."""
    resolved_db = db_port or build_database_adapter()
    return create_records_repository(
        resolved_db,
        logger=get_app_logger(),
        settings=settings or EngineSettings.from_env(),
    )


def build_ledger_entry_sink(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerEntrySinkPort:
    """Return the SQL records repository used to store new entries."""
    settings = EngineSettings.from_env()
    if settings.backend != "sqlalchemy":
        raise RuntimeError(
            "Storing ledger entries requires RECORDS_BACKEND=sqlalchemy."
        )
    return build_records_repository(db_port, settings=settings)


def build_reconcile_ledger_use_case(
    repository=None,
) -> ReconcileLedgerUseCase:
    """Return the ledger reconciliation use case."""
    resolved = repository or build_records_repository()
    return ReconcileLedgerUseCase(resolved, resolved, logger=get_app_logger())


def build_booking_profit_use_case(repository=None) -> GetBookingProfitUseCase:
    """Return the booking profit use case."""
    resolved = repository or build_records_repository()
    return GetBookingProfitUseCase(resolved, resolved, logger=get_app_logger())


def build_promote_bookings_use_case(
    repository=None,
    sink: LedgerEntrySinkPort | None = None,
) -> PromotePendingBookingsUseCase:
    """Return the pending booking promotion use case."""
    resolved_sink = sink or build_ledger_entry_sink()
    resolved = repository or resolved_sink
    return PromotePendingBookingsUseCase(
        resolved,
        resolved,
        resolved_sink,
        logger=get_app_logger(),
    )


def build_recalculate_pricing_use_case(
    state: PricingState,
    sink: PricingChangeSinkPort,
) -> RecalculatePricingUseCase:
    """Return a pricing edit session using the configured debounce window."""
    settings = EngineSettings.from_env()
    return RecalculatePricingUseCase(
        state,
        sink,
        debouncer=PricingChangeDebouncer(window_ms=settings.debounce_ms),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_records_repository",
    "build_ledger_entry_sink",
    "build_reconcile_ledger_use_case",
    "build_booking_profit_use_case",
    "build_promote_bookings_use_case",
    "build_recalculate_pricing_use_case",
]

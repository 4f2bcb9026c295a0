"""Factory helpers to select the records backend."""

from pathlib import Path

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.json_snapshot_repository import JsonSnapshotRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import EngineSettings
from src.infrastructure.sqlalchemy_records_repository import (
    SqlAlchemyRecordsRepository,
)


def create_records_repository(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: EngineSettings | None = None,
) -> SqlAlchemyRecordsRepository | JsonSnapshotRepository:
    """Return a records repository implementation based on configuration.

    Args:
        db_port: Port providing access to the records engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings; read from the environment when None.

    Returns:
        Repository implementing the snapshot ports.

    Raises:
        RuntimeError: If the JSON backend has no snapshot file.
        ValueError: If the backend is unknown.
    """
    resolved_logger = logger or get_app_logger()
    resolved = settings or EngineSettings.from_env()

    if resolved.backend == "sqlalchemy":
        return SqlAlchemyRecordsRepository(db_port, logger=resolved_logger)

    if resolved.backend == "json":
        if resolved.snapshot_file is None or not isinstance(
            resolved.snapshot_file, Path
        ):
            raise RuntimeError(
                "JSON backend requires a local RECORDS_SNAPSHOT_FILE path."
            )
        return JsonSnapshotRepository(
            resolved.snapshot_file,
            logger=resolved_logger,
        )

    raise ValueError(
        "Unsupported records backend: "
        f"{resolved.backend}. Expected sqlalchemy or json."
    )


__all__ = ["create_records_repository"]

"""SQLAlchemy adapter reading and writing booking and ledger records.

Records live in two tables, ``bookings`` and ``expenses``, each holding the
record identifier and the back-office document as a JSON ``payload``.
"""

import json
import uuid
from collections.abc import Mapping

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.sinks import LedgerEntrySinkPort
from src.application.ports.snapshots import (
    BookingSnapshotPort,
    LedgerSnapshotPort,
)
from src.infrastructure.logging.logger import get_app_logger


SELECT_BOOKINGS_SQL = text(
    """
    SELECT id, payload
    FROM bookings
    ORDER BY id
    """
)

SELECT_EXPENSES_SQL = text(
    """
    SELECT id, payload
    FROM expenses
    ORDER BY id
    """
)

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expenses (id, payload)
    VALUES (:id, :payload)
    """
)

CREATE_RECORD_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS bookings (
        id TEXT PRIMARY KEY,
        payload TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS expenses (
        id TEXT PRIMARY KEY,
        payload TEXT NOT NULL
    )
    """,
)


class SqlAlchemyRecordsRepository(
    BookingSnapshotPort,
    LedgerSnapshotPort,
    LedgerEntrySinkPort,
):
    """Records repository backed by the records SQL database."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the records engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def prepare_storage(self) -> None:
        """Ensure the record tables exist."""
        engine = self._db_port.get_records_engine()
        with engine.begin() as conn:
            for statement in CREATE_RECORD_TABLES_SQL:
                conn.exec_driver_sql(statement)

    def fetch_bookings(self) -> list[Mapping]:
        """Return booking records.

        Returns:
            list[Mapping]: Booking documents with their ``id``.
        """
        return self._fetch(SELECT_BOOKINGS_SQL, "bookings")

    def fetch_entries(self) -> list[Mapping]:
        """Return ledger entry records.

        Returns:
            list[Mapping]: Expense documents with their ``id``.
        """
        return self._fetch(SELECT_EXPENSES_SQL, "expenses")

    def save_entry(self, record: Mapping) -> str:
        """Insert a ledger entry record.

        Args:
            record: Ledger entry document; an ``id`` is generated if absent.

        Returns:
            str: Identifier of the stored entry.
        """
        entry_id = str(record.get("id") or uuid.uuid4().hex)
        payload = {key: value for key, value in record.items() if key != "id"}
        engine = self._db_port.get_records_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_EXPENSE_SQL,
                {"id": entry_id, "payload": json.dumps(payload)},
            )
        self._logger.info(f"Ledger entry stored: id={entry_id}")
        return entry_id

    def _fetch(self, query, table: str) -> list[Mapping]:
        engine = self._db_port.get_records_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        records = []
        for row in rows:
            payload = self._decode(row.payload, row.id, table)
            records.append({**payload, "id": str(row.id)})
        return records

    def _decode(self, payload, record_id, table: str) -> Mapping:
        if isinstance(payload, Mapping):
            return payload
        try:
            decoded = json.loads(payload or "{}")
        except (TypeError, ValueError):
            self._logger.warning(
                f"Unreadable payload in {table} for id={record_id}"
            )
            return {}
        return decoded if isinstance(decoded, Mapping) else {}


__all__ = [
    "SqlAlchemyRecordsRepository",
    "SELECT_BOOKINGS_SQL",
    "SELECT_EXPENSES_SQL",
    "INSERT_EXPENSE_SQL",
    "CREATE_RECORD_TABLES_SQL",
]

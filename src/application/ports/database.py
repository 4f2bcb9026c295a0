"""Database ports for the reconciliation engine.

This module defines the application-layer protocol for accessing the
records database. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the booking and ledger records store."""

    def get_records_engine(self) -> Engine:
        """Get the engine for the records database.

        Returns:
            Engine: SQLAlchemy engine connected to the records backend.
        """


__all__ = ["DatabaseEnginePort"]

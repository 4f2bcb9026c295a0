"""Tests for the SQLAlchemy records repository."""

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text

from src.infrastructure.sqlalchemy_records_repository import (
    SqlAlchemyRecordsRepository,
)


@pytest.fixture()
def repository():
    engine = create_engine("sqlite://")
    db_port = SimpleNamespace(get_records_engine=lambda: engine)
    repo = SqlAlchemyRecordsRepository(db_port, logger=MagicMock())
    repo.prepare_storage()
    return repo, engine


def _insert(engine, table: str, record_id: str, payload: str) -> None:
    with engine.begin() as conn:
        conn.execute(
            text(f"INSERT INTO {table} (id, payload) VALUES (:id, :payload)"),
            {"id": record_id, "payload": payload},
        )


def test_fetch_bookings_merges_id_into_payload(repository) -> None:
    """Booking documents should come back with their row id."""
    repo, engine = repository
    _insert(
        engine,
        "bookings",
        "b2",
        json.dumps({"bookingDetails": {"boatName": "Aurora"}}),
    )
    _insert(engine, "bookings", "b1", json.dumps({"id": "ignored"}))

    records = repo.fetch_bookings()

    assert [record["id"] for record in records] == ["b1", "b2"]
    assert records[1]["bookingDetails"]["boatName"] == "Aurora"


def test_unreadable_payload_degrades_to_empty_record(repository) -> None:
    """Broken JSON should only empty its own record."""
    repo, engine = repository
    _insert(engine, "expenses", "e1", "{not json")
    _insert(engine, "expenses", "e2", json.dumps({"cashAlin": 10}))

    records = repo.fetch_entries()

    assert records == [{"id": "e1"}, {"cashAlin": 10, "id": "e2"}]
    repo._logger.warning.assert_called_once()


def test_save_entry_inserts_and_returns_id(repository) -> None:
    """Saved entries should be readable as ledger entry records."""
    repo, _ = repository

    generated = repo.save_entry({"bookingId": "b1", "suma1": 400.0})
    explicit = repo.save_entry({"id": "manual", "cashAlin": 5.0})

    records = {record["id"]: record for record in repo.fetch_entries()}
    assert explicit == "manual"
    assert records[generated]["bookingId"] == "b1"
    assert records["manual"] == {"cashAlin": 5.0, "id": "manual"}

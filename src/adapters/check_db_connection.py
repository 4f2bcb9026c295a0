"""Simple CLI to validate the records database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the records database.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the records database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_records_engine()
    logger.info(f"Records DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Records connection is working.")


if __name__ == "__main__":
    main()

"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.application.use_cases.pricing_debouncer import DEFAULT_DEBOUNCE_MS
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class EngineSettings:
    """Settings for the records backend and pricing recalculation.

    Attributes:
        backend: Backend identifier (sqlalchemy or json).
        snapshot_file: Optional path or URI to a JSON records export.
        debounce_ms: Quiet period before a pricing change is published.
    """

    backend: str = "sqlalchemy"
    snapshot_file: Optional[Path | str] = None
    debounce_ms: int = DEFAULT_DEBOUNCE_MS

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from environment variables.

        Returns:
            EngineSettings: Settings sourced from environment variables.
        """
        backend = os.getenv("RECORDS_BACKEND", "sqlalchemy").strip().lower()
        raw_snapshot = os.getenv("RECORDS_SNAPSHOT_FILE")
        logger = get_app_logger()
        if raw_snapshot:
            snapshot_file = cls._normalize_path(raw_snapshot, logger=logger)
        else:
            snapshot_file = cls._default_snapshot_file(logger=logger)
        return cls(
            backend=backend,
            snapshot_file=snapshot_file,
            debounce_ms=cls._debounce_ms(
                os.getenv("PRICING_DEBOUNCE_MS"),
                logger=logger,
            ),
        )

    @staticmethod
    def _normalize_path(
        raw_path: str,
        logger,
    ) -> Path | str:
        """Normalize the snapshot file path or URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path | str: Normalized filesystem path or URI string.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme and parsed.scheme != "file":
            return raw_path
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Snapshot file does not exist at {path}")
        return path

    @staticmethod
    def _default_snapshot_file(logger) -> Path | None:
        """Return a default snapshot path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single export is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set RECORDS_SNAPSHOT_FILE to choose one."
            )
        return None

    @staticmethod
    def _debounce_ms(raw: str | None, logger) -> int:
        if not raw:
            return DEFAULT_DEBOUNCE_MS
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid PRICING_DEBOUNCE_MS={raw!r}; using default")
            return DEFAULT_DEBOUNCE_MS
        return max(0, value)


__all__ = ["EngineSettings"]

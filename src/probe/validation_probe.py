"""Row-count smoke test for published snapshot URLs."""

from __future__ import annotations

from core.errors import KeeperMissingArgumentError
from core.logging_config import get_logger
from core.types import ValidationResult
from probe.query_engine import DuckDBQueryEngine, QueryEngine

_LOGGER = get_logger(__name__)


class ValidationProbe:
    """Checks that a published snapshot is queryable remotely."""

    def __init__(self, engine: QueryEngine | None = None) -> None:
        self._engine = engine if engine is not None else DuckDBQueryEngine()

    def validate(self, url: str | None) -> ValidationResult:
        """Count rows of the Parquet file at url with a single attempt.

        Args:
            url: Public URL of the snapshot.

        Returns:
            URL and row count.

        Raises:
            KeeperMissingArgumentError: If url is blank.
            KeeperDependencyError: If the engine is not available.
            KeeperValidationError: If the engine fails the query.
        """
        target_url = (url or "").strip()
        if not target_url:
            raise KeeperMissingArgumentError("No URL specified.")
        row_count = self._engine.count_rows(target_url)
        _LOGGER.info("validation_completed", url=target_url, row_count=row_count)
        return ValidationResult(url=target_url, row_count=row_count)

"""Remote analytical query engine capability.

This module wraps DuckDB behind a small protocol so the validation
probe can be exercised without the engine installed.
"""

from __future__ import annotations

from typing import Protocol

from core.constants import ROW_COUNT_QUERY_TEMPLATE
from core.errors import KeeperDependencyError, KeeperValidationError


class QueryEngine(Protocol):
    """Engine able to count rows of a remote Parquet file."""

    def count_rows(self, url: str) -> int:
        """Return the row count for the Parquet file at url."""


class DuckDBQueryEngine:
    """Query engine backed by an in-memory DuckDB connection."""

    def count_rows(self, url: str) -> int:
        """Run a single COUNT(*) query against a remote Parquet URL.

        Args:
            url: Public HTTP(S) URL of a Parquet file.

        Returns:
            Row count reported by DuckDB.

        Raises:
            KeeperDependencyError: If duckdb is not installed.
            KeeperValidationError: If DuckDB rejects or fails the query.
        """
        try:
            import duckdb
        except ImportError as error:
            raise KeeperDependencyError(
                "Validation requires duckdb, but it is not installed. "
                "Install it with: pip install duckdb"
            ) from error
        query = build_row_count_query(url)
        connection = duckdb.connect(database=":memory:")
        try:
            row = connection.execute(query).fetchone()
        except duckdb.Error as error:
            raise KeeperValidationError(f"DuckDB query failed for {url}: {error}") from error
        finally:
            connection.close()
        if row is None:
            raise KeeperValidationError(f"DuckDB returned no rows for {url}.")
        return int(row[0])


def build_row_count_query(url: str) -> str:
    """Render the row-count statement with the URL quoted as a SQL literal."""
    return ROW_COUNT_QUERY_TEMPLATE.format(url=url.replace("'", "''"))

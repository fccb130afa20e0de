"""
Database connection and query utilities.

Provides a small store client over psycopg that returns rows as
dictionaries. A Database is constructed once and handed to each
repository, so there is no process-wide connection handle.

For testing, use set_connection_override() to inject a connection
that will be used instead of creating new ones. This enables
transaction rollback between tests.
"""

import logging
import math
from contextlib import contextmanager
from typing import Any, Optional

import psycopg
from psycopg.rows import dict_row

from trackside.errors import QueryTimeoutError, StoreError

logger = logging.getLogger(__name__)

# libpq ignores connect timeouts below two seconds
MIN_CONNECT_TIMEOUT = 2


class Database:
    """
    Store client bound to a single Postgres DSN.

    Reads accept a timeout in seconds. It bounds opening the connection
    (connect_timeout) and is applied as a transaction-local
    statement_timeout. Either expiry raises QueryTimeoutError.
    """

    def __init__(self, database_url: str, default_timeout: Optional[float] = None):
        self.database_url = database_url
        self.default_timeout = default_timeout
        self._connection_override: Optional[psycopg.Connection] = None

    # =========================================================================
    # Connection Override (for testing)
    # =========================================================================

    def set_connection_override(self, conn: psycopg.Connection) -> None:
        """
        Set a connection to use instead of creating new ones.

        Used by test fixtures to ensure all database operations run
        within a single transaction that can be rolled back.
        """
        self._connection_override = conn

    def clear_connection_override(self) -> None:
        """Clear the connection override, restoring normal behavior."""
        self._connection_override = None

    # =========================================================================
    # Connection Management
    # =========================================================================

    @contextmanager
    def get_connection(self, timeout: Optional[float] = None):
        """
        Context manager for database connections.

        In normal operation:
            - Opens a new connection, giving up after the timeout
            - Commits on successful exit
            - Rolls back on exception
            - Closes connection when done

        With override set (testing):
            - Returns the override connection
            - Does NOT commit, rollback, or close
        """
        if self._connection_override is not None:
            yield self._connection_override
            return

        kwargs = {}
        timeout = self._resolve_timeout(timeout)
        if timeout:
            kwargs["connect_timeout"] = max(MIN_CONNECT_TIMEOUT, math.ceil(timeout))

        try:
            conn = psycopg.connect(self.database_url, **kwargs)
        except psycopg.errors.ConnectionTimeout as e:
            logger.warning("Timed out connecting to database: %s", e)
            raise QueryTimeoutError(f"timed out connecting to database: {e}") from e
        except psycopg.Error as e:
            raise StoreError(f"could not connect to database: {e}") from e

        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    @contextmanager
    def get_cursor(self, timeout: Optional[float] = None):
        """
        Context manager for a cursor with dict rows.

        psycopg errors raised inside the block are re-raised as
        StoreError (or QueryTimeoutError when the statement timed out).
        """
        try:
            with self.get_connection(timeout) as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    self._apply_timeout(cur, timeout)
                    yield cur
        except psycopg.errors.QueryCanceled as e:
            logger.warning("Query cancelled after timeout: %s", e)
            raise QueryTimeoutError(f"query timed out: {e}") from e
        except psycopg.Error as e:
            logger.error("Database error: %s", e)
            raise StoreError(str(e)) from e

    def _resolve_timeout(self, timeout: Optional[float]) -> Optional[float]:
        return self.default_timeout if timeout is None else timeout

    def _apply_timeout(self, cur, timeout: Optional[float]) -> None:
        timeout = self._resolve_timeout(timeout)
        if not timeout:
            return
        millis = max(1, int(timeout * 1000))
        cur.execute(
            "SELECT set_config('statement_timeout', %s, true)", (str(millis),)
        )

    # =========================================================================
    # Query Helpers
    # =========================================================================

    def execute(self, query: str, params: tuple = None) -> None:
        """
        Execute a query without returning results.

        Use for DDL, INSERT, UPDATE, DELETE when you don't need the affected rows.
        """
        with self.get_cursor() as cur:
            cur.execute(query, params)

    def fetch_one(
        self, query: str, params: tuple = None, timeout: Optional[float] = None
    ) -> dict[str, Any] | None:
        """
        Execute a query and return a single row as dict.

        Returns:
            Dict of column names to values, or None if no row found
        """
        with self.get_cursor(timeout) as cur:
            cur.execute(query, params)
            return cur.fetchone()

    def fetch_all(
        self, query: str, params: tuple = None, timeout: Optional[float] = None
    ) -> list[dict[str, Any]]:
        """
        Execute a query and return all rows as list of dicts.

        Returns:
            List of dicts, empty list if no rows found
        """
        with self.get_cursor(timeout) as cur:
            cur.execute(query, params)
            return cur.fetchall()

    # =========================================================================
    # Batch Operations
    # =========================================================================

    def execute_many(self, query: str, params_list: list[tuple]) -> int:
        """
        Execute a query multiple times with different parameters.

        More efficient than calling execute() in a loop for bulk inserts.

        Returns:
            Number of rows affected
        """
        with self.get_cursor() as cur:
            cur.executemany(query, params_list)
            return cur.rowcount

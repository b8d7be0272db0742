"""Base repository class."""

import threading
from typing import Any

import duckdb
from loguru import logger


class BaseRepository:
    """Base repository over a shared DuckDB connection.

    Each call runs on its own cursor so repositories can be used from worker
    threads.
    """

    def __init__(self, conn: duckdb.DuckDBPyConnection):
        self._db = conn
        self._lock = threading.Lock()
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        with self._lock:
            cursor = self._db.cursor()
        if params:
            return cursor.execute(query, params)
        return cursor.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def close(self) -> None:
        """Close the underlying connection."""
        with self._lock:
            self._db.close()
        logger.debug("{} closed", self.__class__.__name__)

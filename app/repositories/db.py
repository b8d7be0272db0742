"""DuckDB connection management."""

from pathlib import Path

import duckdb
from loguru import logger

from app.models import ALL_DDL


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.debug("DB tables initialized")


def connect(db_path: str) -> duckdb.DuckDBPyConnection:
    """Open a writable connection, creating the file and tables if needed."""
    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = duckdb.connect(db_path)
    init_tables(conn)
    logger.debug("DB connected: {}", db_path)
    return conn

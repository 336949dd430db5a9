"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

Repositories should acquire connections through :func:`connection`, which
guarantees the connection goes back to the pool on every exit path.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from db.errors import DbConnectionError
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX, dsn: str | None = None) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.
        dsn: Connection string; defaults to ``config.DATABASE_URL``.

    Raises:
        DbConnectionError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn or DATABASE_URL)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise DbConnectionError(f"Unable to connect to database: {e}") from e


def get_connection():
    """
    Get a connection from the pool.

    Returns:
        A psycopg2 connection object.

    Raises:
        DbConnectionError: If the pool has not been initialized or is exhausted,
            or the server cannot be reached.
    """
    if _pool is None:
        raise DbConnectionError("Database pool not initialized. Call init_pool() first.")
    try:
        return _pool.getconn()
    except (psycopg2.OperationalError, pool.PoolError) as e:
        logger.error(f"Failed to acquire database connection: {e}")
        raise DbConnectionError(f"Unable to acquire database connection: {e}") from e


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is not None:
        _pool.putconn(conn)


@contextmanager
def connection() -> Iterator:
    """
    Scoped connection: yields a pooled connection and always releases it,
    even when the body (or a rollback inside it) raises.
    """
    conn = get_connection()
    try:
        yield conn
    finally:
        release_connection(conn)


def rollback_quietly(conn, action: str) -> None:
    """
    Roll back the current transaction. A failing rollback is logged and
    swallowed so it never replaces the error that triggered it.
    """
    try:
        conn.rollback()
    except Exception as e:
        logger.error(f"Rollback failed after attempt to {action}: {e}")


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")

"""Tests for the pooled connection provider."""

from unittest.mock import MagicMock

import psycopg2
import pytest
from psycopg2 import pool

import db.connection as db_connection
from db.errors import DbConnectionError


@pytest.fixture
def fake_pool(monkeypatch):
    fake = MagicMock(spec=pool.SimpleConnectionPool)
    monkeypatch.setattr(db_connection, "_pool", fake)
    return fake


def test_get_connection_without_pool_is_connectivity_error(monkeypatch):
    monkeypatch.setattr(db_connection, "_pool", None)

    with pytest.raises(DbConnectionError, match="not initialized"):
        db_connection.get_connection()


@pytest.mark.parametrize(
    "error", [psycopg2.OperationalError("could not connect"), pool.PoolError("connection pool exhausted")]
)
def test_get_connection_wraps_driver_errors(fake_pool, error):
    fake_pool.getconn.side_effect = error

    with pytest.raises(DbConnectionError) as exc_info:
        db_connection.get_connection()

    assert exc_info.value.__cause__ is error


def test_connection_scope_releases_on_success(fake_pool):
    conn = fake_pool.getconn.return_value

    with db_connection.connection() as acquired:
        assert acquired is conn

    fake_pool.putconn.assert_called_once_with(conn)


def test_connection_scope_releases_on_error(fake_pool):
    conn = fake_pool.getconn.return_value

    with pytest.raises(RuntimeError):
        with db_connection.connection():
            raise RuntimeError("boom")

    fake_pool.putconn.assert_called_once_with(conn)


def test_init_pool_wraps_unreachable_server(monkeypatch):
    monkeypatch.setattr(db_connection, "_pool", None)
    monkeypatch.setattr(
        db_connection.pool,
        "SimpleConnectionPool",
        MagicMock(side_effect=psycopg2.OperationalError("connection refused")),
    )

    with pytest.raises(DbConnectionError):
        db_connection.init_pool(dsn="postgresql://nobody@127.0.0.1:1/none")
    assert db_connection._pool is None


def test_init_pool_is_idempotent(fake_pool, monkeypatch):
    factory = MagicMock()
    monkeypatch.setattr(db_connection.pool, "SimpleConnectionPool", factory)

    db_connection.init_pool()

    factory.assert_not_called()


def test_close_pool(fake_pool):
    db_connection.close_pool()

    fake_pool.closeall.assert_called_once_with()
    assert db_connection._pool is None


def test_rollback_quietly_rolls_back():
    conn = MagicMock()

    db_connection.rollback_quietly(conn, "insert project")

    conn.rollback.assert_called_once_with()


def test_rollback_quietly_swallows_rollback_failure():
    conn = MagicMock()
    conn.rollback.side_effect = psycopg2.InterfaceError("connection already closed")

    db_connection.rollback_quietly(conn, "insert project")

    conn.rollback.assert_called_once_with()

"""Tests for schema creation: errors are wrapped and the connection released."""

import psycopg2
import pytest

import db.init_db as init_db
from db.errors import DbError


@pytest.fixture
def schema_db(fake_db, monkeypatch):
    monkeypatch.setattr(init_db, "connection", fake_db)
    return fake_db


def test_create_tables_commits(schema_db):
    init_db.create_tables()

    sql = schema_db.cursor.execute.call_args[0][0]
    assert "CREATE TABLE IF NOT EXISTS project_category" in sql
    assert schema_db.transaction_calls() == ["commit"]
    assert schema_db.released == 1


def test_create_tables_failure_is_wrapped_as_db_error(schema_db):
    cause = psycopg2.errors.InsufficientPrivilege("permission denied for schema public")
    schema_db.cursor.execute.side_effect = cause

    with pytest.raises(DbError) as exc_info:
        init_db.create_tables()

    assert exc_info.value.__cause__ is cause
    assert schema_db.transaction_calls() == ["rollback"]
    assert schema_db.released == 1


def test_failed_rollback_does_not_hide_ddl_error(schema_db):
    cause = psycopg2.ProgrammingError("syntax error at or near")
    schema_db.cursor.execute.side_effect = cause
    schema_db.conn.rollback.side_effect = psycopg2.InterfaceError("connection already closed")

    with pytest.raises(DbError) as exc_info:
        init_db.drop_tables()

    assert exc_info.value.__cause__ is cause
    assert schema_db.released == 1

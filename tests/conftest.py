"""Shared pytest fixtures: a fake connection factory for repository unit tests."""

from contextlib import contextmanager
from decimal import Decimal
from unittest.mock import MagicMock

import pytest


class FakeConnectionFactory:
    """
    Stands in for ``db.connection.connection``: every call yields the same
    MagicMock connection whose ``cursor()`` context yields ``self.cursor``.
    Counts acquisitions and releases.
    """

    def __init__(self):
        self.conn = MagicMock(name="conn")
        self.cursor = MagicMock(name="cursor")
        self.conn.cursor.return_value.__enter__.return_value = self.cursor
        self.acquired = 0
        self.released = 0

    @contextmanager
    def __call__(self):
        self.acquired += 1
        try:
            yield self.conn
        finally:
            self.released += 1

    def transaction_calls(self) -> list[str]:
        """Names of commit/rollback calls made on the connection, in order."""
        return [c[0] for c in self.conn.mock_calls if c[0] in ("commit", "rollback")]


@pytest.fixture
def fake_db():
    return FakeConnectionFactory()


@pytest.fixture
def project_row():
    return {
        "project_id": 1,
        "project_name": "Build shed",
        "estimated_hours": Decimal("40.00"),
        "actual_hours": None,
        "difficulty": 3,
        "notes": "weekend project",
    }

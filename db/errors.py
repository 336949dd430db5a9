"""
db/errors.py
------------
Storage-level exceptions raised by the database and repository layers.
The original driver exception is always kept as ``__cause__``.
"""


class DbError(Exception):
    """A statement failed to execute or its result could not be decoded."""


class DbConnectionError(DbError):
    """A database connection could not be acquired."""

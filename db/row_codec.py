"""
db/row_codec.py
---------------
Maps between SQL and the domain dataclasses.

Two operations make up the codec contract used by the repositories:

* ``bind`` places a typed value at a 1-based position of a positional
  parameter list, coercing it to the declared SQL type.
* ``extract`` builds a dataclass instance from a mapping-shaped row
  (``psycopg2.extras.RealDictCursor``), matching columns to fields by name.

Any object with the same two methods can be handed to a repository instead.
"""

from dataclasses import MISSING, fields, is_dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, TypeVar

T = TypeVar("T")

_CENTS = Decimal("0.01")


class SqlType(Enum):
    """Semantic types a value can be bound as."""
    TEXT = "text"
    DECIMAL = "decimal"
    INTEGER = "integer"


class RowCodec:
    """Dataclass-driven parameter binding and row extraction."""

    def bind(self, params: list, position: int, value: Any, sql_type: SqlType) -> None:
        """
        Bind ``value`` at ``position`` (1-based) of ``params``.

        A position may be rebound, or be the next free one; anything else
        would leave a hole. ``None`` binds as SQL NULL for every type.

        Raises:
            IndexError: If ``position`` is outside ``1..len(params) + 1``.
            TypeError: If ``sql_type`` is not a :class:`SqlType`.
        """
        if not 1 <= position <= len(params) + 1:
            raise IndexError(
                f"Cannot bind parameter {position}: {len(params)} already bound"
            )
        coerced = self._coerce(value, sql_type)
        if position == len(params) + 1:
            params.append(coerced)
        else:
            params[position - 1] = coerced

    @staticmethod
    def _coerce(value: Any, sql_type: SqlType) -> Any:
        if not isinstance(sql_type, SqlType):
            raise TypeError(f"Unsupported SQL type: {sql_type!r}")
        if value is None:
            return None
        if sql_type is SqlType.TEXT:
            return str(value)
        if sql_type is SqlType.DECIMAL:
            if isinstance(value, float):
                value = repr(value)
            return Decimal(value).quantize(_CENTS)
        return int(value)

    def extract(self, row: Mapping[str, Any], entity_cls: type[T]) -> T:
        """
        Build an ``entity_cls`` instance from ``row``.

        Every init field whose name matches a column is populated; columns
        without a matching field are ignored, fields without a matching
        column keep their defaults.

        Raises:
            TypeError: If ``entity_cls`` is not a dataclass, or a field with
                no default has no matching column.
        """
        if not (isinstance(entity_cls, type) and is_dataclass(entity_cls)):
            raise TypeError(f"{entity_cls!r} is not a dataclass type")
        kwargs = {}
        for f in fields(entity_cls):
            if not f.init:
                continue
            if f.name in row:
                kwargs[f.name] = row[f.name]
            elif f.default is MISSING and f.default_factory is MISSING:
                raise TypeError(
                    f"Row has no column '{f.name}' required by {entity_cls.__name__}"
                )
        return entity_cls(**kwargs)

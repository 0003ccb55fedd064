"""Per-render state and the render result record.

``ParamCounter`` is the runtime parameter state for a single ``to_sql()``
call.  One instance is created at the start of every render and threaded by
reference through every clause renderer, every condition and every nested
subquery, so placeholder positions are globally ordered and never collide
within one statement.  Because it is never stored on a builder, rendering
the same builder twice produces identical output.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from querybrick.dialect.base import Dialect
from querybrick.schema.raw import RawExpression


@dataclass
class ParamCounter:
    """Position of the next placeholder within the statement being rendered."""

    position: int = 0

    def bind(self, dialect: Dialect) -> str:
        """Return the placeholder for the current position and advance."""
        marker = dialect.placeholder(self.position)
        self.position += 1
        return marker


@dataclass
class CompiledSQL:
    """The output of a successful render.

    Attributes:
        sql: The SQL text with dialect-specific placeholders.
        params: Arguments aligned left to right with the placeholders.
        dialect: The target dialect name (``'postgres'``, ``'mysql'``, ...).

    Unpacks as ``(sql, params)``::

        sql, params = stmt.to_sql()
        cursor.execute(sql, params)
    """

    sql: str
    params: list[Any] = field(default_factory=list)
    dialect: str = ""

    def __iter__(self) -> Iterator[Any]:
        yield self.sql
        yield self.params


@runtime_checkable
class NestedStatement(Protocol):
    """Anything that can render itself inside another statement.

    Implemented by every statement builder.  Nested rendering shares the
    outer ``counter`` and ``dialect`` so placeholder numbering and quoting
    continue across the subquery boundary.
    """

    def to_sql(self) -> CompiledSQL: ...

    def render_nested(self, counter: ParamCounter, dialect: Dialect) -> tuple[str, list[Any]]: ...


def bind_value(value: Any, dialect: Dialect, counter: ParamCounter) -> tuple[str, list[Any]]:
    """Render one value.

    Raw expressions are spliced verbatim, statement builders become a
    parenthesised scalar subquery, anything else is a placeholder.
    """
    if isinstance(value, RawExpression):
        return value.sql, []
    if isinstance(value, NestedStatement):
        sub_sql, sub_args = value.render_nested(counter, dialect)
        return f"({sub_sql})", sub_args
    return counter.bind(dialect), [value]

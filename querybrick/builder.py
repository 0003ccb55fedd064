"""Entry point for statement construction.

``QueryBuilder`` binds a :class:`~querybrick.dialect.base.Dialect` and hands
out statement builders already configured for it::

    qb = QueryBuilder(postgres())
    sql, params = qb.select("id").from_("t").where(eq("x", 5)).to_sql()
    # SELECT "id" FROM "t" WHERE "x" = $1   [5]

``with_dialect`` returns a new ``QueryBuilder``; statements already created
keep the dialect they were created with.
"""
from __future__ import annotations

from querybrick.dialect.base import Dialect
from querybrick.dialect.postgres import PostgresDialect
from querybrick.dialect.registry import DialectFactory
from querybrick.schema.raw import RawExpression
from querybrick.statements import Delete, Insert, Select, Update


class QueryBuilder:
    """Factory for dialect-bound statement builders.

    Args:
        dialect: Target dialect.  Defaults to PostgreSQL.
    """

    def __init__(self, dialect: Dialect | None = None) -> None:
        self._dialect = dialect or PostgresDialect()

    @classmethod
    def for_target(cls, name: str) -> QueryBuilder:
        """Create a builder for a registered dialect name (``"mysql"``, ...).

        Raises:
            UnsupportedDialectError: If ``name`` is not registered.
        """
        return cls(DialectFactory.create(name))

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    def with_dialect(self, dialect: Dialect) -> QueryBuilder:
        return QueryBuilder(dialect)

    def select(self, *columns: str | RawExpression) -> Select:
        return Select(dialect=self._dialect, select_columns=columns)

    def insert(self, table: str = "") -> Insert:
        return Insert(dialect=self._dialect, table_name=table)

    def update(self, table: str = "") -> Update:
        return Update(dialect=self._dialect, table_name=table)

    def delete(self, table: str = "") -> Delete:
        return Delete(dialect=self._dialect, table_name=table)

    def __repr__(self) -> str:
        return f"QueryBuilder({self._dialect!r})"


def new(dialect: Dialect | None = None) -> QueryBuilder:
    return QueryBuilder(dialect)

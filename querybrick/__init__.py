"""querybrick - fluent, dialect-aware SQL statement builders.

Build Queries. Don't Concatenate Them.

querybrick assembles SELECT, INSERT, UPDATE and DELETE statements through
chainable, immutable builders and renders them to SQL text plus an ordered
argument list for a DB-API ``execute`` call.  It never talks to a database.

Public API
----------
``QueryBuilder`` / ``new``
    Entry point bound to a dialect; starts every statement.

Dialects
    ``mysql()``, ``postgres()``, ``sqlite()``, ``sqlserver()``, ``oracle()``
    and the ``DialectFactory`` registry for selection by name.

Conditions
    ``eq``, ``not_eq``, ``gt``, ``gt_or_eq``, ``lt``, ``lt_or_eq``, ``like``,
    ``not_like``, ``in_``, ``not_in``, ``is_null``, ``is_not_null``,
    ``between``, ``column_eq``, ``and_``, ``or_``.

Raw SQL
    ``raw``, ``unsafe_raw``, ``current_timestamp`` - trusted-input escape
    hatch, not a security boundary.

Example::

    import querybrick as qb

    q = qb.new(qb.postgres())
    sql, params = (
        q.select("id", "name")
        .from_("people")
        .where(qb.gt("age", 18), qb.or_(qb.eq("role", "admin"), qb.is_null("role")))
        .order_by("name")
        .limit(10)
        .to_sql()
    )
    # SELECT "id", "name" FROM "people" WHERE "age" > $1
    #   AND ("role" = $2 OR "role" IS NULL) ORDER BY "name" ASC LIMIT $3
    # params == [18, "admin", 10]

Extensibility
-------------
New dialects can be registered via::

    from querybrick import DialectFactory, PostgresDialect

    @DialectFactory.register("cockroach")
    class CockroachDialect(PostgresDialect):
        name = "cockroach"
"""

from __future__ import annotations

from querybrick.builder import QueryBuilder, new
from querybrick.compile.context import CompiledSQL, ParamCounter
from querybrick.dialect import (
    Dialect,
    DialectCapabilities,
    DialectFactory,
    MySQLDialect,
    OracleDialect,
    PostgresDialect,
    SQLiteDialect,
    SQLServerDialect,
    mysql,
    oracle,
    postgres,
    sqlite,
    sqlserver,
)
from querybrick.errors import (
    ArityMismatchError,
    BuildError,
    EmptyRowError,
    InsertModeConflictError,
    MissingAssignmentError,
    MissingTargetError,
    QueryBrickError,
    UnsafeRawExpressionError,
    UnsupportedDialectError,
)
from querybrick.schema.clauses import ConflictAction
from querybrick.schema.conditions import (
    Condition,
    and_,
    between,
    column_eq,
    eq,
    gt,
    gt_or_eq,
    in_,
    is_not_null,
    is_null,
    like,
    lt,
    lt_or_eq,
    not_eq,
    not_in,
    not_like,
    or_,
)
from querybrick.schema.raw import RawExpression, current_timestamp, raw, unsafe_raw
from querybrick.statements import Delete, Insert, Select, Statement, Update
from querybrick.utils import configure_logging

__all__ = [
    # Entry point
    "QueryBuilder",
    "new",
    # Statements
    "Select",
    "Insert",
    "Update",
    "Delete",
    "Statement",
    "CompiledSQL",
    "ParamCounter",
    # Dialects
    "Dialect",
    "DialectCapabilities",
    "DialectFactory",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "SQLServerDialect",
    "OracleDialect",
    "mysql",
    "postgres",
    "sqlite",
    "sqlserver",
    "oracle",
    # Conditions
    "Condition",
    "eq",
    "not_eq",
    "gt",
    "gt_or_eq",
    "lt",
    "lt_or_eq",
    "like",
    "not_like",
    "in_",
    "not_in",
    "is_null",
    "is_not_null",
    "between",
    "column_eq",
    "and_",
    "or_",
    # Raw SQL / conflict handling
    "RawExpression",
    "raw",
    "unsafe_raw",
    "current_timestamp",
    "ConflictAction",
    # Errors
    "QueryBrickError",
    "BuildError",
    "EmptyRowError",
    "MissingTargetError",
    "InsertModeConflictError",
    "ArityMismatchError",
    "MissingAssignmentError",
    "UnsafeRawExpressionError",
    "UnsupportedDialectError",
    # Logging
    "configure_logging",
]

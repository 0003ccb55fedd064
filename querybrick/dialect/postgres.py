"""PostgreSQL dialect."""

from __future__ import annotations

from querybrick.dialect.base import DialectCapabilities, NumberedDialect


class PostgresDialect(NumberedDialect):
    """PostgreSQL dialect.

    Parameter style: ``$1, $2, ...`` - the native server-side numbering used
    by ``asyncpg`` and PostgreSQL prepared statements.

    PostgreSQL supports ``RETURNING`` everywhere but rejects ``LIMIT`` and
    ``ORDER BY`` on UPDATE and DELETE.
    """

    name = "postgres"
    prefix = "$"
    capabilities = DialectCapabilities(
        supports_returning=True,
        supports_update_limit=False,
        supports_delete_limit=False,
        supports_ordered_mutation=False,
    )

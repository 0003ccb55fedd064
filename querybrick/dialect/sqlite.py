"""SQLite dialect."""

from __future__ import annotations

from querybrick.dialect.base import DialectCapabilities, SequentialDialect


class SQLiteDialect(SequentialDialect):
    """SQLite dialect.

    Parameter style: ``?`` (qmark) - compatible with the standard library
    ``sqlite3`` module.

    ``RETURNING`` requires SQLite 3.35+.  ``LIMIT`` / ``ORDER BY`` on UPDATE
    and DELETE require a build with ``SQLITE_ENABLE_UPDATE_DELETE_LIMIT``.
    """

    name = "sqlite"
    capabilities = DialectCapabilities(
        supports_returning=True,
        supports_update_limit=True,
        supports_delete_limit=True,
        supports_ordered_mutation=True,
    )

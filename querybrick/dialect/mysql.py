"""MySQL dialect."""

from __future__ import annotations

from querybrick.dialect.base import DialectCapabilities, SequentialDialect


class MySQLDialect(SequentialDialect):
    """MySQL / MariaDB dialect.

    Parameter style: ``?`` - compatible with ``mysql-connector-python``
    prepared cursors.

    Identifiers are quoted with backticks (`` ` ``) rather than double-quotes.
    MySQL accepts ``ORDER BY`` and ``LIMIT`` on single-table UPDATE and
    DELETE, but has no ``RETURNING``.
    """

    name = "mysql"
    quote_open = "`"
    quote_close = "`"
    capabilities = DialectCapabilities(
        supports_returning=False,
        supports_update_limit=True,
        supports_delete_limit=True,
        supports_ordered_mutation=True,
    )

"""SQL Server dialect."""

from __future__ import annotations

from querybrick.dialect.base import DialectCapabilities, NumberedDialect


class SQLServerDialect(NumberedDialect):
    """Microsoft SQL Server dialect.

    Parameter style: ``@p1, @p2, ...``.  Identifiers are bracket-quoted;
    only the closing bracket is doubled inside a name.  String literals are
    emitted as Unicode (``N'...'``).
    """

    name = "sqlserver"
    prefix = "@p"
    quote_open = "["
    quote_close = "]"
    capabilities = DialectCapabilities()

    def escape_string(self, value: str) -> str:
        return "N" + super().escape_string(value)

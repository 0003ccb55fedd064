"""Oracle dialect."""

from __future__ import annotations

from querybrick.dialect.base import DialectCapabilities, NumberedDialect


class OracleDialect(NumberedDialect):
    """Oracle dialect.

    Parameter style: ``:1, :2, ...`` (numeric binds, as accepted by
    ``python-oracledb``).  Oracle's ``RETURNING ... INTO`` form is not
    emitted, so ``RETURNING`` is reported unsupported.
    """

    name = "oracle"
    prefix = ":"
    capabilities = DialectCapabilities()

"""Raw SQL expressions.

A :class:`RawExpression` is caller-supplied SQL text that is spliced into the
output verbatim, with no placeholder and no argument.  It is accepted as an
INSERT value, an UPDATE / ON CONFLICT assignment value, a select-list item
and as the left-hand side of a condition (``COUNT(*)`` in HAVING).

Raw expressions are a trusted-input escape hatch, not a security boundary.
:func:`raw` rejects text containing data-modifying keywords as a best-effort
guard against obvious mistakes; it cannot catch every injection shape.
Never build a raw expression from untrusted input.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from querybrick.errors import UnsafeRawExpressionError
from querybrick.utils import get_logger

logger = get_logger("schema.raw")

_BLOCKED_KEYWORDS = re.compile(r"\b(DROP|DELETE|INSERT|UPDATE|ALTER)\b", re.IGNORECASE)


class RawExpression(BaseModel):
    """Literal SQL text rendered without parameter binding.

    Attributes:
        sql: The SQL fragment.
        checked: ``True`` if the keyword guard was applied.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sql: str
    checked: bool = True

    def __str__(self) -> str:
        return self.sql


def raw(sql: str) -> RawExpression:
    """Build a raw expression after a basic safety check.

    Args:
        sql: SQL fragment such as ``"CURRENT_TIMESTAMP"`` or ``"COUNT(*)"``.

    Returns:
        A :class:`RawExpression`.

    Raises:
        UnsafeRawExpressionError: If ``sql`` contains DROP, DELETE, INSERT,
            UPDATE or ALTER as a word (case-insensitive).
    """
    match = _BLOCKED_KEYWORDS.search(sql)
    if match:
        logger.warning("Rejected raw SQL expression containing %s", match.group(1).upper())
        raise UnsafeRawExpressionError(sql, match.group(1))
    return RawExpression(sql=sql)


def unsafe_raw(sql: str) -> RawExpression:
    """Build a raw expression without the keyword check (use with caution)."""
    return RawExpression(sql=sql, checked=False)


def current_timestamp() -> RawExpression:
    return raw("CURRENT_TIMESTAMP")

"""DELETE statement builder."""
from __future__ import annotations

from typing import Any, ClassVar, Self

from querybrick.compile.context import ParamCounter
from querybrick.errors import MissingTargetError
from querybrick.statements.base import (
    JoinMixin,
    LimitMixin,
    OrderByMixin,
    ReturningMixin,
    WhereMixin,
)


class Delete(WhereMixin, JoinMixin, OrderByMixin, LimitMixin, ReturningMixin):
    """Builds ``DELETE`` statements.

    Rendering order::

        DELETE FROM t [JOIN ...] [WHERE ...] [ORDER BY ...] [LIMIT ?] [RETURNING ...]

    JOINs are emitted as given, for dialects with multi-table delete
    syntax.  ORDER BY, LIMIT and RETURNING follow the same capability
    gating as :class:`~querybrick.statements.update.Update`.
    """

    keyword: ClassVar[str] = "DELETE"

    table_name: str = ""

    def from_(self, table: str) -> Self:
        return self._replace(table_name=table)

    def _build(self, counter: ParamCounter) -> tuple[str, list[Any]]:
        if not self.table_name:
            raise MissingTargetError(self.keyword)

        r = self._renderer(counter)
        args: list[Any] = []

        sql = f"DELETE FROM {r.table(self.table_name)}"

        join_sql, join_args = r.joins(self.join_clauses)
        sql += join_sql
        args.extend(join_args)

        where_sql, where_args = r.conditions(" WHERE ", self.where_conditions)
        sql += where_sql
        args.extend(where_args)

        if self.order_items and self._supports("supports_ordered_mutation", "ORDER BY"):
            sql += r.order_by(self.order_items)

        if self.limit_value is not None and self._supports("supports_delete_limit", "LIMIT"):
            limit_sql, limit_args = r.bound("LIMIT", self.limit_value)
            sql += limit_sql
            args.extend(limit_args)

        if self.returning_columns and self._supports("supports_returning", "RETURNING"):
            sql += r.returning(self.returning_columns)

        return sql, args

"""UPDATE statement builder."""
from __future__ import annotations

from typing import Any, ClassVar, Self

from querybrick.compile.context import ParamCounter
from querybrick.errors import MissingAssignmentError, MissingTargetError
from querybrick.schema.clauses import Assignment
from querybrick.schema.raw import unsafe_raw
from querybrick.statements.base import LimitMixin, OrderByMixin, ReturningMixin, WhereMixin


class Update(WhereMixin, OrderByMixin, LimitMixin, ReturningMixin):
    """Builds ``UPDATE`` statements.

    Rendering order::

        UPDATE t SET ... [WHERE ...] [ORDER BY ...] [LIMIT ?] [RETURNING ...]

    ORDER BY, LIMIT and RETURNING are emitted only when the dialect's
    capabilities allow them; otherwise they are dropped without error and
    bind no arguments.
    """

    keyword: ClassVar[str] = "UPDATE"

    table_name: str = ""
    assignment_list: tuple[Assignment, ...] = ()

    def table(self, table: str) -> Self:
        return self._replace(table_name=table)

    def set(self, column: str, value: Any) -> Self:
        """Assign a bound value, a raw expression or a scalar subquery to ``column``."""
        assignment = Assignment(column=column, value=value)
        return self._replace(assignment_list=self.assignment_list + (assignment,))

    def set_raw(self, column: str, expression: str) -> Self:
        """Assign a verbatim SQL expression, e.g. ``set_raw("n", "n + 1")``.

        The expression is trusted input and is not keyword-checked.
        """
        return self.set(column, unsafe_raw(expression))

    def _build(self, counter: ParamCounter) -> tuple[str, list[Any]]:
        if not self.table_name:
            raise MissingTargetError(self.keyword)
        if not self.assignment_list:
            raise MissingAssignmentError(self.table_name)

        r = self._renderer(counter)
        args: list[Any] = []

        set_sql, set_args = r.assignments(self.assignment_list)
        sql = f"UPDATE {r.table(self.table_name)} SET {set_sql}"
        args.extend(set_args)

        where_sql, where_args = r.conditions(" WHERE ", self.where_conditions)
        sql += where_sql
        args.extend(where_args)

        if self.order_items and self._supports("supports_ordered_mutation", "ORDER BY"):
            sql += r.order_by(self.order_items)

        if self.limit_value is not None and self._supports("supports_update_limit", "LIMIT"):
            limit_sql, limit_args = r.bound("LIMIT", self.limit_value)
            sql += limit_sql
            args.extend(limit_args)

        if self.returning_columns and self._supports("supports_returning", "RETURNING"):
            sql += r.returning(self.returning_columns)

        return sql, args

"""SELECT statement builder."""
from __future__ import annotations

from typing import Any, ClassVar, Self

from querybrick.compile.context import NestedStatement, ParamCounter
from querybrick.errors import MissingTargetError
from querybrick.schema.clauses import SubqueryRef
from querybrick.schema.conditions import Condition
from querybrick.schema.raw import RawExpression
from querybrick.statements.base import JoinMixin, LimitMixin, OrderByMixin, WhereMixin


class Select(WhereMixin, JoinMixin, OrderByMixin, LimitMixin):
    """Builds ``SELECT`` statements.

    Clauses may be set in any order; rendering always follows::

        SELECT [DISTINCT] cols FROM src JOIN* WHERE GROUP BY HAVING
        ORDER BY LIMIT OFFSET

    Example::

        stmt = (
            qb.select("u.id", "u.name")
            .from_("users", alias="u")
            .left_join("orders", column_eq("o.user_id", "u.id"), alias="o")
            .where(gt("u.age", 18))
            .order_by("u.name")
            .limit(10)
        )
        sql, params = stmt.to_sql()
    """

    keyword: ClassVar[str] = "SELECT"

    select_columns: tuple[str | RawExpression, ...] = ()
    is_distinct: bool = False
    table_name: str = ""
    table_alias: str | None = None
    source_subquery: SubqueryRef | None = None
    group_columns: tuple[str | RawExpression, ...] = ()
    having_conditions: tuple[Condition, ...] = ()
    offset_value: int | None = None

    # ------------------------------------------------------------------
    # Chainable clause setters
    # ------------------------------------------------------------------

    def columns(self, *columns: str | RawExpression) -> Self:
        """Append select-list items.  An empty list renders ``*``."""
        return self._replace(select_columns=self.select_columns + columns)

    def from_(self, table: str, alias: str | None = None) -> Self:
        """Select from a table (clears any FROM subquery)."""
        return self._replace(table_name=table, table_alias=alias, source_subquery=None)

    def from_subquery(self, subquery: NestedStatement, alias: str = "") -> Self:
        """Select from a derived table (clears any FROM table)."""
        ref = SubqueryRef(statement=subquery, alias=alias)
        return self._replace(table_name="", table_alias=None, source_subquery=ref)

    def distinct(self) -> Self:
        return self._replace(is_distinct=True)

    def group_by(self, *columns: str | RawExpression) -> Self:
        return self._replace(group_columns=self.group_columns + columns)

    def having(self, *conditions: Condition) -> Self:
        """Add HAVING conditions (AND-joined, like WHERE)."""
        return self._replace(having_conditions=self.having_conditions + conditions)

    def offset(self, offset: int) -> Self:
        return self._replace(offset_value=offset)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _build(self, counter: ParamCounter) -> tuple[str, list[Any]]:
        if not self.table_name and self.source_subquery is None:
            raise MissingTargetError(
                self.keyword, "No table or subquery specified for FROM clause."
            )

        r = self._renderer(counter)
        args: list[Any] = []

        sql = "SELECT DISTINCT " if self.is_distinct else "SELECT "
        sql += r.column_list(self.select_columns) if self.select_columns else "*"

        if self.source_subquery is not None:
            from_sql, from_args = r.subquery(self.source_subquery)
            args.extend(from_args)
        else:
            from_sql = r.table(self.table_name, self.table_alias)
        sql += f" FROM {from_sql}"

        join_sql, join_args = r.joins(self.join_clauses)
        sql += join_sql
        args.extend(join_args)

        where_sql, where_args = r.conditions(" WHERE ", self.where_conditions)
        sql += where_sql
        args.extend(where_args)

        sql += r.group_by(self.group_columns)

        having_sql, having_args = r.conditions(" HAVING ", self.having_conditions)
        sql += having_sql
        args.extend(having_args)

        sql += r.order_by(self.order_items)

        limit_sql, limit_args = r.bound("LIMIT", self.limit_value)
        sql += limit_sql
        args.extend(limit_args)

        offset_sql, offset_args = r.bound("OFFSET", self.offset_value)
        sql += offset_sql
        args.extend(offset_args)

        return sql, args

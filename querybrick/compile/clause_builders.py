"""Clause-level SQL renderers shared by the statement builders.

``ClauseRenderer`` wraps the dialect and the per-render
:class:`~querybrick.compile.context.ParamCounter`.  Every method returns the
fragment with its leading space (or an empty string when the clause is
absent), and the methods that can bind values also return their arguments,
so a statement assembles itself by concatenating fragments in clause order::

    r = ClauseRenderer(dialect, counter)
    sql, args = r.conditions(" WHERE ", stmt.where_conditions)

Nested statements (FROM / JOIN subqueries) are rendered with the **same**
counter, keeping placeholder positions globally ordered.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from querybrick.compile.context import ParamCounter, bind_value
from querybrick.dialect.base import Dialect
from querybrick.schema.clauses import Assignment, Join, OrderItem, SubqueryRef
from querybrick.schema.conditions import Condition
from querybrick.schema.raw import RawExpression


@dataclass
class ClauseRenderer:
    """Renders individual clauses for one statement render pass."""

    dialect: Dialect
    counter: ParamCounter

    def identifier(self, name: str | RawExpression) -> str:
        if isinstance(name, RawExpression):
            return name.sql
        return self.dialect.format_identifier(name)

    def column_list(self, columns: Sequence[str | RawExpression]) -> str:
        return ", ".join(self.identifier(c) for c in columns)

    def table(self, name: str, alias: str | None = None) -> str:
        sql = self.dialect.format_identifier(name)
        if alias:
            sql = f"{sql} AS {self.dialect.quote_identifier(alias)}"
        return sql

    def subquery(self, ref: SubqueryRef) -> tuple[str, list[Any]]:
        """``(<nested sql>) [AS alias]``; nested build errors propagate."""
        sub_sql, sub_args = ref.statement.render_nested(self.counter, self.dialect)
        sql = f"({sub_sql})"
        if ref.alias:
            sql = f"{sql} AS {self.dialect.quote_identifier(ref.alias)}"
        return sql, sub_args

    def conditions(self, keyword: str, conditions: Sequence[Condition]) -> tuple[str, list[Any]]:
        """AND-join top-level conditions behind ``keyword`` (``" WHERE "``)."""
        parts: list[str] = []
        args: list[Any] = []
        for cond in conditions:
            part_sql, part_args = cond.render(self.dialect, self.counter)
            if part_sql:
                parts.append(part_sql)
                args.extend(part_args)
        if not parts:
            return "", []
        return keyword + " AND ".join(parts), args

    def joins(self, joins: Sequence[Join]) -> tuple[str, list[Any]]:
        sql = ""
        args: list[Any] = []
        for join in joins:
            if join.subquery is not None:
                target, target_args = self.subquery(join.subquery)
                args.extend(target_args)
            else:
                target = self.table(join.table or "", join.alias)
            if isinstance(join.on, Condition):
                on_sql, on_args = join.on.render(self.dialect, self.counter)
                args.extend(on_args)
            else:
                on_sql = join.on
            sql += f" {join.kind.value} JOIN {target} ON {on_sql}"
        return sql, args

    def group_by(self, columns: Sequence[str | RawExpression]) -> str:
        if not columns:
            return ""
        return f" GROUP BY {self.column_list(columns)}"

    def order_by(self, items: Sequence[OrderItem]) -> str:
        if not items:
            return ""
        order_parts = [f"{self.identifier(o.column)} {o.direction}" for o in items]
        return f" ORDER BY {', '.join(order_parts)}"

    def bound(self, keyword: str, value: Any) -> tuple[str, list[Any]]:
        """``keyword`` followed by one placeholder (LIMIT / OFFSET)."""
        if value is None:
            return "", []
        marker, args = bind_value(value, self.dialect, self.counter)
        return f" {keyword} {marker}", args

    def assignments(self, assignments: Sequence[Assignment]) -> tuple[str, list[Any]]:
        parts: list[str] = []
        args: list[Any] = []
        for assignment in assignments:
            marker, value_args = bind_value(assignment.value, self.dialect, self.counter)
            parts.append(f"{self.identifier(assignment.column)} = {marker}")
            args.extend(value_args)
        return ", ".join(parts), args

    def values_row(self, row: Sequence[Any]) -> tuple[str, list[Any]]:
        markers: list[str] = []
        args: list[Any] = []
        for value in row:
            marker, value_args = bind_value(value, self.dialect, self.counter)
            markers.append(marker)
            args.extend(value_args)
        return f"({', '.join(markers)})", args

    def returning(self, columns: Sequence[str | RawExpression]) -> str:
        if not columns:
            return ""
        return f" RETURNING {self.column_list(columns)}"

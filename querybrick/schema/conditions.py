"""Predicate trees for WHERE / HAVING / JOIN ... ON.

Conditions are immutable pydantic models built through the constructor
functions at the bottom of this module (``eq``, ``between``, ``and_`` ...).
Each node renders itself with::

    sql, args = condition.render(dialect, counter)

where ``counter`` is the :class:`~querybrick.compile.context.ParamCounter` of
the statement being rendered.  The number of placeholders in ``sql`` always
equals ``len(args)`` and their left-to-right order matches.

Rendering never raises for odd values; the only error that can escape is a
:class:`~querybrick.errors.BuildError` from an embedded subquery.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from querybrick.compile.context import NestedStatement, ParamCounter, bind_value
from querybrick.dialect.base import Dialect
from querybrick.schema.raw import RawExpression

_FROZEN = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)


class Operator(str, Enum):
    """Comparison operators for single-column predicates."""

    EQ = "="
    NE = "<>"
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    LIKE = "LIKE"
    NOT_LIKE = "NOT LIKE"
    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"


class ValueKind(str, Enum):
    """How the right-hand side of a comparison is rendered."""

    VALUE = "value"
    COLUMN = "column"
    SUBQUERY = "subquery"


_NULL_TESTS = frozenset({Operator.IS_NULL, Operator.IS_NOT_NULL})


def _render_column(column: str | RawExpression, dialect: Dialect) -> str:
    if isinstance(column, RawExpression):
        return column.sql
    return dialect.format_identifier(column)


class Condition(BaseModel):
    """Base class for every predicate node."""

    model_config = _FROZEN

    def render(self, dialect: Dialect, counter: ParamCounter) -> tuple[str, list[Any]]:
        raise NotImplementedError


class Comparison(Condition):
    """``column OP rhs`` where rhs is a bound value, a column or a subquery.

    Attributes:
        column: Left-hand column (or a raw expression such as ``COUNT(*)``).
        operator: Comparison operator.
        value: Right-hand value, column name or statement builder.
        kind: Which of the three the ``value`` is.
    """

    column: str | RawExpression
    operator: Operator
    value: Any = None
    kind: ValueKind = ValueKind.VALUE

    def render(self, dialect: Dialect, counter: ParamCounter) -> tuple[str, list[Any]]:
        left = f"{_render_column(self.column, dialect)} {self.operator.value}"
        if self.operator in _NULL_TESTS:
            return left, []
        if self.kind is ValueKind.COLUMN:
            return f"{left} {dialect.format_identifier(self.value)}", []
        if self.kind is ValueKind.SUBQUERY:
            sub_sql, sub_args = self.value.render_nested(counter, dialect)
            return f"{left} ({sub_sql})", sub_args
        rhs, args = bind_value(self.value, dialect, counter)
        return f"{left} {rhs}", args


class Between(Condition):
    """``column BETWEEN low AND high``; both bounds are bound left to right."""

    column: str | RawExpression
    low: Any
    high: Any

    def render(self, dialect: Dialect, counter: ParamCounter) -> tuple[str, list[Any]]:
        low_sql, low_args = bind_value(self.low, dialect, counter)
        high_sql, high_args = bind_value(self.high, dialect, counter)
        column = _render_column(self.column, dialect)
        return f"{column} BETWEEN {low_sql} AND {high_sql}", low_args + high_args


class Membership(Condition):
    """``column [NOT] IN (...)`` over a value list or a subquery.

    An empty value list renders a constant predicate: ``1 = 0`` for IN
    (matches nothing) and ``1 = 1`` for NOT IN (matches everything).
    """

    column: str | RawExpression
    value_list: tuple[Any, ...] = ()
    subquery: Any = None
    negated: bool = False

    def render(self, dialect: Dialect, counter: ParamCounter) -> tuple[str, list[Any]]:
        keyword = "NOT IN" if self.negated else "IN"
        column = _render_column(self.column, dialect)
        if self.subquery is not None:
            sub_sql, sub_args = self.subquery.render_nested(counter, dialect)
            return f"{column} {keyword} ({sub_sql})", sub_args
        if not self.value_list:
            return ("1 = 1" if self.negated else "1 = 0"), []
        markers: list[str] = []
        args: list[Any] = []
        for value in self.value_list:
            marker, value_args = bind_value(value, dialect, counter)
            markers.append(marker)
            args.extend(value_args)
        return f"{column} {keyword} ({', '.join(markers)})", args


class LogicalCondition(Condition):
    """AND / OR group.

    Children render in order.  The group is wrapped in parentheses only
    when it has more than one rendered child, which keeps precedence
    correct when groups are nested.
    """

    connective: Literal["AND", "OR"]
    conditions: tuple[Condition, ...] = ()

    def render(self, dialect: Dialect, counter: ParamCounter) -> tuple[str, list[Any]]:
        parts: list[str] = []
        args: list[Any] = []
        for cond in self.conditions:
            part_sql, part_args = cond.render(dialect, counter)
            if part_sql:
                parts.append(part_sql)
                args.extend(part_args)
        if not parts:
            return "", []
        sql = f" {self.connective} ".join(parts)
        if len(parts) > 1:
            sql = f"({sql})"
        return sql, args


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def _compare(column: str | RawExpression, operator: Operator, value: Any) -> Condition:
    kind = ValueKind.SUBQUERY if isinstance(value, NestedStatement) else ValueKind.VALUE
    return Comparison(column=column, operator=operator, value=value, kind=kind)


def eq(column: str | RawExpression, value: Any) -> Condition:
    return _compare(column, Operator.EQ, value)


def not_eq(column: str | RawExpression, value: Any) -> Condition:
    return _compare(column, Operator.NE, value)


def gt(column: str | RawExpression, value: Any) -> Condition:
    return _compare(column, Operator.GT, value)


def gt_or_eq(column: str | RawExpression, value: Any) -> Condition:
    return _compare(column, Operator.GTE, value)


def lt(column: str | RawExpression, value: Any) -> Condition:
    return _compare(column, Operator.LT, value)


def lt_or_eq(column: str | RawExpression, value: Any) -> Condition:
    return _compare(column, Operator.LTE, value)


def like(column: str | RawExpression, pattern: Any) -> Condition:
    return _compare(column, Operator.LIKE, pattern)


def not_like(column: str | RawExpression, pattern: Any) -> Condition:
    return _compare(column, Operator.NOT_LIKE, pattern)


def in_(column: str | RawExpression, *values: Any) -> Condition:
    """``column IN (...)``.

    Accepts the values variadically, a single iterable of values (list,
    tuple, set, range, generator; strings count as one value), or a single
    statement builder for ``IN (subquery)``.
    """
    return _membership(column, values, negated=False)


def not_in(column: str | RawExpression, *values: Any) -> Condition:
    """``column NOT IN (...)``; same argument forms as :func:`in_`."""
    return _membership(column, values, negated=True)


def _membership(column: str | RawExpression, values: tuple[Any, ...], *, negated: bool) -> Condition:
    if len(values) == 1:
        (only,) = values
        if isinstance(only, NestedStatement):
            return Membership(column=column, subquery=only, negated=negated)
        if isinstance(only, Iterable) and not isinstance(only, (str, bytes, BaseModel)):
            values = tuple(only)
    return Membership(column=column, value_list=values, negated=negated)


def is_null(column: str | RawExpression) -> Condition:
    return Comparison(column=column, operator=Operator.IS_NULL)


def is_not_null(column: str | RawExpression) -> Condition:
    return Comparison(column=column, operator=Operator.IS_NOT_NULL)


def between(column: str | RawExpression, low: Any, high: Any) -> Condition:
    return Between(column=column, low=low, high=high)


def column_eq(left: str, right: str) -> Condition:
    """Column-to-column equality, e.g. for JOIN ... ON predicates."""
    return Comparison(column=left, operator=Operator.EQ, value=right, kind=ValueKind.COLUMN)


def and_(*conditions: Condition) -> Condition:
    return LogicalCondition(connective="AND", conditions=conditions)


def or_(*conditions: Condition) -> Condition:
    return LogicalCondition(connective="OR", conditions=conditions)

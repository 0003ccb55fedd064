"""Statement builder base class and shared clause mixins.

Builders are frozen pydantic models.  Every chained call returns an updated
copy (``model_copy(update=...)``) and never mutates the receiver, so a
partially built statement can be branched freely::

    base = qb.select("id").from_("users")
    active = base.where(eq("active", True))
    admins = base.where(eq("role", "admin"))   # ``base`` is unchanged

``to_sql()`` creates a fresh :class:`~querybrick.compile.context.ParamCounter`
on every call, so rendering is repeatable: the same builder always yields
the same SQL and arguments.
"""
from __future__ import annotations

from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field

from querybrick.compile.clause_builders import ClauseRenderer
from querybrick.compile.context import CompiledSQL, NestedStatement, ParamCounter
from querybrick.dialect.base import Dialect, DialectCapabilities
from querybrick.dialect.postgres import PostgresDialect
from querybrick.errors import BuildError
from querybrick.schema.clauses import Join, JoinKind, OrderItem, SubqueryRef
from querybrick.schema.conditions import Condition
from querybrick.schema.raw import RawExpression
from querybrick.utils import get_logger

logger = get_logger("statements")


class Statement(BaseModel):
    """Common behaviour for SELECT / INSERT / UPDATE / DELETE builders.

    Subclasses implement :meth:`_build`, which appends clauses in the fixed
    order of their statement type using a :class:`ClauseRenderer`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    #: SQL keyword of the statement, used in errors and log records.
    keyword: ClassVar[str] = ""

    dialect: Dialect = Field(default_factory=PostgresDialect)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def to_sql(self) -> CompiledSQL:
        """Render the statement.

        Returns:
            :class:`~querybrick.compile.context.CompiledSQL` with the SQL
            text, the positional arguments and the dialect name.

        Raises:
            BuildError: If the statement is structurally incomplete, or a
                nested subquery is.
        """
        counter = ParamCounter()
        try:
            sql, params = self._build(counter)
        except BuildError as exc:
            logger.debug("Failed to render %s for %s: %s", self.keyword, self.dialect.name, exc)
            raise
        logger.debug(
            "Rendered %s for %s with %d parameter(s)", self.keyword, self.dialect.name, len(params)
        )
        return CompiledSQL(sql=sql, params=params, dialect=self.dialect.name)

    def render_nested(self, counter: ParamCounter, dialect: Dialect) -> tuple[str, list[Any]]:
        """Render as a subquery of another statement.

        The subquery shares the outer ``counter`` and is rendered in the
        outer ``dialect``, whatever dialect it was built with.
        """
        stmt = self if dialect == self.dialect else self._replace(dialect=dialect)
        return stmt._build(counter)

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------

    def _build(self, counter: ParamCounter) -> tuple[str, list[Any]]:
        raise NotImplementedError

    def _replace(self, **changes: Any) -> Self:
        return self.model_copy(update=changes)

    def _renderer(self, counter: ParamCounter) -> ClauseRenderer:
        return ClauseRenderer(self.dialect, counter)

    def _supports(self, capability: str, clause: str) -> bool:
        """Check a dialect capability, logging when ``clause`` gets dropped."""
        caps: DialectCapabilities = self.dialect.capabilities
        if getattr(caps, capability):
            return True
        logger.debug(
            "Dropping %s from %s: not supported by %s", clause, self.keyword, self.dialect.name
        )
        return False


# ---------------------------------------------------------------------------
# Clause mixins
# ---------------------------------------------------------------------------


class WhereMixin(Statement):
    where_conditions: tuple[Condition, ...] = ()

    def where(self, *conditions: Condition) -> Self:
        """Add WHERE conditions; all top-level conditions are AND-joined."""
        return self._replace(where_conditions=self.where_conditions + conditions)


class JoinMixin(Statement):
    join_clauses: tuple[Join, ...] = ()

    def join(self, table: str, on: str | Condition, alias: str | None = None) -> Self:
        """Add an INNER JOIN.  ``on`` is literal SQL or a condition."""
        return self._add_join(JoinKind.INNER, table, on, alias)

    def left_join(self, table: str, on: str | Condition, alias: str | None = None) -> Self:
        return self._add_join(JoinKind.LEFT, table, on, alias)

    def right_join(self, table: str, on: str | Condition, alias: str | None = None) -> Self:
        return self._add_join(JoinKind.RIGHT, table, on, alias)

    def join_subquery(self, subquery: NestedStatement, alias: str, on: str | Condition) -> Self:
        """Add an INNER JOIN against an aliased derived table."""
        return self._add_subquery_join(JoinKind.INNER, subquery, alias, on)

    def left_join_subquery(self, subquery: NestedStatement, alias: str, on: str | Condition) -> Self:
        return self._add_subquery_join(JoinKind.LEFT, subquery, alias, on)

    def right_join_subquery(self, subquery: NestedStatement, alias: str, on: str | Condition) -> Self:
        return self._add_subquery_join(JoinKind.RIGHT, subquery, alias, on)

    def _add_join(self, kind: JoinKind, table: str, on: str | Condition, alias: str | None) -> Self:
        join = Join(kind=kind, table=table, alias=alias, on=on)
        return self._replace(join_clauses=self.join_clauses + (join,))

    def _add_subquery_join(
        self, kind: JoinKind, subquery: NestedStatement, alias: str, on: str | Condition
    ) -> Self:
        ref = SubqueryRef(statement=subquery, alias=alias)
        join = Join(kind=kind, subquery=ref, on=on)
        return self._replace(join_clauses=self.join_clauses + (join,))


class OrderByMixin(Statement):
    order_items: tuple[OrderItem, ...] = ()

    def order_by(self, column: str | RawExpression, direction: str = "ASC") -> Self:
        """Add an ORDER BY entry; directions other than ``"DESC"`` mean ASC."""
        item = OrderItem(column=column, direction=direction)
        return self._replace(order_items=self.order_items + (item,))


class LimitMixin(Statement):
    limit_value: int | None = None

    def limit(self, limit: int) -> Self:
        """Set LIMIT; the value is always passed as a bound argument."""
        return self._replace(limit_value=limit)


class ReturningMixin(Statement):
    returning_columns: tuple[str | RawExpression, ...] = ()

    def returning(self, *columns: str | RawExpression) -> Self:
        """Set the RETURNING columns (replaces any previous list)."""
        return self._replace(returning_columns=columns)

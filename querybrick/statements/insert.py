"""INSERT statement builder."""
from __future__ import annotations

from typing import Any, ClassVar, Self

from querybrick.compile.clause_builders import ClauseRenderer
from querybrick.compile.context import NestedStatement, ParamCounter
from querybrick.errors import (
    ArityMismatchError,
    EmptyRowError,
    InsertModeConflictError,
    MissingTargetError,
)
from querybrick.schema.clauses import ConflictAction
from querybrick.statements.base import ReturningMixin


class Insert(ReturningMixin):
    """Builds ``INSERT`` statements.

    Exactly one insertion mode must be chosen: one or more ``values()`` rows,
    ``from_select()``, or ``default_values()``.  Rendering order::

        INSERT INTO t [(cols)] VALUES (...), (...) | <select> | DEFAULT VALUES
        [ON CONFLICT [(target)] DO NOTHING | DO UPDATE SET ...] [RETURNING ...]

    Values that are :class:`~querybrick.schema.raw.RawExpression` instances
    are spliced verbatim instead of being bound.
    """

    keyword: ClassVar[str] = "INSERT"

    table_name: str = ""
    column_names: tuple[str, ...] = ()
    rows: tuple[tuple[Any, ...], ...] = ()
    source_select: Any = None
    use_defaults: bool = False
    conflict: ConflictAction | None = None

    # ------------------------------------------------------------------
    # Chainable clause setters
    # ------------------------------------------------------------------

    def into(self, table: str) -> Self:
        return self._replace(table_name=table)

    def columns(self, *columns: str) -> Self:
        """Set the column list (replaces any previous list)."""
        return self._replace(column_names=columns)

    def values(self, *values: Any) -> Self:
        """Append one VALUES row; call repeatedly for a multi-row insert."""
        return self._replace(rows=self.rows + (values,))

    def from_select(self, select: NestedStatement) -> Self:
        return self._replace(source_select=select)

    def default_values(self) -> Self:
        return self._replace(use_defaults=True)

    def on_conflict(self, action: ConflictAction) -> Self:
        return self._replace(conflict=action)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _validate(self) -> None:
        if not self.table_name:
            raise MissingTargetError(self.keyword)

        modes: list[str] = []
        if self.rows:
            modes.append("VALUES")
        if self.source_select is not None:
            modes.append("FROM SELECT")
        if self.use_defaults:
            modes.append("DEFAULT VALUES")
        if len(modes) != 1:
            raise InsertModeConflictError(modes)

        if self.column_names and self.rows:
            expected = len(self.column_names)
            for index, row in enumerate(self.rows):
                if len(row) != expected:
                    raise ArityMismatchError(expected, len(row), index)

        for index, row in enumerate(self.rows):
            if not row:
                raise EmptyRowError(index)

    def _build(self, counter: ParamCounter) -> tuple[str, list[Any]]:
        self._validate()

        r = self._renderer(counter)
        args: list[Any] = []

        sql = f"INSERT INTO {r.table(self.table_name)}"
        if self.column_names and not self.use_defaults:
            sql += f" ({r.column_list(self.column_names)})"

        if self.use_defaults:
            sql += " DEFAULT VALUES"
        elif self.source_select is not None:
            select_sql, select_args = self.source_select.render_nested(counter, self.dialect)
            sql += f" {select_sql}"
            args.extend(select_args)
        else:
            groups: list[str] = []
            for row in self.rows:
                row_sql, row_args = r.values_row(row)
                groups.append(row_sql)
                args.extend(row_args)
            sql += f" VALUES {', '.join(groups)}"

        conflict_sql, conflict_args = self._build_on_conflict(r)
        sql += conflict_sql
        args.extend(conflict_args)

        if self.returning_columns and self._supports("supports_returning", "RETURNING"):
            sql += r.returning(self.returning_columns)

        return sql, args

    def _build_on_conflict(self, r: ClauseRenderer) -> tuple[str, list[Any]]:
        if self.conflict is None:
            return "", []
        sql = " ON CONFLICT"
        target = self.conflict.target
        if target:
            targets = (target,) if isinstance(target, str) else target
            sql += f" ({r.column_list(targets)})"
        if self.conflict.do_nothing:
            return sql + " DO NOTHING", []
        if self.conflict.do_update:
            set_sql, set_args = r.assignments(self.conflict.assignments)
            return f"{sql} DO UPDATE SET {set_sql}", set_args
        return sql, []

"""Immutable clause records held by the statement builders.

Attributes:
    Join:           one ``[INNER|LEFT|RIGHT] JOIN ... ON ...`` entry.
    SubqueryRef:    an aliased nested statement used in FROM or JOIN.
    OrderItem:      one ``ORDER BY`` entry with a normalised direction.
    Assignment:     one ``column = value`` pair (UPDATE SET, DO UPDATE SET).
    ConflictAction: INSERT ``ON CONFLICT`` directive.
"""
from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from querybrick.schema.conditions import Condition
from querybrick.schema.raw import RawExpression

_FROZEN = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)


class JoinKind(str, Enum):
    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class SubqueryRef(BaseModel):
    """A nested statement with an optional alias.

    The alias is emitted only when non-empty; a derived table usually
    needs one to be referenced from ON / WHERE.
    """

    model_config = _FROZEN

    statement: Any
    alias: str = ""


class Join(BaseModel):
    """A single join.

    Attributes:
        kind: INNER, LEFT or RIGHT.
        table: Joined table name (mutually exclusive with ``subquery``).
        alias: Optional table alias (plain-table joins only).
        subquery: Aliased derived table.
        on: Join predicate, either literal SQL text or a :class:`Condition`.
    """

    model_config = _FROZEN

    kind: JoinKind = JoinKind.INNER
    table: str | None = None
    alias: str | None = None
    subquery: SubqueryRef | None = None
    on: str | Condition


class OrderItem(BaseModel):
    """An ``ORDER BY`` entry.

    Only the exact tokens ``"ASC"`` and ``"DESC"`` are honoured; anything
    else (including lower-case spellings) normalises to ``ASC``.
    """

    model_config = _FROZEN

    column: str | RawExpression
    direction: Literal["ASC", "DESC"] = "ASC"

    @field_validator("direction", mode="before")
    @classmethod
    def _normalize_direction(cls, value: Any) -> str:
        if value == "DESC":
            return "DESC"
        return "ASC"


class Assignment(BaseModel):
    """``column = value``; a :class:`RawExpression` value is spliced verbatim."""

    model_config = _FROZEN

    column: str
    value: Any = None


class ConflictAction(BaseModel):
    """What an INSERT does when it hits a unique / primary-key conflict.

    Attributes:
        target: Conflict target column(s) or constraint, rendered in
            parentheses.  ``None`` renders a bare ``ON CONFLICT``.
        do_nothing: Emit ``DO NOTHING``.  Takes precedence over
            ``do_update``.
        do_update: Ordered ``column -> value`` assignments for
            ``DO UPDATE SET``.  A mapping is frozen in its iteration
            (insertion) order; a sequence of pairs keeps its own order.

    Example::

        ConflictAction(
            target="email",
            do_update=[("name", "Ana"), ("updated_at", current_timestamp())],
        )
    """

    model_config = _FROZEN

    target: str | tuple[str, ...] | None = None
    do_nothing: bool = False
    do_update: tuple[tuple[str, Any], ...] = Field(default_factory=tuple)

    @field_validator("do_update", mode="before")
    @classmethod
    def _freeze_assignments(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        return value

    @property
    def assignments(self) -> list[Assignment]:
        return [Assignment(column=col, value=val) for col, val in self.do_update]

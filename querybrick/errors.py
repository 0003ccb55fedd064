"""Custom exception hierarchy for querybrick.

All public errors inherit from QueryBrickError so callers can catch the base
class for any querybrick-specific failure.

Structural problems with a statement (missing table, conflicting insertion
modes, and so on) are only detected when the statement is rendered, and are
raised as subclasses of :class:`BuildError`.  The one exception is
:class:`UnsafeRawExpressionError`, which is raised as soon as a suspicious
raw expression is constructed.
"""
from __future__ import annotations


class QueryBrickError(Exception):
    """Base exception for all querybrick errors."""


class BuildError(QueryBrickError):
    """Raised when a statement cannot be rendered to SQL.

    Args:
        message: Human-readable description.
        clause: The clause being rendered when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause


class MissingTargetError(BuildError):
    """Raised when a statement has no table (or subquery) to operate on."""

    def __init__(self, statement: str, message: str | None = None) -> None:
        super().__init__(
            message or f"No table specified for {statement} statement.",
            clause="FROM" if statement == "SELECT" else statement,
        )
        self.statement = statement


class InsertModeConflictError(BuildError):
    """Raised when an INSERT selects zero or several insertion modes.

    Args:
        modes: The insertion modes that were selected (may be empty).
    """

    def __init__(self, modes: list[str]) -> None:
        if modes:
            message = (
                "Cannot specify multiple insertion methods "
                f"(VALUES, FROM SELECT, DEFAULT VALUES); got {', '.join(modes)}."
            )
        else:
            message = "No values, select query, or DEFAULT VALUES specified."
        super().__init__(message, clause="VALUES")
        self.modes = modes


class ArityMismatchError(BuildError):
    """Raised when a VALUES row length differs from the declared column count."""

    def __init__(self, expected: int, actual: int, row: int) -> None:
        super().__init__(
            f"Number of values ({actual}) in row {row} doesn't match columns ({expected}).",
            clause="VALUES",
        )
        self.expected = expected
        self.actual = actual
        self.row = row


class EmptyRowError(BuildError):
    """Raised when a VALUES row has no values (``VALUES ()`` is not valid SQL)."""

    def __init__(self, row: int) -> None:
        super().__init__(f"VALUES row {row} is empty.", clause="VALUES")
        self.row = row


class MissingAssignmentError(BuildError):
    """Raised when an UPDATE has no SET assignments."""

    def __init__(self, table: str) -> None:
        super().__init__(f"No SET values specified for UPDATE of '{table}'.", clause="SET")
        self.table = table


class UnsafeRawExpressionError(QueryBrickError):
    """Raised by :func:`~querybrick.schema.raw.raw` for a rejected expression.

    This signals a programming error rather than a runtime condition.  Use
    :func:`~querybrick.schema.raw.unsafe_raw` when the text is trusted.

    Args:
        expression: The rejected SQL text.
        keyword: The blocked keyword that was found.
    """

    def __init__(self, expression: str, keyword: str) -> None:
        super().__init__(
            f"Potentially dangerous raw SQL expression (contains {keyword.upper()}): {expression!r}"
        )
        self.expression = expression
        self.keyword = keyword


class UnsupportedDialectError(QueryBrickError):
    """Raised when a dialect name is not registered."""

    def __init__(self, name: str, registered: list[str]) -> None:
        super().__init__(
            f"Unsupported dialect target: '{name}'. Registered targets: {registered}."
        )
        self.name = name
        self.registered = registered

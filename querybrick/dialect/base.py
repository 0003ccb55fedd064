"""Dialect abstractions: capability flags and the Dialect ABC.

The Strategy pattern is used:
- ``Dialect`` defines the per-database formatting primitives (placeholders,
  identifier quoting, string literals) and a capability record.
- ``MySQLDialect``, ``PostgresDialect``, ``SQLiteDialect``,
  ``SQLServerDialect`` and ``OracleDialect`` override the dialect-specific
  steps.

Statement builders never inspect concrete dialect types; optional clauses
are gated on :class:`DialectCapabilities` instead.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class DialectCapabilities:
    """Feature flags describing which optional clauses a backend accepts.

    Attributes:
        supports_returning: ``RETURNING`` on INSERT / UPDATE / DELETE.
        supports_update_limit: ``LIMIT`` on UPDATE.
        supports_delete_limit: ``LIMIT`` on DELETE.
        supports_ordered_mutation: ``ORDER BY`` on UPDATE / DELETE.
    """

    supports_returning: bool = False
    supports_update_limit: bool = False
    supports_delete_limit: bool = False
    supports_ordered_mutation: bool = False


class Dialect(ABC):
    """Abstract base for database dialects.

    Instances are stateless and immutable, so a single instance can be
    shared across any number of statement builders.
    """

    #: Canonical dialect name (``'postgres'``, ``'mysql'``, ...).
    name: str = ""

    #: Optional-clause support for this backend.
    capabilities: DialectCapabilities = DialectCapabilities()

    #: Opening / closing identifier quote characters.
    quote_open: str = '"'
    quote_close: str = '"'

    @abstractmethod
    def placeholder(self, index: int) -> str:
        """Return the parameter marker for the 0-based ``index``.

        Args:
            index: Position of the parameter within the statement.

        Returns:
            Dialect-specific placeholder string.
        """

    def quote_identifier(self, name: str) -> str:
        """Wrap ``name`` in quote characters, doubling any embedded closer.

        Args:
            name: Unquoted identifier (table or column name).

        Returns:
            Quoted identifier.
        """
        escaped = name.replace(self.quote_close, self.quote_close * 2)
        return f"{self.quote_open}{escaped}{self.quote_close}"

    def escape_string(self, value: str) -> str:
        """Return ``value`` as a single-quoted SQL string literal."""
        escaped = value.replace("'", "''")
        return f"'{escaped}'"

    def format_identifier(self, name: str) -> str:
        """Quote a possibly qualified identifier part by part.

        ``"orders.id"`` becomes ``"orders"."id"`` and a ``*`` part is left
        bare, so ``"o.*"`` becomes ``"o".*``.
        """
        parts = name.split(".")
        return ".".join(p if p == "*" else self.quote_identifier(p) for p in parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class SequentialDialect(Dialect):
    """Dialect whose placeholder ignores the parameter position (``?``)."""

    marker: str = "?"

    def placeholder(self, index: int) -> str:
        _check_index(index)
        return self.marker


class NumberedDialect(Dialect):
    """Dialect whose placeholder embeds a 1-based position (``$1``, ``:1``)."""

    prefix: str = "$"

    def placeholder(self, index: int) -> str:
        _check_index(index)
        return f"{self.prefix}{index + 1}"


def _check_index(index: int) -> None:
    if index < 0:
        raise ValueError(f"Placeholder index must be non-negative, got {index}.")

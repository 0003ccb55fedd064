"""Dialect registry (Open/Closed Principle).

``DialectFactory`` maps target names to :class:`~querybrick.dialect.base.Dialect`
classes so a dialect can be chosen by name (for example from application
settings) and new dialects can be added without editing querybrick itself.

Usage::

    from querybrick.dialect.registry import DialectFactory

    @DialectFactory.register("cockroach")
    class CockroachDialect(PostgresDialect):
        name = "cockroach"

    dialect = DialectFactory.create("cockroach")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from querybrick.dialect.base import Dialect
from querybrick.errors import UnsupportedDialectError


class DialectFactory:
    """Registry mapping dialect target names to :class:`Dialect` classes.

    Names are matched case-insensitively.  Instances are created once per
    class and reused, since dialects are stateless.
    """

    _dialects: ClassVar[dict[str, type[Dialect]]] = {}
    _instances: ClassVar[dict[type[Dialect], Dialect]] = {}

    @classmethod
    def register(cls, *names: str) -> Callable[[type[Dialect]], type[Dialect]]:
        """Decorator that registers a dialect class under one or more names.

        Args:
            names: Target name and optional aliases (e.g. ``"postgres"``,
                ``"postgresql"``).

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[Dialect]) -> type[Dialect]:
            for name in names:
                cls._dialects[name.lower()] = dialect_cls
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, dialect_cls: type[Dialect]) -> None:
        """Register a dialect class without using the decorator form."""
        cls._dialects[name.lower()] = dialect_cls

    @classmethod
    def create(cls, name: str) -> Dialect:
        """Return the shared dialect instance registered for ``name``.

        Args:
            name: The dialect target name.

        Returns:
            A :class:`Dialect` instance.

        Raises:
            UnsupportedDialectError: If no dialect is registered for ``name``.
        """
        dialect_cls = cls._dialects.get(name.lower())
        if dialect_cls is None:
            raise UnsupportedDialectError(name, cls.registered_targets())
        instance = cls._instances.get(dialect_cls)
        if instance is None:
            instance = cls._instances[dialect_cls] = dialect_cls()
        return instance

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect target names."""
        return sorted(cls._dialects)

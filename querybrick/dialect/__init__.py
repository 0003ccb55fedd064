"""Database dialects and the dialect registry.

One factory function per supported database family; each returns a shared,
immutable instance that can be bound to any number of builders.
"""

from __future__ import annotations

from querybrick.dialect.base import (
    Dialect,
    DialectCapabilities,
    NumberedDialect,
    SequentialDialect,
)
from querybrick.dialect.mysql import MySQLDialect
from querybrick.dialect.oracle import OracleDialect
from querybrick.dialect.postgres import PostgresDialect
from querybrick.dialect.registry import DialectFactory
from querybrick.dialect.sqlite import SQLiteDialect
from querybrick.dialect.sqlserver import SQLServerDialect

DialectFactory.register("mysql", "mariadb")(MySQLDialect)
DialectFactory.register("postgres", "postgresql")(PostgresDialect)
DialectFactory.register("sqlite", "sqlite3")(SQLiteDialect)
DialectFactory.register("sqlserver", "mssql")(SQLServerDialect)
DialectFactory.register("oracle")(OracleDialect)


def mysql() -> Dialect:
    return DialectFactory.create("mysql")


def postgres() -> Dialect:
    return DialectFactory.create("postgres")


def sqlite() -> Dialect:
    return DialectFactory.create("sqlite")


def sqlserver() -> Dialect:
    return DialectFactory.create("sqlserver")


def oracle() -> Dialect:
    return DialectFactory.create("oracle")


__all__ = [
    "Dialect",
    "DialectCapabilities",
    "DialectFactory",
    "MySQLDialect",
    "NumberedDialect",
    "OracleDialect",
    "PostgresDialect",
    "SQLServerDialect",
    "SQLiteDialect",
    "SequentialDialect",
    "mysql",
    "oracle",
    "postgres",
    "sqlite",
    "sqlserver",
]

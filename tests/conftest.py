"""Shared pytest fixtures for querybrick unit and integration tests."""
from __future__ import annotations

import pytest

from querybrick import QueryBuilder, mysql, oracle, postgres, sqlite, sqlserver

ALL_TARGETS = ["mysql", "postgres", "sqlite", "sqlserver", "oracle"]


@pytest.fixture(scope="session")
def pg() -> QueryBuilder:
    """PostgreSQL builder: ``$n`` placeholders, RETURNING only."""
    return QueryBuilder(postgres())


@pytest.fixture(scope="session")
def my() -> QueryBuilder:
    """MySQL builder: ``?`` placeholders, backtick quoting, LIMIT on mutations."""
    return QueryBuilder(mysql())


@pytest.fixture(scope="session")
def lite() -> QueryBuilder:
    """SQLite builder: ``?`` placeholders, every optional clause."""
    return QueryBuilder(sqlite())


@pytest.fixture(scope="session")
def mssql() -> QueryBuilder:
    return QueryBuilder(sqlserver())


@pytest.fixture(scope="session")
def ora() -> QueryBuilder:
    return QueryBuilder(oracle())


@pytest.fixture(params=ALL_TARGETS)
def any_builder(request: pytest.FixtureRequest) -> QueryBuilder:
    """Parametrised over every built-in dialect."""
    return QueryBuilder.for_target(request.param)

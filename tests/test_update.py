"""Unit tests for UPDATE rendering and capability gating."""

from __future__ import annotations

import pytest

from querybrick import MissingAssignmentError, MissingTargetError, eq, gt, raw


def test_set_and_where(pg):
    sql, params = pg.update("users").set("name", "Bob").set("age", 31).where(eq("id", 7)).to_sql()
    assert sql == 'UPDATE "users" SET "name" = $1, "age" = $2 WHERE "id" = $3'
    assert params == ["Bob", 31, 7]


def test_table_method(lite):
    sql = lite.update().table("users").set("x", 1).to_sql().sql
    assert sql == 'UPDATE "users" SET "x" = ?'


def test_set_raw(pg):
    sql, params = pg.update("counters").set_raw("hits", "hits + 1").where(eq("id", 1)).to_sql()
    assert sql == 'UPDATE "counters" SET "hits" = hits + 1 WHERE "id" = $1'
    assert params == [1]


def test_order_by_and_limit_mysql(my):
    sql, params = (
        my.update("users").set("x", 1).where(eq("a", 2)).order_by("id").limit(5).to_sql()
    )
    assert sql == "UPDATE `users` SET `x` = ? WHERE `a` = ? ORDER BY `id` ASC LIMIT ?"
    assert params == [1, 2, 5]


def test_order_by_and_limit_dropped_postgres(pg):
    sql, params = (
        pg.update("users").set("x", 1).where(eq("a", 2)).order_by("id").limit(5).to_sql()
    )
    assert sql == 'UPDATE "users" SET "x" = $1 WHERE "a" = $2'
    assert params == [1, 2]


def test_returning_postgres(pg):
    sql = pg.update("users").set("x", 1).returning("id", "x").to_sql().sql
    assert sql == 'UPDATE "users" SET "x" = $1 RETURNING "id", "x"'


@pytest.mark.parametrize("fixture", ["mssql", "ora"])
def test_optional_clauses_dropped(request, fixture):
    qb = request.getfixturevalue(fixture)
    stmt = qb.update("t").set("x", 1).where(gt("y", 2)).order_by("y").limit(3).returning("x")
    sql, params = stmt.to_sql()
    assert "ORDER BY" not in sql
    assert "LIMIT" not in sql
    assert "RETURNING" not in sql
    assert params == [1, 2]


def test_missing_table(pg):
    with pytest.raises(MissingTargetError):
        pg.update().set("x", 1).to_sql()


def test_missing_assignments(pg):
    with pytest.raises(MissingAssignmentError) as exc_info:
        pg.update("users").where(eq("id", 1)).to_sql()
    assert exc_info.value.table == "users"


def test_set_scalar_subquery(pg):
    total = pg.select(raw("SUM(amount)")).from_("payments").where(eq("order_id", 9))
    sql, params = pg.update("orders").set("total", total).where(eq("id", 9)).to_sql()
    assert sql == (
        'UPDATE "orders" SET "total" = '
        '(SELECT SUM(amount) FROM "payments" WHERE "order_id" = $1) WHERE "id" = $2'
    )
    assert params == [9, 9]

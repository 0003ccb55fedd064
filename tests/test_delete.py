"""Unit tests for DELETE rendering and capability gating."""

from __future__ import annotations

import pytest

from querybrick import MissingTargetError, column_eq, eq, lt


def test_where(pg):
    sql, params = pg.delete("users").where(eq("id", 1)).to_sql()
    assert sql == 'DELETE FROM "users" WHERE "id" = $1'
    assert params == [1]


def test_from_method(my):
    assert my.delete().from_("users").to_sql().sql == "DELETE FROM `users`"


def test_limit_omitted_for_postgres(pg):
    sql, params = pg.delete("logs").where(lt("ts", "2020-01-01")).limit(5).to_sql()
    assert sql == 'DELETE FROM "logs" WHERE "ts" < $1'
    assert params == ["2020-01-01"]


def test_limit_bound_for_mysql(my):
    sql, params = my.delete("logs").where(lt("ts", "2020-01-01")).order_by("ts").limit(5).to_sql()
    assert sql == "DELETE FROM `logs` WHERE `ts` < ? ORDER BY `ts` ASC LIMIT ?"
    assert params == ["2020-01-01", 5]


def test_join(my):
    sql, params = (
        my.delete("orders")
        .join("users", column_eq("orders.user_id", "users.id"))
        .where(eq("users.banned", True))
        .to_sql()
    )
    assert sql == (
        "DELETE FROM `orders` INNER JOIN `users` ON `orders`.`user_id` = `users`.`id` "
        "WHERE `users`.`banned` = ?"
    )
    assert params == [True]


def test_returning_sqlite(lite):
    sql = lite.delete("t").where(eq("id", 3)).returning("id").to_sql().sql
    assert sql == 'DELETE FROM "t" WHERE "id" = ? RETURNING "id"'


def test_sqlserver_drops_optional_clauses(mssql):
    sql, params = (
        mssql.delete("t").where(eq("id", 3)).order_by("id", "DESC").limit(1).returning("id").to_sql()
    )
    assert sql == "DELETE FROM [t] WHERE [id] = @p1"
    assert params == [3]


def test_missing_table(pg):
    with pytest.raises(MissingTargetError) as exc_info:
        pg.delete().where(eq("id", 1)).to_sql()
    assert str(exc_info.value) == "No table specified for DELETE statement."

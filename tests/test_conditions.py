"""Unit tests for condition rendering (placeholders, grouping, IN lists)."""

from __future__ import annotations

import re

import pytest

from querybrick import (
    ParamCounter,
    and_,
    between,
    column_eq,
    eq,
    gt,
    gt_or_eq,
    in_,
    is_not_null,
    is_null,
    like,
    lt,
    lt_or_eq,
    mysql,
    not_eq,
    not_in,
    not_like,
    or_,
    oracle,
    postgres,
    raw,
    sqlite,
    sqlserver,
)

_MARKERS = {
    "mysql": r"\?",
    "postgres": r"\$\d+",
    "sqlite": r"\?",
    "sqlserver": r"@p\d+",
    "oracle": r":\d+",
}


def _render(cond, dialect=None, counter=None):
    return cond.render(dialect or postgres(), counter or ParamCounter())


@pytest.mark.parametrize(
    "cond, expected_sql",
    [
        (eq("age", 30), '"age" = $1'),
        (not_eq("age", 30), '"age" <> $1'),
        (gt("age", 30), '"age" > $1'),
        (gt_or_eq("age", 30), '"age" >= $1'),
        (lt("age", 30), '"age" < $1'),
        (lt_or_eq("age", 30), '"age" <= $1'),
        (like("age", 30), '"age" LIKE $1'),
        (not_like("age", 30), '"age" NOT LIKE $1'),
    ],
)
def test_comparison_operators(cond, expected_sql):
    sql, args = _render(cond)
    assert sql == expected_sql
    assert args == [30]


def test_null_tests_bind_nothing():
    assert _render(is_null("deleted_at")) == ('"deleted_at" IS NULL', [])
    assert _render(is_not_null("deleted_at")) == ('"deleted_at" IS NOT NULL', [])


def test_between_binds_low_then_high():
    assert _render(between("age", 18, 65)) == ('"age" BETWEEN $1 AND $2', [18, 65])


def test_column_eq_binds_nothing():
    sql, args = _render(column_eq("o.user_id", "u.id"))
    assert sql == '"o"."user_id" = "u"."id"'
    assert args == []


def test_raw_value_is_spliced():
    assert _render(lt("expires_at", raw("CURRENT_TIMESTAMP"))) == (
        '"expires_at" < CURRENT_TIMESTAMP',
        [],
    )


def test_raw_column_on_left():
    assert _render(gt(raw("COUNT(*)"), 5)) == ("COUNT(*) > $1", [5])


def test_counter_continues_from_position():
    counter = ParamCounter(position=2)
    sql, _ = _render(eq("x", 1), counter=counter)
    assert sql == '"x" = $3'
    assert counter.position == 3


# ---------------------------------------------------------------------------
# IN / NOT IN
# ---------------------------------------------------------------------------


def test_in_variadic():
    assert _render(in_("id", 1, 2, 3)) == ('"id" IN ($1, $2, $3)', [1, 2, 3])


def test_in_list_argument_is_expanded():
    assert _render(in_("id", [4, 5])) == ('"id" IN ($1, $2)', [4, 5])
    assert _render(not_in("id", (4, 5))) == ('"id" NOT IN ($1, $2)', [4, 5])


def test_empty_in_matches_nothing():
    assert _render(in_("id")) == ("1 = 0", [])
    assert _render(in_("id", [])) == ("1 = 0", [])


def test_empty_not_in_matches_everything():
    assert _render(not_in("id")) == ("1 = 1", [])


# ---------------------------------------------------------------------------
# Logical grouping
# ---------------------------------------------------------------------------


def test_or_group_is_parenthesised():
    sql, args = _render(or_(eq("a", 1), eq("b", 2)))
    assert sql == '("a" = $1 OR "b" = $2)'
    assert args == [1, 2]


def test_single_child_group_has_no_parentheses():
    assert _render(and_(eq("a", 1))) == ('"a" = $1', [1])


def test_empty_group_renders_nothing():
    assert _render(or_()) == ("", [])


def test_empty_children_are_skipped():
    sql, args = _render(and_(or_(), eq("a", 1)))
    assert sql == '"a" = $1'
    assert args == [1]


def test_nested_groups_keep_precedence():
    cond = and_(eq("a", 1), or_(eq("b", 2), and_(eq("c", 3), eq("d", 4))))
    sql, args = _render(cond)
    assert sql == '("a" = $1 AND ("b" = $2 OR ("c" = $3 AND "d" = $4)))'
    assert args == [1, 2, 3, 4]


@pytest.mark.parametrize(
    "factory", [mysql, postgres, sqlite, sqlserver, oracle], ids=lambda f: f.__name__
)
def test_placeholder_count_matches_args(factory):
    dialect = factory()
    cond = and_(
        eq("a", 1),
        or_(in_("b", 2, 3, 4), between("c", 5, 6)),
        is_null("d"),
        like("e", "x%"),
    )
    sql, args = _render(cond, dialect)
    assert len(re.findall(_MARKERS[dialect.name], sql)) == len(args)
    assert args == [1, 2, 3, 4, 5, 6, "x%"]


def test_numbered_placeholders_are_left_to_right():
    sql, _ = _render(and_(eq("a", 1), in_("b", 2, 3), between("c", 4, 5)), oracle())
    assert re.findall(r":(\d+)", sql) == ["1", "2", "3", "4", "5"]


def test_in_expands_any_iterable():
    assert _render(in_("id", {3})) == ('"id" IN ($1)', [3])
    assert _render(in_("id", range(3))) == ('"id" IN ($1, $2, $3)', [0, 1, 2])
    assert _render(not_in("id", (n * 2 for n in (1, 2)))) == ('"id" NOT IN ($1, $2)', [2, 4])


def test_in_single_string_is_one_value():
    assert _render(in_("code", "abc")) == ('"code" IN ($1)', ["abc"])


def test_in_single_raw_is_spliced():
    assert _render(in_("id", raw("NULL"))) == ('"id" IN (NULL)', [])

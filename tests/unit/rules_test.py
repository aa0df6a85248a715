"""Unit tests for create-statement recognition and drop synthesis."""

import pytest

from sqlsnip.core.rules import DROP_RULES, drop_statement_for, reduce_argument, reduce_arguments
from sqlsnip.models import ObjectKind


def test_rules_are_ordered_table_view_function_procedure_trigger() -> None:
    assert [rule.kind for rule in DROP_RULES] == [
        ObjectKind.TABLE,
        ObjectKind.VIEW,
        ObjectKind.FUNCTION,
        ObjectKind.PROCEDURE,
        ObjectKind.TRIGGER,
    ]


class TestTables:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("create table t;", "drop table if exists t cascade;"),
            ("create table t (id integer);", "drop table if exists t cascade;"),
            ("create table app.users(", "drop table if exists app.users cascade;"),
            ("create temp table t as select 1;", "drop table if exists t cascade;"),
            ("create global temporary table t (x int);", "drop table if exists t cascade;"),
            ("create unlogged table if not exists t (x int);", "drop table if exists t cascade;"),
            ("  CREATE TABLE IF NOT EXISTS Sales.Orders (", "drop table if exists Sales.Orders cascade;"),
        ],
    )
    def test_table_forms(self, line: str, expected: str) -> None:
        assert drop_statement_for(line) == expected


class TestViews:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("create view v as select 1;", "drop view if exists v cascade;"),
            ("create temporary view app.v as", "drop view if exists app.v cascade;"),
            ("create recursive view tree (id) as", "drop view if exists tree cascade;"),
        ],
    )
    def test_view_forms(self, line: str, expected: str) -> None:
        assert drop_statement_for(line) == expected


class TestFunctions:
    def test_named_arguments_with_default_reduce_to_types(self) -> None:
        line = "create function f(a integer default 5, b text) returns integer as $$"
        assert drop_statement_for(line) == "drop function if exists f(integer, text) cascade;"

    def test_no_arguments(self) -> None:
        line = "create function app.now_utc() returns timestamp as $$"
        assert drop_statement_for(line) == "drop function if exists app.now_utc() cascade;"

    def test_header_ending_at_argument_list(self) -> None:
        assert drop_statement_for("create function f(x int)") == "drop function if exists f(int) cascade;"

    def test_unnamed_arguments_are_kept(self) -> None:
        line = "create function f(integer, text) returns void"
        assert drop_statement_for(line) == "drop function if exists f(integer, text) cascade;"

    def test_function_without_returns_is_dropped_as_procedure(self) -> None:
        line = "create function f(x int) as $$"
        assert drop_statement_for(line) == "drop procedure if exists f(int) cascade;"

    def test_keywords_are_case_insensitive_and_names_keep_case(self) -> None:
        line = "CREATE FUNCTION MySchema.DoIt(Val Integer DEFAULT 1) RETURNS void"
        assert drop_statement_for(line) == "drop function if exists MySchema.DoIt(Integer) cascade;"


class TestProcedures:
    def test_procedure_with_as(self) -> None:
        line = "create procedure p(a integer, b text default 'x') as $$"
        assert drop_statement_for(line) == "drop procedure if exists p(integer, text) cascade;"

    def test_procedure_header_ending_at_argument_list(self) -> None:
        assert drop_statement_for("create procedure app.p()") == "drop procedure if exists app.p() cascade;"


class TestTriggers:
    def test_trigger_on_table(self) -> None:
        line = "create trigger trg after insert on app.t for each row execute function f();"
        assert drop_statement_for(line) == "drop trigger if exists trg on app.t cascade;"

    def test_constraint_trigger(self) -> None:
        line = "create constraint trigger chk after update on t"
        assert drop_statement_for(line) == "drop trigger if exists chk on t cascade;"

    def test_trigger_without_table_is_skipped(self) -> None:
        assert drop_statement_for("create trigger trg") is None


class TestPassThroughAndSkips:
    def test_search_path_line_is_returned_unchanged(self) -> None:
        assert drop_statement_for("  set search_path to app;") == "  set search_path to app;"

    @pytest.mark.parametrize(
        "line",
        [
            "create or replace function f() returns void",
            "create or replace view v as",
            "create unique index i on t (x);",
            "create schema app;",
            "insert into t values (1);",
            "select * from t;",
            "-- create table commented;",
        ],
    )
    def test_unrecognized_lines_yield_nothing(self, line: str) -> None:
        assert drop_statement_for(line) is None


class TestArgumentReduction:
    @pytest.mark.parametrize(
        ("arg", "expected"),
        [
            ("a integer", "integer"),
            ("integer", "integer"),
            ("a integer default 5", "integer"),
            ("a timestamp default now()", "timestamp"),
            ("a integer = 5", "integer"),
            ("integer default 5", "integer"),
            ("out n integer", "out integer"),
            ("inout n text default 'x'", "inout text"),
            ("variadic vals text[]", "variadic text[]"),
            ("  a  varchar  ", "varchar"),
        ],
    )
    def test_reduce_argument(self, arg: str, expected: str) -> None:
        assert reduce_argument(arg) == expected

    def test_reduce_arguments_joins_with_comma_space(self) -> None:
        assert reduce_arguments("a integer default 5,b text") == "integer, text"

    def test_empty_argument_list(self) -> None:
        assert reduce_arguments("") == ""
        assert reduce_arguments("  ") == ""

"""Tests for post-generation SQL validation with sqlglot."""

from __future__ import annotations

import pytest

from filterql.ast.builder import and_, eq, field, gt, ne, or_
from filterql.compiler.transpiler import Transpiler
from filterql.compiler.validator import validate_sql
from filterql.models.query import Query
from tests.conftest import FIELDS


class TestValidateSql:
    def test_valid_postgres(self) -> None:
        assert validate_sql('SELECT * FROM data WHERE "age" > 25;', "postgres") == []

    def test_valid_mysql(self) -> None:
        assert validate_sql("SELECT * FROM data WHERE `age` > 25 LIMIT 3;", "mysql") == []

    def test_valid_sqlserver_top(self) -> None:
        assert validate_sql("SELECT TOP 20 * FROM data;", "sqlserver") == []

    def test_invalid_sql(self) -> None:
        errors = validate_sql('SELECT * FROM data WHERE ("age" > 25;', "postgres")
        assert len(errors) == 1

    def test_two_statements_reported(self) -> None:
        errors = validate_sql("SELECT * FROM data; SELECT 1;", "postgres")
        assert errors == ["Expected one SELECT statement, found 2"]

    def test_non_select_reported(self) -> None:
        errors = validate_sql("DELETE FROM data;", "postgres")
        assert errors == ["Expected a SELECT statement, found DELETE"]

    def test_unknown_dialect_is_skipped(self) -> None:
        errors = validate_sql("SELECT 1;", "oracle")
        assert len(errors) == 1
        assert "oracle" in errors[0]


class TestCompiledOutputParses:
    @pytest.mark.parametrize("dialect", ["postgres", "mysql", "sqlserver"])
    def test_round_trip_through_sqlglot(self, dialect: str) -> None:
        where = and_(
            ne(field(3), None),
            or_(gt(field(4), 25), eq(field(2), "Jerry", "Tom")),
        )
        sql = Transpiler(table_name="data").compile(
            dialect, FIELDS, Query(where=where, limit=10)
        ).unwrap()
        assert validate_sql(sql, dialect) == []

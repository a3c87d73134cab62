"""Unit tests for the generic DB-API positional statement."""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any

import pytest

from named_params.adapters.dbapi import DBAPIAdapter, DBAPIStatement
from named_params.adapters.mysql import MysqlAdapter
from named_params.adapters.oracle import OracleAdapter
from named_params.adapters.sqlite import SqliteAdapter
from named_params.core.enums import ValueKind
from named_params.core.exceptions import UnboundParameterError, ValueConversionError


class FakeCursor:
    def __init__(self, description: Any = None) -> None:
        self.description = description
        self.calls: list[tuple[Any, ...]] = []
        self.input_sizes: tuple[Any, ...] | None = None
        self.closed = False

    def execute(self, *args: Any) -> None:
        self.calls.append(args)

    def setinputsizes(self, *sizes: Any) -> None:
        self.input_sizes = sizes

    def close(self) -> None:
        self.closed = True


class FakeConnection:
    def __init__(self, description: Any = None) -> None:
        self.cursors: list[FakeCursor] = []
        self._description = description

    def cursor(self) -> FakeCursor:
        cursor = FakeCursor(self._description)
        self.cursors.append(cursor)
        return cursor


@pytest.fixture
def conn() -> FakeConnection:
    return FakeConnection()


class TestDBAPIStatement:
    def test_prepare_opens_one_cursor(self, conn: FakeConnection) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT ?")
        assert isinstance(stmt, DBAPIStatement)
        assert stmt.cursor is conn.cursors[0]
        assert stmt.connection is conn
        assert stmt.sql == "SELECT ?"

    def test_parameters_in_ordinal_order(self, conn: FakeConnection) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT ?, ?")
        stmt.bind(2, ValueKind.STRING, "b")
        stmt.bind(1, ValueKind.INT, 1)
        assert stmt.execute_query() is conn.cursors[0]
        assert conn.cursors[0].calls == [("SELECT ?, ?", (1, "b"))]

    def test_rebinding_replaces_value(self, conn: FakeConnection) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT ?")
        stmt.bind(1, ValueKind.INT, 1)
        stmt.bind(1, ValueKind.INT, 2)
        assert stmt.parameters() == (2,)

    def test_no_parameters_executes_without_params(self, conn: FakeConnection) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT 1")
        stmt.execute()
        assert conn.cursors[0].calls == [("SELECT 1",)]

    def test_gap_raises_before_driver_call(self, conn: FakeConnection) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT ?, ?, ?")
        stmt.bind(3, ValueKind.INT, 3)
        with pytest.raises(UnboundParameterError) as exc_info:
            stmt.execute()
        assert exc_info.value.ordinals == [1, 2]
        assert conn.cursors[0].calls == []

    def test_conversion_error(self, conn: FakeConnection) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT ?")
        with pytest.raises(ValueConversionError, match="byte at position 1") as exc_info:
            stmt.bind(1, ValueKind.BYTE, 1000)
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert stmt.parameters() == ()

    @pytest.mark.parametrize(
        ("kind", "value", "hints"),
        [
            (ValueKind.DECIMAL, "abc", {}),
            (ValueKind.DECIMAL, "1e30", {"scale": 10}),
            (ValueKind.TIMESTAMP, datetime.datetime(2024, 1, 1), {"tz": "Nowhere/Zone"}),
            (ValueKind.BYTES, 5, {}),
            (ValueKind.BLOB, 5, {}),
            (ValueKind.BOOLEAN, "false", {}),
        ],
    )
    def test_unconvertible_values_raise_conversion_error(
        self, conn: FakeConnection, kind: ValueKind, value: Any, hints: dict[str, Any]
    ) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT ?")
        with pytest.raises(ValueConversionError):
            stmt.bind(1, kind, value, **hints)
        assert stmt.parameters() == ()

    def test_ordinal_must_be_positive(self, conn: FakeConnection) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT ?")
        with pytest.raises(ValueConversionError):
            stmt.bind(0, ValueKind.INT, 1)

    def test_execute_reports_result_set(self) -> None:
        conn = FakeConnection(description=(("x", None, None, None, None, None, None),))
        assert DBAPIAdapter().prepare(conn, "SELECT 1").execute() is True
        assert DBAPIAdapter().prepare(FakeConnection(), "DELETE FROM t").execute() is False

    def test_clear_parameters(self, conn: FakeConnection) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT ?")
        stmt.bind(1, ValueKind.INT, 1)
        stmt.clear_parameters()
        assert stmt.parameters() == ()

    def test_close(self, conn: FakeConnection) -> None:
        stmt = DBAPIAdapter().prepare(conn, "SELECT 1")
        stmt.close()
        assert conn.cursors[0].closed


class TestAdapterHooks:
    def test_sqlite_binds_decimal_and_dates_as_text(self, conn: FakeConnection) -> None:
        stmt = SqliteAdapter().prepare(conn, "SELECT ?, ?")
        stmt.bind(1, ValueKind.DECIMAL, Decimal("1.50"))
        stmt.bind(2, ValueKind.TIMESTAMP, datetime.datetime(2024, 1, 2, 3, 4, 5))
        assert stmt.parameters() == ("1.50", "2024-01-02T03:04:05")

    def test_mysql_joins_arrays(self, conn: FakeConnection) -> None:
        stmt = MysqlAdapter().prepare(conn, "SELECT %s")
        stmt.bind(1, ValueKind.ARRAY, ("a", "b"))
        assert stmt.parameters() == ("a,b",)

    def test_oracle_booleans_as_numbers(self, conn: FakeConnection) -> None:
        stmt = OracleAdapter().prepare(conn, "SELECT :1 FROM dual")
        stmt.bind(1, ValueKind.BOOLEAN, True)
        assert stmt.parameters() == (1,)

    def test_oracle_no_input_sizes_without_lobs(self) -> None:
        assert OracleAdapter().input_sizes({1: ValueKind.INT}) is None

    def test_oracle_lob_input_sizes(self, conn: FakeConnection) -> None:
        oracledb = pytest.importorskip("oracledb")
        stmt = OracleAdapter().prepare(conn, "INSERT INTO t VALUES (:1, :2)")
        stmt.bind(2, ValueKind.CLOB, "text")
        stmt.bind(1, ValueKind.INT, 1)
        stmt.execute()
        assert conn.cursors[0].input_sizes == (None, oracledb.DB_TYPE_CLOB)

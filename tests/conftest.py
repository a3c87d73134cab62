"""Shared test fixtures."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from typing import Any

import pytest

from named_params.core.enums import ParamStyle, ValueKind


class RecordingStatement:
    """Positional statement that records every call instead of touching a driver."""

    def __init__(self, sql: str) -> None:
        self.sql = sql
        self.binds: list[tuple[int, ValueKind, Any, dict[str, Any]]] = []
        self.executed: list[str] = []
        self.closed = False

    def bind(self, ordinal: int, kind: ValueKind, value: Any, **hints: Any) -> None:
        self.binds.append((ordinal, kind, value, hints))

    def execute_query(self) -> Any:
        self.executed.append("execute_query")
        return "result-set"

    def execute(self) -> bool:
        self.executed.append("execute")
        return False

    def close(self) -> None:
        self.closed = True


class RecordingAdapter:
    """Adapter handing out RecordingStatements."""

    def __init__(self, paramstyle: ParamStyle = ParamStyle.QMARK) -> None:
        self._paramstyle = paramstyle
        self.prepared: list[tuple[Any, str]] = []

    @property
    def paramstyle(self) -> ParamStyle:
        return self._paramstyle

    def prepare(self, connection: Any, sql: str) -> RecordingStatement:
        self.prepared.append((connection, sql))
        return RecordingStatement(sql)


@pytest.fixture
def recording_adapter() -> RecordingAdapter:
    return RecordingAdapter()


@pytest.fixture
def sqlite_conn() -> Iterator[sqlite3.Connection]:
    """SQLite in-memory connection with a ``users`` table."""
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.execute(
        "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, email TEXT, "
        "active INTEGER, balance TEXT, created TEXT, avatar BLOB)"
    )
    conn.execute("INSERT INTO users (id, name, email, active) VALUES (1, 'Alice', 'alice@ex.com', 1)")
    conn.execute("INSERT INTO users (id, name, email, active) VALUES (2, 'Bob', 'bob@ex.com', 0)")
    conn.commit()
    yield conn
    conn.close()

"""Positional statement protocols.

``NamedPreparedStatement`` talks to the database only through these
protocols. Every adapter module MUST provide a ``StatementAdapter`` whose
``prepare`` returns a ``PositionalStatement``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from named_params.core.enums import ParamStyle, ValueKind


@runtime_checkable
class PositionalStatement(Protocol):
    """A prepared statement whose parameters are addressed by 1-based ordinal."""

    def bind(self, ordinal: int, kind: ValueKind, value: Any, **hints: Any) -> None:
        """Bind *value* as *kind* to the marker at *ordinal*."""
        ...

    def execute_query(self) -> Any:
        """Execute and return a cursor-like object over the result set."""
        ...

    def execute(self) -> bool:
        """Execute and return True if the statement produced a result set."""
        ...

    def close(self) -> None:
        """Release driver resources held by the statement."""
        ...


@runtime_checkable
class StatementAdapter(Protocol):
    """Creates positional statements on a caller-supplied DB-API connection."""

    @property
    def paramstyle(self) -> ParamStyle:
        """Positional marker style the driver accepts."""
        ...

    def prepare(self, connection: Any, sql: str) -> PositionalStatement:
        """Prepare positional *sql* on *connection*."""
        ...

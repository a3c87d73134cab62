"""Named prepared statement.

NamedPreparedStatement rewrites a ``:name`` query to positional markers,
prepares it through an adapter, and binds parameters by name. The query is
scanned once, at construction; every bind resolves its name against the
index built then and forwards to the positional statement.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from named_params.adapters.protocol import PositionalStatement, StatementAdapter
from named_params.core.config import StatementConfig, load_adapter
from named_params.core.enums import ValueKind
from named_params.core.exceptions import UnknownParameterError
from named_params.core.index import build_index
from named_params.core.rewriter import rewrite

logger = logging.getLogger("named_params")


class NamedPreparedStatement:
    """Prepared statement with parameters bound by name.

    Args:
        connection: An open DB-API connection; it stays owned by the caller.
        sql: Query with ``:name`` placeholders.
        config: Translation options. Defaults to ``StatementConfig()``.
        adapter: Statement adapter; loaded from ``config.driver`` when omitted.

    Raises:
        DuplicateParameterError: In strict mode, if a name is repeated.
        UnterminatedLiteralError: In literal-aware mode, on an unclosed literal.

    Errors raised by the driver, at prepare, bind or execute time, propagate
    unchanged.
    """

    def __init__(
        self,
        connection: Any,
        sql: str,
        *,
        config: StatementConfig | None = None,
        adapter: StatementAdapter | None = None,
    ) -> None:
        self._config = config if config is not None else StatementConfig()
        self._adapter = adapter if adapter is not None else load_adapter(self._config.driver)
        paramstyle = self._config.paramstyle or self._adapter.paramstyle

        self._original_sql = sql
        self._index = build_index(
            sql, strict=self._config.strict, skip_literals=self._config.skip_literals
        )
        self._sql = rewrite(sql, paramstyle, skip_literals=self._config.skip_literals)
        self._statement = self._adapter.prepare(connection, self._sql)
        logger.debug(
            "prepared %r as %r with parameters %s", sql, self._sql, dict(self._index)
        )

    # --- introspection ---

    @property
    def statement(self) -> PositionalStatement:
        """The wrapped positional statement."""
        return self._statement

    @property
    def sql(self) -> str:
        """The rewritten, positional query text."""
        return self._sql

    @property
    def original_sql(self) -> str:
        return self._original_sql

    @property
    def parameters(self) -> Mapping[str, int]:
        """Read-only ``{name: ordinal}`` map built at construction."""
        return self._index

    @property
    def parameter_names(self) -> list[str]:
        """Bindable names, ordered by ordinal."""
        return sorted(self._index, key=self._index.__getitem__)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._original_sql!r})"

    def parameter_index(self, name: str) -> int:
        """Return the ordinal bound by *name*.

        Raises:
            UnknownParameterError: If *name* is not a bindable parameter of the query.
        """
        try:
            return self._index[name]
        except KeyError:
            raise UnknownParameterError(name) from None

    # --- binding ---

    def bind(self, name: str, value: Any, kind: ValueKind = ValueKind.OBJECT, **hints: Any) -> None:
        """Bind *value* as *kind* to the parameter *name*.

        *hints* are forwarded to the positional statement unchanged: ``length``
        for streams and LOBs, ``tz`` for dates and times, ``sql_type`` and
        ``type_name`` for NULL, ``target_kind`` and ``scale_or_length`` for
        objects, ``scale`` for decimals.

        Raises:
            UnknownParameterError: If *name* is unknown. Nothing is bound.
        """
        self._statement.bind(self.parameter_index(name), kind, value, **hints)

    def bind_all(self, values: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Bind several parameters as objects.

        Every name is resolved before anything is bound, so an unknown name
        leaves the statement untouched.
        """
        merged = {**(values or {}), **kwargs}
        resolved = [(self.parameter_index(name), value) for name, value in merged.items()]
        for ordinal, value in resolved:
            self._statement.bind(ordinal, ValueKind.OBJECT, value)

    def set_null(self, name: str, sql_type: Any = None, type_name: str | None = None) -> None:
        """Bind SQL NULL to the parameter *name*."""
        self.bind(name, None, ValueKind.NULL, sql_type=sql_type, type_name=type_name)

    # --- execution ---

    def execute_query(self) -> Any:
        """Execute and return the driver cursor over the result set."""
        return self._statement.execute_query()

    def execute(self) -> bool:
        """Execute; True when the statement produced a result set."""
        return self._statement.execute()

    # --- lifecycle ---

    def close(self) -> None:
        self._statement.close()

    def __enter__(self) -> NamedPreparedStatement:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


def _setter(kind: ValueKind) -> Any:
    def setter(self: NamedPreparedStatement, name: str, value: Any, **hints: Any) -> None:
        self.bind(name, value, kind, **hints)

    setter.__name__ = f"set_{kind.value}"
    setter.__qualname__ = f"NamedPreparedStatement.{setter.__name__}"
    setter.__doc__ = f"Bind *value* as {kind.name} to the parameter *name*."
    return setter


# set_boolean, set_int, set_timestamp, ... one per value kind
for _kind in ValueKind:
    if _kind is not ValueKind.NULL:
        setattr(NamedPreparedStatement, f"set_{_kind.value}", _setter(_kind))
del _kind


def prepare(
    connection: Any,
    sql: str,
    *,
    adapter: StatementAdapter | None = None,
    **options: Any,
) -> NamedPreparedStatement:
    """Create a NamedPreparedStatement, building its config from *options*.

    Example:
        with prepare(conn, "SELECT * FROM users WHERE id = :id") as stmt:
            stmt.set_int("id", 1)
            rows = stmt.execute_query().fetchall()
    """
    return NamedPreparedStatement(
        connection, sql, config=StatementConfig(**options), adapter=adapter
    )

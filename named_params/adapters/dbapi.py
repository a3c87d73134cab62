"""Generic positional statement over a PEP 249 connection.

DB-API drivers have no separate prepare/bind step: parameters travel with
``cursor.execute``. ``DBAPIStatement`` keeps bound values per ordinal and
hands them to the driver as a positional tuple when executed.
"""

from __future__ import annotations

import logging
from typing import Any

from named_params.core.converters import convert
from named_params.core.enums import ParamStyle, ValueKind
from named_params.core.exceptions import UnboundParameterError, ValueConversionError

logger = logging.getLogger("named_params.adapters")


class DBAPIAdapter:
    """Base adapter: qmark markers, values passed to the driver as converted."""

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.QMARK

    def prepare(self, connection: Any, sql: str) -> DBAPIStatement:
        """Open a cursor on *connection* for positional *sql*."""
        return DBAPIStatement(self, connection, sql)

    def adapt(self, kind: ValueKind, value: Any) -> Any:
        """Driver-specific final conversion of an already converted value."""
        return value

    def input_sizes(self, kinds: dict[int, ValueKind]) -> list[Any] | None:
        """Positional ``cursor.setinputsizes`` arguments, or None to skip the call."""
        return None


class DBAPIStatement:
    """Positional statement bound to one cursor of a DB-API connection."""

    def __init__(self, adapter: DBAPIAdapter, connection: Any, sql: str) -> None:
        self._adapter = adapter
        self._connection = connection
        self._sql = sql
        self._cursor = connection.cursor()
        self._values: dict[int, Any] = {}
        self._kinds: dict[int, ValueKind] = {}

    @property
    def sql(self) -> str:
        return self._sql

    @property
    def connection(self) -> Any:
        return self._connection

    @property
    def cursor(self) -> Any:
        return self._cursor

    def bind(self, ordinal: int, kind: ValueKind, value: Any, **hints: Any) -> None:
        """Convert *value* as *kind* and store it for the marker at *ordinal*.

        Raises:
            ValueConversionError: If *value* or a hint does not fit *kind*.
        """
        if ordinal < 1:
            raise ValueConversionError(ordinal, kind.value, "positions start at 1")
        try:
            converted = convert(kind, value, **hints)
        except (TypeError, ValueError) as e:
            raise ValueConversionError(ordinal, kind.value, str(e)) from e
        self._values[ordinal] = self._adapter.adapt(kind, converted)
        self._kinds[ordinal] = kind
        logger.debug("bound %s at position %d", kind.value, ordinal)

    def parameters(self) -> tuple[Any, ...]:
        """Bound values in marker order.

        Raises:
            UnboundParameterError: If a position below the highest bound one is empty.
        """
        if not self._values:
            return ()
        highest = max(self._values)
        missing = [i for i in range(1, highest + 1) if i not in self._values]
        if missing:
            raise UnboundParameterError(missing)
        return tuple(self._values[i] for i in range(1, highest + 1))

    def clear_parameters(self) -> None:
        self._values.clear()
        self._kinds.clear()

    def _run(self) -> Any:
        params = self.parameters()
        sizes = self._adapter.input_sizes(self._kinds)
        if sizes is not None:
            self._cursor.setinputsizes(*sizes)
        logger.debug("executing %r with %d parameter(s)", self._sql, len(params))
        if params:
            self._cursor.execute(self._sql, params)
        else:
            self._cursor.execute(self._sql)
        return self._cursor

    def execute_query(self) -> Any:
        """Execute and return the cursor positioned before the first row."""
        return self._run()

    def execute(self) -> bool:
        """Execute; True when the statement produced a result set."""
        return self._run().description is not None

    def close(self) -> None:
        self._cursor.close()

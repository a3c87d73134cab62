"""Oracle adapter for oracledb connections."""

from __future__ import annotations

from typing import Any

from named_params.adapters.dbapi import DBAPIAdapter
from named_params.core.enums import ParamStyle, ValueKind

_LOB_TYPES = {
    ValueKind.BLOB: "DB_TYPE_BLOB",
    ValueKind.CLOB: "DB_TYPE_CLOB",
    ValueKind.NCLOB: "DB_TYPE_NCLOB",
}


class OracleAdapter(DBAPIAdapter):
    """Positional statements on an oracledb connection.

    Uses numeric markers (``:1``, ``:2``). LOB values are declared with
    ``setinputsizes`` so values over 32k are not bound as VARCHAR2/RAW.
    """

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.NUMERIC

    def adapt(self, kind: ValueKind, value: Any) -> Any:
        # Oracle before 23c has no SQL BOOLEAN
        if isinstance(value, bool):
            return int(value)
        return value

    def input_sizes(self, kinds: dict[int, ValueKind]) -> list[Any] | None:
        if not any(kind in _LOB_TYPES for kind in kinds.values()):
            return None

        import oracledb

        highest = max(kinds)
        sizes: list[Any] = []
        for ordinal in range(1, highest + 1):
            kind = kinds.get(ordinal)
            sizes.append(getattr(oracledb, _LOB_TYPES[kind]) if kind in _LOB_TYPES else None)
        return sizes

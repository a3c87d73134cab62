"""MySQL adapter for mysql-connector-python connections."""

from __future__ import annotations

from typing import Any

from named_params.adapters.dbapi import DBAPIAdapter
from named_params.core.enums import ParamStyle, ValueKind


class MysqlAdapter(DBAPIAdapter):
    """Positional statements on a mysql-connector connection."""

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.FORMAT

    def adapt(self, kind: ValueKind, value: Any) -> Any:
        # MySQL has no array type; bind the elements as a comma-separated set
        if kind is ValueKind.ARRAY and value is not None:
            return ",".join(str(element) for element in value)
        return value

"""SQLite adapter using stdlib sqlite3."""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any

from named_params.adapters.dbapi import DBAPIAdapter
from named_params.core.enums import ParamStyle, ValueKind


class SqliteAdapter(DBAPIAdapter):
    """Positional statements on a ``sqlite3.Connection``.

    sqlite3 has no decimal type and its default date/time adapters are
    deprecated, so those values are bound as text.
    """

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.QMARK

    def adapt(self, kind: ValueKind, value: Any) -> Any:
        if isinstance(value, Decimal):
            return str(value)
        if isinstance(value, (datetime.date, datetime.time)):
            # datetime is a date subclass, isoformat covers both
            return value.isoformat()
        return value

"""PostgreSQL adapter for psycopg (v3+) connections."""

from __future__ import annotations

from named_params.adapters.dbapi import DBAPIAdapter
from named_params.core.enums import ParamStyle


class PostgresqlAdapter(DBAPIAdapter):
    """Positional statements on a psycopg connection.

    psycopg adapts every converted value natively, including lists to arrays.
    """

    @property
    def paramstyle(self) -> ParamStyle:
        return ParamStyle.FORMAT

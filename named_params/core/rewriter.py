"""Query rewriter.

Converts ``:name`` placeholders to the positional markers of a DB-API
paramstyle:

    qmark    ->  ?          (sqlite3)
    format   ->  %s         (psycopg, mysql-connector)
    numeric  ->  :1, :2 ... (oracledb)
"""

from __future__ import annotations

from functools import lru_cache

from named_params.core.enums import ParamStyle
from named_params.core.scanner import iter_placeholders


def positional_marker(paramstyle: ParamStyle, ordinal: int) -> str:
    """Return the marker for the *ordinal*-th placeholder in *paramstyle*."""
    if paramstyle is ParamStyle.QMARK:
        return "?"
    if paramstyle is ParamStyle.FORMAT:
        return "%s"
    return f":{ordinal}"


def _escape(text: str, paramstyle: ParamStyle) -> str:
    # format-style drivers treat every bare % as a conversion
    if paramstyle is ParamStyle.FORMAT:
        return text.replace("%", "%%")
    return text


def rewrite(
    sql: str,
    paramstyle: ParamStyle | str = ParamStyle.QMARK,
    *,
    skip_literals: bool = False,
) -> str:
    """Replace every placeholder in *sql* with a positional marker.

    Args:
        sql: SQL string with ``:name`` parameters.
        paramstyle: Target positional style, a ``ParamStyle`` or its value.
        skip_literals: Leave placeholders inside quoted literals untouched.

    Returns:
        SQL whose i-th marker corresponds to the i-th placeholder occurrence.
        Characters outside placeholders are kept verbatim, except that ``%``
        is doubled for the ``format`` style when the query has placeholders.
    """
    return _rewrite(sql, ParamStyle(paramstyle), skip_literals)


@lru_cache(maxsize=256)
def _rewrite(sql: str, paramstyle: ParamStyle, skip_literals: bool) -> str:
    placeholders = list(iter_placeholders(sql, skip_literals=skip_literals))
    # Without markers the driver is called with no parameters and does no formatting
    if not placeholders:
        return sql

    parts: list[str] = []
    last_end = 0
    for placeholder in placeholders:
        parts.append(_escape(sql[last_end : placeholder.start], paramstyle))
        parts.append(positional_marker(paramstyle, placeholder.ordinal))
        last_end = placeholder.end

    parts.append(_escape(sql[last_end:], paramstyle))
    return "".join(parts)

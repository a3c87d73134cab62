"""
Example 03: Repeated Names, Literals and Strict Modes

By default the last occurrence of a repeated name wins and placeholders inside
quoted literals are rewritten too. StatementConfig turns on stricter behavior.
"""

import sqlite3

from named_params import (
    DuplicateParameterError,
    NamedPreparedStatement,
    ParamStyle,
    StatementConfig,
    rewrite,
)


def main():
    conn = sqlite3.connect(":memory:")

    # Repeated name: only the last occurrence can be bound by name
    stmt = NamedPreparedStatement(conn, "SELECT :x, :x")
    print(f"{stmt.sql!r} -> {dict(stmt.parameters)}")

    try:
        NamedPreparedStatement(conn, "SELECT :x, :x", config=StatementConfig(strict=True))
    except DuplicateParameterError as e:
        print(f"Strict mode: {e}")

    # Placeholders inside literals
    sql = "SELECT ':label' AS label, :value AS value"
    print(f"Default:       {rewrite(sql)!r}")
    print(f"Literal-aware: {rewrite(sql, skip_literals=True)!r}")

    stmt = NamedPreparedStatement(conn, sql, config=StatementConfig(skip_literals=True))
    stmt.set_int("value", 42)
    print(stmt.execute_query().fetchone())

    # Other drivers' markers
    print(f"Oracle:   {rewrite('WHERE a = :a AND b = :b', ParamStyle.NUMERIC)!r}")
    print(f"psycopg:  {rewrite('WHERE a LIKE :a', ParamStyle.FORMAT)!r}")

    conn.close()


if __name__ == "__main__":
    main()

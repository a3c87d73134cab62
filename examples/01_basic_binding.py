"""
Example 01: Basic Named Binding

This example prepares a query with named parameters on a sqlite3 connection,
binds values by name and reads the results.
"""

import sqlite3

from named_params import NamedPreparedStatement, UnknownParameterError


def main():
    conn = sqlite3.connect(":memory:")
    conn.row_factory = sqlite3.Row
    conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, active INTEGER)")
    conn.execute("INSERT INTO users (name, active) VALUES ('Alice', 1)")
    conn.execute("INSERT INTO users (name, active) VALUES ('Bob', 1)")
    conn.execute("INSERT INTO users (name, active) VALUES ('Charlie', 0)")
    conn.commit()

    stmt = NamedPreparedStatement(
        conn, "SELECT id, name FROM users WHERE active = :active AND id > :minid"
    )
    print(f"Rewritten SQL: {stmt.sql}")
    print(f"Parameters: {dict(stmt.parameters)}")

    stmt.set_boolean("active", True)
    stmt.set_int("minid", 1)
    for row in stmt.execute_query().fetchall():
        print(f"  {row['id']}: {row['name']}")

    # Unknown names fail before anything reaches the driver
    try:
        stmt.set_int("minId", 1)
    except UnknownParameterError as e:
        print(f"Error: {e}")

    stmt.close()
    conn.close()


if __name__ == "__main__":
    main()

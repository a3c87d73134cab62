"""
Example 02: Typed Values and Streams

This example binds decimals, timestamps, NULL and streamed content using the
set_<kind> methods, then inserts in a loop by rebinding the same statement.
"""

import datetime
import io
import sqlite3
from decimal import Decimal

from named_params import prepare


def main():
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE invoices (id INTEGER PRIMARY KEY, amount TEXT, issued TEXT, "
        "note TEXT, pdf BLOB)"
    )

    with prepare(
        conn,
        "INSERT INTO invoices (id, amount, issued, note, pdf) "
        "VALUES (:id, :amount, :issued, :note, :pdf)",
    ) as stmt:
        for invoice_id in range(1, 4):
            stmt.set_int("id", invoice_id)
            stmt.set_decimal("amount", Decimal("19.99") * invoice_id)
            stmt.set_timestamp(
                "issued",
                datetime.datetime(2024, 1, invoice_id, 9, 30),
                tz=datetime.timezone.utc,
            )
            if invoice_id % 2:
                stmt.set_character_stream("note", io.StringIO("paid in full, thank you"), length=12)
            else:
                stmt.set_null("note")
            stmt.set_binary_stream("pdf", io.BytesIO(b"%PDF-1.7"))
            stmt.execute()
    conn.commit()

    for row in conn.execute("SELECT id, amount, issued, note FROM invoices"):
        print(row)

    conn.close()


if __name__ == "__main__":
    main()

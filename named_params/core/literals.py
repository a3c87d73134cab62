"""Quoted literal tokenizer.

Used only by the literal-aware scanning mode; the default scanner treats the
whole query as code.
"""

from __future__ import annotations

from named_params.core.exceptions import UnterminatedLiteralError

# quote char -> token kind
_QUOTES = {
    "'": ("string", "string literal"),
    '"': ("identifier", "double-quoted identifier"),
    "`": ("identifier", "backtick-quoted identifier"),
}


def _closing(sql: str, start: int, quote: str) -> int:
    """Return the index just past the literal opened at *start*.

    A doubled quote character inside the literal is an escape.

    Raises:
        UnterminatedLiteralError: If the literal runs to the end of *sql*.
    """
    n = len(sql)
    j = start + 1
    while j < n:
        if sql[j] == quote:
            if j + 1 < n and sql[j + 1] == quote:
                j += 2  # escaped quote
                continue
            return j + 1
        j += 1
    raise UnterminatedLiteralError(f"unterminated {_QUOTES[quote][1]} at offset {start}")


def tokenize(sql: str) -> list[tuple[str, int, int]]:
    """Split *sql* into ``(kind, start, end)`` spans.

    *kind* is ``'string'`` for single-quoted literals, ``'identifier'`` for
    double-quoted or backtick-quoted identifiers and ``'code'`` for everything
    else. Spans are contiguous and cover the whole input.

    Raises:
        UnterminatedLiteralError: If a literal or identifier is not closed.
    """
    spans: list[tuple[str, int, int]] = []
    i = 0
    n = len(sql)
    last = 0

    while i < n:
        ch = sql[i]
        if ch in _QUOTES:
            if i > last:
                spans.append(("code", last, i))
            j = _closing(sql, i, ch)
            spans.append((_QUOTES[ch][0], i, j))
            last = i = j
        else:
            i += 1

    if last < n:
        spans.append(("code", last, n))

    return spans


def code_spans(sql: str) -> list[tuple[int, int]]:
    """Return the ``(start, end)`` spans of *sql* lying outside quoted literals."""
    return [(start, end) for kind, start, end in tokenize(sql) if kind == "code"]

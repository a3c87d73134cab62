"""Placeholder scanner.

Recognizes ``:name`` placeholders in raw SQL text. A name is a run of
lowercase letters or a run of uppercase letters; mixed-case and alphanumeric
names (``:userId``, ``:a1``, ``:user_id``) are not placeholders and are left
alone. A doubled colon (PostgreSQL ``::typecast``) escapes the marker.

No SQL parsing is done by default: a placeholder inside a quoted literal is
still a placeholder. Pass ``skip_literals=True`` to ignore quoted literals and
identifiers.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from named_params.core.literals import code_spans

MARKER = ":"

# Matches :name (all lowercase) or :NAME (all uppercase), whole runs only.
# Negative lookbehind for : handles ::typecast.
PLACEHOLDER_PATTERN = re.compile(r"(?<!:):(?:[a-z]+|[A-Z]+)(?![A-Za-z0-9_])")


@dataclass(frozen=True)
class Placeholder:
    """One occurrence of a placeholder in the query text."""

    name: str
    start: int
    end: int
    ordinal: int

    @property
    def token(self) -> str:
        return MARKER + self.name


def iter_placeholders(sql: str, *, skip_literals: bool = False) -> Iterator[Placeholder]:
    """Yield placeholder occurrences of *sql* in left-to-right order.

    Ordinals are 1-based and count every occurrence, repeated names included.

    Raises:
        UnterminatedLiteralError: With ``skip_literals`` when a quoted literal
            is not closed. Raised on first iteration, not at call time.
    """
    spans = code_spans(sql) if skip_literals else [(0, len(sql))]
    ordinal = 0
    for start, end in spans:
        for match in PLACEHOLDER_PATTERN.finditer(sql, start, end):
            ordinal += 1
            yield Placeholder(match.group()[1:], match.start(), match.end(), ordinal)


@dataclass(frozen=True)
class PlaceholderScan:
    """Re-iterable view of the placeholders of a query.

    Every iteration scans the text again from the start.
    """

    sql: str
    skip_literals: bool = False

    def __iter__(self) -> Iterator[Placeholder]:
        return iter_placeholders(self.sql, skip_literals=self.skip_literals)

    @property
    def names(self) -> list[str]:
        """Placeholder names in occurrence order, repeats included."""
        return [placeholder.name for placeholder in self]

    def __len__(self) -> int:
        return sum(1 for _ in self)


def scan(sql: str, *, skip_literals: bool = False) -> PlaceholderScan:
    """Return a re-iterable scan of the placeholders in *sql*."""
    return PlaceholderScan(sql, skip_literals)

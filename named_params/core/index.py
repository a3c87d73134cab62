"""Parameter index builder.

Maps each placeholder name to the ordinal of its positional marker in the
rewritten query.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from named_params.core.exceptions import DuplicateParameterError
from named_params.core.scanner import iter_placeholders


def build_index(
    sql: str,
    *,
    strict: bool = False,
    skip_literals: bool = False,
) -> Mapping[str, int]:
    """Return a read-only ``{name: ordinal}`` map for the placeholders of *sql*.

    When a name occurs more than once, the last occurrence wins and the
    earlier markers cannot be bound by name. With ``strict=True`` a repeated
    name raises instead.

    Raises:
        DuplicateParameterError: In strict mode, on the second occurrence of a name.
        UnterminatedLiteralError: With ``skip_literals``, on an unclosed literal.
    """
    index: dict[str, int] = {}
    for placeholder in iter_placeholders(sql, skip_literals=skip_literals):
        if strict and placeholder.name in index:
            raise DuplicateParameterError(
                placeholder.name, index[placeholder.name], placeholder.ordinal
            )
        index[placeholder.name] = placeholder.ordinal
    return MappingProxyType(index)

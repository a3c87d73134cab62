"""Parameter style and value kind enumerations."""

from __future__ import annotations

from enum import Enum


class ParamStyle(Enum):
    """Positional DB-API paramstyles a named query can be rewritten to."""

    QMARK = "qmark"
    FORMAT = "format"
    NUMERIC = "numeric"


class ValueKind(Enum):
    """Kinds of value a parameter can be bound as.

    Each kind has a converter in ``named_params.core.converters`` and a
    ``set_<value>`` method on ``NamedPreparedStatement``.
    """

    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    STRING = "string"
    NSTRING = "nstring"
    BYTES = "bytes"
    BLOB = "blob"
    CLOB = "clob"
    NCLOB = "nclob"
    ASCII_STREAM = "ascii_stream"
    BINARY_STREAM = "binary_stream"
    CHARACTER_STREAM = "character_stream"
    NCHARACTER_STREAM = "ncharacter_stream"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    NULL = "null"
    ARRAY = "array"
    REF = "ref"
    ROWID = "rowid"
    SQLXML = "sqlxml"
    URL = "url"
    OBJECT = "object"

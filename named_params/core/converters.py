"""Value converters, one per ``ValueKind``.

A converter turns the value handed to a ``set_<kind>`` call into the Python
object passed to the DB-API driver. ``None`` is passed through unchanged for
every kind so any parameter can be bound to SQL NULL.

Converters raise ``TypeError`` or ``ValueError`` on values that do not fit
their kind; the positional statement reports those as ``ValueConversionError``.
"""

from __future__ import annotations

import datetime
import operator
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any
from xml.etree import ElementTree
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from named_params.core.enums import ValueKind

Converter = Callable[..., Any]

_INT_RANGES: dict[ValueKind, tuple[int, int]] = {
    ValueKind.BYTE: (-(2**7), 2**7 - 1),
    ValueKind.SHORT: (-(2**15), 2**15 - 1),
    ValueKind.INT: (-(2**31), 2**31 - 1),
    ValueKind.LONG: (-(2**63), 2**63 - 1),
}


def _tzinfo(tz: datetime.tzinfo | str | None) -> datetime.tzinfo | None:
    if isinstance(tz, str):
        try:
            return ZoneInfo(tz)
        except ZoneInfoNotFoundError as e:
            raise ValueError(f"unknown time zone {tz!r}") from e
    return tz


def _read(stream: Any, length: int | None) -> Any:
    """Read *length* units from a file-like object, or all of it."""
    if not hasattr(stream, "read"):
        return stream
    if length is None:
        return stream.read()
    if length < 0:
        raise ValueError(f"stream length must be non-negative, got {length}")
    return stream.read(length)


# --- scalars ---


def to_boolean(value: Any) -> bool:
    # bool is an int subclass; text such as "false" is rejected
    if not isinstance(value, int):
        raise TypeError(f"expected bool or int, got {type(value).__name__}")
    return bool(value)


def _integer(kind: ValueKind) -> Converter:
    low, high = _INT_RANGES[kind]

    def convert(value: Any) -> int:
        if isinstance(value, bool):
            raise TypeError(f"expected an integer, got bool {value!r}")
        number = operator.index(value)
        if not low <= number <= high:
            raise ValueError(f"{number} is out of range for {kind.value} [{low}, {high}]")
        return number

    return convert


def to_float(value: Any) -> float:
    return float(value)


def to_decimal(value: Any, scale: int | None = None) -> Decimal:
    """Convert to ``Decimal``; floats go through ``str`` to keep their short form."""
    try:
        number = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        if scale is not None:
            number = number.quantize(Decimal(1).scaleb(-scale))
    except InvalidOperation as e:
        raise ValueError(f"cannot convert {value!r} to decimal") from e
    return number


def to_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


def to_bytes(value: Any) -> bytes:
    # bytes(int) would build a zero-filled buffer
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like object, got {type(value).__name__}")
    return bytes(value)


# --- large objects and streams ---


def to_blob(value: Any, length: int | None = None) -> bytes:
    return to_bytes(_read(value, length))


def to_clob(value: Any, length: int | None = None) -> str:
    return to_string(_read(value, length))


def from_ascii_stream(stream: Any, length: int | None = None) -> str:
    data = _read(stream, length)
    if isinstance(data, (bytes, bytearray)):
        return data.decode("ascii")
    return to_string(data)


def from_binary_stream(stream: Any, length: int | None = None) -> bytes:
    return to_bytes(_read(stream, length))


def from_character_stream(reader: Any, length: int | None = None) -> str:
    return to_string(_read(reader, length))


# --- temporal ---


def to_date(value: Any, tz: datetime.tzinfo | str | None = None) -> datetime.date:
    """Convert to ``date``; with *tz*, an aware datetime is first moved into *tz*."""
    zone = _tzinfo(tz)
    if isinstance(value, datetime.datetime):
        if zone is not None and value.tzinfo is not None:
            value = value.astimezone(zone)
        return value.date()
    if not isinstance(value, datetime.date):
        raise TypeError(f"expected date, got {type(value).__name__}")
    return value


def to_time(value: Any, tz: datetime.tzinfo | str | None = None) -> datetime.time:
    """Convert to ``time``; with *tz*, a naive time is taken to be in *tz*."""
    zone = _tzinfo(tz)
    if isinstance(value, datetime.datetime):
        if zone is not None and value.tzinfo is not None:
            value = value.astimezone(zone)
        value = value.timetz()
    if not isinstance(value, datetime.time):
        raise TypeError(f"expected time, got {type(value).__name__}")
    if zone is not None and value.tzinfo is None:
        value = value.replace(tzinfo=zone)
    return value


def to_timestamp(value: Any, tz: datetime.tzinfo | str | None = None) -> datetime.datetime:
    """Convert to ``datetime``.

    With *tz*, a naive value is taken to be in *tz* and an aware value is
    converted to *tz*.
    """
    zone = _tzinfo(tz)
    if not isinstance(value, datetime.datetime):
        if isinstance(value, datetime.date):
            value = datetime.datetime.combine(value, datetime.time())
        else:
            raise TypeError(f"expected datetime, got {type(value).__name__}")
    if zone is not None:
        value = value.replace(tzinfo=zone) if value.tzinfo is None else value.astimezone(zone)
    return value


# --- structured ---


def to_null(value: Any = None, sql_type: Any = None, type_name: str | None = None) -> None:
    return None


def to_array(value: Any) -> list[Any]:
    if isinstance(value, (str, bytes)):
        raise TypeError(f"expected a sequence of elements, got {type(value).__name__}")
    return list(value)


def to_sqlxml(value: Any) -> str:
    if isinstance(value, ElementTree.Element):
        return ElementTree.tostring(value, encoding="unicode")
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return to_string(value)


def to_url(value: Any) -> str:
    return str(value)


def passthrough(value: Any) -> Any:
    return value


def to_object(
    value: Any,
    target_kind: ValueKind | str | None = None,
    scale_or_length: int | None = None,
) -> Any:
    """Bind a value as-is, or as *target_kind* when one is given.

    *scale_or_length* is the scale for ``DECIMAL`` targets and the length for
    stream and LOB targets; it is ignored for other kinds.
    """
    if target_kind is None:
        return value
    kind = ValueKind(target_kind)
    if kind is ValueKind.OBJECT:
        return value
    if scale_or_length is None:
        return convert(kind, value)
    if kind is ValueKind.DECIMAL:
        return to_decimal(value, scale=scale_or_length)
    if kind in _LENGTH_KINDS:
        return convert(kind, value, length=scale_or_length)
    return convert(kind, value)


CONVERTERS: dict[ValueKind, Converter] = {
    ValueKind.BOOLEAN: to_boolean,
    ValueKind.BYTE: _integer(ValueKind.BYTE),
    ValueKind.SHORT: _integer(ValueKind.SHORT),
    ValueKind.INT: _integer(ValueKind.INT),
    ValueKind.LONG: _integer(ValueKind.LONG),
    ValueKind.FLOAT: to_float,
    ValueKind.DOUBLE: to_float,
    ValueKind.DECIMAL: to_decimal,
    ValueKind.STRING: to_string,
    ValueKind.NSTRING: to_string,
    ValueKind.BYTES: to_bytes,
    ValueKind.BLOB: to_blob,
    ValueKind.CLOB: to_clob,
    ValueKind.NCLOB: to_clob,
    ValueKind.ASCII_STREAM: from_ascii_stream,
    ValueKind.BINARY_STREAM: from_binary_stream,
    ValueKind.CHARACTER_STREAM: from_character_stream,
    ValueKind.NCHARACTER_STREAM: from_character_stream,
    ValueKind.DATE: to_date,
    ValueKind.TIME: to_time,
    ValueKind.TIMESTAMP: to_timestamp,
    ValueKind.NULL: to_null,
    ValueKind.ARRAY: to_array,
    ValueKind.REF: passthrough,
    ValueKind.ROWID: passthrough,
    ValueKind.SQLXML: to_sqlxml,
    ValueKind.URL: to_url,
    ValueKind.OBJECT: to_object,
}

_LENGTH_KINDS = frozenset(
    {
        ValueKind.BLOB,
        ValueKind.CLOB,
        ValueKind.NCLOB,
        ValueKind.ASCII_STREAM,
        ValueKind.BINARY_STREAM,
        ValueKind.CHARACTER_STREAM,
        ValueKind.NCHARACTER_STREAM,
    }
)


def convert(kind: ValueKind, value: Any, **hints: Any) -> Any:
    """Convert *value* for binding as *kind*, applying the kind's *hints*.

    Raises:
        TypeError: If *value* or a hint does not fit *kind*.
        ValueError: If *value* is out of range for *kind*.
    """
    if value is None:
        return None
    return CONVERTERS[kind](value, **hints)

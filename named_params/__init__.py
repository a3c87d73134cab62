"""named_params - named-parameter binding over positional DB-API statements."""

from __future__ import annotations

from named_params.adapters.protocol import PositionalStatement, StatementAdapter
from named_params.core.config import StatementConfig, load_adapter
from named_params.core.enums import ParamStyle, ValueKind
from named_params.core.exceptions import (
    AdapterError,
    DuplicateParameterError,
    NamedParamsError,
    TranslationError,
    UnboundParameterError,
    UnknownParameter,
    UnknownParameterError,
    UnsupportedDriverError,
    UnterminatedLiteralError,
    ValueConversionError,
)
from named_params.core.index import build_index
from named_params.core.rewriter import rewrite
from named_params.core.scanner import Placeholder, PlaceholderScan, iter_placeholders, scan
from named_params.core.statement import NamedPreparedStatement, prepare

__all__ = [
    # Statement
    "NamedPreparedStatement",
    "prepare",
    # Translation
    "Placeholder",
    "PlaceholderScan",
    "iter_placeholders",
    "scan",
    "rewrite",
    "build_index",
    # Config
    "StatementConfig",
    "load_adapter",
    # Protocols
    "PositionalStatement",
    "StatementAdapter",
    # Enums
    "ParamStyle",
    "ValueKind",
    # Exceptions
    "NamedParamsError",
    "UnknownParameterError",
    "UnknownParameter",
    "TranslationError",
    "DuplicateParameterError",
    "UnterminatedLiteralError",
    "AdapterError",
    "UnsupportedDriverError",
    "ValueConversionError",
    "UnboundParameterError",
]

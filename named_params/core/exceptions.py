"""named_params exception hierarchy.

Errors raised by the translation layer are named_params-specific. Errors
raised by the underlying DB-API driver are never caught or wrapped: they reach
the caller exactly as the driver raised them.
"""

from __future__ import annotations


class NamedParamsError(Exception):
    """Base exception for all named_params errors."""


# --- Binding ---


class UnknownParameterError(NamedParamsError, KeyError):
    """Raised when a bind-by-name call references a name the query does not define.

    Also raised for a repeated name whose earlier occurrences were masked by a
    later one; only the last occurrence of a name is bindable.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown parameter: '{name}'")

    def __str__(self) -> str:
        return str(self.args[0])


UnknownParameter = UnknownParameterError


# --- Translation ---


class TranslationError(NamedParamsError):
    """Base for errors raised while translating a named query."""


class DuplicateParameterError(TranslationError):
    """Raised in strict mode when a parameter name occurs more than once."""

    def __init__(self, name: str, first: int, second: int) -> None:
        self.name = name
        self.ordinals = (first, second)
        super().__init__(
            f"Parameter '{name}' occurs more than once (positions {first} and {second})"
        )


class UnterminatedLiteralError(TranslationError):
    """Raised in literal-aware mode when a quoted literal or identifier is not closed."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Cannot scan SQL: {detail}")


# --- Adapter ---


class AdapterError(NamedParamsError):
    """Base for positional statement adapter errors."""


class UnsupportedDriverError(AdapterError):
    """Raised when no adapter is registered for a driver name."""

    def __init__(self, driver: str) -> None:
        self.driver = driver
        super().__init__(f"Unsupported database driver: {driver}")


class ValueConversionError(AdapterError):
    """Raised when a bound value cannot be converted to its declared kind."""

    def __init__(self, ordinal: int, kind: str, detail: str) -> None:
        self.ordinal = ordinal
        self.kind = kind
        super().__init__(f"Cannot bind {kind} at position {ordinal}: {detail}")


class UnboundParameterError(AdapterError):
    """Raised at execution when a positional slot below the highest bound one is empty."""

    def __init__(self, ordinals: list[int]) -> None:
        self.ordinals = ordinals
        super().__init__(f"No value bound for position(s) {ordinals}")

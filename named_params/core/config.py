"""Statement configuration and adapter loading.

StatementConfig is a Pydantic model for type-safe translation options.
Adapters are looked up by driver name and imported lazily, so a driver
package is only required when its adapter is used.
"""

from __future__ import annotations

import importlib
from typing import Any

from pydantic import BaseModel, ConfigDict

from named_params.core.enums import ParamStyle
from named_params.core.exceptions import UnsupportedDriverError


class StatementConfig(BaseModel):
    """Options for translating and preparing a named query.

    Attributes:
        driver: Adapter name: sqlite, postgresql, mysql or oracle.
        paramstyle: Positional marker style; ``None`` uses the adapter's.
        strict: Reject queries that repeat a parameter name.
        skip_literals: Ignore placeholders inside quoted literals and identifiers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    driver: str = "sqlite"
    paramstyle: ParamStyle | None = None
    strict: bool = False
    skip_literals: bool = False


# Adapter module mapping: driver name -> (module_path, adapter_class)
_ADAPTER_MAP: dict[str, tuple[str, str]] = {
    "sqlite": ("named_params.adapters.sqlite", "SqliteAdapter"),
    "postgresql": ("named_params.adapters.postgresql", "PostgresqlAdapter"),
    "mysql": ("named_params.adapters.mysql", "MysqlAdapter"),
    "oracle": ("named_params.adapters.oracle", "OracleAdapter"),
}


def load_adapter(driver: str) -> Any:
    """Instantiate the statement adapter registered for *driver*."""
    driver_lower = driver.lower()
    if driver_lower not in _ADAPTER_MAP:
        raise UnsupportedDriverError(driver)

    module_path, cls_name = _ADAPTER_MAP[driver_lower]
    module = importlib.import_module(module_path)
    return getattr(module, cls_name)()

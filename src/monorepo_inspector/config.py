"""Environment-driven settings for the command-line entrypoint.

Recognised variables:

- ``MONOREPO_INSPECTOR_LOG_LEVEL``: logging level name (default ``INFO``)
- ``MONOREPO_INSPECTOR_REQUIRE``: exit non-zero when the root is not a monorepo
- ``MONOREPO_INSPECTOR_SCHEMA``: path to an alternative report JSON Schema
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "report.schema.json"

LOG_LEVEL_ENV_VAR = "MONOREPO_INSPECTOR_LOG_LEVEL"
REQUIRE_ENV_VAR = "MONOREPO_INSPECTOR_REQUIRE"
SCHEMA_ENV_VAR = "MONOREPO_INSPECTOR_SCHEMA"

_TRUTHY = {"1", "true", "yes", "y"}
_FALSY = {"", "0", "false", "no", "n"}


class ConfigError(RuntimeError):
    """Raised when an environment setting holds an invalid value."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved runtime settings."""

    log_level: int
    require_monorepo: bool
    schema_path: Path


def _parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ConfigError(f"Invalid {LOG_LEVEL_ENV_VAR} value: {value!r}")
    return level


def _parse_flag(name: str, value: str) -> bool:
    normalised = value.strip().lower()
    if normalised in _TRUTHY:
        return True
    if normalised in _FALSY:
        return False
    raise ConfigError(f"Invalid {name} value: {value!r} (expected a boolean)")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``environ`` (default: ``os.environ``).

    Raises:
        ConfigError: If a variable is set to a value that cannot be interpreted.
    """
    env = os.environ if environ is None else environ

    log_level = _parse_log_level(env.get(LOG_LEVEL_ENV_VAR) or "INFO")
    require = _parse_flag(REQUIRE_ENV_VAR, env.get(REQUIRE_ENV_VAR, ""))

    schema_env = env.get(SCHEMA_ENV_VAR)
    schema_path = Path(schema_env) if schema_env else DEFAULT_SCHEMA_PATH

    return Settings(log_level=log_level, require_monorepo=require, schema_path=schema_path)

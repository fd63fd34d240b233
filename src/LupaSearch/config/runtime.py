"""Runtime domain configuration (logging, process behavior)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from LupaSearch.config.common import ConfigSection

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_LEVEL_ENV = "LUPA_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Store validated runtime behavior settings."""

    level: str = "INFO"
    to_file: bool = False
    dir: str = "log"


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load the optional ``log`` section.

    The ``LUPA_LOG_LEVEL`` environment variable overrides ``log.level``.

    Raises:
        TypeError: If config types are invalid.
    """
    section = ConfigSection.from_root(raw, "log", required=False)
    defaults = RuntimeConfig()
    level = os.environ.get(LOG_LEVEL_ENV) or section.read_str("level", defaults.level)
    return RuntimeConfig(
        level=level.strip().upper(),
        to_file=section.read_bool("to_file", defaults.to_file),
        dir=section.read_str("dir", defaults.dir),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Validate runtime domain constraints.

    Raises:
        ValueError: If values violate runtime constraints.
    """
    if config.level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log.level must be one of {sorted(_ALLOWED_LOG_LEVELS)}")
    if config.to_file and not config.dir:
        raise ValueError("log.dir must not be empty")

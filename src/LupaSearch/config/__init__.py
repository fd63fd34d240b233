from __future__ import annotations

"""Public configuration API for LupaSearch."""

from LupaSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
    parse_yaml,
)
from LupaSearch.config.output import OutputConfig
from LupaSearch.config.runtime import RuntimeConfig
from LupaSearch.config.search import SearchConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "SearchConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
    "parse_yaml",
]

from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from LupaSearch.config.output import OutputConfig, check_output, load_output
from LupaSearch.config.runtime import RuntimeConfig, check_runtime, load_runtime
from LupaSearch.config.search import SearchConfig, check_search, load_search

DEFAULT_CONFIG_PATH = Path("config/default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    search: SearchConfig
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    search = load_search(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_search(search)
    check_output(output)

    return AppConfig(runtime=runtime, search=search, output=output)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(config_path: Path, default_path: Path = DEFAULT_CONFIG_PATH) -> AppConfig:
    """Load config by merging defaults and optional override."""
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    merged = merge_config_dicts(base, override)
    return parse_config_dict(merged)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings.

    ``search.attributes`` is replaced as a whole rather than merged, so an
    override file fully controls which filters run.
    """
    merged = _merge(base, override)
    search_override = override.get("search")
    if isinstance(search_override, Mapping) and "attributes" in search_override:
        merged["search"]["attributes"] = search_override["attributes"]
    return merged


def _merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged

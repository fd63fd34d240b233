"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from LupaSearch.config.common import ConfigSection

_ALLOWED_FORMATS = {"json", "text"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Store validated output settings."""

    format: str = "json"
    indent: int = 2


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the optional ``output`` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = ConfigSection.from_root(raw, "output", required=False)
    defaults = OutputConfig()
    return OutputConfig(
        format=section.read_str("format", defaults.format).lower(),
        indent=section.read_int("indent", defaults.indent),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if config.format not in _ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {sorted(_ALLOWED_FORMATS)}")
    if config.indent < 0:
        raise ValueError("output.indent must not be negative")

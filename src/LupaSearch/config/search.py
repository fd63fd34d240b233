"""Search domain configuration: which search class runs, on what, with what."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from LupaSearch.config.common import ConfigSection
from LupaSearch.utils.loader import split_class_path


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search settings.

    Attributes:
        class_path: Import path of the ``Search`` subclass to run.
        scope: Explicit scope, only meaningful when ``has_scope`` is true.
        has_scope: Whether the config supplies a scope; otherwise the class
            default scope is used.
        attributes: Raw search attributes passed to ``search``.
    """

    class_path: str
    scope: Any = None
    has_scope: bool = False
    attributes: Mapping[str, Any] = field(default_factory=dict)


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = ConfigSection.from_root(raw, "search", required=True)
    return SearchConfig(
        class_path=section.read_str("class"),
        scope=section.raw("scope"),
        has_scope=section.has("scope"),
        attributes=section.read_mapping("attributes", {}),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if not config.class_path:
        raise ValueError("search.class must not be empty")
    try:
        split_class_path(config.class_path)
    except ValueError as error:
        raise ValueError(f"search.class is invalid: {error}") from error

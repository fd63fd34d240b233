"""Plain-text output renderer."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from LupaSearch.core.search import Search


def render_text(value: Any) -> str:
    """Render a search result with one item per line.

    Mappings render as ``key: value`` lines; strings and other scalars render
    as a single line.
    """
    if isinstance(value, Search):
        value = value.results
    if isinstance(value, Mapping):
        return "\n".join(f"{key}: {item}" for key, item in value.items())
    if isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray)):
        return "\n".join(str(item) for item in value)
    return str(value)

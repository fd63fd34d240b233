"""JSON output renderers.

Converts arbitrary search results into JSON-serializable Python objects.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from LupaSearch.core.search import Search


def render_result(value: Any) -> Any:
    """Render a search result into JSON-serializable Python objects.

    Mappings become dicts with string keys, other iterables become lists,
    JSON scalars are kept and anything else is rendered with ``str``. A nested
    ``Search`` is rendered as its results.

    Args:
        value: Search result or any value nested in it.

    Returns:
        A JSON-serializable value.
    """
    if isinstance(value, Search):
        return render_result(value.results)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Mapping):
        return {str(key): render_result(item) for key, item in value.items()}
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, Iterable):
        return [render_result(item) for item in value]
    return str(value)


def dump_result(value: Any, *, indent: int = 2) -> str:
    """Serialize a search result to a JSON string."""
    return json.dumps(render_result(value), ensure_ascii=False, indent=indent or None)

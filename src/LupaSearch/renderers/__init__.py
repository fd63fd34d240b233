"""Renderers turning search results into printable output."""

from __future__ import annotations

from LupaSearch.renderers.console import render_text
from LupaSearch.renderers.json import dump_result, render_result

__all__ = ["render_result", "dump_result", "render_text", "render_output"]


def render_output(value: object, *, output_format: str, indent: int = 2) -> str:
    """Render a search result in the configured output format.

    Raises:
        ValueError: If ``output_format`` is unknown.
    """
    if output_format == "json":
        return dump_result(value, indent=indent)
    if output_format == "text":
        return render_text(value)
    raise ValueError(f"Unsupported output format: {output_format}")

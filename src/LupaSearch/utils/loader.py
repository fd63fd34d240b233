"""Resolve search classes from import paths used in configuration."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from LupaSearch.core.search import Search


def load_search_class(path: str) -> type[Search]:
    """Import a search class from ``"package.module:Class"`` or ``"package.module.Class"``.

    Args:
        path: Import path of the class.

    Returns:
        The imported ``Search`` subclass.

    Raises:
        ValueError: If the path is malformed, cannot be imported, or does not
            name a ``Search`` subclass.
    """
    from LupaSearch.core.search import Search

    module_name, attr_path = split_class_path(path)
    try:
        module = importlib.import_module(module_name)
    except ImportError as error:
        raise ValueError(f"Cannot import search class module {module_name!r}: {error}") from error

    target: object = module
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as error:
            raise ValueError(f"Module {module_name!r} has no attribute {attr_path!r}") from error

    if not (isinstance(target, type) and issubclass(target, Search)):
        raise ValueError(f"{path} is not a Search subclass")
    return target


def split_class_path(path: str) -> tuple[str, str]:
    """Split an import path into module and attribute parts."""
    cleaned = path.strip()
    if ":" in cleaned:
        module_name, _, attr_path = cleaned.partition(":")
    else:
        module_name, _, attr_path = cleaned.rpartition(".")
    if not module_name or not attr_path:
        raise ValueError(f"Search class path must look like 'package.module:Class', got {path!r}")
    return module_name, attr_path

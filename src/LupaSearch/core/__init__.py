"""Core search engine: attribute normalization, operation sets and execution."""

from __future__ import annotations

from LupaSearch.core.attributes import is_blank, normalize
from LupaSearch.core.scope import ScopeMethods
from LupaSearch.core.search import Search

__all__ = ["Search", "ScopeMethods", "normalize", "is_blank"]

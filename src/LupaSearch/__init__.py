"""LupaSearch: composable search objects.

A search class names its filters as operations on a nested ``Scope`` class;
each search attribute supplied by the caller applies the matching operation to
the scope, in order.
"""

from __future__ import annotations

from LupaSearch.core.attributes import is_blank, normalize
from LupaSearch.core.scope import ScopeMethods
from LupaSearch.core.search import Search
from LupaSearch.errors import (
    DefaultAttributesError,
    DefaultScopeError,
    LupaError,
    ResultMethodNotImplementedError,
    ScopeMethodNotImplementedError,
    SearchAttributesError,
)

__version__ = "0.1.0"

__all__ = [
    "Search",
    "ScopeMethods",
    "normalize",
    "is_blank",
    "LupaError",
    "SearchAttributesError",
    "DefaultAttributesError",
    "DefaultScopeError",
    "ScopeMethodNotImplementedError",
    "ResultMethodNotImplementedError",
]

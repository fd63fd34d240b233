"""Error types raised by LupaSearch.

Every error derives from :class:`LupaError` so callers can catch the whole
family at once. Some errors also derive from a builtin exception when the
failure has a natural builtin counterpart.
"""

from __future__ import annotations


class LupaError(Exception):
    """Base class for all LupaSearch errors."""


class SearchAttributesError(LupaError):
    """Search attributes are not a mapping, or were never set."""


class DefaultAttributesError(LupaError, TypeError):
    """``default_search_attributes()`` did not return a mapping."""


class DefaultScopeError(LupaError):
    """A search class has no usable default scope."""


class ScopeMethodNotImplementedError(LupaError, NotImplementedError):
    """A search attribute has no matching operation on the Scope class."""


class ResultMethodNotImplementedError(LupaError, AttributeError):
    """A forwarded attribute is not supported by the search result."""


__all__ = [
    "LupaError",
    "SearchAttributesError",
    "DefaultAttributesError",
    "DefaultScopeError",
    "ScopeMethodNotImplementedError",
    "ResultMethodNotImplementedError",
]

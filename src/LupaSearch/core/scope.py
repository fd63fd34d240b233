"""Operation sets: the named filters a search class can apply to its scope."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, ClassVar, Mapping

from LupaSearch.errors import ScopeMethodNotImplementedError

# Instance state of an operation set; these names can never be operations.
_RESERVED_NAMES = frozenset({"scope", "search_attributes", "operations", "operation_names", "responds_to", "apply"})


class ScopeMethods:
    """Base class for the ``Scope`` class nested in every search class.

    Each public method of a subclass, or of any mixin it inherits from, is an operation named after the search
    attribute that triggers it. An operation takes no arguments, reads
    ``self.scope`` and ``self.search_attributes`` and returns the new scope, or
    ``None`` to leave the scope unchanged.

    The operation registry is built once, when the subclass is defined.

    Example:
        class Scope(ScopeMethods):
            def category(self):
                return [p for p in self.scope if p.category == self.search_attributes["category"]]
    """

    operations: ClassVar[Mapping[str, Callable[..., Any]]] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        registry: dict[str, Callable[..., Any]] = {}
        for klass in reversed(cls.__mro__):
            if klass is ScopeMethods or klass is object:
                continue
            for name, member in vars(klass).items():
                if name.startswith("_") or isinstance(member, (staticmethod, classmethod, property)):
                    continue
                if not callable(member):
                    continue
                if name in _RESERVED_NAMES:
                    raise TypeError(f"{cls.__qualname__}.{name} is reserved and cannot be a search operation")
                registry[name] = member
        cls.operations = MappingProxyType(registry)

    def __init__(self, scope: Any, search_attributes: Mapping[str, Any]) -> None:
        """Bind the operation set to a scope and canonical search attributes.

        Args:
            scope: Current scope value, replaced as operations are applied.
            search_attributes: Canonical search attributes, shared by reference.
        """
        self.scope = scope
        self._search_attributes = MappingProxyType(search_attributes)

    @property
    def search_attributes(self) -> Mapping[str, Any]:
        """Read-only view of the canonical search attributes."""
        return self._search_attributes

    @classmethod
    def operation_names(cls) -> tuple[str, ...]:
        """Return registered operation names in definition order."""
        return tuple(cls.operations)

    @classmethod
    def responds_to(cls, name: str) -> bool:
        return name in cls.operations

    def apply(self, name: str) -> Any:
        """Invoke one operation by name and return its result.

        Raises:
            ScopeMethodNotImplementedError: If no operation is registered as ``name``.
        """
        if not self.responds_to(name):
            raise ScopeMethodNotImplementedError(f"{name} is not defined on {type(self).__qualname__}.")
        return getattr(self, name)()

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__} scope={self.scope!r} search_attributes={dict(self._search_attributes)!r}>"

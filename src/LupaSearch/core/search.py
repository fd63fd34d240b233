"""Search engine: applies named scope operations driven by search attributes."""

from __future__ import annotations

import inspect
from types import MethodType
from typing import Any, Callable, ClassVar, Final, Iterator, Mapping

from LupaSearch.core.attributes import is_mapping_like, normalize
from LupaSearch.core.scope import ScopeMethods
from LupaSearch.errors import (
    DefaultScopeError,
    ResultMethodNotImplementedError,
    ScopeMethodNotImplementedError,
    SearchAttributesError,
)
from LupaSearch.utils.log import log

_UNSET: Final = object()


class _EntryPoint:
    """Method descriptor with separate class-level and instance-level bodies.

    Accessed on an instance it binds the instance function, accessed on the
    class it binds the class function.
    """

    def __init__(self, instance_func: Callable[..., Any]) -> None:
        self._instance_func = instance_func
        self._class_func: Callable[..., Any] | None = None
        self.__doc__ = instance_func.__doc__

    def classmethod(self, class_func: Callable[..., Any]) -> _EntryPoint:
        self._class_func = class_func
        return self

    def __get__(self, instance: Any, owner: type | None = None) -> Callable[..., Any]:
        if instance is None:
            if self._class_func is None:
                raise AttributeError("entry point has no class-level implementation")
            return MethodType(self._class_func, owner)
        return MethodType(self._instance_func, instance)


class Search:
    """Base class for search objects.

    A search object owns a scope and applies the operations of its nested
    ``Scope`` class, one per search attribute, in attribute order. The result
    is computed once, on first access to :attr:`results`.

    Example:
        class ProductSearch(Search):
            class Scope(ScopeMethods):
                def category(self):
                    return self.scope.filter(category=self.search_attributes["category"])

                def in_stock(self):
                    return self.scope.filter(in_stock=self.search_attributes["in_stock"])

            def default_search_attributes(self):
                return {"in_stock": True}

        ProductSearch(products).search({"category": "furniture"}).results

    Unknown public attributes are forwarded to :attr:`results`, and iteration,
    ``len()``, indexing and ``in`` delegate to it as well.
    """

    Scope: ClassVar[type[ScopeMethods]] = ScopeMethods

    _search_attributes: dict[str, Any] | None = None
    _scope_methods: ScopeMethods | None = None
    _results: Any = _UNSET

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        scope_class = cls.Scope
        if not (isinstance(scope_class, type) and issubclass(scope_class, ScopeMethods)):
            raise TypeError(f"{cls.__qualname__}.Scope must be a subclass of ScopeMethods")

    def __init__(self, scope: Any = _UNSET) -> None:
        """Create a search over ``scope``.

        Args:
            scope: Object every operation works on. When omitted,
                :meth:`default_scope` provides it.

        Raises:
            DefaultScopeError: If no scope is given and the class has no default.
        """
        if scope is _UNSET:
            scope = self.default_scope()
        self._scope = scope
        self._search_attributes = None
        self._scope_methods = None
        self._results = _UNSET

    @property
    def scope(self) -> Any:
        """Scope the search was created with."""
        return self._scope

    @property
    def search_attributes(self) -> dict[str, Any] | None:
        """Canonical search attributes, or ``None`` before :meth:`search`."""
        return self._search_attributes

    def default_scope(self) -> Any:
        """Return the scope used when none is passed to the constructor."""
        raise DefaultScopeError(f"{type(self).__qualname__} does not define a default scope.")

    def default_search_attributes(self) -> Mapping[str, Any]:
        """Return attributes applied unless the caller overrides them."""
        return {}

    @_EntryPoint
    def search(self, attributes: Any) -> Search:
        """Set and check search attributes.

        Raw attributes are merged over :meth:`default_search_attributes`,
        canonicalized and pruned of blank values. Every remaining key must name
        an operation of the ``Scope`` class.

        Called on the class instead of an instance, builds an instance with the
        default scope first.

        Args:
            attributes: Mapping of attribute name to value.

        Returns:
            The search itself.

        Raises:
            SearchAttributesError: If ``attributes`` is not a mapping, or results
                were already computed.
            DefaultAttributesError: If default attributes are not a mapping.
            ScopeMethodNotImplementedError: If an attribute has no operation.
        """
        if self._results is not _UNSET:
            raise SearchAttributesError("Search attributes cannot change once results were computed.")
        self._search_attributes = None
        self._scope_methods = None
        if not is_mapping_like(attributes):
            raise SearchAttributesError("Your search params need to be a mapping.")

        search_attributes = normalize(attributes, self.default_search_attributes())
        self._check_method_definitions(search_attributes)
        self._search_attributes = search_attributes
        self._scope_methods = self.Scope(self._scope, search_attributes)
        log.debug("%s configured attributes=%s", type(self).__qualname__, search_attributes)
        return self

    @search.classmethod
    def search(cls, attributes: Any) -> Search:
        _require_default_scope(cls)
        try:
            instance = cls()
        except DefaultScopeError as error:
            raise DefaultScopeError(
                f"You need to define a default scope in order to use {cls.__qualname__}.search."
            ) from error
        return instance.search(attributes)

    @property
    def results(self) -> Any:
        """Final scope after every operation ran; computed once and cached.

        Raises:
            SearchAttributesError: If :meth:`search` was never called.
        """
        if self._results is _UNSET:
            try:
                self._results = self.run()
            except AttributeError as error:
                # Keep the error visible through __getattr__, which Python
                # calls when a property raises AttributeError.
                self.__dict__["_failure"] = error
                raise
        return self._results

    def run(self) -> Any:
        """Apply the operation of every search attribute, in attribute order.

        Every run starts from the scope the search was created with. An
        operation returning ``None`` leaves the scope unchanged; later
        operations see the scope produced by earlier ones.

        Returns:
            The resulting scope.

        Raises:
            SearchAttributesError: If :meth:`search` was never called.
        """
        if self._search_attributes is None or self._scope_methods is None:
            raise SearchAttributesError("You need to specify search attributes.")

        # Each run starts over from the construction scope.
        scope_methods = self.Scope(self._scope, self._search_attributes)
        self._scope_methods = scope_methods
        for name in list(self._search_attributes):
            new_scope = scope_methods.apply(name)
            if new_scope is None:
                log.debug("%s.%s left scope unchanged", type(scope_methods).__qualname__, name)
                continue
            scope_methods.scope = new_scope
            log.debug("%s.%s replaced scope", type(scope_methods).__qualname__, name)
        return scope_methods.scope

    def _check_method_definitions(self, search_attributes: Mapping[str, Any]) -> None:
        for name in search_attributes:
            if isinstance(name, str) and self.Scope.responds_to(name):
                continue
            raise ScopeMethodNotImplementedError(
                f"{name} is not defined on your {type(self).__qualname__}.Scope class."
            )

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(f"{type(self).__qualname__!r} object has no attribute {name!r}")
        failure = self.__dict__.pop("_failure", None)
        if failure is not None:
            raise failure
        results = self.results
        try:
            return getattr(results, name)
        except AttributeError:
            raise ResultMethodNotImplementedError(
                f"The resulting scope does not respond to {name} method."
            ) from None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, key: Any) -> Any:
        return self.results[key]

    def __contains__(self, item: Any) -> bool:
        return item in self.results

    def __bool__(self) -> bool:
        # Truthiness must not trigger execution through __len__.
        return True

    def __repr__(self) -> str:
        state = "resolved" if self._results is not _UNSET else "pending"
        return f"<{type(self).__qualname__} search_attributes={self._search_attributes!r} {state}>"


def _require_default_scope(search_class: type[Search]) -> None:
    """Raise ``DefaultScopeError`` if ``search_class()`` lacks a required argument.

    Only the constructor signature is checked, so a ``TypeError`` raised while
    the constructor runs reaches the caller unchanged.
    """
    try:
        signature = inspect.signature(search_class)
    except (TypeError, ValueError):
        return
    try:
        signature.bind()
    except TypeError as error:
        raise DefaultScopeError(
            f"You need to define a default scope in order to use {search_class.__qualname__}.search."
        ) from error

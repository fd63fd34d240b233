"""Command implementations for LupaSearch CLI.

Encapsulates what each command does, separated from CLI parameter handling
and logging setup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from LupaSearch.config import AppConfig
from LupaSearch.core.search import Search
from LupaSearch.renderers import render_output
from LupaSearch.utils.loader import load_search_class
from LupaSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run the configured search class and render its results.

    Command-line attributes are merged over the configured ones, so they keep
    the position of a configured key they replace.
    """

    config: AppConfig
    extra_attributes: Mapping[str, Any] = field(default_factory=dict)

    def execute(self) -> str:
        """Execute the search.

        Returns:
            Rendered results in the configured output format.
        """
        search_class = load_search_class(self.config.search.class_path)
        attributes = {**self.config.search.attributes, **self.extra_attributes}
        log.info("search class=%s", self.config.search.class_path)
        log.info("attributes=%s", attributes)

        search = self._build(search_class).search(attributes)
        log.debug("normalized attributes=%s", search.search_attributes)
        results = search.results
        return render_output(
            results,
            output_format=self.config.output.format,
            indent=self.config.output.indent,
        )

    def _build(self, search_class: type[Search]) -> Search:
        if self.config.search.has_scope:
            return search_class(self.config.search.scope)
        return search_class()


@dataclass(slots=True)
class OperationsCommand:
    """List the operations of the configured search class."""

    config: AppConfig

    def execute(self) -> str:
        search_class = load_search_class(self.config.search.class_path)
        names = search_class.Scope.operation_names()
        log.debug("%s operations=%s", self.config.search.class_path, names)
        return "\n".join(names)

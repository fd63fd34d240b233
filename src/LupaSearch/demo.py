"""Example search classes over plain number lists.

Used by the default CLI configuration and as a reference for adopters.
"""

from __future__ import annotations

from typing import Any

from LupaSearch.core.scope import ScopeMethods
from LupaSearch.core.search import Search


class ReverseSearch(Search):
    class Scope(ScopeMethods):
        def reverse(self):
            if self.search_attributes["reverse"]:
                return list(reversed(self.scope))
            return None


class NumberSearch(Search):
    """Filter a list of integers.

    Attributes:
        even_numbers: Keep even numbers when true.
        greater_than: Keep numbers strictly greater than the value.
        reverse: Reverse the order when true.
        limit: Keep at most this many numbers.
    """

    class Scope(ScopeMethods):
        def even_numbers(self):
            if self.search_attributes["even_numbers"]:
                return [number for number in self.scope if number % 2 == 0]
            return self.scope

        def greater_than(self):
            threshold = self.search_attributes["greater_than"]
            return [number for number in self.scope if number > threshold]

        def reverse(self):
            return ReverseSearch(self.scope).search({"reverse": self.search_attributes["reverse"]}).results

        def limit(self):
            return list(self.scope)[: int(self.search_attributes["limit"])]

    def default_scope(self) -> Any:
        return [1, 2, 3, 4, 5, 6, 7, 8]

"""Tests for search execution: ordering, validation, memoization, composition."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from LupaSearch import (
    ScopeMethodNotImplementedError,
    ScopeMethods,
    Search,
    SearchAttributesError,
)


class RecordingSearch(Search):
    """Records every operation call on the class-level ``calls`` list."""

    calls: list = []

    class Scope(ScopeMethods):
        def filter1(self):
            RecordingSearch.calls.append(("filter1", list(self.scope)))
            return [item for item in self.scope if item != self.search_attributes["filter1"]]

        def filter2(self):
            RecordingSearch.calls.append(("filter2", list(self.scope)))
            return [item * self.search_attributes["filter2"] for item in self.scope]

        def noop(self):
            RecordingSearch.calls.append(("noop", list(self.scope)))
            return None

        def clear(self):
            RecordingSearch.calls.append(("clear", list(self.scope)))
            return []


class NoneResultSearch(Search):
    calls: list = []

    class Scope(ScopeMethods):
        def nothing(self):
            NoneResultSearch.calls.append("nothing")
            return None


class FailingSearch(Search):
    class Scope(ScopeMethods):
        def boom(self):
            raise RuntimeError("boom failed")

        def missing_attribute(self):
            return self.scope.does_not_exist


class ReverseSearch(Search):
    class Scope(ScopeMethods):
        def reverse(self):
            return list(reversed(self.scope))


class EvenSearch(Search):
    class Scope(ScopeMethods):
        def even(self):
            return [number for number in self.scope if number % 2 == 0]

        def reverse(self):
            return ReverseSearch(self.scope).search({"reverse": True})

    def default_scope(self):
        return [1, 2, 3, 4]



class FlakySearch(Search):
    """Raises from ``boom`` on its first call only."""

    failures_left = 0

    class Scope(ScopeMethods):
        def reverse(self):
            return list(reversed(self.scope))

        def boom(self):
            if FlakySearch.failures_left:
                FlakySearch.failures_left -= 1
                raise RuntimeError("temporary failure")
            return None


class PriceFilters:
    """Plain mixin contributing operations to a Scope class."""

    def price(self):
        return [item for item in self.scope if item <= self.search_attributes["price"]]


class MixinSearch(Search):
    class Scope(PriceFilters, ScopeMethods):
        def reverse(self):
            return list(reversed(self.scope))


class TestRepeatedRuns(unittest.TestCase):
    def test_run_then_results_starts_from_original_scope(self) -> None:
        search = ReverseSearch([1, 2, 3]).search({"reverse": True})
        self.assertEqual(search.run(), [3, 2, 1])
        self.assertEqual(search.results, [3, 2, 1])

    def test_results_after_failed_operation(self) -> None:
        FlakySearch.failures_left = 1
        search = FlakySearch([1, 2, 3]).search({"reverse": True, "boom": True})
        with self.assertRaises(RuntimeError):
            search.results
        self.assertEqual(search.results, [3, 2, 1])


class TestMixinOperations(unittest.TestCase):
    def test_mixin_methods_are_registered(self) -> None:
        self.assertEqual(MixinSearch.Scope.operation_names(), ("price", "reverse"))

    def test_mixin_operation_runs(self) -> None:
        search = MixinSearch([5, 1, 4, 8]).search({"price": 4, "reverse": True})
        self.assertEqual(search.results, [4, 1])


class TestExecutionOrder(unittest.TestCase):
    def setUp(self) -> None:
        RecordingSearch.calls = []

    def test_later_operation_observes_earlier_effect(self) -> None:
        search = RecordingSearch([1, 2, 3]).search({"filter1": 2, "filter2": 10})
        self.assertEqual(search.results, [10, 30])
        self.assertEqual(RecordingSearch.calls, [("filter1", [1, 2, 3]), ("filter2", [1, 3])])

    def test_none_leaves_scope_unchanged(self) -> None:
        search = RecordingSearch([1, 2]).search({"noop": True, "filter2": 2})
        self.assertEqual(search.results, [2, 4])

    def test_empty_replacement_is_kept(self) -> None:
        search = RecordingSearch([1, 2]).search({"clear": True, "noop": True})
        self.assertEqual(search.results, [])
        self.assertEqual(RecordingSearch.calls[-1], ("noop", []))

    def test_defaults_run_first(self) -> None:
        class DefaultedSearch(RecordingSearch):
            def default_search_attributes(self):
                return {"filter2": 3}

        search = DefaultedSearch([1, 2]).search({"filter1": 3})
        self.assertEqual(search.results, [6])
        self.assertEqual([name for name, _ in RecordingSearch.calls], ["filter2", "filter1"])


class TestValidation(unittest.TestCase):
    def setUp(self) -> None:
        RecordingSearch.calls = []

    def test_unknown_key_prevents_all_operations(self) -> None:
        search = RecordingSearch([1, 2, 3])
        with self.assertRaises(ScopeMethodNotImplementedError):
            search.search({"filter1": 2, "unknown": True})
        self.assertEqual(RecordingSearch.calls, [])
        self.assertIsNone(search.search_attributes)
        with self.assertRaises(SearchAttributesError):
            search.results

    def test_blank_unknown_key_is_ignored(self) -> None:
        search = RecordingSearch([1, 2]).search({"unknown": "", "filter2": 2})
        self.assertEqual(search.results, [2, 4])

    def test_non_string_key_raises(self) -> None:
        with self.assertRaises(ScopeMethodNotImplementedError):
            RecordingSearch([1]).search({1: True})

    def test_undecodable_bytes_key_raises(self) -> None:
        with self.assertRaises(ScopeMethodNotImplementedError):
            RecordingSearch([1]).search({b"\xff": True})

    def test_search_after_results_raises(self) -> None:
        search = RecordingSearch([1]).search({})
        search.results
        with self.assertRaises(SearchAttributesError):
            search.search({"filter2": 2})

    def test_search_can_be_reconfigured_before_results(self) -> None:
        search = RecordingSearch([1, 2]).search({"filter1": 1})
        search.search({"filter2": 5})
        self.assertEqual(search.results, [5, 10])

    def test_run_before_search_raises(self) -> None:
        with self.assertRaises(SearchAttributesError):
            RecordingSearch([1]).run()


class TestMemoization(unittest.TestCase):
    def setUp(self) -> None:
        RecordingSearch.calls = []
        NoneResultSearch.calls = []

    def test_results_computed_once(self) -> None:
        search = RecordingSearch([1, 2]).search({"filter2": 2})
        first = search.results
        second = search.results
        self.assertIs(first, second)
        self.assertEqual(len(RecordingSearch.calls), 1)

    def test_forwarding_uses_cached_results(self) -> None:
        search = RecordingSearch([1, 2]).search({"filter2": 2})
        search.index(4)
        search.count(2)
        list(search)
        self.assertEqual(len(RecordingSearch.calls), 1)

    def test_none_result_is_cached(self) -> None:
        search = NoneResultSearch(None).search({"nothing": True})
        self.assertIsNone(search.results)
        self.assertIsNone(search.results)
        self.assertEqual(NoneResultSearch.calls, ["nothing"])


class TestErrorPropagation(unittest.TestCase):
    def test_operation_error_propagates_unwrapped(self) -> None:
        search = FailingSearch([1]).search({"boom": True})
        with self.assertRaisesRegex(RuntimeError, "boom failed"):
            search.results

    def test_operation_attribute_error_propagates_unwrapped(self) -> None:
        search = FailingSearch([1]).search({"missing_attribute": True})
        with self.assertRaisesRegex(AttributeError, "does_not_exist"):
            search.results


class TestComposition(unittest.TestCase):
    def test_operation_may_return_another_search(self) -> None:
        results = EvenSearch.search({"even": True, "reverse": True}).results
        self.assertIsInstance(results, ReverseSearch)
        self.assertEqual(results[0], 4)
        self.assertEqual(list(results), [4, 2])


class TestScopeClassDefinition(unittest.TestCase):
    def test_registry_lists_public_methods_in_order(self) -> None:
        self.assertEqual(RecordingSearch.Scope.operation_names(), ("filter1", "filter2", "noop", "clear"))

    def test_private_helpers_are_not_operations(self) -> None:
        class HelperScope(ScopeMethods):
            def _helper(self):
                return None

            @staticmethod
            def util():
                return None

            def visible(self):
                return self._helper()

        self.assertEqual(HelperScope.operation_names(), ("visible",))

    def test_subclass_inherits_operations(self) -> None:
        class ExtendedScope(RecordingSearch.Scope):
            def extra(self):
                return None

        self.assertTrue(ExtendedScope.responds_to("filter1"))
        self.assertTrue(ExtendedScope.responds_to("extra"))
        self.assertFalse(RecordingSearch.Scope.responds_to("extra"))

    def test_reserved_name_is_rejected(self) -> None:
        with self.assertRaises(TypeError):

            class BadScope(ScopeMethods):
                def scope(self):
                    return None

    def test_scope_must_subclass_scope_methods(self) -> None:
        with self.assertRaises(TypeError):

            class BadSearch(Search):
                class Scope:
                    def reverse(self):
                        return None

    def test_search_attributes_are_read_only(self) -> None:
        scope_methods = ReverseSearch.Scope([1], {"reverse": True})
        with self.assertRaises(TypeError):
            scope_methods.search_attributes["reverse"] = False

    def test_apply_unknown_operation_raises(self) -> None:
        scope_methods = ReverseSearch.Scope([1], {})
        with self.assertRaises(ScopeMethodNotImplementedError):
            scope_methods.apply("missing")


if __name__ == "__main__":
    unittest.main()

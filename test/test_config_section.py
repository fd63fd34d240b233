"""Tests for typed config section access."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from LupaSearch.config.common import ConfigSection


class TestConfigSection(unittest.TestCase):
    def test_missing_optional_section_is_empty(self) -> None:
        section = ConfigSection.from_root({}, "output", required=False)
        self.assertEqual(section.read_int("indent", 2), 2)
        self.assertFalse(section.has("indent"))

    def test_missing_required_section(self) -> None:
        with self.assertRaisesRegex(ValueError, "Missing required config: search"):
            ConfigSection.from_root({}, "search", required=True)

    def test_non_mapping_section(self) -> None:
        with self.assertRaisesRegex(TypeError, "^log must be an object$"):
            ConfigSection.from_root({"log": "INFO"}, "log", required=False)

    def test_required_field_error_names_full_key(self) -> None:
        section = ConfigSection.from_root({"search": {}}, "search", required=True)
        with self.assertRaisesRegex(ValueError, "search\\.class"):
            section.read_str("class")

    def test_null_field_uses_default(self) -> None:
        section = ConfigSection.from_root({"search": {"attributes": None}}, "search", required=True)
        self.assertEqual(section.read_mapping("attributes", {}), {})
        self.assertTrue(section.has("attributes"))

    def test_strings_are_stripped(self) -> None:
        section = ConfigSection.from_root({"log": {"dir": "  logs "}}, "log", required=False)
        self.assertEqual(section.read_str("dir"), "logs")

    def test_bool_is_not_an_integer(self) -> None:
        section = ConfigSection.from_root({"output": {"indent": True}}, "output", required=False)
        with self.assertRaisesRegex(TypeError, "output\\.indent must be an integer"):
            section.read_int("indent")

    def test_mapping_is_copied(self) -> None:
        attributes = {"even_numbers": True}
        section = ConfigSection.from_root({"search": {"attributes": attributes}}, "search", required=True)
        copied = section.read_mapping("attributes")
        copied["reverse"] = True
        self.assertEqual(attributes, {"even_numbers": True})

    def test_raw_skips_type_checks(self) -> None:
        section = ConfigSection.from_root({"search": {"scope": [1, 2]}}, "search", required=True)
        self.assertEqual(section.raw("scope"), [1, 2])
        self.assertIsNone(section.raw("missing"))


if __name__ == "__main__":
    unittest.main()

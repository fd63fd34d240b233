"""Typed access to one section of the YAML config.

Every error message carries the full dotted key (``search.class``), so a bad
config file can be fixed without reading the loader code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Mapping

_REQUIRED: Final = object()

_TYPE_LABELS: Final[dict[type, str]] = {
    str: "a string",
    bool: "a boolean",
    int: "an integer",
    Mapping: "an object",
}


@dataclass(frozen=True, slots=True)
class ConfigSection:
    """A top-level config mapping together with its key.

    Attributes:
        key: Section name in the root mapping, used as error prefix.
        values: Raw section mapping; empty for missing optional sections.
    """

    key: str
    values: Mapping[str, Any]

    @classmethod
    def from_root(cls, raw: Mapping[str, Any], key: str, *, required: bool) -> ConfigSection:
        """Pick section ``key`` out of the root config.

        Raises:
            ValueError: If the section is required but missing.
            TypeError: If the section is not a mapping.
        """
        section = raw.get(key)
        if section is None:
            if required:
                raise ValueError(f"Missing required config: {key}")
            return cls(key=key, values={})
        if not isinstance(section, Mapping):
            raise TypeError(f"{key} must be an object")
        return cls(key=key, values=section)

    def path(self, field: str) -> str:
        return f"{self.key}.{field}"

    def has(self, field: str) -> bool:
        return field in self.values

    def raw(self, field: str, default: Any = None) -> Any:
        """Return a field without type checking."""
        return self.values.get(field, default)

    def read(self, field: str, expected: type, default: Any = _REQUIRED) -> Any:
        """Return a field checked against ``expected``.

        ``bool`` never passes as ``int``. A missing field falls back to
        ``default``; without one it is an error. An explicit ``null`` counts as
        missing.

        Raises:
            ValueError: If the field is required but missing.
            TypeError: If the value has the wrong type.
        """
        value = self.values.get(field)
        if value is None:
            if default is _REQUIRED:
                raise ValueError(f"Missing required config: {self.path(field)}")
            return default
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise TypeError(f"{self.path(field)} must be {_TYPE_LABELS.get(expected, expected.__name__)}")
        return value

    def read_str(self, field: str, default: Any = _REQUIRED) -> str:
        value = self.read(field, str, default)
        return value.strip() if isinstance(value, str) else value

    def read_bool(self, field: str, default: Any = _REQUIRED) -> bool:
        return self.read(field, bool, default)

    def read_int(self, field: str, default: Any = _REQUIRED) -> int:
        return self.read(field, int, default)

    def read_mapping(self, field: str, default: Any = _REQUIRED) -> dict[str, Any]:
        """Return a shallow copy of a mapping field."""
        value = self.read(field, Mapping, default)
        return dict(value) if isinstance(value, Mapping) else value

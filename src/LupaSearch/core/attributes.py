"""Search attribute normalization.

Turns raw, caller-supplied filter attributes into the canonical mapping the
search engine executes:

1. defaults are merged under the caller values (shallow, caller wins),
2. string-like keys are canonicalized recursively,
3. blank values are pruned recursively, bottom-up.

Attribute values form an untyped tree. Each node is one of three kinds
(scalar, sequence, mapping) and every step below has exactly one rule per kind.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final, Mapping

from LupaSearch.errors import DefaultAttributesError, SearchAttributesError

_SCALAR: Final = "scalar"
_SEQUENCE: Final = "sequence"
_MAPPING: Final = "mapping"


def normalize(raw_attributes: Any, default_attributes: Any) -> dict[Any, Any]:
    """Build canonical search attributes from raw and default attributes.

    Args:
        raw_attributes: Caller-supplied attributes, must be mapping-like.
        default_attributes: Class-declared default attributes, must be a mapping.

    Returns:
        A new insertion-ordered dict with canonical keys and no blank values.

    Raises:
        SearchAttributesError: If ``raw_attributes`` is not mapping-like.
        DefaultAttributesError: If ``default_attributes`` is not a mapping.
    """
    merged = merge_attributes(raw_attributes, default_attributes)
    return prune_blank(canonicalize_keys(merged))


def is_mapping_like(value: Any) -> bool:
    """Return whether ``value`` supports key/value access like a mapping."""
    if isinstance(value, Mapping):
        return True
    return callable(getattr(value, "keys", None)) and hasattr(value, "__getitem__")


def merge_attributes(raw_attributes: Any, default_attributes: Any) -> dict[Any, Any]:
    """Shallow-merge raw attributes over default attributes.

    Keys of the defaults keep their order; keys only present in the raw
    attributes follow in their own order. Values are not merged recursively.
    """
    if not is_mapping_like(raw_attributes):
        raise SearchAttributesError(
            f"search params must be a mapping, got {type(raw_attributes).__name__}"
        )
    if not isinstance(default_attributes, Mapping):
        raise DefaultAttributesError(
            f"default_search_attributes must return a mapping, got {type(default_attributes).__name__}"
        )

    merged: dict[Any, Any] = dict(default_attributes)
    for key in raw_attributes.keys():
        merged[key] = raw_attributes[key]
    return merged


def canonical_key(key: Any) -> Any:
    """Return the canonical form of an attribute key.

    ``str`` keys are kept, ``bytes`` keys are decoded as UTF-8 (undecodable
    ones stay ``bytes``) and string-valued enum members are replaced by their
    value. Other keys are returned as-is.
    """
    if isinstance(key, Enum):
        return key.value if isinstance(key.value, str) else key
    if isinstance(key, str):
        return str(key)
    if isinstance(key, (bytes, bytearray)):
        try:
            return bytes(key).decode("utf-8")
        except UnicodeDecodeError:
            return bytes(key)
    return key


def canonicalize_keys(value: Any) -> Any:
    """Canonicalize mapping keys at every depth of ``value``.

    When two keys of one mapping share a canonical form, the later value wins
    and the earlier position is kept.
    """
    kind = _kind_of(value)
    if kind == _MAPPING:
        return {canonical_key(key): canonicalize_keys(item) for key, item in value.items()}
    if kind == _SEQUENCE:
        return _rebuild_sequence(value, [canonicalize_keys(item) for item in value])
    return value


def prune_blank(value: Any) -> Any:
    """Remove blank entries from ``value`` at every depth.

    Children are pruned before their parent is checked, so a mapping or
    sequence that only held blank values is removed from its parent as well.
    """
    kind = _kind_of(value)
    if kind == _MAPPING:
        pruned: dict[Any, Any] = {}
        for key, item in value.items():
            child = prune_blank(item)
            if not _is_blank_node(child):
                pruned[key] = child
        return pruned
    if kind == _SEQUENCE:
        children = (prune_blank(item) for item in value)
        return _rebuild_sequence(value, [child for child in children if not _is_blank_node(child)])
    return value


def is_blank(value: Any) -> bool:
    """Return whether ``value`` is blank once its children are pruned.

    A scalar is blank when it is ``None`` or its string form is empty after
    stripping whitespace. Mappings and sequences are blank when empty.
    """
    return _is_blank_node(prune_blank(value))


def _is_blank_node(value: Any) -> bool:
    kind = _kind_of(value)
    if kind != _SCALAR:
        return len(value) == 0
    if value is None:
        return True
    if isinstance(value, (bytes, bytearray)):
        return not bytes(value).strip()
    return not str(value).strip()


def _kind_of(value: Any) -> str:
    if isinstance(value, Mapping):
        return _MAPPING
    if isinstance(value, (list, tuple)):
        return _SEQUENCE
    return _SCALAR


def _rebuild_sequence(original: Any, items: list[Any]) -> list[Any] | tuple[Any, ...]:
    # Tuples stay tuples, every other sequence becomes a list.
    if isinstance(original, tuple):
        return tuple(items)
    return items

"""Name extraction: turn a caller's item into the string the engines cluster on."""

from collections.abc import Mapping
from typing import Any, Callable

DEFAULT_NAME_FIELD = "name"


class NameExtractionError(ValueError):
    """Raised when an item carries no usable name."""


def _lookup(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        if key not in item:
            raise NameExtractionError(f"item has no {key!r} field: {item!r}")
        return item[key]
    if hasattr(item, key):
        return getattr(item, key)
    raise NameExtractionError(f"item has no {key!r} attribute: {item!r}")


def name_of(item: Any) -> str:
    """
    Default get_name. Strings are their own name; mappings use item["name"];
    objects with a .name attribute use it; anything else falls back to str(item).
    """
    if isinstance(item, str):
        return item
    if isinstance(item, Mapping) or hasattr(item, DEFAULT_NAME_FIELD):
        return str(_lookup(item, DEFAULT_NAME_FIELD))
    return str(item)


def key_getter(key: str = DEFAULT_NAME_FIELD) -> Callable[[Any], str]:
    """Return a get_name that reads item[key] (mappings) or item.<key>; plain strings pass through."""

    def get_name(item: Any) -> str:
        if isinstance(item, str):
            return item
        return str(_lookup(item, key))

    return get_name

"""Small pure helpers shared by fixtures and page objects."""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping


def deep_merge(base: Mapping[str, Any], update: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``update`` merged in recursively.

    Nested mappings are merged key by key; any other value in ``update``
    replaces the one in ``base``. Neither argument is modified.
    """
    merged: Dict[str, Any] = deepcopy(dict(base))
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged


def empty_object_values(value: Any) -> Any:
    """Same shape as ``value`` with every leaf replaced by ``""``."""
    if isinstance(value, Mapping):
        return {key: empty_object_values(item) for key, item in value.items()}
    return ""


def is_truthy_option(value: Any) -> bool:
    # WordPress stores switches as "on"/"off" strings
    if isinstance(value, str):
        return value.lower() in {"on", "yes", "true", "1"}
    return bool(value)

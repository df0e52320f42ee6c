"""Layering of user configuration over the built-in defaults."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of base with update layered on top.

    Sections present in both as mappings are combined key by key; any other
    value in update, lists included, wins outright.
    """
    merged = dict(base)
    for key, override in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(override, dict):
            merged[key] = deep_merge(current, override)
        else:
            merged[key] = override
    return merged

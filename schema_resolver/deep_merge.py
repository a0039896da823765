"""Logic for deep merging configuration dictionaries."""

from collections.abc import Collection
from typing import Any

ADDITIVE_KEYS = frozenset({"allowed_schemes"})


def deep_merge(
    base: dict[str, Any],
    update: dict[str, Any],
    additive_keys: Collection[str] = ADDITIVE_KEYS,
) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, except under `additive_keys`,
      where both lists are unioned and sorted.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value, additive_keys)
        elif (
            key in additive_keys
            and isinstance(value, list)
            and isinstance(current, list)
        ):
            result[key] = sorted({*current, *value})
        else:
            result[key] = value
    return result

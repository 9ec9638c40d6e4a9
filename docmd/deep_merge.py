"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Skip-rule lists extend the built-in tables instead of replacing them.
ADDITIVE_KEYS = frozenset({"tags", "ids", "class_substrings"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, except the skip-rule lists,
      which are merged additively and deduplicated.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif key in ADDITIVE_KEYS and isinstance(current, list):
            extra = value if isinstance(value, list) else [value]
            result[key] = sorted({*current, *extra})
        else:
            result[key] = value
    return result

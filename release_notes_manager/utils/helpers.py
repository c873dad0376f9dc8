"""General utility functions and helper classes."""

from typing import Any, Iterable


def unique_in_order(values: Iterable[str]) -> list[str]:
    """Remove duplicates from values while preserving the order of first appearance."""
    seen: set[str] = set()
    unique_values: list[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique_values.append(value)
    return unique_values


def get_field(data: Any, name: str, default: Any = None) -> Any:
    """Read a field from either a dictionary or an API model object."""
    if isinstance(data, dict):
        return data.get(name, default)
    return getattr(data, name, default)


def replace_first(value: str, old: str, new: str) -> str:
    """Replace the first literal occurrence of old in value with new.

    An empty search string leaves the value untouched.
    """
    if not old:
        return value
    return value.replace(old, new, 1)

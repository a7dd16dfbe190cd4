"""Deep merge used for every configuration layer in suitemap.

Global configuration layers and suite/local markers are combined with the same
rules so a key behaves identically wherever it is overridden:

- mappings merge recursively;
- lists replace the inherited list, unless the first element is ``"+"``
  (append) or ``"="`` (explicit replace);
- anything else replaces the inherited value.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` onto ``base`` without mutating either.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if key in result:
            if isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = deep_merge(result[key], value)
            elif isinstance(result[key], list) and isinstance(value, list):
                result[key] = merge_arrays(result[key], value)
            else:
                result[key] = value
        else:
            result[key] = strip_merge_marker(value) if isinstance(value, list) else value
    return result


def merge_arrays(base: List[Any], override: List[Any]) -> List[Any]:
    """Merge a list override onto an inherited list.

    Example:
        >>> merge_arrays([1, 2], [3, 4])
        [3, 4]
        >>> merge_arrays([1, 2], ["+", 3, 4])
        [1, 2, 3, 4]
        >>> merge_arrays([1, 2], ["=", 3, 4])
        [3, 4]
    """
    if not override:
        return list(base)
    first = override[0]
    if isinstance(first, str):
        if first == "+":
            return [*base, *override[1:]]
        if first == "=":
            return list(override[1:])
    return list(override)


def strip_merge_marker(values: List[Any]) -> List[Any]:
    """Drop a leading ``"+"``/``"="`` marker from a list with nothing to merge into."""
    if values and isinstance(values[0], str) and values[0] in ("+", "="):
        return list(values[1:])
    return list(values)


__all__ = ["deep_merge", "merge_arrays", "strip_merge_marker"]

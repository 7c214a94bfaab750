"""Helpers for inspecting and combining nested translation dictionaries.

Dictionaries are plain nested dicts as loaded from YAML:
{"dashboard": {"title": "Dashboard", "stats": {"occupied": "Occupied"}}}.
Keys are addressed with dot notation ("dashboard.stats.occupied").
"""

import copy
from typing import Any, Dict, Iterable, Optional

Dictionary = Dict[str, Any]


def get_nested_value(dictionary: Dictionary, key: str) -> Optional[Any]:
    """Walk a dotted key through a nested dictionary.

    Args:
        dictionary: Nested translation dictionary.
        key: Dotted key (e.g., "dashboard.title").

    Returns:
        The value at the key, or None if any segment is missing.
    """
    current: Any = dictionary
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def get_translation_keys(dictionary: Dictionary, prefix: str = "") -> list[str]:
    """List the dotted keys of every leaf in a dictionary.

    Args:
        dictionary: Nested translation dictionary.
        prefix: Prefix prepended to every key.

    Returns:
        Dotted keys in insertion order.
    """
    keys = []
    for key, value in dictionary.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            keys.extend(get_translation_keys(value, full_key))
        else:
            keys.append(full_key)
    return keys


def validate_dictionary(dictionary: Dictionary, required_keys: Iterable[str]) -> list[str]:
    """Return the required keys that the dictionary does not define."""
    return [key for key in required_keys if get_nested_value(dictionary, key) is None]


def compare_dictionaries(base: Dictionary, target: Dictionary) -> Dict[str, list[str]]:
    """Compare a translated dictionary against the base one.

    Args:
        base: Reference dictionary (usually the default locale).
        target: Dictionary to check.

    Returns:
        {"missing": keys in base but not target,
         "extra": keys in target but not base}
    """
    base_keys = get_translation_keys(base)
    target_keys = get_translation_keys(target)
    target_set = set(target_keys)
    base_set = set(base_keys)
    return {
        "missing": [key for key in base_keys if key not in target_set],
        "extra": [key for key in target_keys if key not in base_set],
    }


def merge_dictionaries(base: Dictionary, override: Dictionary) -> Dictionary:
    """Deep-merge two dictionaries without mutating either.

    Values from `override` win; nested dicts are merged recursively, so a
    partial translation keeps the base strings it does not redefine.
    """
    result = copy.deepcopy(base)
    _merge_into(result, override)
    return result


def _merge_into(target: Dictionary, source: Dictionary) -> None:
    for key, value in source.items():
        if isinstance(value, dict):
            if not isinstance(target.get(key), dict):
                target[key] = {}
            _merge_into(target[key], value)
        else:
            target[key] = copy.deepcopy(value)

"""Functions to transform nested dicts and lists.

Every ``*_keys`` walker renames dict keys and leaves values alone: lists keep
their order, scalars pass through and ``None`` stays ``None``.
"""

import re
from enum import Enum

from pydantic.alias_generators import to_pascal, to_snake

_NON_IDENTIFIER = re.compile(r"\W")


def underscore(key: str) -> str:
    """Convert a camelCase or PascalCase key to snake_case.

    Examples:
        >>> underscore("UserAttributes")
        'user_attributes'
        >>> underscore("MFAOptions")
        'mfa_options'
    """
    return to_snake(key)


def camelize(name: str) -> str:
    """Convert a snake_case name to the PascalCase used by Cognito fields."""
    return to_pascal(name)


def atomize_key(key):
    """Turn a string key into a valid Python identifier."""
    if not isinstance(key, str):
        return key
    key = _NON_IDENTIFIER.sub("_", key)
    if key[:1].isdigit():
        key = "_" + key
    return key


def stringify_key(key) -> str:
    """Turn a symbol-like key (enum member or other object) into a string."""
    if isinstance(key, Enum):
        return key.value if isinstance(key.value, str) else key.name
    return str(key)


def _walk_keys(obj, convert):
    if isinstance(obj, dict):
        return {convert(k): _walk_keys(v, convert) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_walk_keys(item, convert) for item in obj]
    return obj


def underscore_keys(obj):
    """Convert dict string camelCase keys to underscore_keys."""
    return _walk_keys(obj, lambda k: underscore(k) if isinstance(k, str) else k)


def atomize_keys(obj):
    """Convert dict string keys to identifier keys."""
    return _walk_keys(obj, atomize_key)


def stringify_keys(obj):
    """Convert dict keys of any type to plain strings."""
    return _walk_keys(obj, stringify_key)


def deep_merge(left: dict, right: dict) -> dict:
    """Deep merge two dicts.

    When a key exists in both and both values are dicts they are merged
    recursively; otherwise the value on the right wins.
    """
    merged = dict(left)
    for key, value in right.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged

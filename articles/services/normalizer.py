"""Key normalization: snake_case input keys become camelCase."""

from __future__ import annotations

import re
from typing import Any

_SNAKE_SEGMENT = re.compile(r"_([a-z])")


def to_camel_case(key: str) -> str:
    return _SNAKE_SEGMENT.sub(lambda m: m.group(1).upper(), key)


def normalize_keys(value: Any) -> Any:
    """Recursively rewrite mapping keys to camelCase.

    Lists and tuples are normalized element-wise and keep their type;
    scalars pass through unchanged. Non-string keys are left as they are.
    """
    if isinstance(value, dict):
        return {
            (to_camel_case(key) if isinstance(key, str) else key): normalize_keys(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [normalize_keys(item) for item in value]
    if isinstance(value, tuple):
        return tuple(normalize_keys(item) for item in value)
    return value

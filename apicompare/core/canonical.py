"""Deterministic JSON canonicalization and equality helpers."""

from __future__ import annotations

import json
from typing import Any

PRETTY_INDENT = 2


def canonicalize(value: Any) -> Any:
    """Return a copy with every mapping's keys sorted; sequence order is kept."""
    if isinstance(value, dict):
        return {
            str(key): canonicalize(value[key])
            for key in sorted(value.keys(), key=lambda raw: str(raw))
        }
    if isinstance(value, (list, tuple)):
        return [canonicalize(item) for item in value]
    return value


def compact_json(value: Any) -> str:
    """Serialize without whitespace, preserving key order."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def pretty_json(value: Any, *, sort_keys: bool = False) -> str:
    """Pretty-print with a fixed indent, falling back to `str()` when not serializable."""
    source = canonicalize(value) if sort_keys else value
    try:
        return json.dumps(source, ensure_ascii=False, indent=PRETTY_INDENT)
    except (TypeError, ValueError):
        return str(value)


def strict_json_equal(left: Any, right: Any) -> bool:
    """Equality by serialized text, so key order is significant."""
    try:
        return compact_json(left) == compact_json(right)
    except (TypeError, ValueError):
        return str(left) == str(right)


def json_equal(left: Any, right: Any) -> bool:
    """Order-independent deep equality for mappings; sequences compare positionally."""
    if isinstance(left, dict):
        if not isinstance(right, dict) or len(left) != len(right):
            return False
        for key, left_value in left.items():
            if key not in right:
                return False
            if not json_equal(left_value, right[key]):
                return False
        return True

    if isinstance(left, list):
        if not isinstance(right, list) or len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    # JSON booleans are not numbers even though Python treats True == 1.
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right

    return type(left) is type(right) and left == right

"""Helpers for reading untyped (TOML/JSON) option tables.

Option keys may be spelled in snake_case (`auth_token`) or in the camelCase
used by the JavaScript wrapper (`authToken`); `first_of` accepts both.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def first_of(table: Mapping[str, object], *keys: str) -> object | None:
    """Return the value of the first key present in table."""
    for key in keys:
        if key in table:
            return table[key]
    return None


def get_str(table: Mapping[str, object], *keys: str) -> str | None:
    """Get a string value, stripping whitespace.

    Returns None if missing, not a str, or empty after stripping.
    """
    value = first_of(table, *keys)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_bool(table: Mapping[str, object], *keys: str) -> bool | None:
    value = first_of(table, *keys)
    return value if isinstance(value, bool) else None


def get_str_table(table: Mapping[str, object], *keys: str) -> dict[str, str] | None:
    """Get a nested table whose values are all strings (e.g. HTTP headers).

    Non-string values are converted with str(); key order is preserved.
    """
    nested = as_str_dict(first_of(table, *keys))
    if nested is None:
        return None
    return {k: v if isinstance(v, str) else str(v) for k, v in nested.items()}

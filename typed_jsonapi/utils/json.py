"""Helpers for the JSON value substrate shared by every model."""

from __future__ import annotations

from typing import Any, Mapping


def _sort_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _sort_value(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [_sort_value(item) for item in value]
    return value


def sort_keys(mapping: Mapping[str, Any], *, deep: bool = False) -> dict[str, Any]:
    """Return a copy of ``mapping`` with its keys in sorted order.

    With ``deep`` the nested objects of JSON values are sorted as well, so the
    result serializes the same way an ordered-map JSON value would.
    """
    if deep:
        return _sort_value(mapping)
    return {key: mapping[key] for key in sorted(mapping)}


def to_mapping(value: Any) -> dict[str, Any]:
    """Re-interpret a dumped JSON value as a flat attribute mapping."""
    if not isinstance(value, Mapping):
        raise TypeError(
            f"Attributes must serialize to an object, not {type(value).__name__}."
        )
    return sort_keys(value, deep=True)

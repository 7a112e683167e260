"""Utility helpers for JSON values."""

from .json import sort_keys, to_mapping

__all__ = ["sort_keys", "to_mapping"]

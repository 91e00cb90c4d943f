"""Null-stripping for maps headed to the wire."""

from collections.abc import Mapping
from typing import Any, Dict, Optional


def safe_map(original: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Return a copy of ``original`` without ``None`` values.

    Nested mappings are sanitized recursively. ``None`` yields an empty dict.
    """
    if original is None:
        return {}
    return {
        key: safe_map(value) if isinstance(value, Mapping) else value
        for key, value in original.items()
        if value is not None
    }

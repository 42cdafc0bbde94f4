"""
Utilities for form-js style schemas.

Components are plain dicts; containers hold children under ``components``.
"""

from __future__ import annotations

from typing import Any

# Pure display types: never emitted as field keys, but may group children
DECORATIVE_TYPES = frozenset({"text", "button"})


def index_by_key(
    components: list[dict[str, Any]] | None,
    index: dict[str, dict[str, Any]] | None = None,
) -> dict[str, dict[str, Any]]:
    """
    Build a map of components by ``key`` (recursively).

    Traversal is pre-order: a component, then its children, siblings left
    to right. On duplicate keys the last visited component wins.
    """
    if index is None:
        index = {}
    for component in components or []:
        if not isinstance(component, dict):
            continue
        key = component.get("key")
        if key and not isinstance(key, (list, dict)):
            index[key] = component
        children = component.get("components")
        if isinstance(children, list):
            index_by_key(children, index)
    return index


def extract_field_keys(components: list[dict[str, Any]] | None) -> list[str]:
    """Extract input field keys in pre-order, skipping text/button components."""
    keys: list[str] = []
    _collect_keys(components or [], keys)
    return keys


def _collect_keys(components: list[dict[str, Any]], keys: list[str]) -> None:
    for component in components:
        if not isinstance(component, dict):
            continue
        key = component.get("key")
        if component.get("type") not in DECORATIVE_TYPES and key and isinstance(key, str):
            keys.append(key)
        children = component.get("components")
        if isinstance(children, list):
            _collect_keys(children, keys)

"""Diff tree construction for gendiff."""

from __future__ import annotations

from typing import Any

from .models import DiffNode, NodeType
from .utils import is_mapping, values_equal


def build_diff_tree(old: dict, new: dict) -> tuple[DiffNode, ...]:
    """
    Recursively compare two mappings and build an ordered diff tree.

    Keys from both sides are merged and sorted at every level, so sibling
    nodes always come out in ascending key order. A key holding a mapping
    on both sides becomes a NESTED node whose children are compared one
    level down; anything else is compared as an opaque value.

    Args:
        old: The baseline mapping
        new: The mapping to compare against the baseline

    Returns:
        Tuple of DiffNode, one per key present on either side
    """
    all_keys = sorted(set(old.keys()) | set(new.keys()))
    return tuple(_diff_key(key, old, new) for key in all_keys)


def _diff_key(key: str, old: dict, new: dict) -> DiffNode:
    """Classify a single key."""
    if key not in new:
        return DiffNode(key=key, type=NodeType.REMOVED, old_value=old[key])

    if key not in old:
        return DiffNode(key=key, type=NodeType.ADDED, new_value=new[key])

    old_value = old[key]
    new_value = new[key]

    if is_mapping(old_value) and is_mapping(new_value):
        return DiffNode(
            key=key,
            type=NodeType.NESTED,
            children=build_diff_tree(old_value, new_value)
        )

    return _diff_values(key, old_value, new_value)


def _diff_values(key: str, old_value: Any, new_value: Any) -> DiffNode:
    """Compare two values that are not both mappings."""
    if values_equal(old_value, new_value):
        return DiffNode(key=key, type=NodeType.UNCHANGED, old_value=old_value)

    return DiffNode(
        key=key,
        type=NodeType.CHANGED,
        old_value=old_value,
        new_value=new_value
    )

"""Flat, one-line-per-change renderer using dotted property paths."""

from __future__ import annotations

from typing import Any, Sequence

from ..models import DiffNode, NodeType
from ..utils import build_path, is_mapping, to_json

COMPLEX_VALUE = "[complex value]"


def render_plain(nodes: Sequence[DiffNode]) -> str:
    """
    Render a diff tree as plain sentences, one per changed property.

    Unchanged properties produce no output; nested objects contribute only
    through their children, addressed by full dotted path
    (e.g. ``common.setting6.ops``).
    """
    return "\n".join(_render_nodes(nodes, ""))


def _render_nodes(nodes: Sequence[DiffNode], parent_path: str) -> list[str]:
    lines: list[str] = []

    for node in nodes:
        path = build_path(parent_path, node.key)

        if node.type == NodeType.ADDED:
            lines.append(
                f"Property '{path}' was added with value: {format_value(node.new_value)}"
            )
        elif node.type == NodeType.REMOVED:
            lines.append(f"Property '{path}' was removed")
        elif node.type == NodeType.CHANGED:
            lines.append(
                f"Property '{path}' was updated. "
                f"From {format_value(node.old_value)} to {format_value(node.new_value)}"
            )
        elif node.type == NodeType.NESTED:
            lines.extend(_render_nodes(node.children, path))

    return lines


def format_value(value: Any) -> str:
    if is_mapping(value):
        return COMPLEX_VALUE

    if value is None:
        return "null"

    if isinstance(value, str):
        return f"'{value}'"

    return to_json(value)

"""Hierarchical brace-and-indentation renderer."""

from __future__ import annotations

from typing import Any, Sequence

from ..models import DiffNode, NodeType
from ..utils import is_mapping, to_json

INDENT_SIZE = 4
MARKER_OFFSET = 2

ADDED_MARKER = "+ "
REMOVED_MARKER = "- "
BLANK_MARKER = "  "


def render_stylish(nodes: Sequence[DiffNode]) -> str:
    """
    Render a diff tree as an indented, brace-delimited document.

    Added keys are prefixed with ``+``, removed keys with ``-``, changed
    keys appear as a removed line followed by an added line, and unchanged
    keys get a blank marker. Each nesting level indents by four columns and
    the two-column marker sits inside that indent, so keys line up whatever
    their marker.
    """
    lines = ["{"]
    lines.extend(_render_nodes(nodes, 1))
    lines.append("}")
    return "\n".join(lines)


def _render_nodes(nodes: Sequence[DiffNode], depth: int) -> list[str]:
    lines: list[str] = []

    for node in nodes:
        if node.type == NodeType.ADDED:
            lines.append(_line(depth, ADDED_MARKER, node.key, node.new_value))
        elif node.type == NodeType.REMOVED:
            lines.append(_line(depth, REMOVED_MARKER, node.key, node.old_value))
        elif node.type == NodeType.CHANGED:
            lines.append(_line(depth, REMOVED_MARKER, node.key, node.old_value))
            lines.append(_line(depth, ADDED_MARKER, node.key, node.new_value))
        elif node.type == NodeType.UNCHANGED:
            lines.append(_line(depth, BLANK_MARKER, node.key, node.old_value))
        elif node.type == NodeType.NESTED:
            indent = _marker_indent(depth)
            lines.append(f"{indent}{BLANK_MARKER}{node.key}: {{")
            lines.extend(_render_nodes(node.children, depth + 1))
            lines.append(f"{indent}{BLANK_MARKER}}}")

    return lines


def _marker_indent(depth: int) -> str:
    return " " * (depth * INDENT_SIZE - MARKER_OFFSET)


def _line(depth: int, marker: str, key: str, value: Any) -> str:
    return f"{_marker_indent(depth)}{marker}{key}: {format_value(value, depth)}"


def format_value(value: Any, depth: int) -> str:
    """
    Format a value for a line at the given depth.

    Mappings are expanded into their own brace block, keys sorted, one
    level deeper than the owning line.
    """
    if value is None:
        return "null"

    if is_mapping(value):
        return _format_mapping(value, depth)

    return to_json(value)


def _format_mapping(mapping: dict, depth: int) -> str:
    if not mapping:
        return "{}"

    inner_indent = " " * ((depth + 1) * INDENT_SIZE)
    lines = ["{"]
    for key in sorted(mapping):
        lines.append(f"{inner_indent}{key}: {format_value(mapping[key], depth + 1)}")
    lines.append(" " * (depth * INDENT_SIZE) + "}")
    return "\n".join(lines)

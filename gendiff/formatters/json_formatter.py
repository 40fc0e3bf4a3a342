"""Structured renderer: the diff tree as a nested JSON object."""

from __future__ import annotations

from typing import Any, Sequence

from ..models import DiffNode, NodeType
from ..utils import to_json

JSON_INDENT = 2


def render_json(nodes: Sequence[DiffNode]) -> str:
    """
    Serialize a diff tree as a JSON object keyed by property name.

    Each key maps to an object with a ``type`` field plus ``value``,
    ``oldValue``/``newValue`` or ``children`` depending on the node type.
    Keys keep the sorted order of the tree.
    """
    return to_json(to_dict(nodes), indent=JSON_INDENT)


def to_dict(nodes: Sequence[DiffNode]) -> dict[str, Any]:
    """Encode diff nodes as an insertion-ordered dict."""
    return {node.key: _encode_node(node) for node in nodes}


def _encode_node(node: DiffNode) -> dict[str, Any]:
    if node.type == NodeType.ADDED:
        return {"type": node.type.value, "value": node.new_value}
    elif node.type == NodeType.REMOVED:
        return {"type": node.type.value, "value": node.old_value}
    elif node.type == NodeType.CHANGED:
        return {
            "type": node.type.value,
            "oldValue": node.old_value,
            "newValue": node.new_value,
        }
    elif node.type == NodeType.UNCHANGED:
        return {"type": node.type.value, "value": node.old_value}
    else:
        return {"type": node.type.value, "children": to_dict(node.children)}

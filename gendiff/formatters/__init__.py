"""Output formatters for diff trees."""

from __future__ import annotations

from typing import Callable, Sequence

from ..exceptions import UnsupportedOutputFormatError
from ..models import DiffNode, OutputFormat
from .json_formatter import render_json
from .plain import render_plain
from .stylish import render_stylish

RENDERERS: dict[OutputFormat, Callable[[Sequence[DiffNode]], str]] = {
    OutputFormat.STYLISH: render_stylish,
    OutputFormat.PLAIN: render_plain,
    OutputFormat.JSON: render_json,
}


def resolve_format(format_name: OutputFormat | str) -> OutputFormat:
    """
    Resolve a format name to an OutputFormat.

    Raises:
        UnsupportedOutputFormatError: If the name is not a supported format
    """
    if isinstance(format_name, OutputFormat):
        return format_name
    try:
        return OutputFormat(format_name)
    except ValueError:
        raise UnsupportedOutputFormatError(str(format_name), OutputFormat.names()) from None


def render(nodes: Sequence[DiffNode], format_name: OutputFormat | str) -> str:
    """
    Render a diff tree in the requested output format.

    Args:
        nodes: Diff tree produced by build_diff_tree
        format_name: "stylish", "plain", "json" or an OutputFormat member

    Returns:
        The rendered diff
    """
    return RENDERERS[resolve_format(format_name)](nodes)


__all__ = [
    "RENDERERS",
    "render",
    "render_json",
    "render_plain",
    "render_stylish",
    "resolve_format",
]

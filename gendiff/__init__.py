"""
gendiff - Structural diff for JSON and YAML configuration files

Compares two configuration documents key by key and renders the
differences as an indented tree (stylish), one sentence per change
(plain), or a nested JSON object (json).
"""

from .differ import build_diff_tree
from .engine import DiffEngine, generate_diff
from .exceptions import (
    GendiffError,
    UnsupportedFileFormatError,
    DocumentDecodeError,
    InvalidDocumentError,
    FileSizeError,
    UnsupportedOutputFormatError,
)
from .formatters import render, render_json, render_plain, render_stylish
from .models import (
    EngineConfig,
    DiffNode,
    NodeType,
    FileData,
    FileFormat,
    OutputFormat,
    LogLevel,
)
from .parsers import detect_format, load, parse, read_file

__version__ = "1.0.0"
__all__ = [
    # Engine
    "DiffEngine",
    "EngineConfig",
    "generate_diff",
    # Diff tree
    "build_diff_tree",
    "DiffNode",
    "NodeType",
    # Rendering
    "render",
    "render_stylish",
    "render_plain",
    "render_json",
    "OutputFormat",
    # Loading
    "detect_format",
    "read_file",
    "parse",
    "load",
    "FileData",
    "FileFormat",
    "LogLevel",
    # Errors
    "GendiffError",
    "UnsupportedFileFormatError",
    "DocumentDecodeError",
    "InvalidDocumentError",
    "FileSizeError",
    "UnsupportedOutputFormatError",
]

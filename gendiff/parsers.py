"""Loading and decoding of JSON/YAML documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import (
    DocumentDecodeError,
    FileSizeError,
    InvalidDocumentError,
    UnsupportedFileFormatError,
)
from .models import FileData, FileFormat
from .utils import get_size_mb, get_type_name

logger = logging.getLogger(__name__)

EXTENSIONS = {
    ".json": FileFormat.JSON,
    ".yaml": FileFormat.YAML,
    ".yml": FileFormat.YAML,
}


def detect_format(path: str | Path) -> FileFormat:
    """
    Detect the document format from the file extension.

    Only the suffix is checked; content is never sniffed.

    Raises:
        UnsupportedFileFormatError: If the extension is not .json, .yaml or .yml
    """
    name = str(path)
    for extension, file_format in EXTENSIONS.items():
        if name.endswith(extension):
            return file_format
    raise UnsupportedFileFormatError(name)


def read_file(path: str | Path, max_size_mb: float = 50) -> FileData:
    """
    Read a document from disk and tag it with its format.

    Args:
        path: Path to a .json, .yaml or .yml file
        max_size_mb: Files larger than this are rejected

    Returns:
        FileData with the raw bytes and detected format

    Raises:
        UnsupportedFileFormatError: If the extension is not supported
        FileSizeError: If the file exceeds max_size_mb
        OSError: If the file cannot be read
    """
    file_format = detect_format(path)
    content = Path(path).read_bytes()

    size_mb = get_size_mb(content)
    if size_mb > max_size_mb:
        raise FileSizeError(str(path), size_mb, max_size_mb)

    logger.debug("Read %s (%d bytes, %s)", path, len(content), file_format.value)
    return FileData(path=str(path), content=content, format=file_format)


def parse(file_data: FileData, encoding: str = "utf-8") -> dict:
    """
    Decode a document into a mapping.

    Raises:
        DocumentDecodeError: If the content is not valid for its format
        InvalidDocumentError: If the document root is not a mapping, a
            container refers to itself, or mapping keys collide
    """
    try:
        text = file_data.content.decode(encoding)
    except UnicodeDecodeError as e:
        raise DocumentDecodeError(file_data.path, str(e)) from e

    if file_data.format == FileFormat.JSON:
        data = _parse_json(text, file_data.path)
    else:
        data = _parse_yaml(text, file_data.path)

    if not isinstance(data, dict):
        raise InvalidDocumentError(
            file_data.path, f"root must be an object, got {get_type_name(data)}"
        )

    return _normalize_keys(data, file_data.path)


def load(path: str | Path, max_size_mb: float = 50, encoding: str = "utf-8") -> dict:
    """Read and decode a document in one step."""
    return parse(read_file(path, max_size_mb), encoding)


def _parse_json(text: str, path: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentDecodeError(path, e.msg, e.lineno, e.colno) from e


def _parse_yaml(text: str, path: str) -> Any:
    try:
        data = yaml.safe_load(text)
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark
        line = mark.line + 1 if mark is not None else None
        column = mark.column + 1 if mark is not None else None
        raise DocumentDecodeError(path, e.problem or str(e), line, column) from e
    except yaml.YAMLError as e:
        raise DocumentDecodeError(path, str(e)) from e

    # An empty YAML document is an empty mapping
    if data is None:
        return {}
    return data


def _normalize_keys(data: Any, path: str, ancestors: frozenset = frozenset()) -> Any:
    """
    Convert mapping keys to strings at every level.

    YAML allows non-string keys (``1: a``, ``true: b``); they are turned
    into their YAML/JSON spelling so keys always sort as strings. YAML
    anchors can also make a container hold itself; such documents are
    rejected.

    Raises:
        InvalidDocumentError: On a self-referencing container, or when two
            keys of one mapping have the same string spelling
    """
    if not isinstance(data, (dict, list)):
        return data

    if id(data) in ancestors:
        raise InvalidDocumentError(path, "document contains a recursive alias")
    ancestors = ancestors | {id(data)}

    if isinstance(data, list):
        return [_normalize_keys(item, path, ancestors) for item in data]

    result = {}
    for key, value in data.items():
        name = _key_to_str(key)
        if name in result:
            raise InvalidDocumentError(
                path, f"duplicate key after conversion to string: {name!r}"
            )
        result[name] = _normalize_keys(value, path, ancestors)
    return result


def _key_to_str(key: Any) -> str:
    if isinstance(key, str):
        return key
    if key is None:
        return "null"
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)

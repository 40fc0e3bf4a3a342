"""Data models for gendiff."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LogLevel(Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class NodeType(Enum):
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"
    UNCHANGED = "unchanged"
    NESTED = "nested"


class FileFormat(Enum):
    JSON = "json"
    YAML = "yaml"


class OutputFormat(Enum):
    STYLISH = "stylish"
    PLAIN = "plain"
    JSON = "json"

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass
class EngineConfig:
    """Global configuration for the diff engine."""
    default_format: OutputFormat = OutputFormat.STYLISH
    max_file_size_mb: float = 50
    encoding: str = "utf-8"


@dataclass(frozen=True)
class DiffNode:
    """
    One classified comparison result for a single key.

    Which attributes are populated depends on ``type``:

    - ADDED: ``new_value``
    - REMOVED, UNCHANGED: ``old_value``
    - CHANGED: ``old_value`` and ``new_value``
    - NESTED: ``children`` only
    """
    key: str
    type: NodeType
    old_value: Any = None
    new_value: Any = None
    children: tuple[DiffNode, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FileData:
    """Raw document content paired with its detected format."""
    path: str
    content: bytes
    format: FileFormat

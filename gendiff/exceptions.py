"""Custom exceptions for gendiff."""

from __future__ import annotations

from typing import Optional


class GendiffError(Exception):
    """Base exception for gendiff errors."""
    pass


class UnsupportedFileFormatError(GendiffError):
    """Raised when a file extension is not one of the supported formats."""
    def __init__(self, path: str):
        super().__init__(f"Unsupported file format: {path}")
        self.path = path


class DocumentDecodeError(GendiffError):
    """Raised when a document is not valid JSON/YAML."""
    def __init__(
        self,
        path: str,
        reason: str,
        line: Optional[int] = None,
        column: Optional[int] = None
    ):
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Failed to parse {path}{location}: {reason}")
        self.path = path
        self.reason = reason
        self.line = line
        self.column = column


class InvalidDocumentError(GendiffError):
    """Raised when a decoded document cannot be diffed (non-mapping root, cycles)."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid document {path}: {reason}")
        self.path = path
        self.reason = reason


class FileSizeError(GendiffError):
    """Raised when a file exceeds the configured size limit."""
    def __init__(self, path: str, size_mb: float, limit_mb: float):
        super().__init__(
            f"File size ({size_mb:.2f}MB) exceeds limit ({limit_mb}MB): {path}"
        )
        self.path = path
        self.size_mb = size_mb
        self.limit_mb = limit_mb


class UnsupportedOutputFormatError(GendiffError):
    """Raised when the requested output format is unknown."""
    def __init__(self, format_name: str, supported: list[str]):
        super().__init__(
            f"Unknown output format: {format_name} "
            f"(expected one of: {', '.join(supported)})"
        )
        self.format_name = format_name
        self.supported = supported

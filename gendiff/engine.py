"""Main diff engine for gendiff."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .differ import build_diff_tree
from .formatters import render, resolve_format
from .models import EngineConfig, OutputFormat
from .parsers import parse, read_file

logger = logging.getLogger(__name__)


class DiffEngine:
    """
    Orchestrates the gendiff pipeline:

    1. Loading: read both files and detect their formats
    2. Decoding: parse JSON/YAML into mappings
    3. Diffing: build the sorted diff tree
    4. Rendering: format the tree as stylish, plain or json

    Errors from any stage propagate unchanged; nothing is rendered unless
    every stage succeeds.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Engine configuration (uses defaults if not provided)
        """
        self.config = config or EngineConfig()

    def compare(
        self,
        old: dict,
        new: dict,
        output_format: OutputFormat | str | None = None
    ) -> str:
        """
        Diff two already-decoded mappings and render the result.

        Args:
            old: The baseline mapping
            new: The mapping to compare against the baseline
            output_format: Render format (defaults to config.default_format)

        Returns:
            The rendered diff
        """
        fmt = self._resolve(output_format)
        tree = build_diff_tree(old, new)
        logger.debug("Built diff tree with %d top-level nodes", len(tree))
        return render(tree, fmt)

    def generate_diff(
        self,
        first_path: str | Path,
        second_path: str | Path,
        output_format: OutputFormat | str | None = None
    ) -> str:
        """
        Diff two files on disk.

        Files may be in different formats (a JSON file can be compared with
        a YAML file).

        Args:
            first_path: Path to the baseline document
            second_path: Path to the new document
            output_format: Render format (defaults to config.default_format)

        Returns:
            The rendered diff
        """
        # Reject an unknown format before touching the filesystem
        fmt = self._resolve(output_format)

        old = self._load(first_path)
        new = self._load(second_path)

        return self.compare(old, new, fmt)

    def _resolve(self, output_format: OutputFormat | str | None) -> OutputFormat:
        if output_format is None:
            return resolve_format(self.config.default_format)
        return resolve_format(output_format)

    def _load(self, path: str | Path) -> dict:
        file_data = read_file(path, self.config.max_file_size_mb)
        data = parse(file_data, self.config.encoding)
        logger.debug("Decoded %s with %d top-level keys", path, len(data))
        return data


def generate_diff(
    first_path: str | Path,
    second_path: str | Path,
    output_format: OutputFormat | str | None = None,
    config: Optional[EngineConfig] = None
) -> str:
    """
    Convenience function to diff two files.

    Args:
        first_path: Path to the baseline document
        second_path: Path to the new document
        output_format: "stylish", "plain" or "json" (defaults to
            config.default_format)
        config: Optional engine configuration

    Returns:
        The rendered diff
    """
    engine = DiffEngine(config)
    return engine.generate_diff(first_path, second_path, output_format)

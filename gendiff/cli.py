"""Command line interface for gendiff."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .engine import DiffEngine
from .exceptions import GendiffError
from .models import EngineConfig, LogLevel, OutputFormat


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gendiff",
        description="Compares two configuration files and shows a difference.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gendiff file1.json file2.json
  gendiff -f plain file1.yml file2.yml
  gendiff --format json old.json new.yaml
        """
    )

    parser.add_argument("first_file", help="Path to the baseline JSON/YAML file")
    parser.add_argument("second_file", help="Path to the JSON/YAML file to compare")
    parser.add_argument(
        "-f", "--format",
        choices=OutputFormat.names(),
        default=OutputFormat.STYLISH.value,
        help="Output format (default: %(default)s)"
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=LogLevel.WARN.value,
        help="Logging level (default: %(default)s)"
    )

    return parser


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = LogLevel(parsed_args.log_level)
    logging.basicConfig(
        level=getattr(logging, log_level.name),
        format="%(levelname)s: %(message)s"
    )

    config = EngineConfig(default_format=OutputFormat(parsed_args.format))
    engine = DiffEngine(config)

    try:
        output = engine.generate_diff(parsed_args.first_file, parsed_args.second_file)
    except (GendiffError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

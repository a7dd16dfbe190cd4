"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_config_flags(parser: argparse.ArgumentParser) -> None:
    """Add flags that feed the global configuration.

    Adds: --config, --param, --config-map, --debug
    """
    parser.add_argument(
        "--config",
        dest="config_path",
        type=str,
        help="Global configuration YAML file (layered over bundled defaults)",
    )
    parser.add_argument(
        "--param",
        "-D",
        dest="params",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Add a user parameter visible to suite markers (repeatable)",
    )
    parser.add_argument(
        "--config-map",
        dest="config_map_path",
        type=str,
        help="YAML file mapping discovered marker paths to replacement files",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Emit discovery notes (which markers are loaded)",
    )


def add_log_flags(parser: argparse.ArgumentParser) -> None:
    """Add --log-level and --log-file."""
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING; --debug implies INFO)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write logs to this file instead of stderr",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add standard flags that every discovery command uses.

    Adds: --json, --config, --param, --config-map, --debug, --log-level, --log-file
    """
    add_json_flag(parser)
    add_config_flags(parser)
    add_log_flags(parser)


__all__ = [
    "add_json_flag",
    "add_config_flags",
    "add_log_flags",
    "add_standard_flags",
]

"""
suitemap show-config command.

SUMMARY: Show the merged global configuration

Displays the configuration produced from bundled defaults, the optional
--config file, SUITEMAP_* environment variables and command-line flags.
"""

from __future__ import annotations

import argparse

from suitemap.cli import OutputFormatter, add_standard_flags, build_global_config, setup_logging
from suitemap.core.exceptions import SuitemapError
from suitemap.core.utils.io import dump_yaml_string

SUMMARY = "Show the merged global configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        setup_logging(args)
        global_cfg = build_global_config(args)
    except SuitemapError as exc:
        formatter.error(exc, error_code="config_error")
        return 1

    if formatter.json_mode:
        formatter.json_output(global_cfg.to_dict())
    else:
        formatter.text(dump_yaml_string(global_cfg.to_dict()).rstrip())
    return 0

"""
suitemap local-config command.

SUMMARY: Show the effective configuration for a path inside a suite

Resolves the owning suite, then layers every local-override marker between
the suite root and the path's directory.
"""

from __future__ import annotations

import argparse

from suitemap.cli import OutputFormatter, add_standard_flags, build_global_config, setup_logging
from suitemap.core.discovery import DiscoveryCache, resolve_local_config
from suitemap.core.exceptions import SuitemapError
from suitemap.core.utils.io import dump_yaml_string

SUMMARY = "Show the effective configuration for a path inside a suite"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("path", help="File or directory inside a test suite")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        setup_logging(args)
        global_cfg = build_global_config(args)
        result, config = resolve_local_config(args.path, global_cfg, DiscoveryCache())
    except SuitemapError as exc:
        formatter.error(exc, error_code="local_config_error")
        return 1

    if result.suite is None or config is None:
        formatter.error(
            LookupError(f"No test suite found for {args.path}"),
            error_code="suite_not_found",
        )
        return 1

    payload = {
        "path": args.path,
        "suite": result.suite.to_dict(),
        "components": list(result.components),
        "config": config.to_dict(),
    }
    if formatter.json_mode:
        formatter.json_output(payload)
    else:
        formatter.text(f"# suite: {result.suite.name} ({result.suite.source_root})")
        formatter.text(f"# path: {'/'.join(result.components) or '.'}")
        formatter.text(dump_yaml_string(payload["config"]).rstrip())
    return 0

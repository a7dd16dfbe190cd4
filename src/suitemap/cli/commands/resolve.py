"""
suitemap resolve command.

SUMMARY: Map paths onto the test suites that own them

Prints, for each path, the owning suite (name, source root, exec root) and
the path components from the suite root to the target. Exits 1 when any
path has no owning suite.
"""

from __future__ import annotations

import argparse
from typing import Any, Dict, List

from suitemap.cli import OutputFormatter, add_standard_flags, build_global_config, setup_logging
from suitemap.core.discovery import DiscoveryCache, get_test_suite
from suitemap.core.exceptions import SuitemapError

SUMMARY = "Map paths onto the test suites that own them"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("paths", nargs="+", help="Files or directories to resolve")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        setup_logging(args)
        global_cfg = build_global_config(args)
        cache = DiscoveryCache()

        results: List[Dict[str, Any]] = []
        for item in args.paths:
            result = get_test_suite(item, global_cfg, cache)
            results.append(
                {
                    "path": item,
                    "suite": result.suite.to_dict() if result.suite else None,
                    "components": list(result.components),
                    "exec_path": (
                        str(result.suite.get_exec_path(result.components)) if result.suite else None
                    ),
                }
            )
    except SuitemapError as exc:
        formatter.error(exc, error_code="resolve_error")
        return 1

    missing = [r["path"] for r in results if r["suite"] is None]

    if formatter.json_mode:
        formatter.json_output({"results": results, "missing": missing})
    else:
        for r in results:
            suite = r["suite"]
            if suite is None:
                formatter.text(f"{r['path']}: no test suite found")
                continue
            formatter.text(f"{r['path']}: {suite['name']}")
            formatter.text_kv("source_root", suite["source_root"])
            formatter.text_kv("exec_root", suite["exec_root"])
            formatter.text_kv("exec_path", r["exec_path"])
            formatter.text_kv("components", "/".join(r["components"]) or ".")

    return 1 if missing else 0

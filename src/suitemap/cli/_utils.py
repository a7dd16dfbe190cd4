"""Shared CLI utilities: build the run's configuration and logging from args."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from suitemap.core.config import GlobalConfig, read_config_map_file
from suitemap.core.exceptions import ConfigLoadError
from suitemap.core.stdlib_logging import (
    configure_stdlib_logging,
    suppress_lastresort_in_json_mode,
)


def parse_params(raw: Optional[List[str]]) -> Dict[str, str]:
    """Parse repeated ``NAME=VALUE`` flags; a bare ``NAME`` maps to ``""``."""
    params: Dict[str, str] = {}
    for item in raw or []:
        name, sep, value = str(item).partition("=")
        name = name.strip()
        if not name:
            raise ConfigLoadError(f"Invalid --param {item!r}: expected NAME=VALUE")
        params[name] = value if sep else ""
    return params


def build_global_config(args: argparse.Namespace) -> GlobalConfig:
    """Layer bundled defaults, ``--config``, environment and flags."""
    config_map: Optional[Dict[str, Any]] = None
    map_path = getattr(args, "config_map_path", None)
    if map_path:
        config_map = read_config_map_file(Path(map_path))

    return GlobalConfig.load(
        getattr(args, "config_path", None),
        params=parse_params(getattr(args, "params", None)),
        debug=getattr(args, "debug", None),
        config_map=config_map,
    )


def setup_logging(args: argparse.Namespace) -> None:
    """Configure stdlib logging from --log-level, --log-file and --debug."""
    level = getattr(args, "log_level", "WARNING") or "WARNING"
    if getattr(args, "debug", None) and level in ("WARNING", "ERROR"):
        level = "INFO"
    log_file = getattr(args, "log_file", None)
    if getattr(args, "json", False) and not log_file and level == "WARNING":
        # Keep stderr free of lastResort output so --json stays machine-readable.
        suppress_lastresort_in_json_mode()
        return
    configure_stdlib_logging(level=level, log_path=Path(log_file) if log_file else None)


__all__ = ["parse_params", "build_global_config", "setup_logging"]

"""
suitemap CLI package.

Commands live in ``cli/commands/`` and are discovered automatically; each
module exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args)``.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Global configuration and logging setup from parsed args
"""
from ._output import OutputFormatter, format_json
from ._args import (
    add_json_flag,
    add_config_flags,
    add_log_flags,
    add_standard_flags,
)
from ._utils import build_global_config, parse_params, setup_logging

__all__ = [
    "OutputFormatter",
    "format_json",
    "add_json_flag",
    "add_config_flags",
    "add_log_flags",
    "add_standard_flags",
    "build_global_config",
    "parse_params",
    "setup_logging",
]

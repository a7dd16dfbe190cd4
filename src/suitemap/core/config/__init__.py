"""Global (run-wide) and suite (per-directory) configuration."""
from .global_config import ENV_CONFIG_MAP, ENV_DEBUG, GlobalConfig, read_config_map_file  # noqa: F401
from .suite_config import SuiteConfig  # noqa: F401

__all__ = ["GlobalConfig", "SuiteConfig", "ENV_DEBUG", "ENV_CONFIG_MAP", "read_config_map_file"]

"""Run-wide discovery configuration.

A :class:`GlobalConfig` is built once before discovery starts and is frozen
for the rest of the run. Sources are layered low → high:

1. Bundled defaults: ``suitemap.data/config/defaults.yaml``
2. User config file passed explicitly (``--config``)
3. Environment variables: ``SUITEMAP_DEBUG``, ``SUITEMAP_CONFIG_MAP``
4. Keyword arguments (command-line flags)
"""
from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from suitemap.core.exceptions import ConfigLoadError
from suitemap.core.schemas import SchemaValidationError, validate_payload
from suitemap.core.utils.io import PathLike, read_yaml
from suitemap.core.utils.merge import deep_merge
from suitemap.core.utils.paths import canonical_key, expand_path
from suitemap import data as bundled

logger = logging.getLogger(__name__)
notes_logger = logging.getLogger("suitemap.notes")

GLOBAL_SCHEMA = "global-config.schema"

ENV_DEBUG = "SUITEMAP_DEBUG"
ENV_CONFIG_MAP = "SUITEMAP_CONFIG_MAP"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"", "0", "false", "no", "off"}


def _freeze_config_map(raw: Optional[Mapping[Any, Any]]) -> Optional[Mapping[str, str]]:
    if raw is None:
        return None
    return MappingProxyType({canonical_key(k): str(v) for k, v in raw.items()})


@dataclass(frozen=True)
class GlobalConfig:
    """Marker names, debug flag, user parameters and the path-rewrite table."""

    site_config_names: Tuple[str, ...] = ("suite.site.yaml", "suite.site.yml")
    config_names: Tuple[str, ...] = ("suite.yaml", "suite.yml")
    local_config_names: Tuple[str, ...] = ("suite.local.yaml", "suite.local.yml")
    debug: bool = False
    params: Mapping[str, Any] = field(default_factory=dict)
    config_map: Optional[Mapping[str, str]] = None

    def __post_init__(self) -> None:
        for name in ("site_config_names", "config_names", "local_config_names"):
            names = tuple(getattr(self, name))
            if not names:
                raise ValueError(f"{name} must list at least one file name")
            object.__setattr__(self, name, names)
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
        object.__setattr__(self, "config_map", _freeze_config_map(self.config_map))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GlobalConfig":
        """Build from a merged configuration mapping (see ``defaults.yaml``)."""
        discovery = data.get("discovery") or {}
        kwargs: Dict[str, Any] = {
            "debug": bool(data.get("debug", False)),
            "params": dict(data.get("params") or {}),
            "config_map": data.get("config_map"),
        }
        for key in ("site_config_names", "config_names", "local_config_names"):
            if discovery.get(key):
                kwargs[key] = tuple(discovery[key])
        return cls(**kwargs)

    @classmethod
    def load(
        cls,
        config_path: Optional[PathLike] = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        debug: Optional[bool] = None,
        config_map: Optional[Mapping[str, str]] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> "GlobalConfig":
        """Load and validate the layered global configuration.

        Raises:
            ConfigLoadError: If a layer cannot be read or the merged result
                violates the global configuration schema.
        """
        env = os.environ if env is None else env
        merged: Dict[str, Any] = copy.deepcopy(bundled.read_yaml("config", "defaults.yaml"))

        if config_path is not None:
            merged = deep_merge(merged, _read_user_config(Path(config_path)))

        merged = deep_merge(merged, _env_overrides(env))

        explicit: Dict[str, Any] = {}
        if debug is not None:
            explicit["debug"] = bool(debug)
        if params:
            explicit["params"] = dict(params)
        if config_map is not None:
            explicit["config_map"] = {str(k): str(v) for k, v in config_map.items()}
        merged = deep_merge(merged, explicit)

        try:
            validate_payload(merged, GLOBAL_SCHEMA)
        except SchemaValidationError as exc:
            raise ConfigLoadError(
                f"Invalid global configuration: {exc}",
                path=config_path,
                context={"errors": exc.errors},
            ) from exc

        cfg = cls.from_mapping(merged)
        logger.debug(
            f"Global config loaded (debug={cfg.debug}, "
            f"config_map={'absent' if cfg.config_map is None else len(cfg.config_map)})"
        )
        return cfg

    def with_config_map(self, config_map: Optional[Mapping[str, str]]) -> "GlobalConfig":
        """Return a copy carrying ``config_map``; only valid before discovery starts."""
        return replace(self, config_map=config_map)

    # ------------------------------------------------------------------
    # Discovery helpers
    # ------------------------------------------------------------------
    def rewrite_config_path(self, marker: Path) -> Path:
        """Map a discovered marker through ``config_map``; a miss keeps ``marker``."""
        if self.config_map is None:
            return marker
        replacement = self.config_map.get(canonical_key(marker))
        if replacement is None:
            return marker
        return Path(replacement)

    def note(self, message: str, location: Optional[str] = None) -> None:
        """Emit a debug note; no-op unless ``debug`` is enabled."""
        if not self.debug:
            return
        if location:
            notes_logger.info(f"{location}: note: {message}")
        else:
            notes_logger.info(f"note: {message}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "discovery": {
                "site_config_names": list(self.site_config_names),
                "config_names": list(self.config_names),
                "local_config_names": list(self.local_config_names),
            },
            "debug": self.debug,
            "config_map": None if self.config_map is None else dict(self.config_map),
            "params": dict(self.params),
        }


def _anchor_config_map(raw: Any, *, base_dir: Path) -> Any:
    """Resolve relative keys and values of a rewrite table against ``base_dir``."""
    if not isinstance(raw, dict):
        return raw
    return {
        str(expand_path(str(k), relative_to=base_dir)): str(expand_path(str(v), relative_to=base_dir))
        for k, v in raw.items()
    }


def _read_mapping(path: Path, what: str) -> Dict[str, Any]:
    try:
        data = read_yaml(path, default={}, raise_on_error=True)
    except FileNotFoundError as exc:
        raise ConfigLoadError(f"{what} not found: {path}", path=path) from exc
    except Exception as exc:
        raise ConfigLoadError(f"Cannot read {what} {path}: {exc}", path=path) from exc
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"{what} must be a YAML mapping, got {type(data).__name__}: {path}",
            path=path,
        )
    return data


def _read_user_config(path: Path) -> Dict[str, Any]:
    data = _read_mapping(path, "Global config file")
    if "config_map" in data:
        data = dict(data)
        data["config_map"] = _anchor_config_map(data["config_map"], base_dir=path.resolve().parent)
    return data


def read_config_map_file(path: PathLike) -> Dict[str, str]:
    """Read a YAML rewrite table; relative entries anchor at the file's directory."""
    path = Path(path).expanduser()
    table = _read_mapping(path, "Config map file")
    return _anchor_config_map(table, base_dir=path.resolve().parent)


def _parse_bool(raw: str, *, name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigLoadError(f"{name} must be a boolean, got {raw!r}", context={"env": name})


def _env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if ENV_DEBUG in env:
        overrides["debug"] = _parse_bool(env[ENV_DEBUG], name=ENV_DEBUG)
    map_file = (env.get(ENV_CONFIG_MAP) or "").strip()
    if map_file:
        overrides["config_map"] = read_config_map_file(Path(map_file))
    return overrides


__all__ = ["GlobalConfig", "ENV_DEBUG", "ENV_CONFIG_MAP", "read_config_map_file"]

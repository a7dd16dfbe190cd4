"""Per-suite and per-directory configuration objects.

A :class:`SuiteConfig` starts from defaults derived from the
:class:`~suitemap.core.config.global_config.GlobalConfig` and is then mutated in
place by loading marker files. Markers are YAML mappings validated against
``suite-config.schema.yaml``; typed keys land on attributes, every other
top-level key is merged into :attr:`SuiteConfig.settings`.

Example marker::

    name: unit
    suffixes: [".test", ".yaml"]
    test_exec_root: ../build/unit
    environment:
      LANG: C
    custom_variable: 42
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from suitemap.core.exceptions import ConfigLoadError
from suitemap.core.schemas import SchemaValidationError, validate_payload
from suitemap.core.utils.io import PathLike, read_yaml
from suitemap.core.utils.merge import deep_merge, merge_arrays
from suitemap.core.utils.paths import expand_path

if TYPE_CHECKING:
    from .global_config import GlobalConfig

SUITE_SCHEMA = "suite-config.schema"

_LIST_FIELDS = ("suffixes", "excludes", "available_features", "substitutions")
_ROOT_FIELDS = ("test_source_root", "test_exec_root")


@dataclass
class SuiteConfig:
    """Configuration governing a suite root or one directory inside a suite."""

    name: str = "?"
    test_source_root: Optional[Path] = None
    test_exec_root: Optional[Path] = None
    suffixes: List[str] = field(default_factory=list)
    excludes: List[str] = field(default_factory=list)
    available_features: List[str] = field(default_factory=list)
    substitutions: List[Tuple[str, str]] = field(default_factory=list)
    environment: Dict[str, str] = field(default_factory=dict)
    unsupported: bool = False
    settings: Dict[str, Any] = field(default_factory=dict)
    loaded_from: List[Path] = field(default_factory=list)

    @classmethod
    def from_defaults(cls, global_cfg: "GlobalConfig") -> "SuiteConfig":
        """Fresh configuration for a newly discovered suite.

        User parameters are visible to markers through ``settings["params"]``.
        """
        settings: Dict[str, Any] = {}
        if global_cfg.params:
            settings["params"] = dict(global_cfg.params)
        return cls(settings=settings)

    def derive(self) -> "SuiteConfig":
        """Independent copy; mutating the result never touches ``self``."""
        return copy.deepcopy(self)

    def load_from_path(self, path: PathLike, global_cfg: "GlobalConfig") -> None:
        """Load the marker at ``path`` into this object.

        Raises:
            ConfigLoadError: If the file is missing, unreadable, not a YAML
                mapping, or violates the marker schema.
        """
        path = Path(path)
        try:
            payload = read_yaml(path, default={}, raise_on_error=True)
        except FileNotFoundError as exc:
            raise ConfigLoadError(f"Config file not found: {path}", path=path) from exc
        except Exception as exc:
            raise ConfigLoadError(f"Cannot parse config file {path}: {exc}", path=path) from exc

        if not isinstance(payload, dict):
            raise ConfigLoadError(
                f"Config file must contain a YAML mapping, got {type(payload).__name__}: {path}",
                path=path,
            )
        try:
            validate_payload(payload, SUITE_SCHEMA)
        except SchemaValidationError as exc:
            raise ConfigLoadError(
                f"Invalid config file {path}: {exc}",
                path=path,
                context={"errors": exc.errors},
            ) from exc

        self._apply(payload, base_dir=path.resolve().parent)
        self.loaded_from.append(path)

    def _apply(self, payload: Dict[str, Any], *, base_dir: Path) -> None:
        extra: Dict[str, Any] = {}
        for key, value in payload.items():
            if key == "name":
                self.name = value
            elif key in _ROOT_FIELDS:
                setattr(self, key, expand_path(value, relative_to=base_dir))
            elif key == "substitutions":
                merged = merge_arrays(list(self.substitutions), value)
                self.substitutions = [tuple(pair) for pair in merged]
            elif key in _LIST_FIELDS:
                setattr(self, key, merge_arrays(list(getattr(self, key)), value))
            elif key == "environment":
                env = dict(self.environment)
                env.update({k: str(v) for k, v in value.items()})
                self.environment = env
            elif key == "unsupported":
                self.unsupported = bool(value)
            else:
                extra[key] = value
        if extra:
            self.settings = deep_merge(self.settings, extra)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up an opaque setting."""
        return self.settings.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "test_source_root": str(self.test_source_root) if self.test_source_root else None,
            "test_exec_root": str(self.test_exec_root) if self.test_exec_root else None,
            "suffixes": list(self.suffixes),
            "excludes": list(self.excludes),
            "available_features": list(self.available_features),
            "substitutions": [list(pair) for pair in self.substitutions],
            "environment": dict(self.environment),
            "unsupported": self.unsupported,
            "settings": copy.deepcopy(self.settings),
            "loaded_from": [str(p) for p in self.loaded_from],
        }


__all__ = ["SuiteConfig"]

"""YAML I/O helpers with advisory read locks."""
from __future__ import annotations

import fcntl
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]


def ensure_directory(path: Path) -> Path:
    """Create ``path`` (and parents) when missing and return it."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_yaml(path: PathLike, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns ``default`` if the file is missing, empty or invalid, unless
    ``raise_on_error`` is True in which case the underlying error propagates.

    Examples:
        >>> config = read_yaml(Path("suite.yaml"), default={})
        >>> assert isinstance(config, dict)
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_SH)
            try:
                data = yaml.safe_load(f)
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        return data if data is not None else default
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


def dump_yaml_string(data: Any) -> str:
    """Serialize ``data`` as block-style YAML with stable key order."""
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=True)


__all__ = ["PathLike", "ensure_directory", "read_yaml", "dump_yaml_string"]

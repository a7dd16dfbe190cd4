"""Path primitives used by discovery.

All discovery cache keys go through :func:`canonicalize` so that symlinked and
relative spellings of the same directory share one entry.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .io import PathLike


def canonicalize(path: PathLike, *, base: Optional[PathLike] = None) -> Path:
    """Return the absolute, symlink-free form of ``path``.

    Relative paths are anchored at ``base`` (the process working directory by
    default). Raises ``FileNotFoundError`` when the path does not exist.
    """
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = Path(base if base is not None else os.getcwd()) / p
    return p.resolve(strict=True)


def canonical_key(path: PathLike) -> str:
    """Canonical string form of ``path`` when it exists, normalized text otherwise.

    Used for rewrite-table keys, which may name files that are not present yet.
    """
    p = Path(path).expanduser()
    try:
        return str(p.resolve(strict=True))
    except (FileNotFoundError, NotADirectoryError):
        return os.path.normpath(os.path.abspath(str(p)))


def split_parent(path: Path) -> tuple[Path, str]:
    """Return ``(parent, base name)``; at the root the parent is the path itself."""
    return path.parent, path.name


def is_root(path: Path) -> bool:
    return path.parent == path


def expand_path(raw: str, *, relative_to: Path) -> Path:
    """Expand ``$VARS`` and ``~`` in ``raw``; relative results anchor at ``relative_to``."""
    p = Path(os.path.expandvars(str(raw)).strip()).expanduser()
    if not p.is_absolute():
        p = relative_to / p
    return Path(os.path.normpath(str(p)))


__all__ = ["canonicalize", "canonical_key", "split_parent", "is_root", "expand_path"]

"""Marker file lookup inside a single directory."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

from suitemap.core.utils.io import PathLike

if TYPE_CHECKING:
    from suitemap.core.config import GlobalConfig


def choose_config_file(directory: PathLike, candidate_names: Iterable[str]) -> Optional[Path]:
    """Return ``directory / name`` for the first candidate that exists, in order."""
    directory = Path(directory)
    for name in candidate_names:
        candidate = directory / name
        if candidate.exists():
            return candidate
    return None


def dir_contains_suite(directory: PathLike, global_cfg: "GlobalConfig") -> Optional[Path]:
    """Suite marker in ``directory``: site markers win over plain suite markers."""
    found = choose_config_file(directory, global_cfg.site_config_names)
    if found is None:
        found = choose_config_file(directory, global_cfg.config_names)
    return found


__all__ = ["choose_config_file", "dir_contains_suite"]

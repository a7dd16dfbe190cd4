"""Public entry point: map a raw path argument onto a suite."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, List, Optional

from suitemap.core.exceptions import SuitePathError
from suitemap.core.utils.io import PathLike
from suitemap.core.utils.paths import canonicalize, split_parent

from .models import NOT_FOUND, DiscoveryCache, SearchResult
from .search import search_suite

if TYPE_CHECKING:
    from suitemap.core.config import GlobalConfig

logger = logging.getLogger(__name__)


def get_test_suite(
    item: PathLike,
    global_cfg: "GlobalConfig",
    cache: DiscoveryCache,
    *,
    cwd: Optional[PathLike] = None,
) -> SearchResult:
    """Resolve ``item`` (file or directory) to its suite and path inside it.

    Relative items are anchored at ``cwd`` (the process working directory by
    default). Non-directory trailing segments are stripped and re-appended to
    the result, so ``suite/tests/a.txt`` yields components ``(..., "a.txt")``
    and ``stripped == 1``.

    Raises:
        SuitePathError: If ``item`` does not exist.
        ConfigLoadError: If the owning suite's marker cannot be loaded.
    """
    try:
        current = canonicalize(item, base=cwd)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise SuitePathError(
            f"Cannot resolve path: {item}",
            context={"path": str(item), "cwd": str(cwd) if cwd is not None else None},
        ) from exc

    stripped: List[str] = []
    while not current.is_dir():
        parent, base = split_parent(current)
        if parent == current:
            return NOT_FOUND
        stripped.append(base)
        current = parent
    stripped.reverse()

    if stripped:
        logger.debug(f"{item}: searching from {current} (stripped {'/'.join(stripped)})")
    result = search_suite(current, global_cfg, cache).with_components(stripped)
    if result.suite is not None and stripped:
        result = replace(result, stripped=len(stripped))
    return result


__all__ = ["get_test_suite"]

"""Upward search for the suite that owns a directory.

Walks from a directory towards the filesystem root until a suite marker is
found. Every directory visited is memoized in the run's
:class:`~suitemap.core.discovery.models.DiscoveryCache`, so sibling queries
that share an ancestor locate and load each suite marker at most once.

Load failures propagate and are never cached: the failing directory and every
descendant whose recursion passed through it stay absent from the cache, and
a later query retries the load.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from suitemap.core.config import SuiteConfig
from suitemap.core.utils.io import PathLike
from suitemap.core.utils.paths import canonicalize, split_parent

from .locator import dir_contains_suite
from .models import NOT_FOUND, DiscoveryCache, SearchResult, TestSuite

if TYPE_CHECKING:
    from suitemap.core.config import GlobalConfig

logger = logging.getLogger(__name__)


def search_suite(directory: PathLike, global_cfg: "GlobalConfig", cache: DiscoveryCache) -> SearchResult:
    """Find the suite owning ``directory`` (memoized by canonical path).

    Raises:
        FileNotFoundError: If ``directory`` does not exist.
        ConfigLoadError: If a discovered suite marker cannot be loaded.
    """
    real_path = canonicalize(directory)
    cached = cache.suites.get(real_path)
    if cached is not None:
        logger.debug(f"suite cache hit: {real_path}")
        return cached

    result = _do_search(real_path, global_cfg, cache)
    cache.suites[real_path] = result
    return result


def _do_search(path: Path, global_cfg: "GlobalConfig", cache: DiscoveryCache) -> SearchResult:
    marker = dir_contains_suite(path, global_cfg)
    if marker is None:
        parent, base = split_parent(path)
        if parent == path:
            logger.debug(f"reached filesystem root without a suite marker: {path}")
            return NOT_FOUND
        return search_suite(parent, global_cfg, cache).with_components([base])

    return SearchResult(_load_suite(path, marker, global_cfg), ())


def _load_suite(path: Path, marker: Path, global_cfg: "GlobalConfig") -> TestSuite:
    cfg_path = global_cfg.rewrite_config_path(marker)
    if cfg_path != marker:
        logger.debug(f"config map redirected {marker} -> {cfg_path}")

    global_cfg.note(f"loading suite config {str(cfg_path)!r}")
    config = SuiteConfig.from_defaults(global_cfg)
    config.load_from_path(cfg_path, global_cfg)

    source_root = config.test_source_root or path
    exec_root = config.test_exec_root or path
    logger.debug(f"found suite {config.name!r} at {path} (exec root {exec_root})")
    return TestSuite(config.name, source_root, exec_root, config)


__all__ = ["search_suite"]

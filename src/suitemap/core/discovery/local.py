"""Per-directory configuration inside a discovered suite.

The effective configuration of ``suite/a/b`` is built top-down:

- ``()`` is the suite's own config;
- each deeper level starts from its parent's effective config;
- a level without a local marker shares the parent object unchanged;
- a level with a local marker gets a deep copy of the parent with the marker
  loaded into it.

Because overrides always act on a fresh copy, no level ever mutates an object
an ancestor or sibling subtree still holds.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from suitemap.core.config import SuiteConfig
from suitemap.core.utils.io import PathLike

from .locator import choose_config_file
from .models import DiscoveryCache, SearchResult, TestSuite
from .resolver import get_test_suite

if TYPE_CHECKING:
    from suitemap.core.config import GlobalConfig

logger = logging.getLogger(__name__)


def get_local_config(
    suite: TestSuite,
    global_cfg: "GlobalConfig",
    components: Sequence[str],
    cache: Optional[DiscoveryCache] = None,
) -> SuiteConfig:
    """Effective configuration for directory ``components`` inside ``suite``.

    When ``cache`` is given, results are memoized per suite and path.

    Raises:
        ConfigLoadError: If a local marker on the way down cannot be loaded.
    """
    key = tuple(components)
    if cache is not None:
        cached = cache.local_configs.get((suite, key))
        if cached is not None:
            return cached

    config = _search_local_config(suite, global_cfg, key, cache)
    if cache is not None:
        cache.local_configs[(suite, key)] = config
    return config


def _search_local_config(
    suite: TestSuite,
    global_cfg: "GlobalConfig",
    components: Tuple[str, ...],
    cache: Optional[DiscoveryCache],
) -> SuiteConfig:
    if not components:
        return suite.config

    parent = get_local_config(suite, global_cfg, components[:-1], cache)

    source_path = suite.get_source_path(components)
    cfg_path = choose_config_file(source_path, global_cfg.local_config_names)
    if cfg_path is None:
        return parent

    config = parent.derive()
    global_cfg.note(f"loading local config {str(cfg_path)!r}")
    config.load_from_path(cfg_path, global_cfg)
    logger.debug(f"local override for {'/'.join(components)} from {cfg_path}")
    return config


def resolve_local_config(
    item: PathLike,
    global_cfg: "GlobalConfig",
    cache: DiscoveryCache,
    *,
    cwd: Optional[PathLike] = None,
) -> Tuple[SearchResult, Optional[SuiteConfig]]:
    """Resolve ``item`` and the effective configuration of its directory.

    For a file, the containing directory's configuration is returned. The
    config is ``None`` when no suite owns ``item``.
    """
    result = get_test_suite(item, global_cfg, cache, cwd=cwd)
    if result.suite is None:
        return result, None

    components = result.components[: len(result.components) - result.stripped]
    return result, get_local_config(result.suite, global_cfg, components, cache)


__all__ = ["get_local_config", "resolve_local_config"]

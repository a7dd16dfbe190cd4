"""Suite discovery: upward search for suite roots and downward local configs.

Typical use::

    cache = DiscoveryCache()
    result = get_test_suite("tests/unit/case.test", global_cfg, cache)
    if result.suite is not None:
        cfg = get_local_config(result.suite, global_cfg, result.components[:-1], cache)
"""
from .local import get_local_config, resolve_local_config  # noqa: F401
from .locator import choose_config_file, dir_contains_suite  # noqa: F401
from .models import NOT_FOUND, DiscoveryCache, SearchResult, TestSuite  # noqa: F401
from .resolver import get_test_suite  # noqa: F401
from .search import search_suite  # noqa: F401

__all__ = [
    "DiscoveryCache",
    "NOT_FOUND",
    "SearchResult",
    "TestSuite",
    "choose_config_file",
    "dir_contains_suite",
    "get_local_config",
    "get_test_suite",
    "resolve_local_config",
    "search_suite",
]

import sys
from pathlib import Path
from typing import List

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'suitemap' and tests/ importable for helpers.
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from suitemap.core.config import ENV_CONFIG_MAP, ENV_DEBUG, GlobalConfig, SuiteConfig
from suitemap.core.discovery import DiscoveryCache
from suitemap.core.stdlib_logging import reset_stdlib_logging_for_tests
from helpers.suite_tree import SuiteTree

# Environment variables read by GlobalConfig.load(); a developer shell that
# exports them must not change test outcomes.
_LEAK_PRONE_ENV_KEYS = [ENV_DEBUG, ENV_CONFIG_MAP]


@pytest.fixture(autouse=True)
def _isolate_suitemap_env(monkeypatch):
    for key in _LEAK_PRONE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    reset_stdlib_logging_for_tests()


@pytest.fixture
def global_cfg() -> GlobalConfig:
    """Global config using short marker names: suite.site.cfg / suite.cfg / local.cfg."""
    return GlobalConfig(
        site_config_names=("suite.site.cfg",),
        config_names=("suite.cfg",),
        local_config_names=("local.cfg",),
    )


@pytest.fixture
def cache() -> DiscoveryCache:
    return DiscoveryCache()


@pytest.fixture
def tree(tmp_path) -> SuiteTree:
    # tmp_path may live behind a symlink (e.g. /var -> /private/var); discovery
    # reports canonical paths, so build the tree on the canonical side.
    return SuiteTree(tmp_path.resolve())


@pytest.fixture
def load_calls(monkeypatch) -> List[Path]:
    """Record every SuiteConfig.load_from_path call (the marker-load I/O)."""
    calls: List[Path] = []
    original = SuiteConfig.load_from_path

    def _counting(self, path, global_cfg):
        calls.append(Path(path))
        return original(self, path, global_cfg)

    monkeypatch.setattr(SuiteConfig, "load_from_path", _counting)
    return calls

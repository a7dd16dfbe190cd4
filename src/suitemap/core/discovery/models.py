"""Result and cache types shared by the discovery modules."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from suitemap.core.config import SuiteConfig


@dataclass(frozen=True, eq=False)
class TestSuite:
    """A discovered suite root and the configuration that governs it.

    Compared by identity: each suite marker is loaded once per run, and two
    markers that declare the same name and roots are still distinct suites.
    """

    __test__ = False  # not a pytest test class

    name: str
    source_root: Path
    exec_root: Path
    config: SuiteConfig

    def get_source_path(self, components: Iterable[str]) -> Path:
        return self.source_root.joinpath(*components)

    def get_exec_path(self, components: Iterable[str]) -> Path:
        return self.exec_root.joinpath(*components)

    def to_dict(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "source_root": str(self.source_root),
            "exec_root": str(self.exec_root),
        }


@dataclass(frozen=True)
class SearchResult:
    """Owning suite (``None`` when there is none) plus the path inside it.

    ``components`` is outermost-first and empty when the queried path is the
    suite root itself. ``stripped`` counts the trailing components that name
    non-directories (the queried file), as reported by ``get_test_suite``.
    """

    suite: Optional[TestSuite]
    components: Tuple[str, ...] = ()
    stripped: int = 0

    @property
    def found(self) -> bool:
        return self.suite is not None

    def with_components(self, extra: Iterable[str]) -> "SearchResult":
        """Append ``extra``; a result without a suite stays component-free."""
        if self.suite is None:
            return self
        extra = tuple(extra)
        if not extra:
            return self
        return SearchResult(self.suite, self.components + extra, self.stripped)


NOT_FOUND = SearchResult(None, ())

LocalKey = Tuple[TestSuite, Tuple[str, ...]]


@dataclass
class DiscoveryCache:
    """Memo tables for a single discovery run.

    Owned by the caller and threaded through every call. Not thread-safe:
    concurrent callers must serialize access themselves.
    """

    suites: Dict[Path, SearchResult] = field(default_factory=dict)
    local_configs: Dict[LocalKey, SuiteConfig] = field(default_factory=dict)

    def clear(self) -> None:
        self.suites.clear()
        self.local_configs.clear()


__all__ = ["TestSuite", "SearchResult", "NOT_FOUND", "DiscoveryCache"]

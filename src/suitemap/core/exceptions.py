from __future__ import annotations

from typing import Any, Dict, Mapping


class SuitemapError(Exception):
    """Base exception for suitemap."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class ConfigLoadError(SuitemapError, ValueError):
    """Raised when a marker or global configuration file cannot be loaded."""

    def __init__(
        self,
        message: str,
        *,
        path: Any = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if path is not None:
            ctx["path"] = str(path)
        SuitemapError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)


class SuitePathError(SuitemapError, FileNotFoundError):
    """Raised when a queried path cannot be canonicalized."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SuitemapError.__init__(self, message, context=context)
        FileNotFoundError.__init__(self, message)


__all__ = [
    "SuitemapError",
    "ConfigLoadError",
    "SuitePathError",
]

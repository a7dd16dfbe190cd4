from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from suitemap.core.utils.io import ensure_directory

_CONFIGURED_TARGET: str | None = None
_SUITEMAP_HANDLER: logging.Handler | None = None
_JSON_MODE_NULL_HANDLER_INSTALLED: bool = False

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_NOTE_FORMAT = "suitemap: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


class _NoteAwareFormatter(logging.Formatter):
    """Debug notes render compactly; everything else gets the full format."""

    def __init__(self) -> None:
        super().__init__(_FORMAT)
        self._note = logging.Formatter(_NOTE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if record.name == "suitemap.notes":
            return self._note.format(record)
        return super().format(record)


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Install the suitemap handler on the root logger.

    Logs go to ``log_path`` when given, otherwise to stderr (stdout stays
    reserved for command output). Idempotent per-process: reconfiguring with
    the same target only updates the level.
    """
    global _CONFIGURED_TARGET, _SUITEMAP_HANDLER

    target = str(Path(log_path).resolve()) if log_path is not None else "<stderr>"
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _SUITEMAP_HANDLER is not None:
        _SUITEMAP_HANDLER.setLevel(_level_from_name(level))
        return

    if _SUITEMAP_HANDLER is not None:
        root.removeHandler(_SUITEMAP_HANDLER)
        _SUITEMAP_HANDLER.close()
        _SUITEMAP_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        ensure_directory(Path(target).parent)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(_NoteAwareFormatter())
    root.addHandler(handler)

    _SUITEMAP_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the handler installed by :func:`configure_stdlib_logging`."""
    global _CONFIGURED_TARGET, _SUITEMAP_HANDLER, _JSON_MODE_NULL_HANDLER_INSTALLED
    root = logging.getLogger()
    if _SUITEMAP_HANDLER is not None:
        root.removeHandler(_SUITEMAP_HANDLER)
        _SUITEMAP_HANDLER.close()
    _CONFIGURED_TARGET = None
    _SUITEMAP_HANDLER = None
    root.setLevel(logging.WARNING)
    _JSON_MODE_NULL_HANDLER_INSTALLED = False


def suppress_lastresort_in_json_mode() -> None:
    """Prevent stdlib logging's lastResort handler from polluting JSON output.

    Python's logging module may emit WARNING+ messages to stderr via the implicit
    ``lastResort`` handler when no handlers are configured. Ensure the root
    logger has at least one handler (a NullHandler) when it otherwise has none.
    """
    global _JSON_MODE_NULL_HANDLER_INSTALLED

    root = logging.getLogger()
    if root.handlers or _JSON_MODE_NULL_HANDLER_INSTALLED:
        return
    root.addHandler(logging.NullHandler())
    _JSON_MODE_NULL_HANDLER_INSTALLED = True


__all__ = [
    "configure_stdlib_logging",
    "reset_stdlib_logging_for_tests",
    "suppress_lastresort_in_json_mode",
]

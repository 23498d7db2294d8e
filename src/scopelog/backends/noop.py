"""Backend that discards every message."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scopelog.core import LogFunction, LogLevel, LogMeta, LogScope


def _discard(level: LogLevel, message: str, meta: LogMeta | None = None) -> None:
    pass


def noop_log_factory(scope: LogScope) -> LogFunction:
    """Silence a library entirely: `Logger(noop_log_factory)`."""
    return _discard

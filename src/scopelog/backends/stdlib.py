"""Bridge to the standard `logging` module.

Scope and metadata travel as `extra` attributes (`record.scope`,
`record.meta`) so handlers and formatters can pick them up, e.g.
`logging.Formatter("%(levelname)s %(message)s %(scope)s")`. Severity
filtering is left to the stdlib logger and handler configuration.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from scopelog.core import LogLevel

if TYPE_CHECKING:
    from scopelog.core import LogFunction, LogFunctionFactory, LogMeta, LogScope

_LEVELS: dict[LogLevel, int] = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


def make_stdlib_log_factory(logger: logging.Logger | str | None = None) -> LogFunctionFactory:
    """Build a factory that forwards to a stdlib logger (default name: "scopelog")."""
    target = logger if isinstance(logger, logging.Logger) else logging.getLogger(logger or "scopelog")
    
    def stdlib_log_factory(scope: LogScope) -> LogFunction:
        bound = dict(scope)
        
        def log(level: LogLevel, message: str, meta: LogMeta | None = None) -> None:
            target.log(_LEVELS[LogLevel(level)], message, extra={"scope": bound, "meta": dict(meta or {})})
        return log
    
    return stdlib_log_factory

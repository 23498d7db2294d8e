"""Scope-chaining logger.

A `Logger` owns an immutable snapshot of its scope and the log function its
factory produced for that scope. Narrowing the scope never mutates a logger:
`scope()` builds a new one from the same factory, so a root logger can be
shared freely while request/worker/job loggers are derived from it.

Example:
    >>> def factory(scope):
    ...     def log(level, message, meta=None):
    ...         print(level.upper(), message, dict(scope))
    ...     return log
    >>> log = Logger(factory).scope(worker_id="w1")
    >>> log.scope({"job_id": 84}).info("starting job")
    INFO starting job {'worker_id': 'w1', 'job_id': 84}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .levels import LogLevel

if TYPE_CHECKING:
    from .types import LogFunction, LogFunctionFactory, LogMeta, LogScope


class Logger:
    """Leveled logger bound to a scope through a `LogFunctionFactory`.
    
    The factory is invoked exactly once per logger, at construction, with a
    copy of the scope. Errors raised by the factory or the bound log function
    propagate to the caller unchanged. Level methods return whatever the bound
    function returns.
    """
    
    __slots__ = ("_factory", "_scope", "_log")
    
    def __init__(self, factory: LogFunctionFactory, scope: LogScope | None = None) -> None:
        self._factory = factory
        self._scope: dict[str, Any] = dict(scope or {})
        self._log: LogFunction = factory(dict(self._scope))
    
    @property
    def factory(self) -> LogFunctionFactory:
        """Factory shared by this logger and every logger derived from it."""
        return self._factory
    
    def scope(self, additional_scope: LogScope | None = None, /, **fields: Any) -> Logger:
        """Create a more narrowly scoped logger.
        
        Useful when code performs a subtask: an HTTP server might hold a global
        logger, derive one per request, and derive another per middleware.
        Merge is shallow: keys in `additional_scope` (then `fields`) replace the
        parent's value wholesale, other keys carry over.
        """
        return Logger(self._factory, {**self._scope, **(additional_scope or {}), **fields})
    
    def get_current_scope(self) -> dict[str, Any]:
        """Copy of this logger's scope; mutating it does not affect the logger."""
        return dict(self._scope)
    
    def _emit(self, level: LogLevel, message: str, meta: LogMeta | None) -> Any:
        if meta is None:
            return self._log(level, message)
        return self._log(level, message, meta)
    
    def error(self, message: str, meta: LogMeta | None = None) -> Any:
        """Log a `LogLevel.ERROR` message."""
        return self._emit(LogLevel.ERROR, message, meta)
    
    def warn(self, message: str, meta: LogMeta | None = None) -> Any:
        """Log a `LogLevel.WARNING` message."""
        return self._emit(LogLevel.WARNING, message, meta)
    
    def info(self, message: str, meta: LogMeta | None = None) -> Any:
        """Log a `LogLevel.INFO` message."""
        return self._emit(LogLevel.INFO, message, meta)
    
    def debug(self, message: str, meta: LogMeta | None = None) -> Any:
        """Log a `LogLevel.DEBUG` message."""
        return self._emit(LogLevel.DEBUG, message, meta)
    
    def __repr__(self) -> str:
        return f"Logger(scope={self._scope!r})"

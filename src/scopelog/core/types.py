"""Callable shapes shared by loggers and backends.

A backend is a `LogFunctionFactory`: it receives a scope once and returns a
`LogFunction` closed over it. Plain functions and closures satisfy both
protocols, so a backend can be as small as a nested `def`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from .levels import LogLevel

LogMeta: TypeAlias = Mapping[str, Any]
"""Ad hoc data attached to one log call. Not assumed to be serializable."""

LogScope: TypeAlias = Mapping[str, Any]
"""Ambient context (request id, worker id...). Every key is optional."""


@runtime_checkable
class LogFunction(Protocol):
    """Processes a single log message. Implicitly has access to the scope it was bound with."""
    
    def __call__(self, level: LogLevel, message: str, meta: LogMeta | None = None) -> None: ...


@runtime_checkable
class LogFunctionFactory(Protocol):
    """User-provided constructor that binds a scope and returns the `LogFunction` for it."""
    
    def __call__(self, scope: LogScope) -> LogFunction: ...

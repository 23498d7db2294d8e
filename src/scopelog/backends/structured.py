"""Structured backend: scope and metadata kept apart in every entry.

Each message becomes an immutable `LogEntry` carrying the bound scope and the
call's metadata separately, handed to a `LogRenderer`:
- `ConsoleRenderer`: one line per entry, scope fields then `| meta` fields
- `JsonRenderer`: JSON Lines with nested `scope`/`meta` objects
- `NoOpRenderer`: silent

Example:
    >>> from scopelog import Logger
    >>> log = Logger(make_structured_log_factory(format="json"), {"service": "api"})
    >>> log.info("request received", {"path": "/users"})
    # => {"timestamp":"...","level":"info","message":"request received","scope":{"service":"api"},"meta":{"path":"/users"}}
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Protocol, TextIO, runtime_checkable

import orjson

from scopelog.console.format import to_json
from scopelog.core import LogLevel

if TYPE_CHECKING:
    from scopelog.core import LogFunction, LogFunctionFactory, LogMeta, LogScope


@dataclass(slots=True, frozen=True)
class LogEntry:
    """One log call: level, message, the logger's scope and the call's metadata."""
    
    timestamp: float
    level: LogLevel
    message: str
    scope: dict[str, Any]
    meta: dict[str, Any] | None = None
    
    @property
    def when(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""
    
    def render(self, entry: LogEntry) -> None: ...


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


_RESET = "\033[0m"
_DIM = "\033[2m"
_LEVEL_STYLE = {
    LogLevel.ERROR: "\033[1;31m",
    LogLevel.WARNING: "\033[33m",
    LogLevel.INFO: "\033[32m",
    LogLevel.DEBUG: "\033[2m",
}


def _pairs(fields: dict[str, Any]) -> list[str]:
    return [f"{k}={to_json(v)}" for k, v in fields.items()]


@dataclass(slots=True)
class ConsoleRenderer:
    """Line output: `HH:MM:SS.mmm [LEVEL] message key=value ... | meta_key=value ...`.
    
    Scope fields keep insertion order, so outer scopes print before inner ones.
    Colour is auto-detected from the output stream unless `colors` is given.
    """
    
    output: TextIO | None = None
    colors: bool | None = None
    show_timestamp: bool = True
    
    def render(self, entry: LogEntry) -> None:
        out = self.output or sys.stderr
        colored = self.colors if self.colors is not None else getattr(out, "isatty", lambda: False)()
        label = f"[{entry.level.upper()}]"
        parts = [entry.when.strftime("%H:%M:%S.%f")[:-3]] if self.show_timestamp else []
        parts += [f"{_LEVEL_STYLE[entry.level]}{label}{_RESET}" if colored else label, entry.message]
        parts += _pairs(entry.scope)
        if entry.meta:
            parts += [f"{_DIM}|{_RESET}" if colored else "|", *_pairs(entry.meta)]
        print(" ".join(parts), file=out)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output. Values orjson cannot encode are written as their repr."""
    
    output: TextIO | None = None
    
    def render(self, entry: LogEntry) -> None:
        record: dict[str, Any] = {"timestamp": entry.when.isoformat(), "level": str(entry.level),
                                  "message": entry.message, "scope": entry.scope}
        if entry.meta is not None:
            record["meta"] = entry.meta
        try:
            line = orjson.dumps(record, default=repr, option=orjson.OPT_NON_STR_KEYS)
        except orjson.JSONEncodeError:
            record["scope"] = _encodable(entry.scope)
            if entry.meta is not None:
                record["meta"] = _encodable(entry.meta)
            line = orjson.dumps(record, default=repr, option=orjson.OPT_NON_STR_KEYS)
        print(line.decode(), file=self.output or sys.stdout)


def _encodable(fields: dict[str, Any]) -> dict[str, Any]:
    """Replace values orjson rejects (cycles, ints beyond 64 bits, tuple keys) with their repr."""
    safe: dict[str, Any] = {}
    for key, value in fields.items():
        try:
            orjson.dumps(value, default=repr, option=orjson.OPT_NON_STR_KEYS)
            safe[key] = value
        except orjson.JSONEncodeError:
            safe[key] = repr(value)
    return safe


class NoOpRenderer:
    """Silent renderer."""
    
    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Factory
# ─────────────────────────────────────────────────────────────────────────────


def _renderer_for(format: str) -> LogRenderer:  # noqa: A002
    match format:
        case "console": return ConsoleRenderer()
        case "json": return JsonRenderer()
        case "none": return NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")


def make_structured_log_factory(
    renderer: LogRenderer | None = None,
    *,
    format: str | None = None,  # noqa: A002
) -> LogFunctionFactory:
    """Build a `LogFunctionFactory` that renders structured entries.
    
    Args:
        renderer: Explicit renderer; takes precedence over `format`
        format: "console" (default), "json" or "none"
    
    Raises:
        ValueError: Unknown format name (at build time, not per message)
    """
    out = renderer or _renderer_for(format or "console")
    
    def structured_log_factory(scope: LogScope) -> LogFunction:
        bound = dict(scope)
        
        def log(level: LogLevel, message: str, meta: LogMeta | None = None) -> None:
            entry = LogEntry(time.time(), LogLevel(level), message, bound, None if meta is None else dict(meta))
            out.render(entry)
        return log
    
    return structured_log_factory

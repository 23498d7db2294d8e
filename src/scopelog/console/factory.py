"""Built-in console backend.

`console_log_factory` is the zero-configuration `LogFunctionFactory` libraries
can fall back to when their users don't supply one. It only emits DEBUG
messages when `SCOPELOG_DEBUG` is set. For a different layout (scope printed
more clearly, a touch of colour) build one with `make_console_log_factory`:

    >>> config = ConsoleLogConfig(
    ...     format="[%s] %s %j",
    ...     format_parameters=lambda level, message, scope: [level, message, scope],
    ... )
    >>> factory = make_console_log_factory(config)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from scopelog.config import get_settings
from scopelog.core import LogLevel

from .console import Console

if TYPE_CHECKING:
    from scopelog.core import LogFunction, LogFunctionFactory, LogMeta, LogScope


def _default_parameters(level: LogLevel, message: str, scope: LogScope) -> list[Any]:
    return [level.upper(), message, scope]


class ConsoleLogConfig(BaseModel):
    """Template and parameter extraction for console output.
    
    `format` is processed by `scopelog.console.format_message` (%s %d %i %f %j
    %o %O %c %%). `format_parameters` returns the values, in order, to feed
    into it.
    """
    
    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)
    
    format: str = Field(default="%s: %s (%O)", description="printf-style template")
    format_parameters: Callable[[LogLevel, str, Any], Sequence[Any]] = Field(
        default=_default_parameters,
        description="(level, message, scope) -> template parameters",
    )


def _channel(console: Console, level: LogLevel) -> Callable[..., None]:
    match level:
        case LogLevel.ERROR: return console.error
        case LogLevel.WARNING: return console.warn
        case LogLevel.INFO: return console.info
        # debug and log are aliases on most consoles; log is the generic channel
        case _: return console.log


def make_console_log_factory(
    config: ConsoleLogConfig | None = None,
    *,
    console: Console | None = None,
) -> LogFunctionFactory:
    """Build a console `LogFunctionFactory` with a custom formatter.
    
    Args:
        config: Template and parameter extraction (defaults to `"%s: %s (%O)"`
            with `[LEVEL, message, scope]`)
        console: Output channels (defaults to stdout/stderr)
    """
    cfg = config or ConsoleLogConfig()
    out = console or Console()
    
    def console_log_factory(scope: LogScope) -> LogFunction:
        def log(level: LogLevel, message: str, meta: LogMeta | None = None) -> None:
            if level == LogLevel.DEBUG and not get_settings().debug_enabled:
                return
            _channel(out, level)(cfg.format, *cfg.format_parameters(level, message, scope))
        return log
    
    return console_log_factory


console_log_factory: LogFunctionFactory = make_console_log_factory()
"""Default console factory; DEBUG output only when `SCOPELOG_DEBUG` is set."""
